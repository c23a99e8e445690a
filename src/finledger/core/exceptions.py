"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when user input cannot be parsed or is out of range."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class StorageError(AppError):
    """Raised when the ledger file cannot be read or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Ledger storage failed for {path}: {reason}", code="STORAGE_ERROR")
