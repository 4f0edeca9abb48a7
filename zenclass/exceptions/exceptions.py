"""Custom exceptions - SoC principle"""


class ZenClassError(Exception):
    """Base exception for the reporting API"""
    def __init__(self, message: str, code: int = 400):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ZenClassError):
    """Input validation error"""
    pass


class RecordNotFoundError(ZenClassError):
    """A valid reference with no matching record"""
    def __init__(self, message: str = "Record not found"):
        super().__init__(message, 404)


class DatabaseError(ZenClassError):
    """Database operation errors"""
    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, 500)
