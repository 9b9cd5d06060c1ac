"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code=code
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when an argument is outside its allowed values."""

    def __init__(self, message: str, field: str = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field


class MalformedInputError(DomainException):
    """Raised when a payload cannot be decoded into the expected shape."""

    def __init__(self, message: str, code: str = "MALFORMED_INPUT"):
        super().__init__(message=message, code=code)


class StoreError(DomainException):
    """Raised when the underlying persistence operation fails."""

    def __init__(self, message: str, operation: str = None):
        super().__init__(message=message, code="STORE_ERROR")
        self.operation = operation
