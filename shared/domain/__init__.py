# Shared domain module
from .base_entity import BaseEntity, SoftDeletableEntity, new_entity_id
from .base_value_object import ValueObject
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    MalformedInputError,
    StoreError,
)

__all__ = [
    'BaseEntity',
    'SoftDeletableEntity',
    'new_entity_id',
    'ValueObject',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'MalformedInputError',
    'StoreError',
]
