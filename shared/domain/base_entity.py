"""
Base entity classes for DDD.
"""
from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


def new_entity_id() -> str:
    """Generate an opaque entity identifier."""
    return uuid4().hex


@dataclass
class BaseEntity(ABC):
    """Base entity class with identity."""
    id: str = field(default_factory=new_entity_id)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.utcnow()


@dataclass(eq=False)
class SoftDeletableEntity(BaseEntity):
    """Entity that stays in storage after deletion, flagged instead."""
    deleted: bool = False
