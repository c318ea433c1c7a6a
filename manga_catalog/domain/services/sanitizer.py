from typing import FrozenSet, TypeVar

from pydantic import BaseModel

# Fields that never leave the service boundary.
SECRET_FIELDS: FrozenSet[str] = frozenset({"password_hash", "deleted_at"})

EntityT = TypeVar("EntityT", bound=BaseModel)


def sanitize(entity: EntityT) -> EntityT:
    """Return a copy of ``entity`` with every secret field cleared."""
    cleared = {name: None for name in type(entity).model_fields if name in SECRET_FIELDS}
    return entity.model_copy(update=cleared)
