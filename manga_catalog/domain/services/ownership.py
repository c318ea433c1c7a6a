from typing import Optional

from manga_catalog.domain.exceptions import AccessDeniedError


def check_ownership(resource_owner_id: Optional[int], acting_user_id: Optional[int]) -> bool:
    if resource_owner_id is None or acting_user_id is None:
        return False
    return resource_owner_id == acting_user_id


def ensure_ownership(resource_owner_id: Optional[int], acting_user_id: Optional[int], action: str) -> None:
    if not check_ownership(resource_owner_id, acting_user_id):
        raise AccessDeniedError(f"access denied: you can only {action}")
