"""
Current-user resolution.

Authentication is not implemented: every request acts as the seeded default user.
"""
from fastapi import Depends, HTTPException, status

from db.seed import DEFAULT_USERNAME
from db.session import get_store
from db.store import EntityStore
from models import User


def get_current_user(store: EntityStore = Depends(get_store)) -> User:
    """Return the default user, or 401 if it has not been seeded."""
    user = store.get_user_by_username(DEFAULT_USERNAME)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Default user is not available",
        )
    return user
