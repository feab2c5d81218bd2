"""Access to the process-scoped entity store."""
from fastapi import Request

from db.store import EntityStore


def get_store(request: Request) -> EntityStore:
    """
    Return the entity store owned by the running application.

    The store is created in the application lifespan and kept on app.state;
    tests override this dependency with their own store.
    """
    return request.app.state.store
