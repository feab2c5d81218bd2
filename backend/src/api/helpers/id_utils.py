"""Path id parsing shared by routers."""
from fastapi import HTTPException, status


def parse_id(raw_id: str, entity_name: str) -> int:
    """
    Parse an integer id from a path segment.

    Raises:
        HTTPException: 400 "Invalid <entity> ID" if the segment is not an integer.
    """
    try:
        return int(raw_id.strip())
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {entity_name} ID",
        ) from None
