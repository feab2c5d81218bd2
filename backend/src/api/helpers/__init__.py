"""API helper utilities."""
from api.helpers.id_utils import parse_id

__all__ = [
    "parse_id",
]
