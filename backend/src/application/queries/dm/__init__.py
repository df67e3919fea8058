"""Direct message queries."""

from .get_dm_thread import GetDmThreadQuery, GetDmThreadHandler

__all__ = [
    "GetDmThreadQuery",
    "GetDmThreadHandler",
]
