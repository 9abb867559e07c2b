"""
Schemas package.

Import all schemas here for easy access.
"""

from app.schemas.list import ListResult, ListView

__all__ = [
    "ListResult",
    "ListView",
]
