"""
Models package.

Import all models here so they are registered with SQLAlchemy.
"""

from app.models.list import List

# Export all models
__all__ = [
    "List",
]
