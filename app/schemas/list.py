"""
Result descriptors for the List endpoints.

The service layer returns one of these per request; the UI layer turns it
into a page, a fragment or an empty response. Flags such as
``editing_name`` describe how to display a list and are never persisted.
"""

import enum
from dataclasses import dataclass, field
from typing import Optional, Sequence

from app.errors import ValidationFailed
from app.models.list import List


class ListView(str, enum.Enum):
    """Which template renders a result."""

    INDEX = "lists/index.html"
    CARD = "lists/_card.html"
    FORM = "lists/_form.html"
    NONE = ""


@dataclass(frozen=True)
class ListResult:
    """Outcome of one List endpoint.

    Attributes:
        status_code: HTTP status to send.
        view: Template to render, or ListView.NONE for an empty body.
        list: The list a card or form is about.
        lists: Every list, for the index page.
        new_list: Unsaved blank list backing the create form.
        editing_name: Show the card with its name in an input.
        error: The rejected input, when validation failed.
    """

    status_code: int
    view: ListView
    list: Optional[List] = None
    lists: Sequence[List] = field(default_factory=tuple)
    new_list: Optional[List] = None
    editing_name: bool = False
    error: Optional[ValidationFailed] = None
