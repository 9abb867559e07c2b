"""
List business logic service.

One method per endpoint: validate the input, call the repository and
describe the outcome as a ListResult for the UI layer to render.

Failure cases:
- Empty or whitespace-only name: a 400 ListResult carrying ValidationFailed.
  The repository is not called.
- NotFound / Internal from the repository propagate unchanged.
"""

import logging
from http import HTTPStatus
from typing import Optional

from app.errors import ValidationFailed
from app.models.list import List
from app.repositories.list_repository import ListRepository
from app.schemas.list import ListResult, ListView

logger = logging.getLogger(__name__)

EMPTY_NAME_MESSAGE = "name cannot be empty"


def clean_name(name: Optional[str]) -> str:
    """Trim surrounding whitespace; a missing name counts as empty."""
    return (name or "").strip()


class ListService:
    """Service for list business logic."""

    def __init__(self, repository: ListRepository):
        self.repository = repository

    async def index(self) -> ListResult:
        """Every list plus a blank one for the create form."""
        lists = await self.repository.list_all()
        return ListResult(
            status_code=HTTPStatus.OK,
            view=ListView.INDEX,
            lists=lists,
            new_list=List(name=""),
        )

    async def create(self, name: Optional[str]) -> ListResult:
        """Create a list, or hand the form back with the validation error."""
        name = clean_name(name)
        if not name:
            logger.debug("Rejected create: empty name")
            return ListResult(
                status_code=HTTPStatus.BAD_REQUEST,
                view=ListView.FORM,
                new_list=List(name=name),
                error=ValidationFailed("name", name, EMPTY_NAME_MESSAGE),
            )

        new_list = await self.repository.create(name)
        return ListResult(
            status_code=HTTPStatus.OK,
            view=ListView.CARD,
            list=new_list,
        )

    async def show(self, list_id: int) -> ListResult:
        """Load a list and show it read-only."""
        list_obj = await self.repository.get(list_id)
        return ListResult(
            status_code=HTTPStatus.OK,
            view=ListView.CARD,
            list=list_obj,
        )

    async def edit(self, list_id: int) -> ListResult:
        """Load a list and show it with its name editable."""
        list_obj = await self.repository.get(list_id)
        return ListResult(
            status_code=HTTPStatus.OK,
            view=ListView.CARD,
            list=list_obj,
            editing_name=True,
        )

    async def update(self, list_id: int, name: Optional[str]) -> ListResult:
        """
        Rename a list.

        Submitting the current name again is fine: the repository returns
        the list untouched and the card comes back exactly as it was.
        """
        name = clean_name(name)
        if not name:
            logger.debug("Rejected update of list id=%s: empty name", list_id)
            # Unsaved stand-in so the card can be re-rendered in edit mode
            return ListResult(
                status_code=HTTPStatus.BAD_REQUEST,
                view=ListView.CARD,
                list=List(id=list_id, name=name),
                editing_name=True,
                error=ValidationFailed("name", name, EMPTY_NAME_MESSAGE),
            )

        list_obj = await self.repository.update(list_id, name)
        return ListResult(
            status_code=HTTPStatus.OK,
            view=ListView.CARD,
            list=list_obj,
            editing_name=False,
        )

    async def delete(self, list_id: int) -> ListResult:
        """Delete a list. Always 204, whether or not it existed."""
        await self.repository.delete(list_id)
        return ListResult(status_code=HTTPStatus.NO_CONTENT, view=ListView.NONE)
