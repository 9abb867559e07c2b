"""
Tests for ListService.

Runs the service against a mocked repository. Each test checks which
repository call was made (if any) and what the ListResult describes.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from app.errors import Internal, NotFound, ValidationFailed
from app.repositories.list_repository import ListRepository
from app.schemas.list import ListView
from app.services.list_service import EMPTY_NAME_MESSAGE, ListService, clean_name
from tests.conftest import make_list


pytestmark = pytest.mark.unit


@pytest.fixture
def repository():
    return AsyncMock(spec=ListRepository)


@pytest.fixture
def service(repository):
    return ListService(repository)


class TestCleanName:

    @pytest.mark.parametrize(
        "raw, cleaned",
        [
            ("Groceries", "Groceries"),
            ("  Groceries\t", "Groceries"),
            ("", ""),
            ("   ", ""),
            (None, ""),
            ("a  b", "a  b"),
        ],
    )
    def test_trims_only_the_ends(self, raw, cleaned) -> None:
        assert clean_name(raw) == cleaned


class TestIndex:

    def test_all_lists_and_a_blank_template(self, service, repository) -> None:
        rows = [make_list(1, "a"), make_list(2, "b")]
        repository.list_all.return_value = rows

        result = asyncio.run(service.index())

        assert result.status_code == 200
        assert result.view is ListView.INDEX
        assert list(result.lists) == rows
        assert result.new_list is not None
        assert result.new_list.name == ""
        assert result.new_list.id is None
        assert result.editing_name is False

    def test_empty_store(self, service, repository) -> None:
        repository.list_all.return_value = []

        result = asyncio.run(service.index())

        assert result.status_code == 200
        assert list(result.lists) == []


class TestCreate:

    def test_trims_and_creates(self, service, repository) -> None:
        created = make_list(7, "Groceries")
        repository.create.return_value = created

        result = asyncio.run(service.create("  Groceries "))

        repository.create.assert_awaited_once_with("Groceries")
        assert result.status_code == 200
        assert result.view is ListView.CARD
        assert result.list is created
        assert result.editing_name is False
        assert result.error is None

    @pytest.mark.parametrize("name", ["", "   ", "\n\t", None])
    def test_blank_name_is_rejected_without_store_call(self, service, repository, name) -> None:
        result = asyncio.run(service.create(name))

        repository.create.assert_not_awaited()
        assert result.status_code == 400
        assert result.view is ListView.FORM
        assert isinstance(result.error, ValidationFailed)
        assert result.error.message == EMPTY_NAME_MESSAGE
        assert result.error.field == "name"
        assert result.new_list.name == ""

    def test_store_failure_propagates(self, service, repository) -> None:
        repository.create.side_effect = Internal("OperationalError: gone")

        with pytest.raises(Internal):
            asyncio.run(service.create("Groceries"))


class TestShow:

    def test_card_in_read_mode(self, service, repository) -> None:
        row = make_list(3, "Groceries")
        repository.get.return_value = row

        result = asyncio.run(service.show(3))

        repository.get.assert_awaited_once_with(3)
        assert result.status_code == 200
        assert result.view is ListView.CARD
        assert result.list is row
        assert result.editing_name is False
        assert result.error is None

    def test_missing_list_propagates_not_found(self, service, repository) -> None:
        repository.get.side_effect = NotFound("List", 3)

        with pytest.raises(NotFound):
            asyncio.run(service.show(3))


class TestEdit:

    def test_card_in_edit_mode(self, service, repository) -> None:
        row = make_list(3, "Groceries")
        repository.get.return_value = row

        result = asyncio.run(service.edit(3))

        repository.get.assert_awaited_once_with(3)
        assert result.status_code == 200
        assert result.view is ListView.CARD
        assert result.list is row
        assert result.editing_name is True

    def test_missing_list_propagates_not_found(self, service, repository) -> None:
        repository.get.side_effect = NotFound("List", 3)

        with pytest.raises(NotFound):
            asyncio.run(service.edit(3))


class TestUpdate:

    def test_trims_and_updates(self, service, repository) -> None:
        row = make_list(3, "Shopping")
        repository.update.return_value = row

        result = asyncio.run(service.update(3, " Shopping "))

        repository.update.assert_awaited_once_with(3, "Shopping")
        assert result.status_code == 200
        assert result.view is ListView.CARD
        assert result.list is row
        assert result.editing_name is False

    def test_unchanged_name_returns_the_row_as_is(self, service, repository) -> None:
        row = make_list(3, "Groceries")
        repository.update.return_value = row

        result = asyncio.run(service.update(3, "Groceries"))

        assert result.status_code == 200
        assert result.list.updated_at == row.created_at

    @pytest.mark.parametrize("name", ["", "    ", None])
    def test_blank_name_is_rejected_without_store_call(self, service, repository, name) -> None:
        result = asyncio.run(service.update(3, name))

        repository.update.assert_not_awaited()
        repository.get.assert_not_awaited()
        assert result.status_code == 400
        assert result.view is ListView.CARD
        assert result.editing_name is True
        assert result.list.id == 3
        assert result.list.name == ""
        assert result.error.message == EMPTY_NAME_MESSAGE

    def test_missing_list_propagates_not_found(self, service, repository) -> None:
        repository.update.side_effect = NotFound("List", 3)

        with pytest.raises(NotFound):
            asyncio.run(service.update(3, "Shopping"))


class TestDelete:

    def test_always_no_content(self, service, repository) -> None:
        result = asyncio.run(service.delete(404))

        repository.delete.assert_awaited_once_with(404)
        assert result.status_code == 204
        assert result.view is ListView.NONE
        assert result.list is None

    def test_store_failure_propagates(self, service, repository) -> None:
        repository.delete.side_effect = Internal("TimeoutError: pool")

        with pytest.raises(Internal):
            asyncio.run(service.delete(1))
