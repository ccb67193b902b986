"""Bookmark Operations — scoping, conflict detection and the empty-check shortcut."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from portal.core.errors import ConflictError, ResourceNotFoundError
from portal.schemas.bookmark import BookmarkCreate
from portal.services.bookmarks import (
    check_bookmarks, create_bookmark, delete_bookmark, list_bookmarks,
)


def sermon(resource_id: str) -> BookmarkCreate:
    return BookmarkCreate(
        resource_type="sermon", resource_id=resource_id, resource_title=f"Sermon {resource_id}",
    )


async def test_empty_check_never_queries():
    db = AsyncMock()
    assert await check_bookmarks(db, uuid4(), []) == {}
    db.execute.assert_not_called()


async def test_check_answers_every_requested_id(test_db, make_user):
    member = await make_user()
    await create_bookmark(test_db, member.id, sermon("s1"))
    assert await check_bookmarks(test_db, member.id, ["s1", "s2"]) == {"s1": True, "s2": False}


async def test_bookmarks_are_scoped_per_user(test_db, make_user):
    owner_id = (await make_user()).id
    other_id = (await make_user()).id
    await create_bookmark(test_db, owner_id, sermon("s1"))

    assert await list_bookmarks(test_db, other_id) == []
    assert await check_bookmarks(test_db, other_id, ["s1"]) == {"s1": False}
    with pytest.raises(ResourceNotFoundError):
        await delete_bookmark(test_db, other_id, "sermon", "s1")
    assert len(await list_bookmarks(test_db, owner_id)) == 1


async def test_duplicate_create_conflicts(test_db, make_user):
    member = await make_user()
    await create_bookmark(test_db, member.id, sermon("s1"))
    with pytest.raises(ConflictError):
        await create_bookmark(test_db, member.id, sermon("s1"))


async def test_same_id_different_type_is_allowed(test_db, make_user):
    member = await make_user()
    await create_bookmark(test_db, member.id, sermon("x1"))
    video = BookmarkCreate(resource_type="video", resource_id="x1", resource_title="Clip")
    await create_bookmark(test_db, member.id, video)
    assert len(await list_bookmarks(test_db, member.id)) == 2


async def test_delete_removes_row(test_db, make_user):
    member = await make_user()
    await create_bookmark(test_db, member.id, sermon("s1"))
    await delete_bookmark(test_db, member.id, "sermon", "s1")
    assert await list_bookmarks(test_db, member.id) == []
