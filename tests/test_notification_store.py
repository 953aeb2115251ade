"""Tests for the in-memory notification store."""

from concurrent.futures import ThreadPoolExecutor
from datetime import timezone

import pytest

from volunteer_api.schemas import RecipientType
from volunteer_api.services import NotificationStore


def test_create_sets_defaults() -> None:
    store = NotificationStore()
    note = store.create("admin", None, "Event X created")

    assert note.recipient_type is RecipientType.ADMIN
    assert note.recipient_id is None
    assert note.message == "Event X created"
    assert note.read is False
    assert note.timestamp.tzinfo == timezone.utc
    assert store.list("admin")[0] == note


def test_ids_are_unique() -> None:
    store = NotificationStore()
    ids = {store.create("volunteer", 1, f"message {i}").id for i in range(200)}
    assert len(ids) == 200


def test_list_is_newest_first() -> None:
    store = NotificationStore()
    first = store.create("volunteer", 5, "A")
    second = store.create("volunteer", 5, "B")

    assert [n.id for n in store.list("volunteer", 5)] == [second.id, first.id]


def test_list_filters_by_role_and_recipient() -> None:
    store = NotificationStore()
    store.create("volunteer", 5, "for five")
    store.create("volunteer", 6, "for six")
    store.create("admin", 5, "admin five")
    store.create("volunteer", None, "all volunteers")

    result = store.list("volunteer", 5)

    assert [n.message for n in result] == ["for five"]
    assert all(n.recipient_type == "volunteer" for n in result)


def test_list_without_recipient_returns_whole_role() -> None:
    store = NotificationStore()
    store.create("admin", None, "broadcast")
    store.create("admin", 3, "targeted")
    store.create("volunteer", None, "other role")

    assert [n.message for n in store.list("admin")] == ["targeted", "broadcast"]


def test_list_unread_only() -> None:
    store = NotificationStore()
    read = store.create("volunteer", 1, "old")
    store.create("volunteer", 1, "new")
    store.mark_read(read.id)

    assert [n.message for n in store.list("volunteer", 1, unread_only=True)] == ["new"]
    assert len(store.list("volunteer", 1)) == 2
    assert store.count_unread("volunteer", 1) == 1


def test_list_returns_copies() -> None:
    store = NotificationStore()
    note = store.create("volunteer", 1, "hello")

    listed = store.list("volunteer")
    listed[0].read = True
    listed.clear()

    assert store.list("volunteer")[0].read is False
    assert store.list("volunteer")[0].id == note.id


def test_mark_read_is_idempotent() -> None:
    store = NotificationStore()
    note = store.create("volunteer", 1, "hello")

    first = store.mark_read(note.id)
    second = store.mark_read(note.id)

    assert first is not None and first.read is True
    assert second is not None and second.read is True


def test_mark_read_unknown_id_returns_none() -> None:
    assert NotificationStore().mark_read(42) is None


def test_delete_is_terminal() -> None:
    store = NotificationStore()
    note = store.create("admin", None, "bye")

    assert store.delete(note.id) is True
    assert store.mark_read(note.id) is None
    assert store.delete(note.id) is False
    assert store.list("admin") == []
    assert len(store) == 0


def test_delete_leaves_other_notifications() -> None:
    store = NotificationStore()
    keep = store.create("admin", None, "keep")
    drop = store.create("admin", None, "drop")

    store.delete(drop.id)

    assert [n.id for n in store.list("admin")] == [keep.id]


def test_create_rejects_unknown_role() -> None:
    store = NotificationStore()

    with pytest.raises(ValueError):
        store.create("manager", None, "x")

    assert len(store) == 0
    assert store.create("admin", None, "y").id == 1


def test_list_unknown_role_is_empty() -> None:
    store = NotificationStore()
    store.create("admin", None, "hello")

    assert store.list("manager") == []
    assert store.count_unread("manager") == 0


def test_concurrent_creates_keep_ids_unique() -> None:
    store = NotificationStore()

    def create_many(worker: int) -> list[int]:
        return [store.create("volunteer", worker, f"message {i}").id for i in range(250)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = [i for batch in pool.map(create_many, range(8)) for i in batch]

    assert len(ids) == 2000
    assert len(set(ids)) == 2000
    assert len(store) == 2000
    assert len(store.list("volunteer", 3)) == 250


def test_concurrent_mark_read_and_delete() -> None:
    store = NotificationStore()
    notes = [store.create("admin", None, f"m{i}") for i in range(400)]

    def touch(note_id: int) -> None:
        store.mark_read(note_id)
        if note_id % 2 == 0:
            store.delete(note_id)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(touch, [note.id for note in notes]))

    remaining = store.list("admin")
    assert len(remaining) == 200
    assert all(note.read and note.id % 2 == 1 for note in remaining)
