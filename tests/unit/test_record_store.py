"""Unit tests for the generic RecordStore."""

import threading
from dataclasses import dataclass
from typing import Optional

from shared.storage.record_store import RecordStore


@dataclass
class Note:
    text: str
    id: Optional[str] = None


class TestInsert:
    """Tests for RecordStore.insert."""

    def test_assigns_id_when_missing(self) -> None:
        """Test that a record without an id gets a generated one."""
        store: RecordStore[Note] = RecordStore()
        note = store.insert(Note("hello"))

        assert note.id
        assert store.find(note.id) is note

    def test_keeps_existing_id(self) -> None:
        """Test that a record with an id keeps it."""
        store: RecordStore[Note] = RecordStore()
        store.insert(Note("hello", id="n-1"))

        assert store.find("n-1").text == "hello"

    def test_generated_ids_are_unique(self) -> None:
        """Test that ids do not repeat across inserts."""
        store: RecordStore[Note] = RecordStore()
        ids = {store.insert(Note(str(i))).id for i in range(200)}

        assert len(ids) == 200


class TestQueries:
    """Tests for find, filter and all."""

    def test_find_missing_returns_none(self) -> None:
        """Test that an unknown id is reported as None."""
        store: RecordStore[Note] = RecordStore()

        assert store.find("nope") is None

    def test_filter_preserves_insertion_order(self) -> None:
        """Test that filter keeps records in the order they were inserted."""
        store: RecordStore[Note] = RecordStore()
        for text in ["b1", "a1", "b2", "a2", "b3"]:
            store.insert(Note(text))

        result = store.filter(lambda n: n.text.startswith("b"))

        assert [n.text for n in result] == ["b1", "b2", "b3"]

    def test_all_returns_a_snapshot(self) -> None:
        """Test that mutating the returned list does not touch the store."""
        store: RecordStore[Note] = RecordStore()
        store.insert(Note("x"))

        snapshot = store.all()
        snapshot.clear()

        assert len(store) == 1


class TestMutations:
    """Tests for update, remove_by_id and clear."""

    def test_update_in_place(self) -> None:
        """Test that update changes the stored record itself."""
        store: RecordStore[Note] = RecordStore()
        note = store.insert(Note("old"))

        updated = store.update(note.id, {"text": "new"})

        assert updated is note
        assert note.text == "new"

    def test_update_missing_returns_none(self) -> None:
        """Test that updating an unknown id is reported as None."""
        store: RecordStore[Note] = RecordStore()

        assert store.update("nope", {"text": "x"}) is None

    def test_remove_returns_removed_record(self) -> None:
        """Test that remove_by_id hands back the record and forgets it."""
        store: RecordStore[Note] = RecordStore()
        keep = store.insert(Note("keep"))
        drop = store.insert(Note("drop"))

        removed = store.remove_by_id(drop.id)

        assert removed is drop
        assert store.all() == [keep]

    def test_remove_missing_returns_none(self) -> None:
        """Test that removing an unknown id is reported as None."""
        store: RecordStore[Note] = RecordStore()
        store.insert(Note("x"))

        assert store.remove_by_id("nope") is None
        assert len(store) == 1

    def test_clear(self) -> None:
        """Test that clear empties the store."""
        store: RecordStore[Note] = RecordStore()
        store.insert(Note("x"))
        store.clear()

        assert len(store) == 0


def test_concurrent_inserts_are_all_kept() -> None:
    """Test that inserts from many threads are all recorded."""
    store: RecordStore[Note] = RecordStore()

    def worker() -> None:
        for i in range(100):
            store.insert(Note(str(i)))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 800
