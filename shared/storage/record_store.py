import threading
import uuid
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


def new_id() -> str:
    return str(uuid.uuid4())


class RecordStore(Generic[T]):
    """
    In-process, insertion-ordered collection of records keyed by ``record.id``.

    Every operation runs under ``self.lock`` (re-entrant). Services take the
    same lock around a lookup followed by a mutation so the pair is atomic.
    Lookups are linear scans; datasets are small.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._records: list[T] = []

    def insert(self, record: T) -> T:
        with self.lock:
            if not getattr(record, "id", None):
                record.id = new_id()
            self._records.append(record)
            return record

    def find(self, record_id: str) -> Optional[T]:
        with self.lock:
            for record in self._records:
                if record.id == record_id:
                    return record
            return None

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        with self.lock:
            return [r for r in self._records if predicate(r)]

    def all(self) -> list[T]:
        with self.lock:
            return list(self._records)

    def update(self, record_id: str, changes: dict) -> Optional[T]:
        with self.lock:
            record = self.find(record_id)
            if record is None:
                return None
            for key, value in changes.items():
                setattr(record, key, value)
            return record

    def remove_by_id(self, record_id: str) -> Optional[T]:
        with self.lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    return self._records.pop(index)
            return None

    def clear(self) -> None:
        with self.lock:
            self._records.clear()

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)

    def __iter__(self) -> Iterator[T]:
        # Snapshot so callers may mutate the store while iterating
        return iter(self.all())
