"""
In-memory storage for person records.

``PersonStore`` keeps ``id -> Person`` in a dictionary shared by every
request handler of one application instance.  Writes to the same id
are serialized by a per-key lock so that ``update`` performs its
read-modify-write as one step; writers on different ids never wait on
each other.  Reads take a snapshot and do not lock the key.

The store is created by ``create_app`` and handed to the service layer;
nothing in this module is a module-level singleton.
"""

import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional

from people_api.app.core.errors import NotFoundError
from people_api.app.models.person import Person


class _KeyLock:
    """A lock plus the number of callers holding or waiting on it."""

    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class PersonStore:
    """Thread-safe key-value store of ``Person`` records."""

    def __init__(self) -> None:
        self._people: Dict[int, Person] = {}
        # Only ids with a writer in flight have an entry.
        self._key_locks: Dict[int, _KeyLock] = {}
        # Guards ``_key_locks`` and structural changes of ``_people``.
        self._guard = threading.Lock()

    @contextmanager
    def _locked(self, person_id: int) -> Iterator[None]:
        with self._guard:
            key_lock = self._key_locks.get(person_id)
            if key_lock is None:
                key_lock = self._key_locks[person_id] = _KeyLock()
            key_lock.users += 1
        try:
            with key_lock.lock:
                yield
        finally:
            with self._guard:
                key_lock.users -= 1
                if key_lock.users == 0:
                    del self._key_locks[person_id]

    def save(self, person: Person) -> Person:
        """Insert or overwrite the entry at ``person.id``."""
        with self._locked(person.id):
            with self._guard:
                self._people[person.id] = person
        return person

    def find_by_id(self, person_id: int) -> Optional[Person]:
        with self._guard:
            return self._people.get(person_id)

    def update(self, person_id: int, update_fn: Callable[[Person], Person]) -> Person:
        """Atomically replace the record at ``person_id``.

        ``update_fn`` receives the current record and returns its
        replacement.  Raises ``NotFoundError`` if no record exists.  If
        ``update_fn`` raises, the stored record is left untouched.
        """
        with self._locked(person_id):
            with self._guard:
                current = self._people.get(person_id)
            if current is None:
                raise NotFoundError(person_id)
            updated = update_fn(current)
            with self._guard:
                self._people[person_id] = updated
        return updated

    def find_all(self) -> List[Person]:
        """Return a snapshot of all records in no particular order."""
        with self._guard:
            return list(self._people.values())

    def delete_by_id(self, person_id: int) -> None:
        with self._locked(person_id):
            with self._guard:
                if person_id not in self._people:
                    raise NotFoundError(person_id)
                del self._people[person_id]

    def exists_by_id(self, person_id: int) -> bool:
        with self._guard:
            return person_id in self._people

    def get_next_id(self) -> int:
        """Return ``max(id) + 1``, or ``1`` for an empty store.

        Not reserved: two concurrent callers may receive the same id.
        """
        with self._guard:
            return max(self._people, default=0) + 1
