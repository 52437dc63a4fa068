import threading
from datetime import date

import pytest

from people_api.app.core.errors import NotFoundError
from people_api.app.core.store import PersonStore
from people_api.app.models.person import Person, PersonPatch


def make_person(person_id: int, name: str = "Ana") -> Person:
    return Person(person_id, name, date(1990, 1, 1), date(2015, 6, 1))


def test_next_id_starts_at_one(store: PersonStore) -> None:
    assert store.get_next_id() == 1


def test_next_id_follows_highest_id(store: PersonStore) -> None:
    store.save(make_person(1))
    store.save(make_person(3))

    assert store.get_next_id() == 4


def test_save_overwrites_same_id(store: PersonStore) -> None:
    store.save(make_person(1, "Ana"))
    saved = store.save(make_person(1, "Bia"))

    assert saved.name == "Bia"
    assert store.find_by_id(1) == saved
    assert len(store.find_all()) == 1


def test_find_by_id_missing_returns_none(store: PersonStore) -> None:
    assert store.find_by_id(42) is None


def test_update_replaces_record(store: PersonStore) -> None:
    store.save(make_person(1, "Ana"))

    updated = store.update(1, lambda current: PersonPatch(name="Ana Maria").apply(current))

    assert updated.name == "Ana Maria"
    assert store.find_by_id(1) == updated


def test_update_missing_id_raises(store: PersonStore) -> None:
    with pytest.raises(NotFoundError) as exc:
        store.update(7, lambda current: current)

    assert exc.value.person_id == 7


def test_failed_update_leaves_record_untouched(store: PersonStore) -> None:
    original = store.save(make_person(1))

    def explode(current: Person) -> Person:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        store.update(1, explode)

    assert store.find_by_id(1) is original


def test_delete_removes_record(store: PersonStore) -> None:
    store.save(make_person(1))

    store.delete_by_id(1)

    assert not store.exists_by_id(1)
    assert store.find_all() == []


def test_delete_missing_id_raises(store: PersonStore) -> None:
    with pytest.raises(NotFoundError):
        store.delete_by_id(1)


def test_find_all_returns_snapshot(store: PersonStore) -> None:
    store.save(make_person(1))
    snapshot = store.find_all()

    store.save(make_person(2))

    assert len(snapshot) == 1
    assert {person.id for person in store.find_all()} == {1, 2}


def test_concurrent_updates_on_same_id_are_not_lost(store: PersonStore) -> None:
    store.save(make_person(1, "n"))
    threads_count = 8
    updates_per_thread = 200
    barrier = threading.Barrier(threads_count)

    def worker() -> None:
        barrier.wait()
        for _ in range(updates_per_thread):
            store.update(1, lambda current: PersonPatch(name=current.name + "x").apply(current))

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.find_by_id(1).name) == 1 + threads_count * updates_per_thread


def test_lock_table_empties_after_misses_on_unknown_ids(store: PersonStore) -> None:
    for person_id in range(1, 5001):
        with pytest.raises(NotFoundError):
            store.delete_by_id(person_id)
        with pytest.raises(NotFoundError):
            store.update(person_id, lambda current: current)

    assert store.find_all() == []
    assert store._key_locks == {}


def test_lock_table_empties_after_writes_and_deletes(store: PersonStore) -> None:
    for person_id in range(1, 101):
        store.save(make_person(person_id))
        store.delete_by_id(person_id)

    assert store._key_locks == {}


def test_lock_table_empties_after_concurrent_updates(store: PersonStore) -> None:
    store.save(make_person(1, "n"))
    barrier = threading.Barrier(4)

    def worker() -> None:
        barrier.wait()
        for _ in range(100):
            store.update(1, lambda current: PersonPatch(name=current.name + "x").apply(current))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.find_by_id(1).name) == 401
    assert store._key_locks == {}
