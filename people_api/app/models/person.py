"""
Person domain record.

``Person`` is an immutable value: updates build a replacement through
``PersonPatch.apply`` and the store swaps it in under the same id.
Invariants are checked on construction, so every ``Person`` that
exists satisfies them.

``PersonPatch`` carries a partial update.  Each field is either
``UNSET`` (leave unchanged) or a concrete value (replace).  ``None`` is
never used to mean "absent".
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Union

from people_api.app.core.errors import ConstraintViolationError


class _Unset:
    """Marker type for a patch field that was not supplied."""

    _instance = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class Person:
    """An employee record.

    Invariants:
    - ``id`` is a positive integer
    - ``name`` is not blank
    - ``admission_date`` is not before ``birth_date``
    """

    id: int
    name: str
    birth_date: date
    admission_date: date

    def __post_init__(self) -> None:
        if self.id is None or self.id <= 0:
            raise ConstraintViolationError("id must be a positive integer")
        if self.name is None or not self.name.strip():
            raise ConstraintViolationError("name must not be blank")
        if self.birth_date is None:
            raise ConstraintViolationError("birthDate is required")
        if self.admission_date is None:
            raise ConstraintViolationError("admissionDate is required")
        if self.admission_date < self.birth_date:
            raise ConstraintViolationError("admissionDate cannot be before birthDate")


@dataclass(frozen=True)
class PersonPatch:
    """Partial update for a ``Person``; unset fields keep their value."""

    name: Union[str, _Unset] = UNSET
    birth_date: Union[date, _Unset] = UNSET
    admission_date: Union[date, _Unset] = UNSET

    def apply(self, person: Person) -> Person:
        """Return ``person`` with every supplied field replaced.

        All replacements are applied in a single construction, so the
        ordering invariant is checked against the final values only.
        """
        changes = {
            field: value
            for field, value in (
                ("name", self.name),
                ("birth_date", self.birth_date),
                ("admission_date", self.admission_date),
            )
            if value is not UNSET
        }
        if not changes:
            return person
        return replace(person, **changes)
