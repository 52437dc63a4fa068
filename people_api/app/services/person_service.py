"""
Service layer for people.

``PersonService`` is the only entry point the API handlers use.  It
combines the ``PersonStore`` with the age and salary calculators and
owns the not-found and conflict rules.  Input shape validation (blank
names, dates in the future) happens in the request schemas; record
invariants are enforced by ``Person`` itself.
"""

import logging
from datetime import date
from typing import List

from people_api.app.core.errors import ConflictError, InvalidInputError, NotFoundError
from people_api.app.core.store import PersonStore
from people_api.app.models.person import Person, PersonPatch
from people_api.app.services.age_service import AgeService, Clock
from people_api.app.services.salary_service import SalaryService


logger = logging.getLogger(__name__)

AGE_OUTPUTS = ("days", "months", "years")

SAMPLE_PEOPLE = (
    (1, "José da Silva", date(2000, 4, 6), date(2020, 5, 10)),
    (2, "Maria Santos", date(1995, 8, 15), date(2019, 3, 20)),
    (3, "João Oliveira", date(1988, 12, 3), date(2021, 1, 15)),
)


class PersonService:
    """CRUD and derived values for ``Person`` records."""

    def __init__(self, store: PersonStore, clock: Clock = date.today) -> None:
        self.store = store
        self.age_service = AgeService(clock)
        self.salary_service = SalaryService(self.age_service)

    def seed_sample_data(self) -> None:
        """Store the three sample people under ids 1 to 3."""
        for person_id, name, birth_date, admission_date in SAMPLE_PEOPLE:
            self.store.save(Person(person_id, name, birth_date, admission_date))
        logger.info("Seeded %d sample people", len(SAMPLE_PEOPLE))

    def create(self, name: str, birth_date: date, admission_date: date) -> Person:
        person = Person(self.store.get_next_id(), name, birth_date, admission_date)
        self.store.save(person)
        logger.info("Created person %s", person.id)
        return person

    def create_with_id(self, person_id: int, name: str, birth_date: date, admission_date: date) -> Person:
        """Create a person under a caller-chosen id.

        Raises ``ConflictError`` if the id is already taken.
        """
        if self.store.exists_by_id(person_id):
            raise ConflictError(person_id)
        person = Person(person_id, name, birth_date, admission_date)
        self.store.save(person)
        logger.info("Created person %s with explicit id", person_id)
        return person

    def update(self, person_id: int, name: str, birth_date: date, admission_date: date) -> Person:
        """Replace every field of an existing person."""
        person = self.store.update(
            person_id, lambda current: Person(person_id, name, birth_date, admission_date)
        )
        logger.info("Updated person %s", person_id)
        return person

    def update_partial(self, person_id: int, patch: PersonPatch) -> Person:
        """Replace only the fields set on ``patch``."""
        person = self.store.update(person_id, patch.apply)
        logger.info("Patched person %s", person_id)
        return person

    def get(self, person_id: int) -> Person:
        person = self.store.find_by_id(person_id)
        if person is None:
            raise NotFoundError(person_id)
        return person

    def find_all(self) -> List[Person]:
        """Return every person ordered by name."""
        return sorted(self.store.find_all(), key=lambda person: person.name)

    def delete(self, person_id: int) -> None:
        self.store.delete_by_id(person_id)
        logger.info("Deleted person %s", person_id)

    def calculate_age(self, person_id: int, output_kind: str) -> int:
        """Return the age of a person in days, months or years.

        ``days`` and ``months`` are total counts since the birth date;
        ``years`` is the whole-year part of the calendar age.
        """
        person = self.get(person_id)
        kind = (output_kind or "").lower()
        if kind == "days":
            return self.age_service.total_days(person.birth_date)
        if kind == "months":
            return self.age_service.total_months(person.birth_date)
        if kind == "years":
            return self.age_service.diff(person.birth_date).years
        raise InvalidInputError(
            f"Tipo de saída inválido: {output_kind}. Valores aceitos: {', '.join(AGE_OUTPUTS)}"
        )

    def calculate_salary(self, person_id: int, output_kind: str) -> float:
        person = self.get(person_id)
        return self.salary_service.calculate_salary(
            person.admission_date, output_kind, self.age_service.today()
        )
