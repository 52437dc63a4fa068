"""
Pydantic models for person payloads.

JSON field names are camelCase (``birthDate``, ``admissionDate``);
snake_case names are accepted on input as well.  ``CreatePersonRequest``
is used for POST and PUT, ``UpdatePersonRequest`` for PATCH.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from people_api.app.models.person import Person, PersonPatch


def _require_not_blank(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("Nome é obrigatório")
    return value


def _require_past_or_present(value: date) -> date:
    if value > date.today():
        raise ValueError("Data de admissão deve ser no passado ou presente")
    return value


class CreatePersonRequest(BaseModel):
    """Schema for creating or fully replacing a person."""

    name: str = Field(..., examples=["José da Silva"])
    birth_date: date = Field(..., alias="birthDate", examples=["2000-04-06"])
    admission_date: date = Field(..., alias="admissionDate", examples=["2020-05-10"])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return _require_not_blank(v)

    @field_validator("birth_date")
    @classmethod
    def birth_date_in_past(cls, v: date) -> date:
        if v >= date.today():
            raise ValueError("Data de nascimento deve ser no passado")
        return v

    @field_validator("admission_date")
    @classmethod
    def admission_date_not_in_future(cls, v: date) -> date:
        return _require_past_or_present(v)


class UpdatePersonRequest(BaseModel):
    """Schema for partially updating a person.

    All fields are optional; only the fields present in the request
    body are changed.  Sending ``null`` for a field is rejected because
    fields can be replaced but never cleared.
    """

    name: Optional[str] = Field(None, examples=["José da Silva Sauro"])
    birth_date: Optional[date] = Field(None, alias="birthDate")
    admission_date: Optional[date] = Field(None, alias="admissionDate")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("name", "birth_date", "admission_date", mode="before")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Campo não pode ser nulo")
        return v

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return _require_not_blank(v)

    @field_validator("admission_date")
    @classmethod
    def admission_date_not_in_future(cls, v: date) -> date:
        return _require_past_or_present(v)

    def to_patch(self) -> PersonPatch:
        """Convert the fields that were actually sent into a ``PersonPatch``."""
        supplied = {field: getattr(self, field) for field in self.model_fields_set}
        return PersonPatch(**supplied)


class PersonResponse(BaseModel):
    """Schema for reading a person from the API."""

    id: int
    name: str
    birth_date: date = Field(..., alias="birthDate")
    admission_date: date = Field(..., alias="admissionDate")

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_person(cls, person: Person) -> "PersonResponse":
        return cls(
            id=person.id,
            name=person.name,
            birth_date=person.birth_date,
            admission_date=person.admission_date,
        )
