"""
People endpoints for API v1.

These routes expose CRUD operations for people plus two derived
values: the age of a person (``/age``) and their projected salary
(``/salary``).  Handlers only translate between HTTP and
``PersonService``; failures are raised as domain exceptions and turned
into problem responses by the handlers registered in ``core.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from people_api.app.core.dependencies import get_person_service
from people_api.app.schemas.person import CreatePersonRequest, PersonResponse, UpdatePersonRequest
from people_api.app.services.person_service import PersonService

router = APIRouter()


@router.get("", response_model=List[PersonResponse])
async def list_people(service: PersonService = Depends(get_person_service)) -> List[PersonResponse]:
    """Return every person ordered by name."""
    return [PersonResponse.from_person(person) for person in service.find_all()]


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(person_id: int, service: PersonService = Depends(get_person_service)) -> PersonResponse:
    """Retrieve a single person by id; 404 if absent."""
    return PersonResponse.from_person(service.get(person_id))


@router.post("", response_model=PersonResponse)
async def create_person(
    request: CreatePersonRequest,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Create a person under the next free id."""
    person = service.create(request.name, request.birth_date, request.admission_date)
    return PersonResponse.from_person(person)


@router.post("/{person_id}", response_model=PersonResponse)
async def create_person_with_id(
    person_id: int,
    request: CreatePersonRequest,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Create a person under the given id.

    Answers 400 with ``INVALID_PARAMETER`` when the id is already taken.
    """
    person = service.create_with_id(person_id, request.name, request.birth_date, request.admission_date)
    return PersonResponse.from_person(person)


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: int,
    request: CreatePersonRequest,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Replace every field of an existing person."""
    person = service.update(person_id, request.name, request.birth_date, request.admission_date)
    return PersonResponse.from_person(person)


@router.patch("/{person_id}", response_model=PersonResponse)
async def update_person_partially(
    person_id: int,
    request: UpdatePersonRequest,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Change only the fields present in the request body."""
    person = service.update_partial(person_id, request.to_patch())
    return PersonResponse.from_person(person)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(person_id: int, service: PersonService = Depends(get_person_service)) -> Response:
    service.delete(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{person_id}/age", response_model=int)
async def get_person_age(
    person_id: int,
    output: str = Query(..., description="days, months or years"),
    service: PersonService = Depends(get_person_service),
) -> int:
    """Return the age of a person in the requested unit."""
    return service.calculate_age(person_id, output)


@router.get("/{person_id}/salary", response_model=float)
async def get_person_salary(
    person_id: int,
    output: str = Query(..., description="full or min"),
    service: PersonService = Depends(get_person_service),
) -> float:
    """Return the projected salary, in currency (``full``) or minimum wages (``min``)."""
    return service.calculate_salary(person_id, output)
