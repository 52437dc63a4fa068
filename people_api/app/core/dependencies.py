"""
FastAPI dependency providers.

The person service is built once per application in ``create_app`` and
stored on ``app.state``; handlers receive it through
``Depends(get_person_service)`` so tests can swap it with
``app.dependency_overrides``.
"""

from fastapi import Request

from people_api.app.services.person_service import PersonService


def get_person_service(request: Request) -> PersonService:
    """Return the ``PersonService`` bound to the running application."""
    return request.app.state.person_service
