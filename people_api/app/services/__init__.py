"""
Service layer.

Services hold the business rules and depend only on the domain models
and the store passed to them, never on FastAPI.
"""
