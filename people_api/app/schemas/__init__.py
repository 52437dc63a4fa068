"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain models to decouple the wire
representation from the stored records.
"""
