"""
Version 1 of the API.

Bundles the people endpoints.  Breaking changes belong in a new
version subpackage.
"""
