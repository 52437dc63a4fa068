"""
Domain records.

Models here are plain immutable values that enforce their own
invariants.  They are independent of the API schemas so that the wire
representation can evolve without touching the domain.
"""
