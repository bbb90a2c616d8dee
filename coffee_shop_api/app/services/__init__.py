"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on the
in-memory stores it is given at construction.  Replacing the stores
with a database-backed implementation does not touch the API handlers.
"""
