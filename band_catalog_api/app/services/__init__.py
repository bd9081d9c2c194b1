"""
Service layer abstraction.

Each service encapsulates business logic for one resource and talks to
the database only through the store it was constructed with.
"""
