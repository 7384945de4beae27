"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The in-memory
store used here can be swapped for a database-backed one without
changing API handlers.
"""
