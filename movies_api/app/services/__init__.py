"""
Service layer abstraction.

The store encapsulates persistence behind the ``MovieStore`` interface
and the service holds the business rules on top of it, so API handlers
never talk to the database directly.
"""
