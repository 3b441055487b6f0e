"""
Service layer abstraction.

Each service encapsulates the business rules of a domain and talks to
storage only through a repository, so API handlers never touch the
database directly and tests can substitute any repository.
"""
