"""Infrastructure layer - adapters behind the domain protocols.

- persistence/: SQLAlchemy models, repositories and the Unit of Work
- cache/: Redis and in-memory cache adapters, cache key construction
- security/: JWT, PBKDF2 password hashing, refresh tokens
- logging/: structlog console adapter
"""
