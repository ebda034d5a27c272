"""Application layer - owner, property and auth use cases.

- commands/: Write operations (create, update, sell, images, auth)
- queries/: Read operations (owner and property lookups, listings)
- cqrs/: Registry and mediator that route requests to handlers
- services/: Transactions with retry, cache invalidation, result cache

Handlers return Result types; HTTP mapping happens in presentation.
"""
