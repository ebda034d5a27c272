"""Domain layer - Pure business logic.

Entities, value objects, error constants and protocols (ports) for the
real-estate service. The domain layer has NO dependencies on any framework
or infrastructure.

Structure:
- entities/: Owner, Property, PropertyTrace, PropertyImage, User, RefreshToken
- value_objects/: Immutable values (cache policies, filters, image payloads)
- protocols/: Repository, unit of work and service interfaces
- errors/: Error message constants returned in Result types
"""
