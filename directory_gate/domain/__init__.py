"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects and protocols
(ports). The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (User, PersonalRequest, DirectoryContact, ...)
- enums/: Domain enumerations (RequestStatus)
- errors/: Domain error types (identity provider failures)
- protocols/: Repository and service interfaces
- value_objects/: Immutable helpers (contact name normalization)
"""
