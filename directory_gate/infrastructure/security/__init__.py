"""Security adapters (credential signing)."""

from directory_gate.infrastructure.security.jwt_service import JWTService

__all__ = ["JWTService"]
