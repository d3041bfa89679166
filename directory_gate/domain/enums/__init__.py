"""Domain enums package."""

from directory_gate.domain.enums.request_status import RequestStatus

__all__ = ["RequestStatus"]
