"""Queries (CQRS read operations)."""

from directory_gate.application.queries.directory_queries import ListVisibleContacts
from directory_gate.application.queries.request_queries import ListPendingRequests
from directory_gate.application.queries.version_queries import GetLatestVersion

__all__ = ["GetLatestVersion", "ListPendingRequests", "ListVisibleContacts"]
