"""Client release queries."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetLatestVersion:
    """Most recently published client release."""
