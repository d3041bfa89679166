"""Domain value objects."""

from directory_gate.domain.value_objects.caller import AuthenticatedCaller
from directory_gate.domain.value_objects.contact_name import (
    NormalizedNameMatcher,
    normalize_contact_name,
)

__all__ = ["AuthenticatedCaller", "NormalizedNameMatcher", "normalize_contact_name"]
