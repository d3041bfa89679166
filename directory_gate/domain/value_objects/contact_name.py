"""Contact name normalization and exclusion matching.

Personal requests reference directory contacts by free-text name, not by a
directory key. Matching is done on the normalized form (lower-cased, outer
whitespace trimmed). Two directory contacts with the same normalized name
are indistinguishable to the matcher.

All matching goes through NormalizedNameMatcher so it can be replaced by an
identifier-based matcher without touching the visibility filter.
"""

from collections.abc import Iterable


def normalize_contact_name(name: str | None) -> str:
    """Lower-case and trim a contact name.

    Args:
        name: Raw name (may be None for incomplete legacy rows).

    Returns:
        Normalized name, "" for None.

    Example:
        >>> normalize_contact_name("  Jane DOE ")
        'jane doe'
    """
    if name is None:
        return ""
    return str(name).lower().strip()


class NormalizedNameMatcher:
    """Match directory contacts against requested contact names by normalized name."""

    def build_exclusions(self, requested_names: Iterable[str]) -> frozenset[str]:
        """Build the exclusion key set from approved requested-contact names.

        Args:
            requested_names: Requested contact names from approved requests.

        Returns:
            Set of normalized names to exclude.
        """
        return frozenset(normalize_contact_name(name) for name in requested_names)

    def is_excluded(self, contact_name: str | None, exclusions: frozenset[str]) -> bool:
        """Check whether a directory contact is hidden by the exclusion set.

        Args:
            contact_name: Directory contact name.
            exclusions: Result of build_exclusions().

        Returns:
            True if the contact must be hidden.
        """
        return normalize_contact_name(contact_name) in exclusions
