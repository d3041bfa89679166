"""Frontend return URL handling for the login flow."""

from collections.abc import Sequence
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def is_allowed_return_url(url: str, allowlist: Sequence[str]) -> bool:
    """Check a return URL against an origin allow-list.

    An empty allow-list accepts any URL (mobile deep links included).

    Args:
        url: Candidate return URL.
        allowlist: Allowed origins ("scheme://host[:port]"), no trailing slash.
    """
    if not allowlist:
        return True

    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return False
    return f"{parts.scheme}://{parts.netloc}".lower() in {
        origin.lower() for origin in allowlist
    }


def resolve_return_url(
    desired: str | None, default: str, allowlist: Sequence[str]
) -> str:
    """Pick the URL the login flow returns to.

    Falls back to ``default`` when nothing usable was asked for.
    """
    candidate = (desired or "").strip()
    if candidate and is_allowed_return_url(candidate, allowlist):
        return candidate
    return default


def with_query_param(url: str, key: str, value: str) -> str:
    """Append a query parameter, keeping any existing query and fragment.

    Example:
        >>> with_query_param("https://app.example.com/home?tab=1", "token", "abc")
        'https://app.example.com/home?tab=1&token=abc'
    """
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.append((key, value))
    return urlunsplit(parts._replace(query=urlencode(query)))
