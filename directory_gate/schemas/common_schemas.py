"""Shared schema types."""

from typing import Annotated

from pydantic import AfterValidator


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Required text field: must contain a non-whitespace character; stored as sent.
NonBlankStr = Annotated[str, AfterValidator(_reject_blank)]
