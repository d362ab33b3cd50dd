"""Model annotated types that carry the text normalization rules.

Normalization is attached to the field types rather than to the constructors, so \
that a slide read back from JSON or built directly from its payload class is \
normalized the same way as one built with the [`Slide`][slidemodel.models.slides.Slide] \
helpers.
"""

from typing import Annotated, TypeVar

from pydantic.functional_validators import AfterValidator

T = TypeVar("T")
"""Type of the source entity a chapter is derived from (e.g. a song record)."""

M = TypeVar("M")
"""Type of the media attached to chapters and slides (e.g. a file reference)."""


def strip_text(value: str) -> str:
    return value.strip()


def strip_optional_text(value: str | None) -> str | None:
    """Strip `value` and turn it into `None` if nothing is left.

    Args:
        value: Text to normalize, possibly absent.

    Returns:
        The stripped text, or `None` if `value` was absent, empty or made only of \
        whitespace.
    """
    if value is None:
        return None
    return value.strip() or None


Text = Annotated[str, AfterValidator(strip_text)]
"""String stored without leading and trailing whitespace."""

OptionalText = Annotated[str | None, AfterValidator(strip_optional_text)]
"""Optional string stored stripped, never as an empty string."""
