"""Encode and decode chapters and slides as JSON.

The models can be used directly with Pydantic (`model_dump_json`, \
`model_validate_json`). The functions of this module add the settings handling and \
report decoding failures as [`ChapterFormatError`][slidemodel.exceptions.ChapterFormatError].
"""

from logging import getLogger
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .configuring.settings import Settings
from .exceptions import ChapterFileError, ChapterFormatError
from .models import PresentationChapter, Slide

_logger = getLogger(__name__)


def dump_chapter(
    chapter: PresentationChapter[Any, Any], settings: Settings | None = None
) -> str:
    """Serialize `chapter` to JSON.

    Args:
        chapter: Chapter to serialize
        settings: Output options. Defaults are used if not given

    Returns:
        The JSON text.
    """
    if settings is None:
        settings = Settings()
    return chapter.model_dump_json(
        indent=settings.json_indent, exclude_none=settings.exclude_none
    )


def load_chapter(
    data: str | bytes, source_type: Any = Any, media_type: Any = Any
) -> PresentationChapter[Any, Any]:
    """Deserialize a chapter from JSON.

    Args:
        data: JSON text to decode
        source_type: Type of the source entities (the `T` parameter)
        media_type: Type of the media (the `M` parameter)

    Raises:
        ChapterFormatError: Raised if `data` is not valid JSON, has an unknown \
            `kind` tag, or has missing, unknown or mistyped fields.

    Returns:
        The decoded chapter, parametrized with `source_type` and `media_type`.
    """
    model = PresentationChapter[source_type, media_type]  # type: ignore[valid-type]
    try:
        return model.model_validate_json(data)
    except ValidationError as e:
        _logger.debug("Could not decode chapter as %s", model.__name__)
        raise ChapterFormatError(_describe(e)) from e


def read_chapter(
    path: Path, source_type: Any = Any, media_type: Any = Any
) -> PresentationChapter[Any, Any]:
    """Read and deserialize the chapter stored as JSON in the file `path`.

    Args:
        path: File to read
        source_type: Type of the source entities (the `T` parameter)
        media_type: Type of the media (the `M` parameter)

    Raises:
        ChapterFileError: Raised if the file cannot be read.
        ChapterFormatError: Raised if the content is not a valid chapter.

    Returns:
        The decoded chapter.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        msg = f"could not read {path}: {e.strerror or e}"
        raise ChapterFileError(msg) from e
    return load_chapter(data, source_type, media_type)


def load_slide(data: str | bytes, media_type: Any = Any) -> Slide[Any]:
    """Deserialize a single slide from JSON.

    See [`load_chapter`][slidemodel.serializing.load_chapter] for the details.
    """
    model = Slide[media_type]  # type: ignore[valid-type]
    try:
        return model.model_validate_json(data)
    except ValidationError as e:
        _logger.debug("Could not decode slide as %s", model.__name__)
        raise ChapterFormatError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in e['loc']) or '<root>'}: {e['msg']}"
        for e in error.errors()
    )
    return f"{error.error_count()} validation error(s): {details}"
