"""Generic data model for presentation slide decks.

The model is independent of the records decks are derived from and of the media \
they display: both are type parameters of
[`PresentationChapter`][slidemodel.models.chapter.PresentationChapter].
"""

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

app_name = "slidemodel"

_lazy_attributes = {
    "PresentationChapter": "models",
    "LinkedEntity": "models",
    "SourceEntity": "models",
    "TitleEntity": "models",
    "MediaEntity": "models",
    "Slide": "models",
    "SlideContent": "models",
    "SingleLanguageMainContentSlide": "models",
    "MultiLanguageMainContentSlide": "models",
    "TitleSlide": "models",
    "SimplePictureSlide": "models",
    "EmptySlide": "models",
    "dump_chapter": "serializing",
    "load_chapter": "serializing",
    "load_slide": "serializing",
    "read_chapter": "serializing",
    "ChapterFileError": "exceptions",
    "ChapterFormatError": "exceptions",
    "SlidemodelError": "exceptions",
}


def __getattr__(name: str) -> Any:
    """Lazy-load the public attributes of the slidemodel package.

    Nothing is imported when the package itself is loaded, so that the version can \
    be read by the packaging code without Pydantic installed, and so that the CLI \
    entry point can setup logging before any other module is loaded.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    if name not in _lazy_attributes:
        msg = f"cannot find the attribute {name} in module {__name__}"
        raise AttributeError(msg)
    return getattr(import_module(f".{_lazy_attributes[name]}", __name__), name)
