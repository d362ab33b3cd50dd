"""Modules containing the model classes of slidemodel.

All classes are frozen Pydantic models: they are built once, compared by value and \
serialized to JSON externally tagged: each alternative of a union is written as \
a single-key object naming it, e.g. `{"Empty": {"black_background": true}}`.

- [`chapter`][slidemodel.models.chapter] contains the chapter and its linked entities
- [`slides`][slidemodel.models.slides] contains the slide class, its builders and \
    its structural queries
- [`content`][slidemodel.models.content] contains the closed set of slide contents
- [`scalars`][slidemodel.models.scalars] contains the type variables and the \
    annotated text types carrying whitespace normalization
- [`variants`][slidemodel.models.variants] contains the base class of the union \
    alternatives and their (de)serialization as externally tagged objects
"""

from .chapter import (
    LinkedEntity,
    MediaEntity,
    PresentationChapter,
    SourceEntity,
    TitleEntity,
)
from .content import (
    EmptySlide,
    MultiLanguageMainContentSlide,
    SimplePictureSlide,
    SingleLanguageMainContentSlide,
    SlideContent,
    TitleSlide,
)
from .slides import Slide

__all__ = [
    "EmptySlide",
    "LinkedEntity",
    "MediaEntity",
    "MultiLanguageMainContentSlide",
    "PresentationChapter",
    "SimplePictureSlide",
    "SingleLanguageMainContentSlide",
    "Slide",
    "SlideContent",
    "SourceEntity",
    "TitleEntity",
    "TitleSlide",
]
