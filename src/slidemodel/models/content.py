"""Model classes for the content a slide can display.

[`SlideContent`][slidemodel.models.content.SlideContent] is a closed union: every \
payload class declares a `kind` tag, the key of its serialized object. Adding a \
payload class means updating the union and every consumer matching on it.
"""

from typing import Annotated, ClassVar, Union

from pydantic import Discriminator, Tag

from .scalars import OptionalText, Text
from .variants import Variant, variant_tag


class SingleLanguageMainContentSlide(Variant):
    """Main text in a single language, e.g. a verse of a song."""

    kind: ClassVar[str] = "SingleLanguageMainContent"

    main_text: Text
    """The text displayed on the slide."""

    spoiler_text: OptionalText = None
    """Secondary text, typically revealed separately from the main text."""

    meta_text: OptionalText = None
    """Annotation of the slide, e.g. a verse label."""


class TitleSlide(Variant):
    """Title of a chapter, shown before its content slides."""

    kind: ClassVar[str] = "Title"

    title_text: Text
    """The title to display."""

    meta_text: OptionalText = None
    """Annotation of the slide, e.g. the author of a song."""


class MultiLanguageMainContentSlide(Variant):
    """Main text in several languages displayed at once.

    Languages are matched by position between `main_text_list` and \
    `spoiler_text_vector`. The two sequences are allowed to have different lengths.
    """

    kind: ClassVar[str] = "MultiLanguageMainContent"

    main_text_list: tuple[Text, ...]
    """The text displayed on the slide, one item per language."""

    spoiler_text_vector: tuple[Text, ...]
    """Secondary texts, one item per language."""

    meta_text: OptionalText = None
    """Annotation of the slide."""


class SimplePictureSlide(Variant):
    kind: ClassVar[str] = "SimplePicture"

    picture_path: str
    """Reference to the image to display, stored as given."""


class EmptySlide(Variant):
    kind: ClassVar[str] = "Empty"

    black_background: bool
    """Whether the slide is rendered plain black instead of the default background."""


SlideContent = Annotated[
    Union[
        Annotated[
            SingleLanguageMainContentSlide, Tag(SingleLanguageMainContentSlide.kind)
        ],
        Annotated[TitleSlide, Tag(TitleSlide.kind)],
        Annotated[
            MultiLanguageMainContentSlide, Tag(MultiLanguageMainContentSlide.kind)
        ],
        Annotated[SimplePictureSlide, Tag(SimplePictureSlide.kind)],
        Annotated[EmptySlide, Tag(EmptySlide.kind)],
    ],
    Discriminator(variant_tag),
]
"""Any slide content. Exactly one payload class is active per slide."""
