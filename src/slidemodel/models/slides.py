"""Model class for a single displayable slide."""

from collections.abc import Iterable
from typing import Generic, Self, assert_never

from pydantic import BaseModel, ConfigDict

from .content import (
    EmptySlide,
    MultiLanguageMainContentSlide,
    SimplePictureSlide,
    SingleLanguageMainContentSlide,
    SlideContent,
    TitleSlide,
)
from .scalars import M


class Slide(BaseModel, Generic[M]):
    """One displayable unit of a chapter.

    The content and the linked file are independent: any kind of content can carry \
    its own media, regardless of what the chapter is linked to.

    Slides are immutable. Use the `new_*` class methods to build them and \
    [`with_media`][slidemodel.models.slides.Slide.with_media] to attach media.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    slide_content: SlideContent
    """What the slide displays."""

    linked_file: M | None = None
    """Media attached directly to the slide."""

    @classmethod
    def new_empty_slide(cls, black_background: bool) -> Self:
        return cls(slide_content=EmptySlide(black_background=black_background))

    @classmethod
    def new_content_slide(
        cls,
        main_text: str,
        spoiler_text: str | None = None,
        meta_text: str | None = None,
    ) -> Self:
        """Build a slide holding text in a single language.

        All texts are stripped. Optional texts that are empty once stripped are \
        stored as `None`.

        Args:
            main_text: The text displayed on the slide
            spoiler_text: Secondary text, revealed separately
            meta_text: Annotation of the slide

        Returns:
            The new slide, without any linked file.
        """
        return cls(
            slide_content=SingleLanguageMainContentSlide(
                main_text=main_text, spoiler_text=spoiler_text, meta_text=meta_text
            )
        )

    @classmethod
    def new_title_slide(cls, title_text: str, meta_text: str | None = None) -> Self:
        """Build a title slide, normalizing texts like `new_content_slide`."""
        return cls(slide_content=TitleSlide(title_text=title_text, meta_text=meta_text))

    @classmethod
    def new_multi_language_slide(
        cls,
        main_text_list: Iterable[str],
        spoiler_text_vector: Iterable[str] = (),
        meta_text: str | None = None,
    ) -> Self:
        """Build a slide holding text in several languages.

        Every item is stripped but kept, even when empty, so that languages stay \
        matched by position.

        Args:
            main_text_list: The text displayed on the slide, one item per language
            spoiler_text_vector: Secondary texts, one item per language
            meta_text: Annotation of the slide

        Returns:
            The new slide, without any linked file.
        """
        return cls(
            slide_content=MultiLanguageMainContentSlide(
                main_text_list=tuple(main_text_list),
                spoiler_text_vector=tuple(spoiler_text_vector),
                meta_text=meta_text,
            )
        )

    @classmethod
    def new_picture_slide(cls, picture_path: str) -> Self:
        return cls(slide_content=SimplePictureSlide(picture_path=picture_path))

    def with_media(self, media: M) -> Self:
        """Return a copy of the slide with `media` as its linked file.

        Any previously linked file is replaced. The slide itself is left untouched.

        Args:
            media: Media to attach to the slide

        Returns:
            The updated copy.
        """
        return self.model_copy(update={"linked_file": media})

    @property
    def kind(self) -> str:
        """The discriminator of the slide content, e.g. `"Title"`."""
        return self.slide_content.kind

    def has_spoiler(self) -> bool:
        content = self.slide_content
        match content:
            case SingleLanguageMainContentSlide():
                return content.spoiler_text is not None
            case MultiLanguageMainContentSlide():
                return len(content.spoiler_text_vector) > 0
            case TitleSlide() | SimplePictureSlide() | EmptySlide():
                return False
            case _:
                assert_never(content)

    def has_meta_text(self) -> bool:
        content = self.slide_content
        match content:
            case (
                SingleLanguageMainContentSlide()
                | TitleSlide()
                | MultiLanguageMainContentSlide()
            ):
                return content.meta_text is not None
            case SimplePictureSlide() | EmptySlide():
                return False
            case _:
                assert_never(content)
