"""Model classes for a presentation chapter and its provenance.

A [`PresentationChapter`][slidemodel.models.chapter.PresentationChapter] is a deck: \
an ordered sequence of slides and a linked entity describing where the deck comes \
from. Both the source entity type `T` and the media type `M` are left to the host \
application, which only has to make them validatable and serializable by pydantic:

    class Song(BaseModel):
        id: int
        title: str

    SongChapter = PresentationChapter[Song, Path]

Unparametrized models accept any JSON value for `T` and `M`.
"""

from collections.abc import Iterable
from typing import Annotated, ClassVar, Generic, Self, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag

from .scalars import M, T
from .slides import Slide
from .variants import Variant, variant_tag


class SourceEntity(Variant, Generic[T]):
    """Provenance pointing to a source record, e.g. a song or a Bible verse."""

    kind: ClassVar[str] = "Source"
    value_field: ClassVar[str | None] = "source"

    source: T


class TitleEntity(Variant):
    """Provenance given as a bare label, without any backing record."""

    kind: ClassVar[str] = "Title"
    value_field: ClassVar[str | None] = "title"

    title: str


class MediaEntity(Variant, Generic[M]):
    """Provenance pointing to a media item."""

    kind: ClassVar[str] = "Media"
    value_field: ClassVar[str | None] = "media"

    media: M


LinkedEntity = Annotated[
    Union[
        Annotated[SourceEntity[T], Tag(SourceEntity.kind)],
        Annotated[TitleEntity, Tag(TitleEntity.kind)],
        Annotated[MediaEntity[M], Tag(MediaEntity.kind)],
    ],
    Discriminator(variant_tag),
]
"""Where a chapter comes from. Exactly one of the three entities is active."""


class PresentationChapter(BaseModel, Generic[T, M]):
    """Top of the hierarchy: slides in presentation order and their provenance."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    slides: tuple[Slide[M], ...]
    """Slides of the chapter. The order is the presentation order."""

    linked_entity: LinkedEntity
    """The entity the chapter was derived from."""

    @classmethod
    def new(
        cls,
        slides: Iterable[Slide[M]],
        linked_entity: LinkedEntity,
    ) -> Self:
        """Assemble a chapter from already ordered slides.

        No check is made on the slides: an empty chapter is valid.

        Args:
            slides: Slides in presentation order
            linked_entity: The entity the chapter was derived from

        Returns:
            The new chapter.
        """
        return cls(slides=tuple(slides), linked_entity=linked_entity)
