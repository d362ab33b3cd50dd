from pathlib import Path
from typing import TYPE_CHECKING, Any, assert_never

from . import app

if TYPE_CHECKING:
    from rich.table import Table

    from ..models import PresentationChapter


@app.command()
def show(path: Path, /) -> None:
    """Display the slides of the chapter in PATH.

    Args:
        path: JSON file holding the chapter

    """
    from rich.console import Console
    from rich.markup import escape

    from ..serializing import read_chapter

    chapter = read_chapter(path)
    console = Console()
    console.rule(f"[bold]{escape(_describe_entity(chapter))}", align="left")
    console.print()
    if chapter.slides:
        console.print(_slides_table(chapter))
    else:
        console.print("No slides.")


def _describe_entity(chapter: "PresentationChapter[Any, Any]") -> str:
    from ..models import MediaEntity, SourceEntity, TitleEntity

    entity = chapter.linked_entity
    match entity:
        case SourceEntity():
            return f"Source: {entity.source!r}"
        case TitleEntity():
            return f"Title: {entity.title}"
        case MediaEntity():
            return f"Media: {entity.media!r}"
        case _:
            assert_never(entity)


def _slides_table(chapter: "PresentationChapter[Any, Any]") -> "Table":
    from rich.markup import escape
    from rich.table import Table

    table = Table("#", "Kind", "Spoiler", "Meta", "Linked file")
    for i, slide in enumerate(chapter.slides, start=1):
        table.add_row(
            str(i),
            slide.kind,
            "yes" if slide.has_spoiler() else "no",
            "yes" if slide.has_meta_text() else "no",
            "" if slide.linked_file is None else escape(repr(slide.linked_file)),
        )
    return table
