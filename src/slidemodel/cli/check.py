from pathlib import Path

from . import app


@app.command()
def check(paths: list[Path], /) -> None:
    """Check that each file of PATHS holds a valid serialized chapter.

    Args:
        paths: JSON files to check

    """
    from logging import getLogger

    from ..exceptions import ChapterFileError, ChapterFormatError
    from ..serializing import read_chapter

    logger = getLogger(__name__)
    invalid = 0
    for path in paths:
        try:
            chapter = read_chapter(path)
        except (ChapterFileError, ChapterFormatError) as e:
            logger.error("%s is invalid: %s", path, e)
            invalid += 1
        else:
            logger.info(
                "%s is valid: %d slide(s) linked to a %s entity",
                path,
                len(chapter.slides),
                chapter.linked_entity.kind,
            )
    if invalid:
        logger.error("%d of %d file(s) are invalid", invalid, len(paths))
        raise SystemExit(1)
