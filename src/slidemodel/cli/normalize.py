from pathlib import Path

from . import app


@app.command()
def normalize(path: Path, /, *, workdir: Path = Path()) -> None:
    """Print the chapter of PATH as normalized JSON.

    Texts are stripped and empty optional texts removed, exactly as when the \
    chapter is built in code.

    Args:
        path: JSON file holding the chapter
        workdir: Directory in which to look for settings

    """
    from rich.console import Console

    from ..configuring.settings import Settings
    from ..serializing import dump_chapter, read_chapter

    settings = Settings.from_yaml(workdir)
    chapter = read_chapter(path)
    Console(highlight=False).out(dump_chapter(chapter, settings))
