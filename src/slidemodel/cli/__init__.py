from logging import INFO, basicConfig, getLogger

from cyclopts import App
from rich.logging import RichHandler

app = App(help="Inspect serialized presentation chapters.")


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, tracebacks_show_locals=False)],
    )
    from ..exceptions import SlidemodelError
    from . import check, normalize, print_settings, show  # noqa: F401

    try:
        app()
    except SlidemodelError as e:
        getLogger(__name__).critical(str(e))
        raise SystemExit(1) from e
