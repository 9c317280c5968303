"""``bevshop`` command line entry point."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from bevshop.application.settings import ShopSettings
from bevshop.domain.exceptions import DomainException
from bevshop.infrastructure.bootstrap import shop_app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _package_version() -> str:
    try:
        return version("beverage-shop")
    except PackageNotFoundError:
        return "0.0.0"


def configure_logging(log_file: Path | None, level: str) -> logging.Handler:
    """Log to *log_file* if given; the terminal itself belongs to the UI.

    Returns the installed handler so the caller can release it.
    """
    root = logging.getLogger("bevshop")
    if log_file is None:
        handler: logging.Handler = logging.NullHandler()
    else:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.setLevel(level.upper())
    root.addHandler(handler)
    return handler


def release_logging(handler: logging.Handler) -> None:
    logging.getLogger("bevshop").removeHandler(handler)
    handler.close()


@click.command(context_settings={"auto_envvar_prefix": "BEVSHOP"})
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON catalog file (defaults to the built-in beverages).",
)
@click.option(
    "--visible-rows",
    type=click.IntRange(min=1),
    default=5,
    show_default=True,
    help="Rows shown in the shop table; also the page-up/down step.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write logs to this file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Log level for --log-file.",
)
@click.version_option(_package_version(), prog_name="bevshop")
def cli(
    catalog_path: Path | None,
    visible_rows: int,
    log_file: Path | None,
    log_level: str,
) -> None:
    """Beverage Shop — pick drinks, review the cart, check out."""
    handler = configure_logging(log_file, log_level)
    click.get_current_context().call_on_close(lambda: release_logging(handler))

    try:
        app = shop_app(catalog_path, ShopSettings(visible_rows=visible_rows))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    try:
        app.run()
    except (OSError, EOFError) as exc:
        logger.error("Terminal I/O failed: %s", exc)
        raise click.ClickException(f"Alas, there's been an error: {exc}")
