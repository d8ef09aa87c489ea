"""CLI entry point for badevann."""

import argparse
import logging
import sys
from dataclasses import dataclass

from badevann.config.defaults import (
    CACHE_FILENAME,
    SETTINGS_FILENAME,
    THRESHOLDS_FILENAME,
    config_dir,
)
from badevann.config.loader import load_thresholds
from badevann.config.settings_store import SettingsStore
from badevann.context import AppContext
from badevann.ingest.yr_client import YrClient
from badevann.logging_config import configure_logging, set_debug
from badevann.reporting.display import (
    FETCH_FAILED_MESSAGE,
    DisplayOptions,
    Presentation,
    help_text,
    not_found_message,
)
from badevann.service.data_service import DataService, DataUnavailable
from badevann.storage.cache_repo import CacheRepo
from badevann.ui.menus import MenuRunner

logger = logging.getLogger(__name__)

KEYWORDS = {
    "help": "help", "h": "help", "?": "help",
    "debug": "debug", "d": "debug",
    "short": "short", "s": "short",
    "verbose": "long", "v": "long", "l": "long", "long": "long",
    "iso": "iso", "i": "iso",
    "nocolor": "nocolor",
}


@dataclass(frozen=True)
class CliOptions:
    help: bool = False
    debug: bool = False
    presentation: Presentation | None = None
    color: bool = True
    iso: bool = False
    beach: str = ""


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="badevann",
        description="Badetemperaturer fra yr.no i konsollen",
        add_help=False,
    )
    parser.add_argument(
        "terms",
        nargs="*",
        help="badeplass og/eller nøkkelord (help, debug, short, verbose, iso, nocolor)",
    )
    return parser


def parse_options(argv: list[str]) -> CliOptions:
    """Split arguments into keywords and a beach name.

    Leading dashes are ignored, so ``-d``, ``--debug`` and ``debug`` are the
    same. Tokens that are not keywords are joined into the beach name.
    """
    parser = create_parser()
    tokens = [t.lstrip("-") for t in argv]
    args = parser.parse_args([t for t in tokens if t.strip()])

    flags: set[str] = set()
    name_parts: list[str] = []
    for term in args.terms:
        keyword = KEYWORDS.get(term.lower().strip())
        if keyword is None:
            name_parts.append(term.strip())
        else:
            flags.add(keyword)

    if "short" in flags:
        presentation = Presentation.TEMP_ONLY
    elif "long" in flags:
        presentation = Presentation.LONG
    elif "iso" in flags:
        presentation = Presentation.ISO
    else:
        presentation = None

    return CliOptions(
        help="help" in flags,
        debug="debug" in flags,
        presentation=presentation,
        color="nocolor" not in flags,
        iso="iso" in flags,
        beach=" ".join(name_parts),
    )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    opts = parse_options(argv)

    configure_logging(opts.debug)
    logger.debug("Debug mode enabled")
    logger.debug("Command line arguments: %s", ", ".join(argv))

    home = config_dir()
    store = SettingsStore(home / SETTINGS_FILENAME)
    settings = store.load()
    debug = opts.debug or settings.debug_mode
    if debug and not opts.debug:
        set_debug(True)

    if opts.help:
        print(help_text(opts.color))
        return 0

    service = DataService(
        YrClient(), CacheRepo(home / CACHE_FILENAME), settings.cache_timeout
    )
    try:
        service.get_temperature_data()
    except DataUnavailable:
        logger.debug("Failed to load temperature data", exc_info=True)
        print(FETCH_FAILED_MESSAGE, file=sys.stderr)
        return 1

    ctx = AppContext(
        settings=store,
        data=service,
        options=DisplayOptions(
            color=opts.color,
            iso_dates=opts.iso,
            thresholds=load_thresholds(home / THRESHOLDS_FILENAME),
        ),
        presentation_override=opts.presentation,
        clear_screen=not debug and sys.stdout.isatty(),
    )

    if opts.beach:
        record = service.resolve(opts.beach)
        if record is None:
            print(not_found_message(opts.beach))
            return 0
        ctx.show_temperature(record)
        return 0

    ctx.clear()
    MenuRunner(ctx).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
