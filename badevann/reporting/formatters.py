"""Temperature colors, emojis and date formatting."""

from datetime import datetime

from badevann.config.defaults import DEFAULT_COLOR_BANDS, DEFAULT_EMOJI_BANDS
from badevann.config.schema import Band
from badevann.models.common import parse_timestamp

RESET = "\033[0m"

ANSI_COLORS = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bright_yellow": "\033[93m",
    "bright_cyan": "\033[96m",
    "bright_red": "\033[91m",
}


def band_for_temperature(celsius: float, bands: list[Band]) -> Band:
    """First band whose lower bound the temperature reaches; the last band catches the rest."""
    for band in bands:
        if band.min is None or celsius >= band.min:
            return band
    return bands[-1]


def color_for_temperature(celsius: float, bands: list[Band] = DEFAULT_COLOR_BANDS) -> Band:
    return band_for_temperature(celsius, bands)


def emoji_for_temperature(celsius: float, bands: list[Band] = DEFAULT_EMOJI_BANDS) -> str:
    return band_for_temperature(celsius, bands).symbol


def colorize(text: str, color: str) -> str:
    code = ANSI_COLORS.get(color)
    if code is None:
        return text
    return f"{code}{text}{RESET}"


def format_celsius(celsius: float) -> str:
    """18.0 -> '18°C', 18.5 -> '18.5°C'."""
    return f"{celsius:g}°C"


def colored_temperature(
    celsius: float, bands: list[Band] = DEFAULT_COLOR_BANDS, color: bool = True
) -> str:
    text = format_celsius(celsius)
    if not color:
        return text
    return colorize(text, color_for_temperature(celsius, bands).symbol)


def format_date(value: str | datetime, long: bool = False, iso: bool = False) -> str:
    """Render a measurement time.

    ISO-8601 when ``iso`` is set, otherwise Norwegian day.month.year in local
    time, with hh:mm:ss appended when ``long`` is set. Unparseable strings
    are returned unchanged.
    """
    dt = value if isinstance(value, datetime) else parse_timestamp(value)
    if dt is None:
        return str(value)
    if iso:
        return dt.isoformat()

    local = dt.astimezone()
    date_part = f"{local.day}.{local.month}.{local.year}"
    if long:
        return f"{date_part} {local:%H:%M:%S}"
    return date_part
