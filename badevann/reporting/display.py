"""Textual presentations of temperature records, help and menu texts."""

import json
from dataclasses import dataclass, field
from enum import StrEnum

from badevann.config.defaults import DEFAULT_THRESHOLDS
from badevann.config.schema import OutputFormat, ThresholdConfig
from badevann.models.temperature import TemperatureRecord
from badevann.reporting.formatters import (
    colored_temperature,
    colorize,
    emoji_for_temperature,
    format_date,
)

CLEAR_SCREEN = "\033[2J\033[H"


class Presentation(StrEnum):
    TEMP_ONLY = "tempOnly"
    REGULAR = "regular"
    ISO = "iso"
    LONG = "long"


PRESENTATION_FOR_FORMAT = {
    OutputFormat.TEMP_ONLY: Presentation.TEMP_ONLY,
    OutputFormat.SHORT: Presentation.REGULAR,
    OutputFormat.LONG: Presentation.LONG,
    OutputFormat.ISO: Presentation.ISO,
}


@dataclass(frozen=True)
class DisplayOptions:
    color: bool = True
    iso_dates: bool = False
    thresholds: ThresholdConfig = field(default_factory=lambda: DEFAULT_THRESHOLDS)


def resolve_presentation(setting: OutputFormat, override: Presentation | None = None) -> Presentation:
    """A command-line override wins over the stored output format."""
    if override is not None:
        return override
    return PRESENTATION_FOR_FORMAT[setting]


def _temp(record: TemperatureRecord, opts: DisplayOptions) -> str:
    return colored_temperature(record.temperature, opts.thresholds.colors, opts.color)


def format_short(record: TemperatureRecord, opts: DisplayOptions) -> str:
    return _temp(record, opts)


def format_regular(record: TemperatureRecord, opts: DisplayOptions) -> str:
    return f"{record.name} {format_date(record.time, iso=opts.iso_dates)}: {_temp(record, opts)}"


def format_iso(record: TemperatureRecord, opts: DisplayOptions) -> str:
    return f"{record.name} {format_date(record.time, iso=True)}: {_temp(record, opts)}"


def format_long(record: TemperatureRecord, opts: DisplayOptions) -> str:
    loc = record.location
    lines = [
        "",
        f"🔆 {loc.name.upper()} - {loc.category}",
        f"Badetemperatur\t: {_temp(record, opts)}",
        f"Måletidspunkt\t: {format_date(record.time, long=True, iso=opts.iso_dates)}",
        f"Lokasjon\t: {loc.url_path}",
    ]
    if loc.position is not None:
        lines.append(f"Kart\t\t: https://google.com/maps?q={loc.position.lat},{loc.position.lon}")
    if record.source:
        lines.append(f"Kilde\t\t: {record.source}")
    lines.append("")
    return "\n".join(lines)


FORMATTERS = {
    Presentation.TEMP_ONLY: format_short,
    Presentation.REGULAR: format_regular,
    Presentation.ISO: format_iso,
    Presentation.LONG: format_long,
}


def render_temperature(
    record: TemperatureRecord, presentation: Presentation, opts: DisplayOptions
) -> str:
    return FORMATTERS[presentation](record, opts)


def render_raw(record: TemperatureRecord) -> str:
    """Pretty JSON of the record as received, for debug output."""
    return json.dumps(record.raw, indent=2, ensure_ascii=False)


def format_list_item(record: TemperatureRecord, opts: DisplayOptions, pad_length: int = 32) -> str:
    """Padded name, emoji and temperature for selection lists."""
    name = record.name
    padding = " " * max(1, pad_length - len(name))
    emoji = emoji_for_temperature(record.temperature, opts.thresholds.emojis) if opts.color else ""
    return f"{name}{padding} {emoji} {_temp(record, opts)}"


def help_text(color: bool = True) -> str:
    def title(text: str) -> str:
        return colorize(text, "bright_yellow") if color else text

    return f"""
    {title('BADEVANN')}
    Denne konsollappen henter vanntemperaturer fra internett og lister ut resultatet i konsollen.

    {title('BRUK')}
    'badevann' lar deg velge badeplass fra en liste.
    Alternativt kan du skrive 'badevann <badeplass>', så henter den ut temperaturer for <badeplass>

    {title('PARAMETRE')}:
    help | h: vis denne teksten
    verbose | v: vis mer utfyllende info om badeplassen sammen med vanntemperaturen
    iso | i : vis tidspunkt for måleravlesning på ISO 8601-format
    short | s: vis bare vanntemperatur
    nocolor: ikke fargelegg badetemperaturene
    debug | d : vis utfyllende info ved bruk

    {title('OM DATAENE')}:
    Dataene kommer primært fra yr.no.
    Ved feil i appen, sjekk nettsiden eller lag et issue på github.
    """


def welcome_message(temperature_count: int) -> str:
    return f"Velkommen til Badevann! 🏖\n🔆 {temperature_count} oppdaterte badetemperaturer"


def farewell_message(color: bool = True) -> str:
    text = "\n\t  🔆 Hopp i havet! 🏖\n"
    return colorize(text, "bright_cyan") if color else text


def not_found_message(name: str) -> str:
    return f"Fant ikke badetemperatur for '{name}'\n"


FETCH_FAILED_MESSAGE = (
    "FEIL: Noe gikk galt ved uthenting av vanntemperaturene\n"
    "Sjekk internettforbindelsen, yr.no, eller prøv igjen med 'debug' "
    "parameteren for mer detaljer\n"
)
