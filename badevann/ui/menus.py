"""Interactive menu flow as an explicit screen state machine.

Each screen handler shows its prompt and returns the next screen. Moves
are checked against ``TRANSITIONS``; interrupting any screen goes back to
the main menu, and interrupting the main menu quits.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar

from badevann.config.defaults import (
    BEACH_COUNT_CHOICES,
    CACHE_TIMEOUT_CHOICES,
    DEBUG_MODE_CHOICES,
    OUTPUT_FORMAT_CHOICES,
    REGION_PAGE_SIZE,
)
from badevann.context import AppContext
from badevann.models.temperature import TemperatureRecord
from badevann.reporting.display import (
    farewell_message,
    format_list_item,
    help_text,
    not_found_message,
    welcome_message,
)
from badevann.ui.prompt import TerminalPrompter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Screen(StrEnum):
    MAIN_MENU = "main_menu"
    SEARCH = "search"
    COUNTY_PICKER = "county_picker"
    MUNICIPALITY_PICKER = "municipality_picker"
    HIGHEST_TEMPS = "highest_temps"
    DEFAULT_BEACH = "default_beach"
    BEACH_LIST = "beach_list"
    SETTINGS = "settings"
    SETTING_EDITOR = "setting_editor"
    HELP = "help"
    QUIT = "quit"


_FORWARD: dict[Screen, set[Screen]] = {
    Screen.MAIN_MENU: {
        Screen.SEARCH,
        Screen.COUNTY_PICKER,
        Screen.MUNICIPALITY_PICKER,
        Screen.HIGHEST_TEMPS,
        Screen.DEFAULT_BEACH,
        Screen.SETTINGS,
        Screen.HELP,
        Screen.QUIT,
    },
    Screen.SEARCH: {Screen.BEACH_LIST},
    Screen.COUNTY_PICKER: {Screen.BEACH_LIST},
    Screen.MUNICIPALITY_PICKER: {Screen.BEACH_LIST},
    Screen.HIGHEST_TEMPS: {Screen.BEACH_LIST},
    Screen.DEFAULT_BEACH: set(),
    Screen.BEACH_LIST: set(),
    Screen.SETTINGS: {Screen.SETTING_EDITOR},
    Screen.SETTING_EDITOR: set(),
    Screen.HELP: set(),
    Screen.QUIT: set(),
}

# Every screen but the main menu and quit can be left back to the main menu
TRANSITIONS: dict[Screen, frozenset[Screen]] = {
    screen: frozenset(
        targets if screen in (Screen.MAIN_MENU, Screen.QUIT) else targets | {Screen.MAIN_MENU}
    )
    for screen, targets in _FORWARD.items()
}


@dataclass(frozen=True)
class SettingSpec:
    key: str
    label: str
    message: str
    choices: list[tuple[str, Any]] | None  # None: pick from the beach list


SETTING_SPECS: list[SettingSpec] = [
    SettingSpec(
        "outputFormat", "Endre standard utskrift",
        "Hvilken utskrift skal brukes som standard?", OUTPUT_FORMAT_CHOICES,
    ),
    SettingSpec(
        "defaultBeach", "Endre standard badeplass",
        "Hvilken badeplass skal brukes som standard?", None,
    ),
    SettingSpec(
        "beachCount", "Endre antall badeplasser som skal vises",
        "Hvor mange badeplasser skal vises av gangen?", BEACH_COUNT_CHOICES,
    ),
    SettingSpec(
        "cacheTimeout", "Endre cache timeout",
        "Hvor lenge skal data mellomlagres? (standard er 1 time)", CACHE_TIMEOUT_CHOICES,
    ),
    SettingSpec(
        "debugMode", "Kjør Badevann i debug-modus",
        "Skal appen kjøres i debug-modus?", DEBUG_MODE_CHOICES,
    ),
]

BACK_LABEL = "Gå tilbake til menyen"


class InvalidTransition(RuntimeError):
    pass


class MenuRunner:
    def __init__(self, ctx: AppContext, prompter: TerminalPrompter | None = None):
        self.ctx = ctx
        self.prompter = prompter or TerminalPrompter()
        self.listing: list[TemperatureRecord] = []
        self.listing_message = ""
        self.setting: SettingSpec | None = None
        self._handlers: dict[Screen, Callable[[], Screen]] = {
            Screen.MAIN_MENU: self._main_menu,
            Screen.SEARCH: self._search,
            Screen.COUNTY_PICKER: self._county_picker,
            Screen.MUNICIPALITY_PICKER: self._municipality_picker,
            Screen.HIGHEST_TEMPS: self._highest_temps,
            Screen.DEFAULT_BEACH: self._default_beach,
            Screen.BEACH_LIST: self._beach_list,
            Screen.SETTINGS: self._settings,
            Screen.SETTING_EDITOR: self._setting_editor,
            Screen.HELP: self._help,
        }

    def run(self, start: Screen = Screen.MAIN_MENU) -> None:
        screen = start
        while screen != Screen.QUIT:
            screen = self.step(screen)
        self._quit()

    def step(self, screen: Screen) -> Screen:
        """Run one screen and return the validated next screen."""
        logger.debug("Showing %s", screen)
        nxt = self._handlers[screen]()
        if nxt not in TRANSITIONS[screen]:
            raise InvalidTransition(f"{screen} -> {nxt}")
        return nxt

    def main_menu_items(self) -> list[tuple[str, Screen]]:
        items = [
            ("🔎 Søk etter badeplass", Screen.SEARCH),
            ("🗺  Velg fylke", Screen.COUNTY_PICKER),
            ("📍 Velg kommune", Screen.MUNICIPALITY_PICKER),
            ("📈 Høyeste badetemperaturer i dag", Screen.HIGHEST_TEMPS),
        ]
        default_beach = self.ctx.settings.get().default_beach
        if default_beach:
            items.append((f"⭐ Vis {default_beach}", Screen.DEFAULT_BEACH))
        items += [
            ("⚙️  Endre innstillinger", Screen.SETTINGS),
            ("❓ Hjelp", Screen.HELP),
            ("👋 Avslutt", Screen.QUIT),
        ]
        return items

    # --- Screens ---

    def _main_menu(self) -> Screen:
        items = self.main_menu_items()
        count = len(self.ctx.data.snapshot.records)
        idx = self.prompter.choose(welcome_message(count), [label for label, _ in items])
        if idx is None:
            return Screen.QUIT
        return items[idx][1]

    def _search(self) -> Screen:
        self.listing = _by_name(self.ctx.data.snapshot.records)
        self.listing_message = "Søk etter badeplass"
        return Screen.BEACH_LIST

    def _highest_temps(self) -> Screen:
        self.listing = self.ctx.data.by_temperature_descending()
        self.listing_message = "Høyeste badetemperaturer i dag"
        return Screen.BEACH_LIST

    def _county_picker(self) -> Screen:
        county = self._pick_region(self.ctx.data.snapshot.counties, "fylke")
        if county is None:
            return Screen.MAIN_MENU
        self.listing = _by_name(self.ctx.data.by_county(county))
        self.listing_message = f"Badeplasser i {county}"
        return Screen.BEACH_LIST

    def _municipality_picker(self) -> Screen:
        municipality = self._pick_region(self.ctx.data.snapshot.municipalities, "kommune")
        if municipality is None:
            return Screen.MAIN_MENU
        self.listing = _by_name(self.ctx.data.by_municipality(municipality))
        self.listing_message = f"Badeplasser i {municipality}"
        return Screen.BEACH_LIST

    def _beach_list(self) -> Screen:
        self.ctx.clear()
        page_size = self.ctx.settings.get().beach_count
        record = self._filter_and_choose(
            self.listing_message,
            self.listing,
            label=lambda r: format_list_item(r, self.ctx.options),
            key=lambda r: r.name,
            page_size=page_size,
        )
        if record is not None:
            logger.debug("Beach chosen: %s", record.name)
            self.ctx.clear()
            self.ctx.show_temperature(record)
        return Screen.MAIN_MENU

    def _default_beach(self) -> Screen:
        name = self.ctx.settings.get().default_beach
        record = self.ctx.data.find_by_name(name)
        if record is None:
            print(not_found_message(name))
        else:
            self.ctx.show_temperature(record)
        return Screen.MAIN_MENU

    def _settings(self) -> Screen:
        labels = [spec.label for spec in SETTING_SPECS] + [BACK_LABEL]
        idx = self.prompter.choose("Endre innstillinger", labels)
        if idx is None or idx >= len(SETTING_SPECS):
            return Screen.MAIN_MENU
        self.setting = SETTING_SPECS[idx]
        return Screen.SETTING_EDITOR

    def _setting_editor(self) -> Screen:
        spec = self.setting
        if spec is None:
            return Screen.MAIN_MENU

        if spec.choices is None:
            value = self._filter_and_choose(
                spec.message,
                self.ctx.data.snapshot.beaches,
                label=str,
                key=str,
                page_size=self.ctx.settings.get().beach_count,
            )
            if value is None:
                return Screen.MAIN_MENU
        else:
            idx = self.prompter.choose(spec.message, [label for label, _ in spec.choices])
            if idx is None:
                return Screen.MAIN_MENU
            value = spec.choices[idx][1]

        if self.ctx.settings.update(spec.key, value):
            print("Innstillingene er lagret")
            if spec.key == "debugMode":
                self.ctx.set_debug(bool(value))
        else:
            print("Kunne ikke lagre innstillingen")
        return Screen.MAIN_MENU

    def _help(self) -> Screen:
        self.ctx.clear()
        print(help_text(self.ctx.options.color))
        return Screen.MAIN_MENU

    def _quit(self) -> None:
        self.ctx.clear()
        print(farewell_message(self.ctx.options.color))

    # --- Helpers ---

    def _pick_region(self, regions: list[str], local_name: str) -> str | None:
        logger.debug("Listing %s", local_name)
        return self._filter_and_choose(
            f"Velg {local_name}",
            [r for r in regions if r],
            label=str,
            key=str,
            page_size=REGION_PAGE_SIZE,
        )

    def _filter_and_choose(
        self,
        message: str,
        entries: list[T],
        label: Callable[[T], str],
        key: Callable[[T], str],
        page_size: int,
    ) -> T | None:
        """Narrow ``entries`` by a typed search term, then pick one by number."""
        while True:
            term = self.prompter.ask(f"{message} (søk, Enter for alle, esc for å gå tilbake)")
            if term is None:
                return None
            matches = filter_entries(entries, term, key)
            if not matches:
                print(f"  Ingen treff for '{term}'")
                continue

            shown = matches[:page_size]
            if len(matches) > len(shown):
                print(f"  Viser {len(shown)} av {len(matches)}, skriv mer for å snevre inn")
            idx = self.prompter.choose(message, [label(e) for e in shown])
            if idx is None:
                return None
            return shown[idx]


def filter_entries(entries: list[T], term: str, key: Callable[[T], str]) -> list[T]:
    """Case-insensitive substring filter; an empty term keeps everything."""
    if not term:
        return list(entries)
    needle = term.lower()
    return [e for e in entries if needle in key(e).lower()]


def _by_name(records: list[TemperatureRecord]) -> list[TemperatureRecord]:
    return sorted(records, key=lambda r: r.name.lower())
