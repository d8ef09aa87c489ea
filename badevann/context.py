"""Per-run application state handed to the CLI and menus."""

import logging
from dataclasses import dataclass, field

from badevann.config.settings_store import SettingsStore
from badevann.logging_config import set_debug
from badevann.models.temperature import TemperatureRecord
from badevann.reporting.display import (
    CLEAR_SCREEN,
    DisplayOptions,
    Presentation,
    render_raw,
    render_temperature,
    resolve_presentation,
)
from badevann.service.data_service import DataService

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: SettingsStore
    data: DataService
    options: DisplayOptions
    presentation_override: Presentation | None = None
    clear_screen: bool = False
    # Clearing as decided at startup, restored when debug mode is turned off
    _clear_screen_default: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._clear_screen_default = self.clear_screen

    def clear(self) -> None:
        if self.clear_screen:
            print(CLEAR_SCREEN, end="")

    def show_temperature(self, record: TemperatureRecord) -> None:
        logger.debug("Displaying temperature for %s", record.name)
        presentation = resolve_presentation(
            self.settings.get().output_format, self.presentation_override
        )
        print(render_temperature(record, presentation, self.options))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Raw record:\n%s", render_raw(record))

    def set_debug(self, enabled: bool) -> None:
        set_debug(enabled)
        self.clear_screen = False if enabled else self._clear_screen_default
