"""
Startup wiring for host applications.

Loads the settings file, configures logging at the saved level, and brings up a
Localizer with the active language already resolved and persisted.
"""

import logging
from typing import Optional, Tuple

from formlocalizer.core.localizer import Localizer
from formlocalizer.utils.config import ConfigManager
from formlocalizer.utils.helpers import setup_logging


def initialize(
    config_manager: Optional[ConfigManager] = None,
    system_locale: Optional[str] = None,
) -> Tuple[Localizer, str]:
    """
    Returns the Localizer and the id of the language to apply to every window.

    Call once, after the QApplication exists and before the first window is shown.
    """
    config_manager = config_manager or ConfigManager()
    config = config_manager.load()
    setup_logging(config.get("log_level"))
    logger = logging.getLogger("FormLocalizer.Bootstrap")

    localizer = Localizer(config.get("i18n_dir"))
    language_id = localizer.start(config_manager, system_locale)
    logger.info("Localization ready. Language: %s, packs: %s", language_id, localizer.i18n_dir)
    return localizer, language_id
