"""
Helper utilities for FormLocalizer.

This module provides foundational functions for directory management, platform
detection and logging setup used across the application.
"""

import os
import sys
import logging
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional
from pathlib import Path

from formlocalizer import constants

# Thread lock for logging setup
_logging_lock: threading.Lock = threading.Lock()


def get_app_base_path() -> Path:
    """
    Get the directory the application ships its resources from.
    Handles PyInstaller bundles and source checkouts; an installed package
    falls back to the current working directory.
    """
    if getattr(sys, 'frozen', False) and hasattr(sys, '_MEIPASS'):
        # In a bundle, resources are located in the _MEIPASS temporary directory
        return Path(sys._MEIPASS)

    project_root = Path(__file__).resolve()
    while project_root.name != 'src':
        project_root = project_root.parent
        if project_root == project_root.parent: # Reached the filesystem root
            cwd = Path.cwd()
            logging.getLogger(__name__).debug(
                "No 'src' directory above %s; using working directory %s.", __file__, cwd)
            return cwd
    return project_root.parent


def get_i18n_path() -> Path:
    """Returns the absolute path to the shipped language pack directory."""
    return get_app_base_path() / constants.i18n.I18N_DIRNAME


def get_app_data_path() -> Path:
    """
    Retrieve the per-user application data directory, creating it if needed.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    appdata: Optional[str] = os.getenv("APPDATA")
    if not appdata:
        appdata = os.path.expanduser("~")
        logger.debug("APPDATA environment variable not set, using home directory: %s", appdata)
    path: Path = Path(appdata) / constants.app.APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except PermissionError as e:
        logger.error("Permission denied creating app data directory %s: %s", path, e)
        raise PermissionError(f"Cannot access app data directory: {path}. Please check permissions.") from e
    except OSError as e:
        logger.error("Failed to create app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check disk space or path validity.") from e


def is_windows_platform() -> bool:
    """True when running on the Windows NT family."""
    return sys.platform == "win32"


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """
    Configure logging with both a rotating file handler and a console handler in a thread-safe manner.
    """
    logger: logging.Logger = logging.getLogger(constants.app.APP_NAME)
    with _logging_lock:
        if not logger.handlers:
            is_production = os.environ.get(constants.app.ENV_VAR_PROD_MODE, "").lower() == "true"
            if is_production:
                root_log_level = constants.logs.PRODUCTION_LOG_LEVEL
            elif log_level:
                root_log_level = logging.getLevelName(log_level.upper())
                if not isinstance(root_log_level, int):
                    root_log_level = logging.DEBUG
            else:
                root_log_level = logging.DEBUG
            logger.setLevel(root_log_level)

            log_formatter = logging.Formatter(
                fmt=constants.logs.LOG_FORMAT, datefmt=constants.logs.LOG_DATE_FORMAT
            )

            file_log_level = constants.logs.PRODUCTION_LOG_LEVEL if is_production else constants.logs.FILE_LOG_LEVEL
            try:
                log_file_path: Path = get_app_data_path() / constants.logs.LOG_FILENAME
                file_handler: RotatingFileHandler = RotatingFileHandler(
                    log_file_path,
                    maxBytes=constants.logs.MAX_LOG_SIZE,
                    backupCount=constants.logs.LOG_BACKUP_COUNT,
                    encoding='utf-8',
                    delay=True # Delays opening the file until the first log message
                )
                file_handler.setFormatter(log_formatter)
                file_handler.setLevel(file_log_level)
                logger.addHandler(file_handler)
            except (PermissionError, OSError) as e:
                print(f"CRITICAL: Failed to set up file logging: {e}. File logging will be disabled.", file=sys.stderr)

            console_handler: logging.StreamHandler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(log_formatter)
            console_log_level = constants.logs.PRODUCTION_LOG_LEVEL if is_production else constants.logs.CONSOLE_LOG_LEVEL
            console_handler.setLevel(console_log_level)
            logger.addHandler(console_handler)

            if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
                logger.info("File logging target: %s, Level: %s", log_file_path, logging.getLevelName(file_log_level))
            else:
                logger.warning("File logging is NOT active due to previous errors.")
            logger.info("Application logging initialized. Production mode: %s. Root Log Level: %s.",
                        is_production, logging.getLevelName(root_log_level))

    return logger
