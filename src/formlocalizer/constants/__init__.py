"""
Provides centralized, immutable constants for FormLocalizer.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from formlocalizer import constants

    # Name of the shipped base pack
    constants.i18n.pack_filename(constants.i18n.DEFAULT_LANGUAGE)

    # JSON field holding the per-form strings
    constants.i18n.keys.FORMS
"""

from .app import app
from .config import config
from .i18n import i18n
from .logs import logs

__all__ = [
    "app",
    "config",
    "i18n",
    "logs",
]
