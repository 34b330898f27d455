"""
Unit tests for the startup wiring used by host applications.
"""
import json
import logging

from formlocalizer.bootstrap import initialize
from formlocalizer.core import registry as registry_module
from formlocalizer.core.registry import get_registry
from formlocalizer.utils.config import ConfigManager


def test_initialize_uses_configured_pack_directory(tmp_path, monkeypatch, pack_dir, clean_app_logger):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    monkeypatch.delenv("FORMLOCALIZER_PROD", raising=False)
    config_path = tmp_path / "settings.json"
    config_path.write_text(json.dumps({"i18n_dir": str(pack_dir), "log_level": "WARNING"}), encoding="utf-8")

    localizer, language = initialize(ConfigManager(config_path), system_locale="fr_FR")

    assert language == "fr-FR"
    assert localizer.i18n_dir == pack_dir
    assert clean_app_logger.level == logging.WARNING
    assert json.loads(config_path.read_text(encoding="utf-8"))["ui_language"] == "fr-FR"


def test_get_registry_is_a_process_wide_singleton(pack_dir, monkeypatch):
    monkeypatch.setattr(registry_module, "_registry", None)

    first = get_registry(pack_dir)
    assert first.i18n_dir == pack_dir
    assert get_registry() is first
    assert get_registry(pack_dir.parent) is first
