"""Internationalization support for picklist.

Wraps Castella's i18n system and loads the picklist translations.

Usage:
    from picklist.i18n import init_i18n, t

    init_i18n()  # Auto-detect from OS
    init_i18n("ja")  # or explicit locale

    Text(t("picklist.placeholder"))
"""

import locale
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from castella.i18n import I18nManager, load_yaml_catalog

logger = logging.getLogger(__name__)

# Path to picklist translations
_LOCALES_DIR = Path(__file__).parent / "locales"

# Supported locales
SUPPORTED_LOCALES = ["en", "ja"]

DEFAULT_LOCALE = "en"


def detect_os_locale() -> str:
    """Detect the OS language setting.

    Returns:
        Detected locale code ('en', 'ja'), defaults to 'en' if not detected
    """
    for env_var in ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE"):
        lang = os.environ.get(env_var, "")
        if lang:
            # "ja_JP.UTF-8" -> "ja"
            lang_code = lang.split("_")[0].split(".")[0].lower()
            if lang_code in SUPPORTED_LOCALES:
                return lang_code

    try:
        system_locale = locale.getlocale()[0]
        if system_locale:
            lang_code = system_locale.split("_")[0].lower()
            if lang_code in SUPPORTED_LOCALES:
                return lang_code
    except (ValueError, TypeError):
        pass

    return DEFAULT_LOCALE


def init_i18n(locale_code: str | None = None) -> None:
    """Load all translation catalogs and set the initial locale.

    Args:
        locale_code: Initial locale code (e.g., 'en', 'ja').
                     If None or 'auto', auto-detect from OS settings.
    """
    manager = I18nManager()

    for yaml_file in sorted(_LOCALES_DIR.glob("*.yaml")):
        try:
            catalog = load_yaml_catalog(yaml_file)
        except (OSError, ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load locale {yaml_file}: {e}")
            continue
        manager.load_catalog(catalog.locale, catalog)

    if locale_code is None or locale_code == "auto":
        locale_code = detect_os_locale()

    manager.set_locale(locale_code)


def t(key: str, **kwargs: Any) -> str:
    """Translate a key using the current locale.

    Returns the key itself if no translation is found.
    """
    return I18nManager().t(key, **kwargs)


def set_locale(locale_code: str) -> None:
    I18nManager().set_locale(locale_code)


def available_locales() -> list[str]:
    return I18nManager().available_locales


__all__ = [
    "init_i18n",
    "t",
    "set_locale",
    "available_locales",
    "detect_os_locale",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
]
