"""
i18n utilities for API messages
"""
import json
from pathlib import Path

from flask import request, g, has_request_context

# Load translation files
_translations = {}
_i18n_dir = Path(__file__).parent


def load_translations():
    """Load all translation files"""
    for locale_file in _i18n_dir.glob('*.json'):
        with open(locale_file, 'r', encoding='utf-8') as f:
            _translations[locale_file.stem] = json.load(f)


# Load translations on module import
load_translations()

SUPPORTED_LOCALES = sorted(_translations.keys())
DEFAULT_LOCALE = 'en'


def get_locale():
    """
    Pick the locale for the current request

    X-Language wins when it names a supported locale; otherwise the best
    Accept-Language match, then English.
    """
    if not has_request_context():
        return DEFAULT_LOCALE

    if hasattr(g, 'locale'):
        return g.locale

    custom_lang = request.headers.get('X-Language')
    if custom_lang in SUPPORTED_LOCALES:
        g.locale = custom_lang
        return custom_lang

    # Match on base language so 'zh-CN' selects 'zh'
    best = None
    best_quality = 0
    for lang, quality in request.accept_languages:
        base_lang = lang.split('-')[0].lower()
        if base_lang in SUPPORTED_LOCALES and quality > best_quality:
            best, best_quality = base_lang, quality

    g.locale = best or DEFAULT_LOCALE
    return g.locale


def _lookup(locale, keys):
    value = _translations.get(locale, {})
    for k in keys:
        if not isinstance(value, dict) or k not in value:
            return None
        value = value[k]
    return value if isinstance(value, str) else None


def translate(key: str, **params) -> str:
    """
    Get translated message for the current locale

    Args:
        key: Translation key in dot notation (e.g., 'errors.not_found')
        **params: Parameters to format into the translation string

    Returns:
        Translated and formatted message, or the key itself if unknown
    """
    keys = key.split('.')
    value = _lookup(get_locale(), keys) or _lookup(DEFAULT_LOCALE, keys)
    if value is None:
        return key

    if params:
        try:
            value = value.format(**params)
        except (KeyError, ValueError):
            pass  # Return unformatted if formatting fails

    return value


# Shorthand alias
t = translate
