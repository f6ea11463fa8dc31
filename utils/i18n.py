"""
Error message translations.

Messages live as flat key/value YAML files under translations/. The API
only ever returns translated text for a key, so the language is picked
per request from Accept-Language and falls back to English.
"""
import yaml
from pathlib import Path
from flask import request, g, current_app, has_request_context

TRANSLATIONS_DIR = Path(__file__).resolve().parent.parent / 'translations'
LANGUAGES = ['da', 'en']
DEFAULT_LANGUAGE = 'en'

# Scandinavian visitors read Danish fine
DANISH_READERS = {'da', 'dk', 'sv', 'se', 'no', 'nb', 'nn'}

_translations_cache = {}
_file_mtimes = {}

def _read_language_file(lang):
    path = TRANSLATIONS_DIR / f'{lang}.yaml'
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"[Translations] Warning: {path.name} not found")
        return {}

def _files_changed():
    changed = False
    for lang in LANGUAGES:
        path = TRANSLATIONS_DIR / f'{lang}.yaml'
        if not path.exists():
            continue
        mtime = path.stat().st_mtime
        if _file_mtimes.get(lang) != mtime:
            _file_mtimes[lang] = mtime
            changed = True
    return changed

def load_translations():
    """Load all language files; in debug mode edits are picked up without a restart"""
    global _translations_cache

    if _translations_cache and not current_app.debug:
        return _translations_cache

    if _files_changed() or not _translations_cache:
        print("[Translations] Reloading language files...")
        _translations_cache = {lang: _read_language_file(lang) for lang in LANGUAGES}

    return _translations_cache

def get_language():
    """Pick 'da' or 'en' from the Accept-Language header, remembered for the request"""
    if not has_request_context():
        return DEFAULT_LANGUAGE

    if 'language' in g:
        return g.language

    language = DEFAULT_LANGUAGE
    for value, _quality in request.accept_languages:
        primary = value.lower().replace('_', '-').split('-')[0]
        if primary in DANISH_READERS:
            language = 'da'
            break
        if primary == 'en':
            break

    g.language = language
    return language

def t(key, *args, **kwargs):
    """Translate key to the current language, formatting any placeholders"""
    translations = load_translations()
    fallback = translations.get(DEFAULT_LANGUAGE, {}).get(key, key)
    translation = translations.get(get_language(), {}).get(key, fallback)

    if not (args or kwargs):
        return translation

    try:
        return translation.format(*args, **kwargs)
    except (IndexError, KeyError, ValueError) as e:
        print(f"[Translations] Warning: formatting error for key '{key}': {e}")
        return translation
