# Copyright: 2011 MoinMoin:ThomasWaldmann
# Copyright: 2023 MoinMoin project
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - i18n (internationalization) and l10n (localization) support

To use this, please use exactly this line (no less, no more)::

    from viewprotect.i18n import _, L_, N_

    # _ == gettext
    # N_ == ngettext
    # L_ == lazy_gettext

Message catalogs are compiled gettext files below viewprotect/translations
(<locale>/LC_MESSAGES/messages.mo), loaded with babel.support.Translations.
No catalogs are shipped yet, so every message falls back to its English
source text; create them with pybabel extract / init / compile (see the
message_extractors in setup.py).
"""


import os

from babel import Locale
from babel.support import LazyProxy, NullTranslations, Translations

from flask import current_app, request, has_app_context, has_request_context

from viewprotect import log

logging = log.getLogger(__name__)

TRANSLATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "translations")
DOMAIN = "messages"


def i18n_init(app):
    """initialize translations and make them available to templates"""
    app.extensions["viewprotect.translations"] = {}
    app.jinja_env.add_extension("jinja2.ext.i18n")
    app.jinja_env.install_gettext_callables(gettext, ngettext, newstyle=True)


def list_translations():
    """return the Locales we have message catalogs for"""
    result = []
    if not os.path.isdir(TRANSLATIONS_DIR):
        return result
    for folder in sorted(os.listdir(TRANSLATIONS_DIR)):
        if os.path.isdir(os.path.join(TRANSLATIONS_DIR, folder, "LC_MESSAGES")):
            result.append(Locale.parse(folder))
    return result


def get_locale():
    """return the locale for the current request"""
    locale = None
    if has_request_context():
        # try to guess the language from the user accept
        # header the browser transmits. The best match wins.
        supported_languages = [str(locale) for locale in [Locale("en")] + list_translations()]
        locale = request.accept_languages.best_match(supported_languages)
        logging.debug(f"best match locale = {locale!r}")
    if not locale:
        locale = current_app.cfg.locale_default
    return locale


def get_translations():
    if not has_app_context():
        # e.g. messages created at import time
        return NullTranslations()
    cache = current_app.extensions.setdefault("viewprotect.translations", {})
    locale = get_locale()
    try:
        return cache[locale]
    except KeyError:
        translations = Translations.load(TRANSLATIONS_DIR, [locale], DOMAIN)
        cache[locale] = translations
        return translations


def gettext(string, **variables):
    result = get_translations().gettext(string)
    return result % variables if variables else result


def ngettext(singular, plural, num, **variables):
    variables.setdefault("num", num)
    return get_translations().ngettext(singular, plural, num) % variables


def lazy_gettext(string, **variables):
    return LazyProxy(gettext, string, enable_cache=False, **variables)


_ = gettext
N_ = ngettext
L_ = lazy_gettext
