# Copyright: 2000-2006 by Juergen Hermann <jh@web.de>
# Copyright: 2002-2011 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - WSGI application setup and related code.

Use create_app(config) to create the WSGI application (using Flask).
"""

from __future__ import annotations

from os import path, PathLike
from flask import Flask, request, render_template
from flask import current_app as app
from flask import g as flaskg

from viewprotect.i18n import i18n_init, _
from viewprotect.protection import ViewProtect
from viewprotect.storage import create_simple_stores
from viewprotect.user import User

from viewprotect import log

from typing import Any

logging = log.getLogger(__name__)


def create_app(config: str | PathLike[str] | None = None) -> Flask:
    """
    Simple wrapper around create_app_ext().
    """
    return create_app_ext(flask_config_file=config)


def create_app_ext(
    flask_config_file: str | PathLike[str] | None = None,
    flask_config_dict: dict[str, Any] | None = None,
    viewprotect_config_class: type | None = None,
    warn_default: bool = True,
    **kwargs,
) -> Flask:
    """
    Factory for ViewProtect WSGI apps.

    :param flask_config_file: A Flask config file name (may define a VIEWPROTECTCFG class).
                              If not given, a config pointed to by the VIEWPROTECTCFG env var
                              will be loaded (if possible).
    :param flask_config_dict: A dict used to update the Flask config (applied after
                              flask_config_file was loaded, if given).
    :param viewprotect_config_class: If given, this class is instantiated as app.cfg;
                              otherwise, VIEWPROTECTCFG from the Flask config is used. If that
                              is also not present, the built-in DefaultConfig will be used.
    :param warn_default: Emit a warning if we fall back to the built-in default config.
    :param kwargs: Additional keyword args will be patched into the configuration
                   class (before its instance is created).
    """
    logging.debug("running create_app_ext")
    app = Flask("viewprotect")

    if flask_config_file:
        app.config.from_pyfile(path.abspath(flask_config_file))
    else:
        if not app.config.from_envvar("VIEWPROTECTCFG", silent=True):
            # no VIEWPROTECTCFG env variable set, try stuff in cwd:
            flask_config_file = path.abspath("wikiconfig.py")
            if path.exists(flask_config_file):
                app.config.from_pyfile(flask_config_file)
    if flask_config_dict:
        app.config.update(flask_config_dict)
    Config = viewprotect_config_class
    if not Config:
        Config = app.config.get("VIEWPROTECTCFG")
    if not Config:
        if warn_default:
            logging.warning("using builtin default configuration")
        from viewprotect.config.default import DefaultConfig as Config
    for key, value in kwargs.items():
        setattr(Config, key, value)
    if Config.secrets is None:
        # reuse the secret configured for flask (which is required for sessions)
        Config.secrets = app.config.get("SECRET_KEY")
    app.cfg = Config()
    if not app.config.get("SECRET_KEY"):
        app.config["SECRET_KEY"] = app.cfg.secrets

    app.before_request(before_wiki)
    app.teardown_request(teardown_wiki)
    from viewprotect.apps.protect import protect

    app.register_blueprint(protect, url_prefix="/+viewprotect")
    app.register_error_handler(403, denied_error)

    init_backends(app)
    i18n_init(app)
    return app


def destroy_app(app):
    deinit_backends(app)


def init_backends(app, create_backend=False):
    """
    initialize the restriction store, audit log and the protection service
    """
    logging.debug("running init_backends")
    cfg = app.cfg
    app.store, app.audit_log = create_simple_stores(cfg.store_uri, cfg.store_table, cfg.store_log_table)
    app.store.verbose = cfg.store_verbose
    app.store.open()
    if create_backend or cfg.create_backend:
        app.store.create()
    app.titles = cfg.titles()
    app.viewprotect = ViewProtect(
        app.store,
        app.audit_log,
        cfg.groups(),
        actions=cfg.viewprotect_actions,
        manage_capability=cfg.viewprotect_manage_capability,
        vip_group=cfg.viewprotect_vip_group,
    )


def deinit_backends(app):
    if app.cfg.destroy_backend:
        app.store.destroy()
    app.store.close()


def setup_user() -> User:
    """
    Get the user doing the request, as authenticated by the front end.
    """
    userobj = app.cfg.user_from_request(request)
    logging.debug(f"request user: {userobj!r}")
    return userobj


def before_wiki():
    """
    Setup environment for wiki requests: the user and the protection service.
    """
    logging.debug("running before_wiki")
    flaskg.user = setup_user()
    flaskg.viewprotect = app.viewprotect


def teardown_wiki(response):
    """
    Teardown environment of wiki request.
    """
    logging.debug("running teardown_wiki")
    # changes this request staged but did not flush must not leak into a later flush
    if app.viewprotect.discard_pending():
        logging.warning("discarded restriction changes staged but not flushed by this request")
    return response


def denied_error(e):
    """
    Render a 403 error, listing the groups having access if we know them.
    """
    groups = getattr(e, "groups", [])
    return render_template("protect/denied.html", title_name=_("Permission denied"), error=e, groups=groups), 403
