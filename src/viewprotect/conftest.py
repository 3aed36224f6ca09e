# Copyright: 2005 MoinMoin:NirSoffer
# Copyright: 2007 MoinMoin:AlexanderSchremmer
# Copyright: 2008,2011 MoinMoin:ThomasWaldmann
# Copyright: 2023 MoinMoin project
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect Testing Framework
-----------------------------

All test modules must be named test_modulename to be included in the
test suite.

Tests that require a certain configuration must use a Config class to
define the required configuration within the test class (by overriding
the cfg fixture).
"""

import os

import pytest

import viewprotect
import viewprotect.log
from viewprotect.app import create_app_ext, destroy_app, before_wiki, teardown_wiki
from viewprotect._tests import wikiconfig


# exclude some directories from pytest test discovery, pathes relative to this file
collect_ignore = ["static", "translations"]

# Logging for tests to avoid useless output like timing information on stderr on test failures
config_file = os.path.join(os.path.dirname(viewprotect.__file__), "_tests", "test_logging.conf")
viewprotect.log.load_config(config_file)


@pytest.fixture
def cfg():
    return wikiconfig.Config


@pytest.fixture
def app_ctx(cfg):
    more_config = dict(
        create_backend=True,  # create the restriction and audit log tables
        destroy_backend=True,  # drop them at app shutdown
    )
    app = create_app_ext(
        flask_config_dict=dict(SECRET_KEY="foobarfoobar", TESTING=True), viewprotect_config_class=cfg, **more_config
    )
    ctx = app.test_request_context("/", base_url="http://localhost:8080/")
    ctx.push()
    before_wiki()

    yield app, ctx

    teardown_wiki("")
    ctx.pop()
    destroy_app(app)


@pytest.fixture(autouse=True)
def app(app_ctx):
    return app_ctx[0]
