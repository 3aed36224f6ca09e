# Copyright: 2007 MoinMoin:KarolNowak
# Copyright: 2008 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    ViewProtect - some common code for testing
"""


from flask import current_app as app
from flask import g as flaskg

from viewprotect.user import User


def become(username):
    """make username the user of the current request"""
    flaskg.user = User(username)
    return flaskg.user


def title(name):
    """resolve name with the title directory of the current app"""
    return app.titles.from_text(name)
