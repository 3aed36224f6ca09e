# Copyright: 2010 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    ViewProtect - protect views package

    This package contains the views and templates for protecting pages and files,
    the audit log and the JSON query API.
"""


from flask import Blueprint

protect = Blueprint("protect", __name__, template_folder="templates")
import viewprotect.apps.protect.views  # noqa
