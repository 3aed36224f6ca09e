# Copyright: 2017-2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - per-page access restrictions for a wiki.
"""


import sys
import platform

from ._version import version  # noqa

project = "ViewProtect"


if sys.hexversion < 0x3090000:
    sys.exit("Error: %s requires Python 3.9+, current version is %s\n" % (project, platform.python_version()))
