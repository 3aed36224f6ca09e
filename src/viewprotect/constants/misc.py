# Copyright: 2011 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - miscellaneous constants
"""

ANON = "anonymous"

# staged as group, it means "no group": the action becomes unrestricted
NO_GROUP = ""

# separator for group lists in audit log entries
GROUP_SEPARATOR = ", "

# message key of a permission error, followed by the qualifying groups
DENIED_MESSAGE = "viewprotect-denied"

# namespaces of titles
NAMESPACE_MAIN = ""
NAMESPACE_FILE = "File"

# page ids below this mean "page does not exist (yet)"
MIN_PAGE_ID = 1
