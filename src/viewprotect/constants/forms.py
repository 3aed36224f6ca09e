# Copyright: 2012 MoinMoin:CheerXiao
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - form widget hints for the templates
"""

WIDGET_TEXT = "text"  # single-line text
WIDGET_SELECT = "select"  # pick one of some options
WIDGET_COMBOBOX = "combobox"  # text with suggested options
WIDGET_HIDDEN = "hidden"
