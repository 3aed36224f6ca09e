# Copyright: 2000-2004 Juergen Hermann <jh@web.de>
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - site-wide configuration defaults
"""
