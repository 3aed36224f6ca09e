# Copyright: 2010 MoinMoin:ThomasWaldmann
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    ViewProtect - signals

    We define all signals here to avoid typos/conflicts in the signal name.
"""


from blinker import Namespace, ANY  # noqa

_signals = Namespace()

# sent after a flush committed, once per audit log entry
protection_changed = _signals.signal("protection_changed")
# sent when a restriction denied a user some action
access_denied = _signals.signal("access_denied")
