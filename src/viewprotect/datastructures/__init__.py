# Copyright: 2009 MoinMoin:DmitrijsMilajevs
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - datastructures (groups) support.
"""


from viewprotect.datastructures.backends import GroupMembership, GroupDoesNotExistError, ensure_membership_backend
from viewprotect.datastructures.backends.config_groups import ConfigGroups
