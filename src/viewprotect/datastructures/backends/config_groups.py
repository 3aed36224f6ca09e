# Copyright: 2009 MoinMoin:DmitrijsMilajevs
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - config groups backend

The config_groups backend enables one to define groups, their members and the
capabilities granted to them in a configuration file.
"""


from viewprotect.datastructures.backends import GroupMembership, GroupDoesNotExistError


class ConfigGroups(GroupMembership):
    def __init__(self, groups, capabilities=None):
        """
        :param groups: Dictionary of groups where key is group name,
                       and value is list of members of that group.
        :param capabilities: Dictionary where key is group name and value is
                             list of capabilities members of that group hold.
        """
        self._groups = groups
        self._capabilities = capabilities or {}

    def __contains__(self, group_name):
        return group_name in self._groups

    def __iter__(self):
        return iter(self._groups.keys())

    def _retrieve_members(self, group_name):
        try:
            return self._groups[group_name]
        except KeyError:
            raise GroupDoesNotExistError(group_name)

    def members(self, group_name):
        return list(self._retrieve_members(group_name))

    def is_in_group(self, user, group_name):
        if group_name not in self._groups:
            return False
        return str(user) in self._groups[group_name]

    def groups_of(self, user):
        name = str(user)
        return [group_name for group_name, members in self._groups.items() if name in members]

    def has_capability(self, user, capability):
        for group_name in self.groups_of(user):
            if capability in self._capabilities.get(group_name, []):
                return True
        return False
