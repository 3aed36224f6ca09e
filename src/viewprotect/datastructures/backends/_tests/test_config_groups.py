# Copyright: 2009 by MoinMoin:DmitrijsMilajevs
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - viewprotect.datastructures.backends.config_groups tests.
"""

import pytest

from viewprotect import error
from viewprotect.constants.rights import MANAGE
from viewprotect.datastructures import ConfigGroups, GroupMembership, GroupDoesNotExistError, ensure_membership_backend
from viewprotect.user import User


class TestConfigGroupsBackend:
    test_groups = {
        "EditorGroup": ["AdminGroup", "John", "JoeDoe", "Editor1"],
        "AdminGroup": ["Admin1", "Admin2", "John"],
        "OtherGroup": ["SomethingOther"],
        "EmptyGroup": [],
    }

    capabilities = {"AdminGroup": [MANAGE]}

    @pytest.fixture
    def groups(self):
        return ConfigGroups(self.test_groups, self.capabilities)

    def test_contains(self, groups):
        for group in self.test_groups:
            assert group in groups
        assert "NotExistingGroup" not in groups
        assert sorted(groups) == sorted(self.test_groups)

    def test_members(self, groups):
        assert groups.members("AdminGroup") == ["Admin1", "Admin2", "John"]
        with pytest.raises(GroupDoesNotExistError):
            groups.members("NotExistingGroup")

    def test_is_in_group(self, groups):
        assert groups.is_in_group(User("John"), "EditorGroup")
        assert groups.is_in_group("John", "AdminGroup")
        assert not groups.is_in_group(User("JoeDoe"), "AdminGroup")
        assert not groups.is_in_group(User("John"), "NotExistingGroup")
        assert not groups.is_in_group(User(), "EmptyGroup")

    def test_groups_of(self, groups):
        assert sorted(groups.groups_of(User("John"))) == ["AdminGroup", "EditorGroup"]
        assert groups.groups_of(User("Nobody")) == []

    def test_has_capability(self, groups):
        assert groups.has_capability(User("Admin1"), MANAGE)
        assert not groups.has_capability(User("Editor1"), MANAGE)
        assert not groups.has_capability(User("Admin1"), "frobnicate")


class TestMembershipInterface:
    def test_incomplete_backend(self):
        class OnlyMembership(GroupMembership):
            def is_in_group(self, user, group_name):
                return False

        with pytest.raises(TypeError):
            OnlyMembership()

    def test_ensure_membership_backend(self):
        groups = ConfigGroups({})
        assert ensure_membership_backend(groups) is groups
        with pytest.raises(error.ConfigurationMissing):
            ensure_membership_backend({"editors": ["Alice"]})
        with pytest.raises(error.ConfigurationMissing):
            ensure_membership_backend(None)


coverage_modules = ["viewprotect.datastructures.backends.config_groups"]
