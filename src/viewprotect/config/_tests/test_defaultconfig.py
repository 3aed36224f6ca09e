# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    ViewProtect - viewprotect.config.default Tests
"""


import pytest

from viewprotect import error
from viewprotect.config.default import DefaultConfig
from viewprotect.constants.rights import PROTECTABLE_ACTIONS, MANAGE, READ, EDIT
from viewprotect.datastructures import GroupMembership


class TestDefaultConfig:
    def test_defaults(self):
        assert DefaultConfig.viewprotect_actions == PROTECTABLE_ACTIONS
        assert DefaultConfig.viewprotect_indicator_actions == [READ]
        assert DefaultConfig.viewprotect_manage_capability == MANAGE
        assert DefaultConfig.viewprotect_vip_group is None
        assert DefaultConfig.store_table == "viewprotect"
        assert DefaultConfig.store_log_table == "viewprotect_log"

    def test_valid(self):
        class Config(DefaultConfig):
            secrets = "a long enough secret"

        cfg = Config()
        assert isinstance(cfg.groups(), GroupMembership)
        assert cfg["sitename"] == cfg.sitename

    def test_missing_secret(self):
        class Config(DefaultConfig):
            secrets = None

        with pytest.raises(error.ConfigurationError):
            Config()

    def test_short_secret(self):
        class Config(DefaultConfig):
            secrets = "short"

        with pytest.raises(error.ConfigurationError):
            Config()

    def test_no_actions(self):
        class Config(DefaultConfig):
            secrets = "a long enough secret"
            viewprotect_actions = []

        with pytest.raises(error.ConfigurationError):
            Config()

    def test_indicator_not_restrictable(self):
        class Config(DefaultConfig):
            secrets = "a long enough secret"
            viewprotect_actions = [EDIT]

        with pytest.raises(error.ConfigurationError):
            Config()

    def test_unknown_option(self):
        class Config(DefaultConfig):
            secrets = "a long enough secret"
            config_check_enabled = True
            viewprotect_acitons = [READ]

        with pytest.raises(error.ConfigurationError):
            Config()
