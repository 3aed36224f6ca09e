# -*- coding: utf-8 -*-
"""
ViewProtect Configuration

This configuration is designed to run viewprotect from a workdir using
the built-in server ("viewprotect run"). The front end server must
authenticate users and pass their name in REMOTE_USER.


DEVELOPERS! Do not add your configuration items here - you could accidentally
commit them! Instead, create a wikiconfig_local.py file like this:

from wikiconfig import *
class LocalConfig(Config):
    configuration_item_1 = 'value1'  # overlay this with local customizations
VIEWPROTECTCFG = LocalConfig
SECRET_KEY = 'you need to change this so it is really secret'
DEBUG = True

and point the VIEWPROTECTCFG environment variable to it.
"""

import os

from viewprotect.config.default import DefaultConfig
from viewprotect.constants.rights import MANAGE
from viewprotect.datastructures import ConfigGroups
from viewprotect.title import ConfigTitles


# We assume this structure for a simple "unpack and run" scenario:
# viewprotect/                  # wikiconfig_dir points here: contains this file.
#     wikiconfig.py             # the file you are reading now.
#     wiki/                     # instance_dir variable points here.
#         viewprotect.sqlite    # restrictions and audit log
wikiconfig_dir = os.path.abspath(os.path.dirname(__file__))
instance_dir = os.path.join(wikiconfig_dir, 'wiki')


class Config(DefaultConfig):

    # sitename is displayed in heading of all pages
    sitename = 'My Wiki'

    # where restrictions and the audit log are kept, created by "viewprotect create-tables":
    store_uri = 'sqlite:///{0}'.format(os.path.join(instance_dir, 'viewprotect.sqlite'))

    # a long random string, keep it secret:
    secrets = 'EnterSecretStringHere'

    # groups and their members, members of groups with the MANAGE capability
    # may restrict any page and read the audit log.
    # Usually, you will want a GroupMembership backend asking your user management.
    def groups(self):
        return ConfigGroups(
            {
                'sysop': ['WikiAdmin'],
                'editors': ['WikiAdmin', 'JoeDoe'],
            },
            {'sysop': [MANAGE]},
        )

    # page and file names, usually a TitleDirectory asking your wiki's page table.
    def titles(self):
        return ConfigTitles(
            pages={'Main_Page': 1},
            files={'Example.png': 2},
            uploads={'JoeDoe': ['Example.png']},
        )

    # which actions can be restricted, which are shown as page indicators:
    # viewprotect_actions = ['read', 'edit', 'upload']
    # viewprotect_indicator_actions = ['read']

    # members of this group bypass all restrictions:
    # viewprotect_vip_group = 'sysop'


VIEWPROTECTCFG = Config  # Flask requires uppercase
# Flask settings - see the flask documentation about their meaning
SECRET_KEY = 'you need to change this so it is really secret'
# DEBUG = False # use True for development only, not for public sites!
# TESTING = False
# SESSION_COOKIE_NAME = 'session'
# PERMANENT_SESSION_LIFETIME = timedelta(days=31)
