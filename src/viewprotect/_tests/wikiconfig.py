# Copyright: 2000-2004 by Juergen Hermann <jh@web.de>
# Copyright: 2011-2013 by MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - Test wiki configuration.

Do not change any values without good reason.

We mostly want to have default values here, except for the groups and pages
the tests work with.
"""


from viewprotect.config.default import DefaultConfig
from viewprotect.constants.rights import MANAGE
from viewprotect.datastructures import ConfigGroups
from viewprotect.title import ConfigTitles

test_groups = {
    "editors": ["Alice", "Bob"],
    "reviewers": ["Carol"],
    "staff": ["Alice", "Dave"],
    "sysop": ["Admin"],
    "vips": ["Vera"],
}

test_capabilities = {"sysop": [MANAGE]}

test_pages = {"Main_Page": 1, "Secret": 2, "Budget": 3, "Roadmap": 4}

test_files = {"Plan.pdf": 10, "Photo.jpg": 11, "Other.png": 12}

test_uploads = {"Alice": ["Plan.pdf", "Photo.jpg"], "Dave": ["Other.png"]}


class Config(DefaultConfig):
    """
    Default configuration for unit tests.
    """

    secrets = "test secret, not for production"
    sitename = "ViewProtectTest"
    store_uri = None  # in-memory sqlite
    viewprotect_vip_group = "vips"

    def groups(self):
        return ConfigGroups(test_groups, test_capabilities)

    def titles(self):
        return ConfigTitles(pages=test_pages, files=test_files, uploads=test_uploads)
