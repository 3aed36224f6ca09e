# Copyright: 2000-2004 Juergen Hermann <jh@web.de>
# Copyright: 2005-2013 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - Configuration defaults class
"""


from viewprotect import error
from viewprotect import datastructures
from viewprotect import user
from viewprotect import title
from viewprotect.constants.rights import PROTECTABLE_ACTIONS, MANAGE, READ

from viewprotect import log

logging = log.getLogger(__name__)


class ConfigFunctionality:
    """Configuration base class with config class behaviour."""

    def __init__(self):
        """Init Config instance"""
        if self.config_check_enabled:
            self._config_check()

        if self.secrets is None:  # admin did not setup a real secret
            raise error.ConfigurationError(
                "No secret configured! You need to set secrets = 'somelongsecretstring' in your wiki config."
            )
        secret_min_length = 10
        if len(self.secrets) < secret_min_length:
            raise error.ConfigurationError(
                "The secrets = '...' wiki config setting is a way too short string "
                "(minimum length is {} chars)!".format(secret_min_length)
            )

        if not self.viewprotect_actions:
            raise error.ConfigurationError("viewprotect_actions must name at least one action.")
        unknown = [action for action in self.viewprotect_indicator_actions if action not in self.viewprotect_actions]
        if unknown:
            raise error.ConfigurationError(
                "viewprotect_indicator_actions contains actions that can't be restricted: {}.".format(
                    ", ".join(unknown)
                )
            )

        if self.store_uri is None:
            logging.warning("No store_uri configured, restrictions are kept in memory only!")

    def _config_check(self):
        """Check namespace and warn about unknown names

        Warn about names which are not used by DefaultConfig, except
        modules, classes, _private or __magic__ names.
        """
        unknown = [
            f'"{name}"'
            for name in dir(self)
            if not name.startswith("_")
            and name not in DefaultConfig.__dict__
            and not isinstance(getattr(self, name), (type(error), type(DefaultConfig)))
        ]
        if unknown:
            msg = """
Unknown configuration options: {}.

Please check your configuration for typos.
""".format(
                ", ".join(unknown)
            )
            raise error.ConfigurationError(msg)

    def __getitem__(self, item):
        """Make it possible to access a config object like a dict"""
        return getattr(self, item)


class DefaultConfig(ConfigFunctionality):
    """Configuration base class with default config values
    (added below)
    """

    # Do not add anything into this class. Functionality must
    # be added above. Settings must be added below to
    # the options dictionary.


options_no_group_name = {
    # ==========================================================================
    "datastructures": (
        "Datastruct",
        None,
        (
            (
                "groups",
                lambda cfg: datastructures.ConfigGroups({}),
                "function f(cfg) that returns a GroupMembership backend answering group membership and capability questions.",
            ),
            (
                "titles",
                lambda cfg: title.ConfigTitles(),
                "function f(cfg) that returns a TitleDirectory resolving page and file names to page ids.",
            ),
        ),
    ),
    # ==========================================================================
    "auth": (
        "Authentication / Security",
        None,
        (
            ("secrets", None, "A long secret string, also used as the Flask SECRET_KEY if that is not set."),
            (
                "user_from_request",
                lambda cfg, request: user.from_request(request),
                "function f(cfg, request) that returns the User doing the request.",
            ),
        ),
    ),
    # ==========================================================================
    "misc": (
        "Miscellaneous",
        None,
        (
            ("sitename", "Untitled Wiki", "Short description of your wiki site."),
            ("locale_default", "en_US", "Default locale for user interface and content."),
            ("config_check_enabled", False, "if True, check configuration for unknown settings."),
            ("create_backend", False, "if True, create the restriction tables when the app gets created."),
            ("destroy_backend", False, "if True, drop the restriction tables when the app gets destroyed."),
        ),
    ),
}

options = {
    "store": (
        "Restriction Storage",
        "Where restrictions and the audit log are kept.",
        (
            ("uri", None, "sqlalchemy database uri, None means a non-persistent in-memory sqlite database."),
            ("table", "viewprotect", "name of the restrictions table."),
            ("log_table", "viewprotect_log", "name of the audit log table."),
            ("verbose", False, "if True, log all SQL queries."),
        ),
    ),
    "viewprotect": (
        "Restrictions",
        "Which actions can be restricted and who bypasses restrictions.",
        (
            ("actions", PROTECTABLE_ACTIONS, "actions that can be restricted to groups."),
            ("indicator_actions", [READ], "restricted actions shown as indicator on the page."),
            ("manage_capability", MANAGE, "capability that bypasses restrictions and allows changing them."),
            ("vip_group", None, "members of this group bypass all restrictions."),
            ("file_limit", 200, "number of most recent uploads offered for protection."),
            (
                "denied_image",
                "/static/viewprotect/Stop_Sign.svg",
                "image streamed instead of a restricted file.",
            ),
            ("log_limit", 50, "number of audit log entries shown."),
        ),
    ),
}


def _add_options_to_defconfig(opts, addgroup=True):
    for groupname in opts:
        group_short, group_doc, group_opts = opts[groupname]
        for name, default, doc in group_opts:
            if addgroup:
                name = groupname + "_" + name
            setattr(DefaultConfig, name, default)


_add_options_to_defconfig(options)
_add_options_to_defconfig(options_no_group_name, False)
