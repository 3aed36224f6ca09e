# Copyright: 2009 MoinMoin:DmitrijsMilajevs
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - group membership backends

Group memberships and capabilities are defined by the host's user management.
A backend must implement both questions we ask: "is this user in that group?"
and "does this user hold that capability?". A class that forgets one of them
can't be instantiated.
"""


from abc import ABC, abstractmethod

from viewprotect import error


class GroupDoesNotExistError(LookupError):
    """
    Raised when a group name is not found in the backend.
    """


class GroupMembership(ABC):
    """
    Membership and capability questions about a user.
    """

    @abstractmethod
    def is_in_group(self, user, group_name):
        """
        Return True if user is a member of group_name.
        """

    @abstractmethod
    def has_capability(self, user, capability):
        """
        Return True if user holds capability.
        """

    def groups_of(self, user):
        """
        Return the names of the groups user is a member of.
        """
        return []


def ensure_membership_backend(backend):
    """
    Check that backend can answer membership and capability questions.

    :raises ConfigurationMissing: if it can't
    """
    if not isinstance(backend, GroupMembership):
        raise error.ConfigurationMissing(
            "Expected a GroupMembership groups backend, but got {!r}. "
            "Check the groups setting of your wiki configuration.".format(backend)
        )
    return backend
