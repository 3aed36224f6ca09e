# Copyright: 2000-2004 Juergen Hermann <jh@web.de>
# Copyright: 2003-2013 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - user

Users are authenticated by the host; we only need a stable name to resolve
group memberships and to attribute changes.
"""


from viewprotect.constants.misc import ANON


class User:
    """A wiki user, as far as restriction checks are concerned."""

    def __init__(self, name=ANON, auth_method="remote_user"):
        self.name = name or ANON
        self.auth_method = auth_method

    @property
    def valid(self):
        return self.name != ANON

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"<{self.__class__.__name__} name={self.name!r} valid={self.valid}>"

    def __eq__(self, other):
        return isinstance(other, User) and self.name == other.name

    def __hash__(self):
        return hash(self.name)


def from_request(request):
    """Create a User from the REMOTE_USER variable set by the front end server."""
    return User(name=request.environ.get("REMOTE_USER"))
