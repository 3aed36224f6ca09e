# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    ViewProtect - host hook tests
"""


from viewprotect import hooks
from viewprotect._tests import title
from viewprotect.constants.rights import READ, EDIT, UPLOAD
from viewprotect.user import User

admin = User("Admin")


class TestHooks:
    def test_permissions_errors(self, app):
        secret = title("Secret")
        assert hooks.get_user_permissions_errors(secret, User("Carol"), READ) == []
        app.viewprotect.set_action_protection(admin, secret, READ, ["editors", "staff"])
        errors = hooks.get_user_permissions_errors(secret, User("Carol"), READ)
        assert errors[0] == "viewprotect-denied"
        assert sorted(errors[1:]) == ["editors", "staff"]
        assert hooks.get_user_permissions_errors(secret, User("Dave"), READ) == []
        assert hooks.get_user_permissions_errors(secret, User("Carol"), EDIT) == []

    def test_before_page_display(self, app):
        secret = title("Secret")
        assert hooks.before_page_display(secret) == {}
        assert hooks.before_page_display(None) == {}
        app.viewprotect.set_action_protection(admin, secret, READ, ["editors"])
        app.viewprotect.set_action_protection(admin, secret, EDIT, ["sysop"])
        # only the configured indicator actions are shown
        assert hooks.before_page_display(secret) == {"viewprotect-read": "read restricted to: editors"}

    def test_img_auth(self, app):
        plan = title("File:Plan.pdf")
        assert hooks.img_auth_before_stream(plan, User(), "Plan.pdf") is None
        app.viewprotect.set_page_protection(User("Alice"), plan, [READ, UPLOAD], "staff")
        assert hooks.img_auth_before_stream(plan, User("Dave"), "Plan.pdf") is None
        image, error = hooks.img_auth_before_stream(plan, User("Bob"), "Plan.pdf")
        assert image == app.cfg.viewprotect_denied_image
        assert error == ["img-auth-accessdenied", "img-auth-badtitle", "Plan.pdf"]
