# Copyright: 2023 MoinMoin project
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - viewprotect.cli tests
"""

import pytest

from viewprotect._tests import title
from viewprotect.cli import cli
from viewprotect.cli.maint.protect import cli_Protect, cli_Unprotect, cli_Show, cli_Check, cli_Log, CLI_USER
from viewprotect.cli.maint.tables import cli_CreateTables, cli_DestroyTables
from viewprotect.constants.rights import READ, EDIT


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


def stored(app, name):
    page_id = title(name).page_id
    return {action: sorted(groups) for action, groups in app.store.select_pages([page_id]).get(page_id, {}).items()}


def test_help(runner):
    result = runner.invoke(cli, ["help"])
    assert result.exit_code == 0
    assert "create-tables" in result.output


class TestProtectCommands:
    def test_protect(self, app, runner):
        result = runner.invoke(cli_Protect, ["--page", "Secret", "--group", "editors", "--group", "reviewers"])
        assert result.exit_code == 0
        assert stored(app, "Secret") == {READ: ["editors", "reviewers"]}
        [entry] = app.audit_log.entries()
        assert entry.performer == CLI_USER
        assert entry.new_groups == "editors, reviewers"

    def test_protect_as_user(self, app, runner):
        result = runner.invoke(cli_Protect, ["-p", "Budget", "-a", "edit", "-g", "sysop", "-u", "Admin"])
        assert result.exit_code == 0
        assert stored(app, "Budget") == {EDIT: ["sysop"]}
        assert app.audit_log.entries()[0].performer == "Admin"

    def test_protect_unknown_page(self, app, runner):
        result = runner.invoke(cli_Protect, ["--page", "Nope", "--group", "editors"])
        assert result.exit_code == 2
        assert app.audit_log.entries() == []

    def test_protect_unknown_action(self, app, runner):
        result = runner.invoke(cli_Protect, ["--page", "Secret", "--action", "frobnicate", "--group", "editors"])
        assert result.exit_code == 2
        assert stored(app, "Secret") == {}

    def test_unprotect(self, app, runner):
        runner.invoke(cli_Protect, ["--page", "Secret", "--group", "editors"])
        runner.invoke(cli_Protect, ["--page", "Secret", "--action", "edit", "--group", "sysop"])
        result = runner.invoke(cli_Unprotect, ["--page", "Secret", "--action", "edit"])
        assert result.exit_code == 0
        assert stored(app, "Secret") == {READ: ["editors"]}
        result = runner.invoke(cli_Unprotect, ["--page", "Secret"])
        assert result.exit_code == 0
        assert stored(app, "Secret") == {}

    def test_show(self, runner):
        result = runner.invoke(cli_Show, ["--page", "Secret"])
        assert result.exit_code == 0
        assert "Secret is not restricted." in result.output
        runner.invoke(cli_Protect, ["--page", "Secret", "--group", "editors"])
        result = runner.invoke(cli_Show, ["--page", "Secret"])
        assert result.output == "read: editors\n"

    def test_check(self, runner):
        runner.invoke(cli_Protect, ["--page", "Secret", "--group", "editors"])
        result = runner.invoke(cli_Check, ["--page", "Secret", "--user", "Alice"])
        assert "Alice may read Secret." in result.output
        result = runner.invoke(cli_Check, ["--page", "Secret", "--user", "Carol"])
        assert "Carol may not read Secret, restricted to: editors." in result.output

    def test_log(self, runner):
        runner.invoke(cli_Protect, ["--page", "Secret", "--group", "editors"])
        runner.invoke(cli_Protect, ["--page", "Budget", "--group", "staff"])
        result = runner.invoke(cli_Log, [])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("read 3: [] -> [staff]")
        result = runner.invoke(cli_Log, ["--page", "Secret"])
        assert result.output.splitlines()[0].endswith("read 2: [] -> [editors]")


class TestTableCommands:
    def test_destroy_and_create(self, app, runner):
        runner.invoke(cli_Protect, ["--page", "Secret", "--group", "editors"])
        result = runner.invoke(cli_DestroyTables, ["--yes"])
        assert result.exit_code == 0
        result = runner.invoke(cli_CreateTables, [])
        assert result.exit_code == 0
        assert list(app.store) == []

    def test_destroy_needs_confirmation(self, app, runner):
        runner.invoke(cli_Protect, ["--page", "Secret", "--group", "editors"])
        result = runner.invoke(cli_DestroyTables, [], input="n\n")
        assert result.exit_code == 1
        assert list(app.store) == [(title("Secret").page_id, READ, "editors")]
