# Copyright: 2017 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    ViewProtect - protect views

    Forms for restricting pages (for managers) and own files (for uploaders),
    the audit log and a small JSON API.
"""


from flask import request, url_for, flash, redirect, render_template, abort, jsonify
from flask import current_app as app
from flask import g as flaskg

from pydantic import ValidationError

from viewprotect import error
from viewprotect.apps.protect import protect
from viewprotect.constants.misc import NAMESPACE_FILE, NO_GROUP
from viewprotect.constants.rights import MANAGE, READ, FILE_ACTIONS
from viewprotect.forms import ProtectPageForm, ProtectFileForm, form_errors
from viewprotect.i18n import _
from viewprotect.security import require_permission, protected

from viewprotect import log

logging = log.getLogger(__name__)


@protect.errorhandler(error.InvalidArgument)
def invalid_argument(e):
    logging.warning(f"invalid request: {e}")
    return render_template("protect/invalid.html", title_name=_("Invalid request"), message=str(e)), 400


@protect.route("/page", methods=["GET", "POST"])
@require_permission(MANAGE)
def protect_page():
    """
    Restrict an action on some page to a group, or remove the restriction.
    """
    title_name = _("Protect page")
    actions = app.cfg.viewprotect_actions
    errors = {}
    values = dict(page=request.args.get("page", ""), action=actions[0], group=NO_GROUP)
    if request.method == "POST":
        values.update(request.form.to_dict())
        try:
            form = ProtectPageForm.from_flat(request.form, titles=app.titles, actions=actions)
        except ValidationError as err:
            errors = form_errors(err)
        else:
            title = app.titles.from_text(form.page)
            group = form.group or None
            app.viewprotect.set_action_protection(flaskg.user, title, form.action, [group] if group else [])
            if group:
                flash(
                    _("{action} on {page} is now restricted to {group}.").format(
                        action=form.action, page=title, group=group
                    ),
                    "info",
                )
            else:
                flash(_("{action} on {page} is now unrestricted.").format(action=form.action, page=title), "info")
            return redirect(url_for(".protect_page", page=title.fullname))
    restrictions = {}
    if values["page"]:
        restrictions = app.viewprotect.get_page_restrictions(app.titles.from_text(values["page"]))
    return render_template(
        "protect/protect_page.html",
        title_name=title_name,
        widgets=ProtectPageForm.widgets(),
        values=values,
        errors=errors,
        actions=actions,
        restrictions=restrictions,
    )


def current_restriction(title):
    """
    Return the group reading title is currently restricted to, "" if unrestricted.
    """
    groups = app.viewprotect.get_restricted_groups(title, READ)
    return groups[0] if groups else NO_GROUP


@protect.route("/file", methods=["GET", "POST"])
@protect.route("/file/<path:sub>", methods=["GET", "POST"])
def protect_file(sub=None):
    """
    Restrict reading and uploading one of the user's files to one of the user's groups.
    """
    user = flaskg.user
    if not user.valid:
        abort(403)
    title_name = _("Protect file")
    uploads = app.titles.uploaded_by(user.name, app.cfg.viewprotect_file_limit)
    groups = app.viewprotect.groups.groups_of(user)
    submitted_name = request.values.get("viewprotectfile", sub)
    check = request.values.get("selected_file")
    if check and submitted_name != check:
        raise error.InvalidArgument(f"Submitted file {submitted_name!r} does not match the selected file {check!r}.")
    submitted_group = request.values.get("group")
    errors = {}
    if submitted_name and (sub is None or submitted_group is not None):
        values = dict(viewprotectfile=submitted_name, selected_file=check or "", group=submitted_group or NO_GROUP)
        try:
            form = ProtectFileForm.from_flat(values, uploads=uploads, groups=groups)
        except ValidationError as err:
            errors = form_errors(err)
        else:
            if submitted_group is None:
                # file chosen, now choose the group
                return redirect(url_for(".protect_file", sub=form.viewprotectfile))
            title = app.titles.from_text(form.viewprotectfile, NAMESPACE_FILE)
            app.viewprotect.set_page_protection(user, title, FILE_ACTIONS, form.group or None)
            flash(_("Restriction of {file} saved.").format(file=form.viewprotectfile), "info")
            return redirect(url_for(".protect_file", restrict=form.viewprotectfile, group=form.group))

    selected = submitted_name if submitted_name in uploads and "viewprotectfile" not in errors else None
    group = NO_GROUP
    if selected:
        group = current_restriction(app.titles.from_text(selected, NAMESPACE_FILE))
    return render_template(
        "protect/protect_file.html",
        title_name=title_name,
        widgets=ProtectFileForm.widgets(),
        uploads=uploads,
        most_recent=uploads[0] if uploads else "",
        selected=selected,
        groups=groups,
        group=group,
        errors=errors,
        restricted=request.args.get("restrict"),
        restricted_group=request.args.get("group"),
    )


@protect.route("/log")
@require_permission(MANAGE)
def audit_log():
    """
    Show the most recent restriction changes.
    """
    page_id = None
    page = request.args.get("page")
    if page:
        title = app.titles.from_text(page)
        if not title.exists:
            abort(404)
        page_id = title.page_id
    entries = app.audit_log.entries(page_id=page_id, limit=app.cfg.viewprotect_log_limit)
    titles = {entry.page_id: app.titles.from_id(entry.page_id) for entry in entries}
    return render_template("protect/log.html", title_name=_("Restriction log"), entries=entries, titles=titles)


@protect.route("/api/<path:item_name>")
@protected(READ)
def api_restrictions(item_name):
    """
    Return the restrictions of a page as JSON, only those of ?action= if given.
    """
    title = app.titles.from_text(item_name)
    if not title.exists:
        abort(404)
    action = request.args.get("action")
    if action:
        if action not in app.cfg.viewprotect_actions:
            raise error.InvalidArgument(f"Action {action!r} can't be restricted.")
        groups = app.viewprotect.get_restricted_groups(title, action)
        return jsonify(page=title.fullname, page_id=title.page_id, action=action, groups=groups)
    restrictions = app.viewprotect.get_page_restrictions(title)
    return jsonify(page=title.fullname, page_id=title.page_id, restrictions=restrictions)


@protect.route("/check/<path:item_name>")
def api_check(item_name):
    """
    May the current user do ?action= (default: read) on a page?
    """
    action = request.args.get("action", READ)
    title = app.titles.from_text(item_name)
    result = app.viewprotect.has_permission(title, flaskg.user, action)
    groups = [] if result else result.groups
    return jsonify(page=title.fullname, action=action, allowed=bool(result), groups=groups)
