# Copyright: 2012 MoinMoin:PavelSviderski
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    ViewProtect - form schemas

    Each field carries a widget hint for the templates. Validators needing
    request data (title directory, the user's uploads and groups) get it via
    the validation context.
"""


from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from viewprotect.constants.forms import WIDGET_TEXT, WIDGET_SELECT, WIDGET_COMBOBOX, WIDGET_HIDDEN
from viewprotect.constants.misc import NAMESPACE_FILE, NO_GROUP, GROUP_SEPARATOR


def widget(kind, label, **properties):
    return dict(widget=kind, label=label, **properties)


class ViewProtectForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    @classmethod
    def from_flat(cls, values, **context):
        """
        Validate form values (e.g. request.form).

        :raises pydantic.ValidationError: if some value is invalid
        """
        return cls.model_validate(dict(values), context=context)

    @classmethod
    def widgets(cls):
        return {name: field.json_schema_extra for name, field in cls.model_fields.items()}


def _context(info):
    return info.context or {}


def valid_group_name(group):
    if GROUP_SEPARATOR.strip() in group:
        raise PydanticCustomError("invalid_group", "Group names must not contain ','.")
    return group


class ProtectPageForm(ViewProtectForm):
    """
    Restrict an action on a page to a group, or remove the restriction.
    """

    page: str = Field(min_length=1, json_schema_extra=widget(WIDGET_TEXT, "Page", required=True))
    action: str = Field(json_schema_extra=widget(WIDGET_SELECT, "Action"))
    group: str = Field(NO_GROUP, json_schema_extra=widget(WIDGET_COMBOBOX, "Group"))

    @field_validator("page")
    @classmethod
    def page_exists(cls, value, info: ValidationInfo):
        titles = _context(info).get("titles")
        if titles is not None and not titles.from_text(value).exists:
            raise PydanticCustomError("unknown_page", "Page {page} does not exist.", dict(page=value))
        return value

    @field_validator("action")
    @classmethod
    def action_protectable(cls, value, info: ValidationInfo):
        actions = _context(info).get("actions", [])
        if value not in actions:
            raise PydanticCustomError("unknown_action", "Action {action} can't be restricted.", dict(action=value))
        return value

    @field_validator("group")
    @classmethod
    def group_name(cls, value):
        return valid_group_name(value)


class ProtectFileForm(ViewProtectForm):
    """
    Restrict reading and uploading one of the user's own files to one of the
    user's groups, or remove the restriction.
    """

    viewprotectfile: str = Field(min_length=1, json_schema_extra=widget(WIDGET_COMBOBOX, "File", required=True))
    selected_file: str = Field("", json_schema_extra=widget(WIDGET_HIDDEN, ""))
    group: str = Field(NO_GROUP, json_schema_extra=widget(WIDGET_SELECT, "Group"))

    @field_validator("viewprotectfile")
    @classmethod
    def user_uploaded(cls, value, info: ValidationInfo):
        if value.startswith(NAMESPACE_FILE + ":"):
            value = value[len(NAMESPACE_FILE) + 1 :]
        if value not in _context(info).get("uploads", []):
            raise PydanticCustomError("not_uploaded", "{file} is not one of your files.", dict(file=value))
        return value

    @field_validator("group")
    @classmethod
    def user_is_member(cls, value, info: ValidationInfo):
        value = valid_group_name(value)
        if value != NO_GROUP and value not in _context(info).get("groups", []):
            raise PydanticCustomError("not_member", "You are not a member of {group}.", dict(group=value))
        return value


def form_errors(err):
    """
    Map a pydantic.ValidationError to field name -> message.
    """
    errors = {}
    for detail in err.errors():
        name = str(detail["loc"][0]) if detail["loc"] else ""
        errors.setdefault(name, detail["msg"])
    return errors
