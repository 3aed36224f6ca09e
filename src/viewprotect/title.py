# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - titles

A Title is the host's identity of a page or file: a stable integer page id
(0 for pages that do not exist yet), a name and a namespace.
"""


from abc import ABC, abstractmethod

from viewprotect.constants.misc import NAMESPACE_MAIN, NAMESPACE_FILE, MIN_PAGE_ID


class Title:
    def __init__(self, page_id, name, namespace=NAMESPACE_MAIN):
        self.page_id = page_id or 0
        self.name = name
        self.namespace = namespace

    @property
    def exists(self):
        return self.page_id >= MIN_PAGE_ID

    @property
    def fullname(self):
        if self.namespace:
            return f"{self.namespace}:{self.name}"
        return self.name

    def __str__(self):
        return self.fullname

    def __repr__(self):
        return f"<Title {self.fullname!r} page_id={self.page_id}>"

    def __eq__(self, other):
        return (
            isinstance(other, Title)
            and (self.page_id, self.name, self.namespace) == (other.page_id, other.name, other.namespace)
        )

    def __hash__(self):
        return hash((self.page_id, self.name, self.namespace))


class TitleDirectory(ABC):
    """
    Resolves page and file names to titles, backed by the host's page table.
    """

    @abstractmethod
    def from_text(self, name, namespace=NAMESPACE_MAIN):
        """
        Return the Title for name; page_id is 0 if there is no such page.
        """

    @abstractmethod
    def from_id(self, page_id):
        """
        Return the Title with page_id or None.
        """

    @abstractmethod
    def uploaded_by(self, username, limit=200):
        """
        Return names of files uploaded by username, most recent first.
        """


class ConfigTitles(TitleDirectory):
    """
    Titles defined in the configuration.

    :param pages: dict page name -> page id
    :param files: dict file name -> page id
    :param uploads: dict user name -> list of file names, most recent first
    """

    def __init__(self, pages=None, files=None, uploads=None):
        self._names = {}
        for namespace, names in ((NAMESPACE_MAIN, pages or {}), (NAMESPACE_FILE, files or {})):
            for name, page_id in names.items():
                self._names[namespace, name] = page_id
        self._ids = {page_id: key for key, page_id in self._names.items()}
        self._uploads = uploads or {}

    def from_text(self, name, namespace=NAMESPACE_MAIN):
        if namespace == NAMESPACE_MAIN and ":" in name:
            prefix, rest = name.split(":", 1)
            if prefix == NAMESPACE_FILE:
                namespace, name = prefix, rest
        return Title(self._names.get((namespace, name), 0), name, namespace)

    def from_id(self, page_id):
        try:
            namespace, name = self._ids[page_id]
        except KeyError:
            return None
        return Title(page_id, name, namespace)

    def uploaded_by(self, username, limit=200):
        return list(self._uploads.get(username, []))[:limit]
