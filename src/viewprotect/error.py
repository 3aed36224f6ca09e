# Copyright: 2004-2005 Nir Soffer <nirs@freeshell.org>
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect errors / exception classes.

Error
 +- InvalidArgument     bad page id, action or group name, nothing was done
 +- CompositeError      wraps the exception being handled when it was raised
     +- StorageFailure  a restriction table transaction failed, nothing was written
     +- FatalError
         +- ConfigurationError
             +- ConfigurationMissing
"""

import sys


class Error(Exception):
    """Base class for ViewProtect errors.

    The message may be given as str, as utf-8 encoded bytes or as any object
    with a __str__ method; str(error) gives it as str.
    """

    def __init__(self, message):
        if isinstance(message, bytes):
            message = message.decode()
        self.message = str(message)

    def __str__(self):
        return self.message

    def __getitem__(self, item):
        """Make it possible to access attributes like a dict"""
        return getattr(self, item)


class CompositeError(Error):
    """Base class for errors raised while handling another exception.

    The handled exception's sys.exc_info() is kept as innerException, so a
    traceback of e.g. the database error is still available for debugging.
    """

    def __init__(self, message):
        Error.__init__(self, message)
        self.innerException = sys.exc_info()

    def exceptions(self):
        """Return the exc_info of all nested inner exceptions, outermost first"""
        result = [self.innerException]
        while True:
            try:
                result.append(result[-1][1].innerException)
            except AttributeError:
                return result


class FatalError(CompositeError):
    """Base class for errors we can't recover from."""


class ConfigurationError(FatalError):
    """Raised when a fatal misconfiguration is found."""


class ConfigurationMissing(ConfigurationError):
    """Raised when a configured collaborator does not provide a required interface,
    e.g. a groups backend that can't answer membership or capability questions.
    """


class InvalidArgument(Error):
    """Raised for a malformed or nonexistent page / file identifier, an unknown
    action or a bad group name. The caller must not proceed.
    """


class StorageFailure(CompositeError):
    """Raised when reading or writing the restriction tables failed."""
