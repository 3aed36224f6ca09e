# Copyright: 2008 MoinMoin:ThomasWaldmann
# Copyright: 2007 MoinMoin:JohannesBerg
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    ViewProtect - logging setup

    Logging gets configured once per process, by the first of:

    a) the logging configuration file named by the VIEWPROTECTLOGGINGCONF
       environment variable,
    b) the file given to an explicit viewprotect.log.load_config(filename)
       call (this must happen before any module called getLogger),
    c) the builtin configuration below (INFO and up, to stderr).

    If a) or b) can't be used, c) is used and a warning tells why.

    Modules get their logger like this::

       from viewprotect import log
       logging = log.getLogger(__name__)

    Restriction checks are logged at DEBUG level, restriction changes at
    INFO level (see viewprotect.signalling.log), so a logger_viewprotect
    section with level=DEBUG shows every decision.
"""

from io import StringIO
import os
import logging
import logging.config
import logging.handlers  # handlers from there may be used in logging config files
import warnings

ENV_VAR = "VIEWPROTECTLOGGINGCONF"

builtin_config = """\
[DEFAULT]
loglevel=INFO

[loggers]
keys=root

[handlers]
keys=stderr

[formatters]
keys=default

[logger_root]
level=%(loglevel)s
handlers=stderr

[handler_stderr]
class=StreamHandler
level=NOTSET
formatter=default
args=(sys.stderr, )

[formatter_default]
format=%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s
datefmt=
class=logging.Formatter
"""

configured = False


def _log_warning(message, category, filename, lineno, file=None, line=None):
    # the record's origin is this module, msg tells where the warning came from
    getLogger(__name__).warning(f"{filename}:{lineno}: {category.__name__}: {message}")


def _file_config(f):
    global configured
    logging.config.fileConfig(f)
    configured = True
    warnings.showwarning = _log_warning


def load_config(conf_fname=None):
    """
    Configure logging from conf_fname (overridden by VIEWPROTECTLOGGINGCONF),
    falling back to the builtin configuration.
    """
    failure = None
    conf_fname = os.environ.get(ENV_VAR, conf_fname)
    if conf_fname:
        conf_fname = os.path.abspath(conf_fname)
        try:
            # fileConfig() silently ignores a missing file, opening it ourselves gives a useful error
            with open(conf_fname) as f:
                _file_config(f)
        except Exception as err:  # XXX be more precise
            failure = str(err)
        else:
            getLogger(__name__).debug(f'using logging configuration read from "{conf_fname}"')
            return
    with StringIO(builtin_config) as f:
        _file_config(f)
    logger = getLogger(__name__)
    if failure:
        logger.warning(f'load_config for "{conf_fname}" failed with "{failure}", using builtin configuration.')
    else:
        logger.debug("using builtin logging configuration")


def getLogger(name):
    """
    logging.getLogger(name), configuring logging first if needed.

    The level constants get patched into the logger, so it can be used
    instead of the logging module (logging.DEBUG etc.).
    """
    if not configured:
        load_config()
    logger = logging.getLogger(name)
    for levelnumber, levelname in logging._levelToName.items():
        setattr(logger, levelname, levelnumber)
    return logger
