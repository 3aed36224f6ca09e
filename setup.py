#!/usr/bin/env python
# Copyright: 2001 by Juergen Hermann <jh@web.de>
# Copyright: 2001-2024 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

from setuptools import setup


setup_args = dict(
    # stuff for babel:
    message_extractors={
        'src': [
            ('viewprotect/apps/**/templates/**.html', 'jinja2', None),
            ('viewprotect/**/_tests/**', 'ignore', None),
            ('viewprotect/static/**', 'ignore', None),
            ('viewprotect/**.py', 'python', None),
        ],
    },
)


if __name__ == '__main__':
    setup(**setup_args)
