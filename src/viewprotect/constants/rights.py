# Copyright: 2011 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - restrictable actions and capabilities
"""

# read means to be able to view a page or stream a file
READ = "read"

# edit means to be able to change a page
EDIT = "edit"

# upload means to be able to upload a new version of a file
UPLOAD = "upload"

# actions that can be restricted to groups
PROTECTABLE_ACTIONS = [READ, EDIT, UPLOAD]

# actions a file restriction applies to
FILE_ACTIONS = [READ, UPLOAD]

# holders of this capability bypass all restrictions and may change them
MANAGE = "viewprotectmanage"
