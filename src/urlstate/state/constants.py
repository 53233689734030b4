"""
Path grammar constants.

Marker segments, reserved words and the fixed error vocabulary. The error
strings are matched verbatim by consumers, so they must not change.
"""

# Marker segments selecting a section parser
USER_DELIMITER = "u"
SEARCH_DELIMITER = "q"
GUI_DELIMITER = "i"

PATH_SEPARATOR = "/"

# Top-level views that claim the whole path
ROOT_RESERVED = ("about", "docs", "login", "new", "store")

# Suffixes turning an owner path into a profile page
PROFILE_RESERVED = ("charms", "issues", "revenue", "settings")

# Panel sub-markers inside the GUI section
GUI_RESERVED = ("applications", "deploy", "inspector", "machines")

BUNDLE_SERIES = "bundle"
DEFAULT_SERIES = (BUNDLE_SERIES, "precise", "trusty", "xenial")

INVALID_ROOT = "invalid root path."
INVALID_STORE = "invalid store path."
INVALID_GUI = "invalid GUI path."
INVALID_USER = "invalid user path."
INVALID_USER_STORE = "invalid user store path."
