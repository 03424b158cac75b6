"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_OVERWRITES = 2
DEFAULT_SESSION_HOURS = 24
DEFAULT_PORT = 3000
MAIL_FROM_NAME = "Langley Pharmacy"
LOGIN_PAGE = "index.html"
DASHBOARD_PAGE = "dashboard.html"
