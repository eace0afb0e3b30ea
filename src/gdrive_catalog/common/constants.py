"""Constants used throughout the application."""

# OAuth2 scopes, shared by the consent URL and the Drive client
SCOPES = ("https://www.googleapis.com/auth/drive",)

# OAuth2 endpoints
AUTH_URI = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
GRANT_TYPE = "authorization_code"

# Drive hierarchy
ROOT_FOLDER_ID = "root"
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
DEFAULT_MIME_TYPE = "application/octet-stream"

# Catalog filter
CATALOG_EXTENSIONS = (".xml", ".txt", ".json")

# API limits
PAGE_SIZE = 100
MAX_FOLDER_DEPTH = 100
HTTP_TIMEOUT = 30.0  # seconds

# Correlation label bound to the credentials of one flow
DEFAULT_USER_KEY = "current-user"
