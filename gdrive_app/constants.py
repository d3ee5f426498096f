"""
Constants shared by the routes, bindings and handlers.
"""

APPS_PLUGIN_NAME = "com.mattermost.apps"
APPS_PLUGIN_API = f"/plugins/{APPS_PLUGIN_NAME}/api/v1"
MATTERMOST_API = "/api/v4"

GOOGLE_DRIVE_ICON = "icon.png"


class Routes:
    """Call paths the app answers to."""

    MANIFEST = "/manifest.json"
    BINDINGS = "/bindings"
    CONNECT_SUBMIT = "/connect/submit"
    DISCONNECT_SUBMIT = "/disconnect/submit"
    HELP_SUBMIT = "/help/submit"
    OAUTH2_CONNECT = "/oauth2/connect"
    OAUTH2_COMPLETE = "/oauth2/complete"
    SAVE_FILE_CALL = "/save-file/call"
    SAVE_FILE_SUBMIT = "/save-file/submit"


class AppExpandLevels:
    EXPAND_NONE = "none"
    EXPAND_ID = "id"
    EXPAND_SUMMARY = "summary"
    EXPAND_ALL = "all"


class AppBindingLocations:
    COMMAND = "/command"
    POST_MENU = "/post_menu"


class AppCallResponseTypes:
    OK = "ok"
    ERROR = "error"
    FORM = "form"
