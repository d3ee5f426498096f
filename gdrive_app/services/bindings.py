"""
Manifest and UI bindings advertised to the Apps framework.
"""

from typing import Any, Dict, List

from gdrive_app.constants import (
    GOOGLE_DRIVE_ICON,
    AppBindingLocations,
    AppExpandLevels,
    Routes,
)
from gdrive_app.schemas.call import AppBinding, AppCall, AppCallRequest
from gdrive_app.utils.config import get_settings
from gdrive_app.utils.helpers import is_connected

COMMAND_TRIGGER = "drive"

HELP_TEXT = "\n".join([
    "#### Google Drive",
    f"- `/{COMMAND_TRIGGER} connect`: Connect your Google account",
    f"- `/{COMMAND_TRIGGER} disconnect`: Disconnect your Google account",
    f"- `/{COMMAND_TRIGGER} help`: Show this help",
    "",
    "Use **Upload to Google Drive** in a post's menu to save its attachments.",
])


def get_manifest() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "app_id": settings.APP_ID,
        "version": "v0.1.0",
        "display_name": settings.APP_DISPLAY_NAME,
        "description": settings.APP_DESCRIPTION,
        "homepage_url": settings.APP_HOMEPAGE_URL,
        "icon": GOOGLE_DRIVE_ICON,
        "requested_permissions": ["act_as_bot", "act_as_user", "remote_oauth2"],
        "requested_locations": [AppBindingLocations.COMMAND, AppBindingLocations.POST_MENU],
        "bindings": {
            "path": Routes.BINDINGS,
            "expand": {
                "acting_user": AppExpandLevels.EXPAND_SUMMARY,
                "oauth2_user": AppExpandLevels.EXPAND_SUMMARY,
            },
        },
        "http": {"root_url": settings.APP_ROOT_URL},
    }


def _command_binding(label: str, description: str, path: str, expand: Dict[str, str]) -> AppBinding:
    return AppBinding(
        location=label,
        label=label,
        icon=GOOGLE_DRIVE_ICON,
        description=description,
        submit=AppCall(path=path, expand=expand),
    )


def get_bindings(call: AppCallRequest) -> List[Dict[str, Any]]:
    """Bindings for the acting user; connected users get disconnect and upload."""
    connected = is_connected(call.context.oauth2)

    sub_commands = []
    if connected:
        sub_commands.append(_command_binding(
            "disconnect",
            "Disconnect your Google account",
            Routes.DISCONNECT_SUBMIT,
            {
                "acting_user": AppExpandLevels.EXPAND_SUMMARY,
                "acting_user_access_token": AppExpandLevels.EXPAND_ALL,
                "oauth2_user": AppExpandLevels.EXPAND_SUMMARY,
            },
        ))
    else:
        sub_commands.append(_command_binding(
            "connect",
            "Connect your Google account",
            Routes.CONNECT_SUBMIT,
            {
                "oauth2_app": AppExpandLevels.EXPAND_ALL,
                "oauth2_user": AppExpandLevels.EXPAND_SUMMARY,
            },
        ))
    sub_commands.append(_command_binding("help", "Show Google Drive help", Routes.HELP_SUBMIT, {}))

    bindings = [
        AppBinding(
            location=AppBindingLocations.COMMAND,
            bindings=[
                AppBinding(
                    location=COMMAND_TRIGGER,
                    label=COMMAND_TRIGGER,
                    icon=GOOGLE_DRIVE_ICON,
                    description="Manage Google Drive",
                    hint="[connect | disconnect | help]",
                    bindings=sub_commands,
                )
            ],
        )
    ]

    if connected:
        bindings.append(AppBinding(
            location=AppBindingLocations.POST_MENU,
            bindings=[
                AppBinding(
                    location="upload-file",
                    label="Upload to Google Drive",
                    icon=GOOGLE_DRIVE_ICON,
                    submit=AppCall(
                        path=Routes.SAVE_FILE_CALL,
                        expand={
                            "acting_user_access_token": AppExpandLevels.EXPAND_ALL,
                            "post": AppExpandLevels.EXPAND_SUMMARY,
                        },
                    ),
                )
            ],
        ))

    return [binding.model_dump(exclude_none=True) for binding in bindings]
