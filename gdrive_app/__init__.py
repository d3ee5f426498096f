"""
Mattermost app that connects Google accounts and uploads post attachments to Google Drive.
"""

__version__ = "0.1.0"
