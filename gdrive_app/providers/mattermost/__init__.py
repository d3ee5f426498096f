"""
Mattermost REST API provider.
"""
