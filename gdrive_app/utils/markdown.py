"""Markdown helpers for messages shown in Mattermost."""


def hyperlink(text: str, url: str) -> str:
    return f"[{text}]({url})"


def bold(text: str) -> str:
    return f"**{text}**"


def code(text: str) -> str:
    return f"`{text}`"
