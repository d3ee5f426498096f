"""
Unit tests for shared helpers.
"""

import asyncio
import threading
import time

import pytest

from gdrive_app.exceptions import AppException, ExceptionType
from gdrive_app.utils.helpers import try_call
from gdrive_app.utils.markdown import bold, code, hyperlink
from gdrive_app.utils.oauth_scopes import get_google_oauth_scopes


@pytest.mark.asyncio
async def test_try_call_returns_result():
    assert await try_call(lambda: {"ok": True}, ExceptionType.TEXT_ERROR, "Google failed: ") == {"ok": True}


@pytest.mark.asyncio
async def test_try_call_wraps_failure():
    def boom():
        raise RuntimeError("backend down")

    with pytest.raises(AppException) as exc_info:
        await try_call(boom, ExceptionType.TEXT_ERROR, "Google failed: ")
    assert exc_info.value.message == "Google failed: backend down"
    assert exc_info.value.exception_type == ExceptionType.TEXT_ERROR
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_try_call_keeps_app_exceptions():
    def fail():
        raise AppException(ExceptionType.MARKDOWN, "already user facing")

    with pytest.raises(AppException) as exc_info:
        await try_call(fail, ExceptionType.TEXT_ERROR, "Google failed: ")
    assert exc_info.value.message == "already user facing"


@pytest.mark.asyncio
async def test_try_call_runs_off_the_event_loop():
    loop_thread = threading.get_ident()
    ran_in = []

    def slow_request():
        ran_in.append(threading.get_ident())
        time.sleep(0.5)
        return "done"

    ticks = []

    async def ticker():
        for _ in range(8):
            ticks.append(time.monotonic())
            await asyncio.sleep(0.05)

    result, _ = await asyncio.gather(
        try_call(slow_request, ExceptionType.TEXT_ERROR, "Google failed: "),
        ticker(),
    )

    assert result == "done"
    assert ran_in[0] != loop_thread
    gaps = [later - earlier for earlier, later in zip(ticks, ticks[1:])]
    assert max(gaps) < 0.3


def test_markdown_helpers():
    assert hyperlink("link", "http://x") == "[link](http://x)"
    assert bold("b") == "**b**"
    assert code("c") == "`c`"


def test_scopes_are_a_copy():
    scopes = get_google_oauth_scopes()
    scopes.append("extra")
    assert "extra" not in get_google_oauth_scopes()
    assert "https://www.googleapis.com/auth/drive" in get_google_oauth_scopes()
