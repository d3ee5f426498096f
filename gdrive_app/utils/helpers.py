"""
Small helpers shared by the call handlers.
"""

import logging
from typing import Callable, Optional, TypeVar

from fastapi.concurrency import run_in_threadpool

from gdrive_app.exceptions import AppException, ExceptionType
from gdrive_app.schemas.call import Oauth2App

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_connected(oauth2: Optional[Oauth2App]) -> bool:
    """Whether the OAuth2 context carries a linked Google credential."""
    return bool(oauth2 and oauth2.user and oauth2.user.refresh_token)


async def try_call(fn: Callable[[], T], exception_type: ExceptionType, prefix: str) -> T:
    """
    Run a blocking Google API call in the threadpool, turning any failure
    into a user-facing exception.

    Args:
        fn: Zero-argument callable performing the request
        exception_type: Rendering hint for the raised exception
        prefix: Text prepended to the underlying error message

    Returns:
        Whatever fn returns

    Raises:
        AppException: If fn raises
    """
    try:
        return await run_in_threadpool(fn)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"{prefix}{str(e)}")
        raise AppException(exception_type, f"{prefix}{str(e)}") from e
