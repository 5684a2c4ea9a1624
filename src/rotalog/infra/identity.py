from __future__ import annotations

"""
Current User Resolution.

Resolves the principal each record is attributed to. Failures never
propagate: the literal UNKNOWN is substituted instead.
"""

import getpass
import logging
import os
from typing import Callable

from rotalog.domain.constants import UNKNOWN_USER

logger = logging.getLogger(__name__)

IdentityProvider = Callable[[], str]


def get_current_user() -> str:
    """
    Return the calling user's name, 'DOMAIN\\user' on Windows domains.

    Returns:
        str: The user name, or UNKNOWN if it cannot be determined.
    """
    try:
        user = getpass.getuser()
    except Exception as e:
        # getpass raises OSError (3.13+) or KeyError (older) without a passwd entry
        logger.debug(f"Identity resolution failed: {e}")
        return UNKNOWN_USER

    if not user:
        return UNKNOWN_USER

    domain = os.environ.get("USERDOMAIN", "") if os.name == "nt" else ""
    return f"{domain}\\{user}" if domain else user


def resolve_user(provider: IdentityProvider = get_current_user) -> str:
    """
    Invoke an identity provider, substituting UNKNOWN on any failure.

    Args:
        provider: Callable returning the principal name.

    Returns:
        str: A non-empty user name.
    """
    try:
        user = provider()
    except Exception as e:
        logger.debug(f"Identity provider failed: {e}")
        return UNKNOWN_USER
    if not user:
        return UNKNOWN_USER
    return str(user).strip() or UNKNOWN_USER
