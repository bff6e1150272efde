"""Author attribution for inserted comments.

Resolution order:
1. ``include_author_name`` is off → None
2. ``author_name`` is set (non-blank) → that name
3. The operating-system username
4. None, if the lookup fails

Settings are passed in explicitly; reading them from an editor or config
file is the caller's concern.
"""

from __future__ import annotations

import getpass
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from criticmark.utils.logger import get_logger

logger = get_logger(__name__)

UsernameLookup = Callable[[], str]


@dataclass(frozen=True, slots=True)
class AuthorSettings:
    """Author attribution settings.

    Attributes:
        include_author_name: Attribute comments at all
        author_name: Explicit name; blank means "use the OS username"
        include_timestamp: Append ``(YYYY-MM-DD HH:MM)`` to the name

    """

    include_author_name: bool = True
    author_name: str = ""
    include_timestamp: bool = True


def resolve_author_name(
    settings: AuthorSettings,
    username_lookup: UsernameLookup = getpass.getuser,
) -> str | None:
    """Return the name to attribute comments to, or None."""
    if not settings.include_author_name:
        return None

    if settings.author_name.strip():
        return settings.author_name

    try:
        username = username_lookup()
    except (OSError, KeyError, ImportError):
        logger.debug("OS username lookup failed", exc_info=True)
        return None

    if username and username.strip():
        return username
    return None


def format_author_name(
    settings: AuthorSettings,
    now: datetime | None = None,
    username_lookup: UsernameLookup = getpass.getuser,
) -> str | None:
    """Return the attribution string, e.g. ``"ana (2024-03-09 14:05)"``.

    Args:
        settings: Attribution settings
        now: Timestamp to use (defaults to the current local time)
        username_lookup: OS username provider

    Returns:
        Formatted attribution, or None when no author is available

    """
    name = resolve_author_name(settings, username_lookup)
    if name is None:
        return None
    if not settings.include_timestamp:
        return name
    now = now or datetime.now()
    return f"{name} ({now:%Y-%m-%d %H:%M})"


__all__ = [
    "AuthorSettings",
    "format_author_name",
    "resolve_author_name",
]
