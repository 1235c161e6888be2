"""Console settings read from environment variables.

Recognised variables:

* ``NO_COLOR`` -- non-empty disables color/style sequences (no-color.org).
* ``CONSOLEKIT_ERASE_SCROLLBACK`` -- whether clearing the screen also drops
  the scrollback buffer (default on).
* ``CONSOLEKIT_PAGE_SIZE`` -- rows per page in paged displays (default 30).
* ``CONSOLEKIT_CLEAR_ON_DISPLAY`` -- clear the screen before each page
  (default on).
* ``CONSOLEKIT_LOG_LEVEL`` -- logging level for the command-line tool.

Malformed values are logged and replaced by the default.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from consolekit.environment import is_no_color_specified

logger = logging.getLogger(__name__)

ENV_PREFIX = "CONSOLEKIT_"

DEFAULT_PER_PAGE_COUNT = 30

LOG_LEVELS = ("debug", "info", "warning", "error")

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


@dataclass
class ConsoleSettings:
    """Console and pager options."""

    no_color: bool = False
    erase_scrollback: bool = True
    per_page_count: int = DEFAULT_PER_PAGE_COUNT
    clear_on_display: bool = True
    log_level: str = "warning"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ConsoleSettings:
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            no_color=is_no_color_specified(env),
            erase_scrollback=_env_bool(
                env, "ERASE_SCROLLBACK", defaults.erase_scrollback
            ),
            per_page_count=_env_positive_int(
                env, "PAGE_SIZE", defaults.per_page_count
            ),
            clear_on_display=_env_bool(
                env, "CLEAR_ON_DISPLAY", defaults.clear_on_display
            ),
            log_level=_env_choice(env, "LOG_LEVEL", LOG_LEVELS, defaults.log_level),
        )


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning("Ignoring %s%s=%r: expected a boolean", ENV_PREFIX, name, raw)
    return default


def _env_positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning(
            "Ignoring %s%s=%r: expected a positive integer", ENV_PREFIX, name, raw
        )
        return default
    return value


def _env_choice(
    env: Mapping[str, str], name: str, choices: tuple[str, ...], default: str
) -> str:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning(
            "Ignoring %s%s=%r: expected one of %s",
            ENV_PREFIX,
            name,
            raw,
            ", ".join(choices),
        )
        return default
    return value
