"""
Colors Detection Module

Works out how much color a terminal stream can render: none, the 256-color
ANSI palette, or 24-bit truecolor.

The checks run in a fixed order and the first one that matches wins. Later
checks assume the earlier ones did not match, so do not reorder them.

Usage:
    from colorsupport.colors import detect_color_support
    from colorsupport.levels import StreamTarget

    level = detect_color_support(StreamTarget.STDERR)
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from colorsupport.ci import is_ci
from colorsupport.host import LINUX, MACOS, WINDOWS, HostEnvironment, is_a_tty
from colorsupport.levels import CapabilityLevel, StreamTarget

logger = logging.getLogger(__name__)

__all__ = [
    "Detection",
    "check_256_color",
    "check_ansi_color",
    "detect_color_support",
    "env_no_color",
    "explain_color_support",
    "is_a_tty",
]

ANSI_TERM_PREFIXES = ('screen', 'xterm', 'vt100', 'vt220', 'rxvt')
ANSI_TERM_SUBSTRINGS = ('color', 'ansi', 'cygwin', 'linux')


@dataclass(frozen=True)
class Detection:
    level: CapabilityLevel
    rule: str  # which check decided the level


def env_no_color(environ: Mapping[str, str]) -> bool:
    """NO_COLOR disables color when set to anything except "0" (even empty)."""
    value = environ.get('NO_COLOR')
    return value is not None and value != '0'


def check_256_color(term: str) -> bool:
    """Check if a TERM value advertises the 256-color palette."""
    return term.endswith('256') or term.endswith('256color')


def check_ansi_color(term: str) -> bool:
    """Check if a TERM value belongs to a known color-capable family."""
    return (
        term.startswith(ANSI_TERM_PREFIXES)
        or any(part in term for part in ANSI_TERM_SUBSTRINGS)
    )


def _flag_enabled(host: HostEnvironment, name: str) -> bool:
    value = host.get(name)
    return value is not None and value != '0'


def explain_color_support(
    stream: StreamTarget = StreamTarget.STDOUT,
    host: Optional[HostEnvironment] = None,
) -> Detection:
    """
    Detect color support and report which rule decided it.

    Args:
        stream: Which standard stream to check
        host: Environment snapshot (defaults to the running process)

    Returns:
        Detection with a level that is never UNSET
    """
    if host is None:
        host = HostEnvironment.from_process()

    term = host.get('TERM')
    term_program = host.get('TERM_PROGRAM')
    colorterm = host.get('COLORTERM')

    # Hard disable
    if env_no_color(host.environ):
        return Detection(CapabilityLevel.NO_COLOR, 'no_color')
    if term == 'dumb':
        return Detection(CapabilityLevel.NO_COLOR, 'term_dumb')
    if not (host.is_terminal(stream) or _flag_enabled(host, 'IGNORE_IS_TERMINAL')):
        return Detection(CapabilityLevel.NO_COLOR, 'not_a_terminal')

    if host.os_name == MACOS:
        # Terminal.app reports a 256color TERM but cannot do truecolor
        if term_program == 'Apple_Terminal' and term is not None and check_256_color(term):
            return Detection(CapabilityLevel.ANSI256, 'apple_terminal')
        if term_program == 'iTerm.app' or colorterm == 'truecolor':
            return Detection(CapabilityLevel.TRUECOLOR, 'macos_truecolor')

    if host.os_name == LINUX and colorterm == 'truecolor':
        return Detection(CapabilityLevel.TRUECOLOR, 'linux_truecolor')

    if host.os_name == WINDOWS:
        return Detection(CapabilityLevel.TRUECOLOR, 'windows')

    if colorterm is not None:
        return Detection(CapabilityLevel.TRUECOLOR, 'colorterm')
    if term is not None and check_ansi_color(term):
        return Detection(CapabilityLevel.TRUECOLOR, 'term_family')
    if _flag_enabled(host, 'CLICOLOR'):
        return Detection(CapabilityLevel.TRUECOLOR, 'clicolor')
    if is_ci(host.environ):
        return Detection(CapabilityLevel.TRUECOLOR, 'ci')

    return Detection(CapabilityLevel.NO_COLOR, 'fallback')


def detect_color_support(
    stream: StreamTarget = StreamTarget.STDOUT,
    host: Optional[HostEnvironment] = None,
) -> CapabilityLevel:
    """Detect the color level a stream supports. Never returns UNSET."""
    detection = explain_color_support(stream, host)
    logger.debug(f"Color support for {stream.value}: {detection.level.value} (rule: {detection.rule})")
    return detection.level
