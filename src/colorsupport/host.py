"""
Host Environment

A frozen snapshot of everything the detector is allowed to look at:
environment variables, the host operating system, and whether stdout and
stderr are attached to a terminal.

Usage:
    from colorsupport.host import HostEnvironment

    host = HostEnvironment.from_process()
    host.get('TERM')               # None when unset
    host.is_terminal(StreamTarget.STDERR)
"""

import os
import sys
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional

from colorsupport.levels import StreamTarget

MACOS = "macos"
LINUX = "linux"
WINDOWS = "windows"
OTHER = "other"


def host_os_name(platform: Optional[str] = None) -> str:
    """Map sys.platform onto macos / linux / windows / other."""
    platform = sys.platform if platform is None else platform
    if platform == 'darwin':
        return MACOS
    if platform.startswith('linux'):
        return LINUX
    if platform == 'win32':
        return WINDOWS
    return OTHER


def is_a_tty(stream: StreamTarget) -> bool:
    """Check whether the given standard stream is an interactive terminal."""
    handle = sys.stdout if stream == StreamTarget.STDOUT else sys.stderr
    if handle is None or not hasattr(handle, 'isatty'):
        return False
    try:
        return bool(handle.isatty())
    except (ValueError, OSError):
        # Closed or detached stream
        return False


@dataclass(frozen=True)
class HostEnvironment:
    """
    Immutable detection input. environ is stored as a read-only mapping and
    the snapshot hashes by content.
    """
    environ: Mapping[str, str] = field(default_factory=dict)
    os_name: str = OTHER
    stdout_is_terminal: bool = False
    stderr_is_terminal: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'environ', MappingProxyType(dict(self.environ)))

    def __hash__(self):
        return hash((
            frozenset(self.environ.items()),
            self.os_name,
            self.stdout_is_terminal,
            self.stderr_is_terminal,
        ))

    @classmethod
    def from_process(cls) -> 'HostEnvironment':
        """Snapshot the running process."""
        return cls(
            environ=dict(os.environ),
            os_name=host_os_name(),
            stdout_is_terminal=is_a_tty(StreamTarget.STDOUT),
            stderr_is_terminal=is_a_tty(StreamTarget.STDERR),
        )

    def get(self, name: str) -> Optional[str]:
        return self.environ.get(name)

    def is_terminal(self, stream: StreamTarget) -> bool:
        if stream == StreamTarget.STDOUT:
            return self.stdout_is_terminal
        return self.stderr_is_terminal

    def with_env(self, **overrides: str) -> 'HostEnvironment':
        """Copy of this snapshot with some variables replaced."""
        environ = dict(self.environ)
        environ.update(overrides)
        return replace(self, environ=environ)
