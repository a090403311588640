"""
Pytest configuration and shared fixtures for colorsupport tests.
"""

import os

import pytest

from colorsupport.ci import CI_MARKERS
from colorsupport.host import HostEnvironment, LINUX
from colorsupport.override import ColorSupportOverride

DETECTION_VARS = (
    'NO_COLOR',
    'TERM',
    'TERM_PROGRAM',
    'COLORTERM',
    'CLICOLOR',
    'IGNORE_IS_TERMINAL',
)


@pytest.fixture
def make_host():
    """Build a HostEnvironment attached to a terminal on both streams."""
    def _make(os_name=LINUX, stdout_tty=True, stderr_tty=True, **environ):
        return HostEnvironment(
            environ=environ,
            os_name=os_name,
            stdout_is_terminal=stdout_tty,
            stderr_is_terminal=stderr_tty,
        )
    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable detection or CI checks look at."""
    for name in DETECTION_VARS + CI_MARKERS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def subprocess_env():
    """Environment for CLI subprocesses with detection variables stripped."""
    env = {
        k: v for k, v in os.environ.items()
        if k not in DETECTION_VARS and k not in CI_MARKERS
    }
    return env


@pytest.fixture
def override():
    """A fresh override store per test."""
    return ColorSupportOverride(lock_timeout=0.05, retry_interval=0.001)
