"""
Color Support Override

A thread-safe cell holding a forced CapabilityLevel. When it holds anything
other than UNSET, callers use that value instead of running detection.

Construct one and pass it to whoever needs it. default_override() hands out a
single process-wide instance for code that wants the shared one.

Usage:
    from colorsupport.override import ColorSupportOverride

    override = ColorSupportOverride()
    override.set(CapabilityLevel.ANSI256)
    override.get()   # CapabilityLevel.ANSI256
"""

import logging
import threading
import time
from typing import Optional

from colorsupport.levels import CapabilityLevel

logger = logging.getLogger(__name__)

# The cell stores a small integer, not the enum member itself.
_ENCODE = {
    CapabilityLevel.ANSI256: 1,
    CapabilityLevel.TRUECOLOR: 2,
    CapabilityLevel.NO_COLOR: 3,
    CapabilityLevel.UNSET: -1,
}
_DECODE = {code: level for level, code in _ENCODE.items()}

UNSET_CODE = _ENCODE[CapabilityLevel.UNSET]


def encode_level(level: CapabilityLevel) -> int:
    return _ENCODE.get(level, UNSET_CODE)


def decode_level(code: int) -> CapabilityLevel:
    """Unknown codes decode to UNSET."""
    return _DECODE.get(code, CapabilityLevel.UNSET)


class ColorSupportOverride:
    """
    Process-shareable override cell.

    get() and set() are linearizable: both go through one lock that is held
    only long enough to read or write a single int. Neither raises.
    """

    def __init__(self, lock_timeout: float = 1.0, retry_interval: float = 0.01):
        self.lock_timeout = lock_timeout
        self.retry_interval = retry_interval
        self._lock = threading.Lock()
        self._code = UNSET_CODE

    def set(self, value: CapabilityLevel) -> None:
        """Replace the stored level. Retries until the lock is acquired."""
        code = encode_level(value)
        while not self._lock.acquire(timeout=self.lock_timeout):
            logger.debug("Override lock busy, retrying set")
            time.sleep(self.retry_interval)
        try:
            self._code = code
        finally:
            self._lock.release()
        logger.debug(f"Color support override set to {decode_level(code).value}")

    def get(self) -> CapabilityLevel:
        """
        Read the stored level.

        Returns:
            The last level set, or UNSET if nothing was set or the lock could
            not be acquired within lock_timeout
        """
        if not self._lock.acquire(timeout=self.lock_timeout):
            logger.warning(
                f"Could not read color support override within {self.lock_timeout}s, "
                "treating it as unset"
            )
            return CapabilityLevel.UNSET
        try:
            code = self._code
        finally:
            self._lock.release()
        return decode_level(code)

    def __repr__(self) -> str:
        # Unlocked read: a single int, and repr must not block
        return f"ColorSupportOverride({decode_level(self._code).value})"


_default: Optional[ColorSupportOverride] = None
_default_lock = threading.Lock()


def default_override() -> ColorSupportOverride:
    """Return the process-wide override, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = ColorSupportOverride()
    return _default
