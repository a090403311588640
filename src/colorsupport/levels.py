"""
Capability Levels

Enumerations shared by the detector and the override store.
"""

from enum import Enum


class StreamTarget(str, Enum):
    """Which standard stream to probe for terminal-ness."""
    STDOUT = "stdout"
    STDERR = "stderr"


class CapabilityLevel(str, Enum):
    """
    Color rendering capability of a terminal stream.

    UNSET only ever lives inside an override store. It means "no override is
    active" and must never be treated as something that can be rendered.
    """
    NO_COLOR = "no_color"
    ANSI256 = "ansi256"
    TRUECOLOR = "truecolor"
    UNSET = "unset"

    @property
    def is_set(self) -> bool:
        return self is not CapabilityLevel.UNSET

    @classmethod
    def parse(cls, text: str) -> 'CapabilityLevel':
        """
        Parse a user-supplied level name.

        Accepts the enum values plus a few common spellings
        ("none", "256", "24bit", ...), case-insensitively.

        Raises:
            ValueError: if the name is not recognised
        """
        key = text.strip().lower().replace('-', '_')
        level = _ALIASES.get(key)
        if level is None:
            valid = ', '.join(sorted(_ALIASES))
            raise ValueError(f"Unknown color level: {text!r}. Use one of: {valid}")
        return level


_ALIASES = {
    'no_color': CapabilityLevel.NO_COLOR,
    'nocolor': CapabilityLevel.NO_COLOR,
    'none': CapabilityLevel.NO_COLOR,
    'off': CapabilityLevel.NO_COLOR,
    'ansi256': CapabilityLevel.ANSI256,
    'ansi': CapabilityLevel.ANSI256,
    '256': CapabilityLevel.ANSI256,
    '256color': CapabilityLevel.ANSI256,
    'truecolor': CapabilityLevel.TRUECOLOR,
    '24bit': CapabilityLevel.TRUECOLOR,
    'rgb': CapabilityLevel.TRUECOLOR,
    'unset': CapabilityLevel.UNSET,
    'auto': CapabilityLevel.UNSET,
}
