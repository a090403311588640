"""
colorsupport - terminal color capability detection.

Detects whether a standard stream can render no color, the ANSI 256-color
palette, or 24-bit truecolor, and provides a thread-safe override so callers
can force a level regardless of what detection says.
"""

__version__ = "0.1.0"

from colorsupport.colors import detect_color_support, explain_color_support
from colorsupport.host import HostEnvironment
from colorsupport.levels import CapabilityLevel, StreamTarget
from colorsupport.override import ColorSupportOverride, default_override
from colorsupport.resolve import resolve_color_support

__all__ = [
    "CapabilityLevel",
    "ColorSupportOverride",
    "HostEnvironment",
    "StreamTarget",
    "default_override",
    "detect_color_support",
    "explain_color_support",
    "resolve_color_support",
    "__version__",
]
