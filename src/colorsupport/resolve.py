"""Pick the color level to render with: the override if one is active, detection otherwise."""

from typing import Optional

from colorsupport.colors import detect_color_support
from colorsupport.host import HostEnvironment
from colorsupport.levels import CapabilityLevel, StreamTarget
from colorsupport.override import ColorSupportOverride, default_override


def resolve_color_support(
    stream: StreamTarget = StreamTarget.STDOUT,
    override: Optional[ColorSupportOverride] = None,
    host: Optional[HostEnvironment] = None,
) -> CapabilityLevel:
    """
    Resolve the effective color level for a stream.

    Args:
        stream: Which standard stream output goes to
        override: Override store to consult (defaults to the process-wide one)
        host: Environment snapshot for detection (defaults to the running process)

    Returns:
        NO_COLOR, ANSI256 or TRUECOLOR, never UNSET
    """
    if override is None:
        override = default_override()
    forced = override.get()
    if forced.is_set:
        return forced
    return detect_color_support(stream, host)
