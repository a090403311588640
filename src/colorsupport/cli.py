#!/usr/bin/env python3
"""
colorsupport CLI - report what color level this terminal supports.

Usage:
    colorsupport                          # Resolved level for stdout
    colorsupport --stream stderr detect   # Resolved level for stderr
    colorsupport explain                  # Level plus the rule that decided it
    colorsupport env                      # Environment variables consulted
    colorsupport --force ansi256 detect   # Force a level
"""

import argparse
import json
import logging
import sys

from colorsupport import __version__
from colorsupport.ci import ci_markers_present
from colorsupport.colors import explain_color_support
from colorsupport.host import HostEnvironment
from colorsupport.levels import CapabilityLevel, StreamTarget
from colorsupport.override import ColorSupportOverride
from colorsupport.resolve import resolve_color_support

logger = logging.getLogger(__name__)

CONSULTED_VARS = (
    'NO_COLOR',
    'TERM',
    'TERM_PROGRAM',
    'COLORTERM',
    'CLICOLOR',
    'IGNORE_IS_TERMINAL',
)

LEVEL_LABELS = {
    CapabilityLevel.NO_COLOR: "no color",
    CapabilityLevel.ANSI256: "ANSI 256 colors",
    CapabilityLevel.TRUECOLOR: "truecolor (24-bit)",
    CapabilityLevel.UNSET: "not set",
}


def _parse_level(text: str) -> CapabilityLevel:
    try:
        return CapabilityLevel.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _host_from_args(args) -> HostEnvironment:
    host = HostEnvironment.from_process()
    if args.ignore_is_terminal:
        host = host.with_env(IGNORE_IS_TERMINAL='1')
    return host


# ============================================================================
# Commands
# ============================================================================

def cmd_detect(args, host, override, use_json):
    stream = StreamTarget(args.stream)
    level = resolve_color_support(stream, override=override, host=host)

    if use_json:
        print(json.dumps({'stream': stream.value, 'level': level.value}))
    else:
        print(level.value)
    return 0


def cmd_explain(args, host, override, use_json):
    stream = StreamTarget(args.stream)
    forced = override.get()
    detection = explain_color_support(stream, host)

    if forced.is_set:
        level, rule = forced, 'override'
    else:
        level, rule = detection.level, detection.rule

    if use_json:
        print(json.dumps({
            'stream': stream.value,
            'level': level.value,
            'rule': rule,
            'detected': detection.level.value,
            'override': forced.value,
            'os': host.os_name,
            'is_terminal': host.is_terminal(stream),
        }, indent=2))
        return 0

    print(f"Stream:      {stream.value}")
    print(f"Level:       {LEVEL_LABELS[level]}")
    print(f"Rule:        {rule}")
    if forced.is_set:
        print(f"Detected:    {LEVEL_LABELS[detection.level]} (rule: {detection.rule})")
    print(f"OS:          {host.os_name}")
    print(f"Terminal:    {'yes' if host.is_terminal(stream) else 'no'}")
    return 0


def cmd_env(args, host, override, use_json):
    values = {name: host.get(name) for name in CONSULTED_VARS}
    markers = ci_markers_present(host.environ)

    if use_json:
        print(json.dumps({'env': values, 'ci': bool(markers), 'ci_markers': markers}, indent=2))
        return 0

    for name, value in values.items():
        shown = '(unset)' if value is None else repr(value)
        print(f"{name:<20} {shown}")
    print(f"{'CI':<20} {', '.join(markers) if markers else 'no'}")
    return 0


# ============================================================================
# Main CLI
# ============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='colorsupport',
        description='colorsupport - terminal color capability detection',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  colorsupport                          Resolved level for stdout
  colorsupport --stream stderr detect   Resolved level for stderr
  colorsupport explain                  Show which rule decided the level
  colorsupport --force 256 detect       Force the ANSI 256 palette
'''
    )
    parser.add_argument('--version', action='version', version=f'colorsupport {__version__}')
    parser.add_argument('--json', action='store_true', help='Output in JSON format')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    parser.add_argument('--stream', choices=[s.value for s in StreamTarget], default='stdout',
                        help='Stream to check (default: stdout)')
    parser.add_argument('--force', type=_parse_level, metavar='LEVEL',
                        help='Force a level: no_color, ansi256, truecolor or unset')
    parser.add_argument('--ignore-is-terminal', action='store_true',
                        help='Treat the stream as a terminal even when piped')

    subparsers = parser.add_subparsers(dest='command')
    subparsers.add_parser('detect', help='Print the resolved color level')
    subparsers.add_parser('explain', help='Show the level and the rule that decided it')
    subparsers.add_parser('env', help='Show the environment variables consulted')

    args = parser.parse_args(argv)
    verbose = args.verbose

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )

    commands = {
        'detect': cmd_detect,
        'explain': cmd_explain,
        'env': cmd_env,
    }

    # One store per invocation so --force never leaks into later calls
    override = ColorSupportOverride()

    try:
        if args.force is not None:
            override.set(args.force)
        host = _host_from_args(args)
        handler = commands[args.command or 'detect']
        return handler(args, host, override, args.json)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except ValueError as e:
        print(f"✗ {e}", file=sys.stderr)
        if verbose:
            logger.exception("Command failed")
        return 1


if __name__ == '__main__':
    sys.exit(main())
