"""
Tests for the host snapshot, level parsing and CI detection.
"""

import pytest

from colorsupport.ci import ci_markers_present, is_ci
from colorsupport.host import (
    LINUX,
    MACOS,
    OTHER,
    WINDOWS,
    HostEnvironment,
    host_os_name,
)
from colorsupport.levels import CapabilityLevel, StreamTarget


class TestHostOsName:
    """Test platform mapping."""

    @pytest.mark.parametrize('platform,expected', [
        ('darwin', MACOS),
        ('linux', LINUX),
        ('linux2', LINUX),
        ('win32', WINDOWS),
        ('cygwin', OTHER),
        ('freebsd13', OTHER),
    ])
    def test_mapping(self, platform, expected):
        assert host_os_name(platform) == expected


class TestHostEnvironment:
    """Test HostEnvironment."""

    def test_from_process_snapshots_env(self, clean_env):
        clean_env.setenv('TERM', 'xterm')
        host = HostEnvironment.from_process()
        clean_env.setenv('TERM', 'dumb')
        assert host.get('TERM') == 'xterm'

    def test_get_missing(self):
        assert HostEnvironment().get('TERM') is None

    def test_is_terminal_per_stream(self):
        host = HostEnvironment(stdout_is_terminal=True, stderr_is_terminal=False)
        assert host.is_terminal(StreamTarget.STDOUT) is True
        assert host.is_terminal(StreamTarget.STDERR) is False

    def test_hashable(self):
        a = HostEnvironment(environ={'TERM': 'xterm'}, os_name=LINUX)
        b = HostEnvironment(environ={'TERM': 'xterm'}, os_name=LINUX)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_environ_is_read_only(self):
        source = {'TERM': 'xterm'}
        host = HostEnvironment(environ=source)
        source['TERM'] = 'dumb'
        assert host.get('TERM') == 'xterm'
        with pytest.raises(TypeError):
            host.environ['TERM'] = 'dumb'

    def test_with_env(self):
        host = HostEnvironment(environ={'TERM': 'xterm'})
        updated = host.with_env(IGNORE_IS_TERMINAL='1')
        assert updated.get('IGNORE_IS_TERMINAL') == '1'
        assert updated.get('TERM') == 'xterm'
        assert host.get('IGNORE_IS_TERMINAL') is None


class TestCapabilityLevelParse:
    """Test parsing level names."""

    @pytest.mark.parametrize('text,expected', [
        ('no_color', CapabilityLevel.NO_COLOR),
        ('NONE', CapabilityLevel.NO_COLOR),
        ('no-color', CapabilityLevel.NO_COLOR),
        ('ansi256', CapabilityLevel.ANSI256),
        ('256', CapabilityLevel.ANSI256),
        ('TrueColor', CapabilityLevel.TRUECOLOR),
        ('24bit', CapabilityLevel.TRUECOLOR),
        ('unset', CapabilityLevel.UNSET),
    ])
    def test_parse(self, text, expected):
        assert CapabilityLevel.parse(text) == expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match='Unknown color level'):
            CapabilityLevel.parse('16')

    def test_is_set(self):
        assert CapabilityLevel.UNSET.is_set is False
        assert all(level.is_set for level in CapabilityLevel if level != CapabilityLevel.UNSET)


class TestCI:
    """Test CI detection."""

    def test_no_markers(self):
        assert is_ci({}) is False

    def test_presence_is_enough(self):
        assert is_ci({'CI': ''}) is True
        assert is_ci({'BUILD_NUMBER': '17'}) is True

    def test_markers_present(self):
        assert ci_markers_present({'CI': 'true', 'GITLAB_CI': 'true', 'HOME': '/'}) == ['CI', 'GITLAB_CI']

    def test_ci_false_is_not_ci(self):
        assert is_ci({'CI': 'false'}) is False
        assert ci_markers_present({'CI': 'false'}) == []

    def test_ci_false_with_other_marker(self):
        assert is_ci({'CI': 'false', 'GITHUB_ACTIONS': 'true'}) is True

    def test_reads_process_env(self, clean_env):
        assert is_ci() is False
        clean_env.setenv('TF_BUILD', 'True')
        assert is_ci() is True
