"""
CI environment signal.

Answers "is this process running under a continuous-integration service".
Only the presence of a marker variable matters, not its value.
"""

import os
from typing import Mapping, Optional

CI_MARKERS = (
    'CI',
    'CONTINUOUS_INTEGRATION',
    'BUILD_NUMBER',
    'RUN_ID',
    'TF_BUILD',
    'TEAMCITY_VERSION',
    'GITHUB_ACTIONS',
    'GITLAB_CI',
    'CIRCLECI',
    'TRAVIS',
    'JENKINS_URL',
    'BUILDKITE',
)


def _marker_set(environ: Mapping[str, str], name: str) -> bool:
    if name not in environ:
        return False
    # CI=false is how some services and users say "not CI"
    return not (name == 'CI' and environ[name] == 'false')


def is_ci(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check for any known CI marker variable (reads os.environ by default)."""
    if environ is None:
        environ = os.environ
    return any(_marker_set(environ, name) for name in CI_MARKERS)


def ci_markers_present(environ: Optional[Mapping[str, str]] = None) -> list[str]:
    """Names of the CI marker variables that are set."""
    if environ is None:
        environ = os.environ
    return [name for name in CI_MARKERS if _marker_set(environ, name)]
