"""Resolve which app a command applies to when --app is not given."""

import os
import re
import subprocess
from typing import Mapping, Optional

from org_manager.core.exceptions import ConfigurationError
from org_manager.utils.logging import get_logger

logger = get_logger("cli.apps")

APP_ENV = "HEROKU_APP"

# git@heroku.com:NAME.git, https://git.heroku.com/NAME.git
_GIT_URL_PATTERNS = (
    re.compile(r"^git@(?:[\w.-]+\.)?heroku\.com:(?P<app>[\w-]+)\.git$"),
    re.compile(r"^(?:https?|ssh)://(?:[^@/]+@)?git\.heroku\.com/(?P<app>[\w-]+)\.git$"),
)


def app_from_git_url(url: str) -> Optional[str]:
    """Extract an app name from a platform git remote URL."""
    url = url.strip()
    for pattern in _GIT_URL_PATTERNS:
        match = pattern.match(url)
        if match:
            return match.group("app")
    return None


def git_remote_url(remote: str, cwd: Optional[str] = None) -> Optional[str]:
    """Return the URL configured for a git remote, or None."""
    try:
        result = subprocess.run(
            ["git", "config", "--get", f"remote.{remote}.url"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False
        )
    except OSError as e:
        logger.debug(f"git is not available: {e}")
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def resolve_app(
    app: Optional[str],
    remote: str = "heroku",
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None
) -> str:
    """
    Pick the app from --app, then HEROKU_APP, then the git remote.

    Raises:
        ConfigurationError: if none of them names an app
    """
    if app:
        return app

    env = os.environ if environ is None else environ
    if env.get(APP_ENV):
        return env[APP_ENV]

    url = git_remote_url(remote, cwd=cwd)
    if url:
        name = app_from_git_url(url)
        if name:
            logger.debug(f"Using app {name} from git remote {remote}")
            return name

    raise ConfigurationError(
        "No app specified.\n"
        "Run this command from an app folder or specify which app to use with --app APP."
    )
