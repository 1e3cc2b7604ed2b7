"""Version string for the demo window and CLI.

Major.minor comes from the VERSION file at the project root; the patch
number is the git commit count since the last tag when git is available.
"""

import subprocess
from pathlib import Path

# picker/src/version.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
VERSION_FILE = PROJECT_ROOT / "VERSION"


def _read_major_minor() -> str:
    try:
        return VERSION_FILE.read_text().strip() or "0.0"
    except FileNotFoundError:
        return "0.0"


def _git_patch_number():
    """Commits since the last tag ('v1.0-5-gabc' -> '5'), or None without git."""
    try:
        result = subprocess.run(
            ['git', 'describe', '--tags', '--long'],
            capture_output=True, text=True, check=False, cwd=str(PROJECT_ROOT),
        )
    except FileNotFoundError:
        return None

    if result.returncode != 0:
        return None
    parts = result.stdout.strip().rsplit('-', 2)
    return parts[1] if len(parts) == 3 else None


def get_version() -> str:
    """Version string such as '1.0.5' (patch 0 outside a tagged git checkout)."""
    return f"{_read_major_minor()}.{_git_patch_number() or 0}"
