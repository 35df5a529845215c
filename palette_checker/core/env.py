"""Environment variable loading for palette-check.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  PALETTE_CHECK_FORMAT  text (default) or json
  PALETTE_CHECK_FLIP    1/true/yes/on to flip rows on load and save
"""

import os
from pathlib import Path

from palette_checker.core.errors import UsageError

FORMAT_VAR = 'PALETTE_CHECK_FORMAT'
FLIP_VAR = 'PALETTE_CHECK_FLIP'

FORMATS = ('text', 'json')
_TRUTHY = {'1', 'true', 'yes', 'on'}


def _find_dotenv(start: Path) -> Path | None:
    """First .env in start or its parents; None once a .git boundary is passed."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines, optional quotes and `export ` prefix. Other lines are skipped."""
    result: dict[str, str] = {}
    try:
        text = path.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise UsageError(f'Cannot read .env file "{path}": not valid UTF-8 ({e.reason})') from e
    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.removeprefix('export ').strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the file that was read, or None.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            path = None
    else:
        path = _find_dotenv(Path.cwd())
    if path is None:
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def env_flag(name: str) -> bool:
    return os.environ.get(name, '').strip().lower() in _TRUTHY


def output_format() -> str:
    """Summary format from the environment: 'text' or 'json'."""
    value = os.environ.get(FORMAT_VAR, '').strip().lower()
    return value if value in FORMATS else 'text'
