"""
Cursor settings.

Settings may be given explicitly to `init`, or installed process-wide
with `configure`. They can be kept in a YAML file, e.g.
```
fast_stepping: false
```
"""
import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ValidationError

from circulist.errors import SettingsError

LOG = logging.getLogger(__name__)


class CursorSettings(BaseModel):
    # Resolve long jumps (more steps than items) by arithmetic
    # instead of stepping one item at a time.
    fast_stepping: bool = True


_default_settings = CursorSettings()


def get_settings() -> CursorSettings:
    return _default_settings


def configure(settings: Optional[CursorSettings] = None) -> CursorSettings:
    """
    Installs process-wide default settings,
    used by cursors created without explicit settings.
    :param settings: new defaults, None restores built-in defaults.
    :return: previous defaults
    """
    global _default_settings
    prev = _default_settings
    _default_settings = settings if settings is not None else CursorSettings()
    return prev


def resolve_path(p: Union[Path, str], *parent_candidates) -> Optional[Path]:
    """
    Resolves path.
    If it is absolute - will keep it as is.
    Then it checks whether it is given relative to current working directory.
    Otherwise, will look for first existing "parent_candidates[i] / p"
    :return: resolved path in absolute form, or None if nothing exists.
    """
    p = Path(p)

    if p.is_absolute():
        return p if p.exists() else None

    for parent in [Path.cwd(), *map(Path, parent_candidates)]:
        candidate = parent / p
        if candidate.exists():
            return candidate.absolute()

    return None


def load_settings(path: Union[Path, str], *search_dirs) -> CursorSettings:
    """
    Loads settings from YAML file.
    :param path: settings file location
    :param search_dirs: directories to look in when `path` is relative
        and doesn't exist in working directory.
    :return: loaded settings
    """
    resolved = resolve_path(path, *search_dirs)
    if resolved is None:
        raise SettingsError(f"Settings file not found: {path}")

    try:
        with open(resolved, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsError(f"Can't read settings file {resolved}: {e}") from e
    except yaml.YAMLError as e:
        raise SettingsError(f"Malformed settings file {resolved}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {resolved} should contain a mapping")

    try:
        settings = CursorSettings(**data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {resolved}: {e}") from e

    LOG.debug(f"Loaded settings from {resolved}: {settings}")
    return settings
