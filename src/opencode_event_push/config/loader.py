"""
Module: loader.py
Description: Loads and merges target configuration files.

Two optional JSON files are read: a global one in the user's config
directory and a project one in the directory the host was started in.
Both are interpolated for {env:NAME} tokens and merged with global targets
first.

Outcomes of reading one file:
- missing file: None, silently
- unreadable file: None, one warning
- malformed JSON or wrong shape: empty PluginConfig, one warning
- otherwise: the interpolated, validated PluginConfig
"""

import json
from pathlib import Path
from typing import Mapping, Optional, Union

from pydantic import ValidationError

from opencode_event_push.config.settings import Settings, settings as default_settings
from opencode_event_push.models.target import PluginConfig
from opencode_event_push.utils.interpolate import interpolate
from opencode_event_push.utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def global_config_path(settings: Settings = default_settings) -> Path:
    """Return the path of the per-user config file."""
    return settings.resolve_global_config_dir() / settings.config_filename


def project_config_path(directory: PathLike, settings: Settings = default_settings) -> Path:
    """Return the path of the project config file inside directory."""
    return Path(directory) / settings.config_filename


def read_config_file(
    path: PathLike,
    environ: Optional[Mapping[str, str]] = None
) -> Optional[PluginConfig]:
    """
    Read, parse, interpolate and validate one config file.

    Args:
        path: Location of the JSON config file
        environ: Variable lookup for {env:NAME} tokens, defaults to os.environ

    Returns:
        PluginConfig, or None when the file is missing or unreadable
    """
    path = Path(path)

    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(
            "Could not read config file",
            path=str(path),
            error=str(e),
            error_type=type(e).__name__
        )
        return None

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(
            "Config file is not valid JSON, ignoring its targets",
            path=str(path),
            error=str(e)
        )
        return PluginConfig.empty()

    if not isinstance(document, dict) or not isinstance(document.get("targets"), list):
        logger.warning(
            "Config file is missing a 'targets' array, ignoring it",
            path=str(path)
        )
        return PluginConfig.empty()

    try:
        return PluginConfig.model_validate(interpolate(document, environ))
    except ValidationError as e:
        logger.warning(
            "Config file has invalid targets, ignoring it",
            path=str(path),
            error_count=e.error_count(),
            error=str(e)
        )
        return PluginConfig.empty()


def load_config(
    directory: Optional[PathLike] = None,
    environ: Optional[Mapping[str, str]] = None,
    settings: Settings = default_settings
) -> PluginConfig:
    """
    Load the global config and, if directory is given, the project config.

    Args:
        directory: Project directory supplied by the host, or None
        environ: Variable lookup for {env:NAME} tokens, defaults to os.environ
        settings: Settings supplying the file name and global directory

    Returns:
        PluginConfig with global targets followed by project targets. When
        neither file exists the target list is empty.
    """
    global_config = read_config_file(global_config_path(settings), environ)

    project_config = None
    if directory is not None:
        project_config = read_config_file(project_config_path(directory, settings), environ)

    config = PluginConfig.merge(global_config, project_config)

    logger.debug(
        "Event push config loaded",
        global_found=global_config is not None,
        project_found=project_config is not None,
        target_count=len(config.targets)
    )

    return config
