# filterview/config/loaders.py

"""
Functions for loading and merging FilterView configuration from various sources.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml
from pydantic import ValidationError

from .models import FilterViewConfig

logger = logging.getLogger(__name__)

# --- Constants ---
ENV_PREFIX = "FILTERVIEW_"
ENV_NESTING_SEPARATOR = "__"  # FILTERVIEW_FILTER__BETA -> filter.beta
USER_CONFIG_FILE = Path("~/.config/filterview/filterview.toml").expanduser()
PROJECT_CONFIG_FILE = Path("./filterview.toml")

# --- Helper Functions ---

def _load_toml_file(filepath: Path) -> Dict[str, Any]:
    """Loads a TOML file if it exists, returns empty dict otherwise."""
    if filepath.is_file():
        try:
            with open(filepath, 'r') as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.warning(f"Error decoding TOML file '{filepath}': {e}. Skipping.")
        except OSError as e:
            logger.warning(f"Could not read config file '{filepath}': {e}. Skipping.")
    return {}


def _deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges 'update' dict into 'base' dict."""
    merged = base.copy()
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _parse_env_value(value: str) -> Any:
    if value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value


def _get_config_from_env(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Reads FILTERVIEW_SECTION__KEY environment variables into a nested dict."""
    environ = os.environ if environ is None else environ
    env_config: Dict[str, Any] = {}
    for env_var, value in environ.items():
        if not env_var.startswith(ENV_PREFIX):
            continue
        keys = env_var[len(ENV_PREFIX):].lower().split(ENV_NESTING_SEPARATOR)
        if not all(keys):
            logger.warning(f"Ignoring malformed configuration variable '{env_var}'.")
            continue
        d = env_config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = _parse_env_value(value)
    return env_config

# --- Main Loading Function ---

def load_configuration(
    config_files: Optional[List[Path]] = None,
    disable_project_config: bool = False,
    disable_user_config: bool = False,
) -> FilterViewConfig:
    """
    Loads FilterView configuration from defaults, files, and environment variables.

    Precedence (highest first):
    1. Environment Variables (FILTERVIEW_SECTION__KEY)
    2. User Config File (~/.config/filterview/filterview.toml)
    3. Project Config File (./filterview.toml)
    4. Explicitly passed config files (later files win)
    5. Internal Defaults (from Pydantic models)

    Returns:
        A validated FilterViewConfig object. Falls back to defaults (and logs
        the validation error) if the merged configuration is invalid.
    """
    merged_config_dict: Dict[str, Any] = {}

    for file_path in config_files or []:
        merged_config_dict = _deep_merge_dicts(merged_config_dict, _load_toml_file(Path(file_path)))

    if not disable_project_config:
        logger.debug(f"Attempting to load project config: {PROJECT_CONFIG_FILE.resolve()}")
        project_cfg = _load_toml_file(PROJECT_CONFIG_FILE)
        if project_cfg:
            logger.info(f"Loaded project configuration from {PROJECT_CONFIG_FILE.resolve()}")
            merged_config_dict = _deep_merge_dicts(merged_config_dict, project_cfg)

    if not disable_user_config:
        logger.debug(f"Attempting to load user config: {USER_CONFIG_FILE}")
        user_cfg = _load_toml_file(USER_CONFIG_FILE)
        if user_cfg:
            logger.info(f"Loaded user configuration from {USER_CONFIG_FILE}")
            merged_config_dict = _deep_merge_dicts(merged_config_dict, user_cfg)

    env_cfg = _get_config_from_env()
    if env_cfg:
        logger.debug(f"Applying environment variable configuration: {env_cfg}")
        merged_config_dict = _deep_merge_dicts(merged_config_dict, env_cfg)

    try:
        final_config = FilterViewConfig(**merged_config_dict)
        logger.debug("Configuration loaded and validated successfully.")
        return final_config
    except ValidationError as e:
        logger.error(f"Configuration validation failed:\n{e}")
        logger.warning("Falling back to default configuration due to validation errors.")
        return FilterViewConfig()
