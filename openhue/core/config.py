"""Settings Store for the openhue CLI.

This module handles:
- Locating the per-user config directory (~/.openhue)
- Reading config.yaml into a typed configuration state
- Deciding which commands may run without a configuration
- Writing bridge and key back after pairing
"""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from openhue.core.exceptions import ConfigurationMissing

CONFIG_DIR_ENV = 'OPENHUE_CONFIG_DIR'
CONFIG_FILE_NAME = 'config.yaml'

# Commands that can run before the CLI has been configured
EXEMPT_COMMANDS = ('setup', 'help', 'discover', 'auth')

# Exit status when a command needs a configuration that does not exist yet.
# Kept at 0 so shell scripts don't treat "not set up yet" as a failure.
NOT_CONFIGURED_EXIT_CODE = 0


@dataclass(frozen=True)
class Settings:
    """Bridge address and application key read from config.yaml."""
    bridge: str = ''
    key: str = ''


@dataclass(frozen=True)
class Ready:
    """config.yaml was read successfully."""
    settings: Settings


@dataclass(frozen=True)
class NotConfigured:
    """config.yaml does not exist."""
    path: Path


@dataclass(frozen=True)
class ParseError:
    """config.yaml exists but could not be read or parsed."""
    path: Path
    detail: str


ConfigState = Ready | NotConfigured | ParseError


def get_config_dir() -> Path:
    """Return the config directory, honouring OPENHUE_CONFIG_DIR."""
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / '.openhue'


def get_config_file() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def ensure_config_dir() -> Path:
    """Create the config directory if it doesn't exist.

    Creation is best-effort: a failure here surfaces later as a missing
    config file, so OSError is ignored.
    """
    config_dir = get_config_dir()
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    return config_dir


def is_exempt(command: str | None) -> bool:
    """Check whether a command may run without a loaded configuration."""
    return command in EXEMPT_COMMANDS


def _as_string(value) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def read_config(path: Path | None = None) -> ConfigState:
    """Read config.yaml and report what was found.

    Args:
        path: File to read (defaults to the user config file)

    Returns:
        Ready with the parsed Settings, NotConfigured if the file is absent,
        or ParseError if it could not be read or is not a YAML mapping.
        Missing keys come back as empty strings; values are not validated.
    """
    path = path or get_config_file()

    if not path.exists():
        return NotConfigured(path)

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return ParseError(path, f"invalid YAML: {e}")
    except OSError as e:
        return ParseError(path, str(e))

    # An empty file parses to None and counts as an empty configuration
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return ParseError(path, f"expected a mapping, got {type(data).__name__}")

    return Ready(Settings(
        bridge=_as_string(data.get('bridge')),
        key=_as_string(data.get('key')),
    ))


def load_settings(command: str | None) -> Settings:
    """Load Settings for the command about to run.

    Creates the config directory on the way. Exempt commands get empty
    Settings when the file is missing or broken.

    Args:
        command: Name of the invoked command

    Raises:
        ConfigurationMissing: If there is no usable config and the command
            is not exempt
    """
    ensure_config_dir()
    state = read_config()

    if isinstance(state, Ready):
        return state.settings
    if is_exempt(command):
        return Settings()
    if isinstance(state, ParseError):
        raise ConfigurationMissing(state.path, state.detail)
    raise ConfigurationMissing(state.path)


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Write bridge and key to config.yaml.

    Other keys already present in the file are kept. The file is made
    readable by the current user only, since it holds the application key.

    Returns:
        Path of the written file
    """
    path = path or get_config_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {}
    if path.exists():
        try:
            with open(path, 'r') as f:
                loaded = yaml.safe_load(f)
            if isinstance(loaded, dict):
                data = loaded
        except (yaml.YAMLError, OSError):
            # If existing file is corrupt, start fresh
            pass

    data['bridge'] = settings.bridge
    data['key'] = settings.key

    with open(path, 'w') as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    os.chmod(path, 0o600)
    return path
