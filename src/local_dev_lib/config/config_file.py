"""Reading and writing the YAML configuration file."""

import logging

import yaml
from pydantic import ValidationError

from ..constants import CONFIG_FILE
from ..errors import ConfigError, FileSystemError
from ..types import CLIConfig

logger = logging.getLogger(__name__)


def config_file_exists() -> bool:
    return CONFIG_FILE.is_file()


def config_file_is_blank() -> bool:
    """Check if the config file has no content besides whitespace."""
    try:
        return not CONFIG_FILE.read_text().strip()
    except OSError:
        return True


def read_config_file() -> str:
    """Read the raw config file contents.

    Raises:
        FileSystemError: If the file exists but cannot be read.
    """
    try:
        return CONFIG_FILE.read_text()
    except OSError as e:
        raise FileSystemError(str(CONFIG_FILE), write=False, reason=str(e)) from e


def parse_config(source: str) -> CLIConfig | None:
    """Parse YAML config source into a CLIConfig.

    Returns:
        The parsed config, or None for an empty document.

    Raises:
        ConfigError: If the source is not valid YAML or has the wrong shape.
    """
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file could not be parsed: {e}") from e
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping")
    try:
        return CLIConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config file is invalid: {e}") from e


def load_config_from_file() -> CLIConfig | None:
    """Load the config file.

    Returns:
        The parsed config, or None if the file is missing or empty.
    """
    if not config_file_exists():
        logger.debug(f"No config file found at {CONFIG_FILE}")
        return None
    return parse_config(read_config_file())


def serialize_config(config: CLIConfig) -> str:
    """Serialize a config to YAML with camelCase keys, omitting unset values."""
    data = config.model_dump(by_alias=True, exclude_none=True)
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def write_config_to_file(config: CLIConfig) -> None:
    """Persist a config to the config file.

    Raises:
        FileSystemError: If the file cannot be written.
    """
    try:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_FILE.write_text(serialize_config(config))
        # Restrict permissions to owner only
        CONFIG_FILE.chmod(0o600)
    except OSError as e:
        raise FileSystemError(str(CONFIG_FILE), write=True, reason=str(e)) from e
    logger.debug(f"Wrote config to {CONFIG_FILE}")


def delete_config_file() -> None:
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
