"""Account configuration: file, environment, and in-memory state."""

from .cli_configuration import CLIConfiguration, cli_configuration
from .config_file import (
    config_file_exists,
    config_file_is_blank,
    delete_config_file,
    load_config_from_file,
    write_config_to_file,
)
from .environment import get_valid_env, load_config_from_environment

__all__ = [
    # State
    "CLIConfiguration",
    "cli_configuration",
    # File
    "config_file_exists",
    "config_file_is_blank",
    "delete_config_file",
    "load_config_from_file",
    "write_config_to_file",
    # Environment
    "get_valid_env",
    "load_config_from_environment",
]
