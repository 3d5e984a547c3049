"""Account configuration state manager.

`CLIConfiguration` owns the in-memory config document and mediates between
configuration sourced from environment variables and the YAML config file.
Environment-sourced configuration is never written back to disk.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from ..constants import AUTH_METHODS, DEFAULT_MODES, ENVIRONMENTS, MIN_HTTP_TIMEOUT
from ..errors import ConfigError
from ..logger import LogCallbacks, make_typed_logger
from ..types import AccountAuth, CLIAccount, CLIConfig, CLIOptions, TokenInfo
from .config_file import (
    config_file_exists,
    config_file_is_blank,
    delete_config_file,
    load_config_from_file,
    write_config_to_file,
)
from .environment import get_valid_env, load_config_from_environment

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"^\d+$")
_WHITESPACE = re.compile(r"\s")


class CLIConfiguration:
    """In-memory account configuration with file and environment backends."""

    def __init__(self) -> None:
        self.options = CLIOptions()
        self.use_env_config = False
        self.config: CLIConfig | None = None

    def init(self, options: CLIOptions | None = None) -> CLIConfig | None:
        self.options = options or CLIOptions()
        return self.load()

    def load(self) -> CLIConfig | None:
        """Load configuration from the environment or the config file.

        When ``use_env`` is set and the environment describes an account,
        that configuration wins; otherwise the config file is read. A missing
        config file yields an empty config.

        Returns:
            The loaded config.
        """
        if self.options.use_env:
            config_from_env = load_config_from_environment()
            if config_from_env:
                account_id = config_from_env.accounts[0].account_id
                logger.debug(f"Loaded config from environment for account {account_id}")
                self.use_env_config = True
                self.config = config_from_env
                return self.config
            logger.debug("No usable config in environment, falling back to file")

        config_from_file = load_config_from_file()
        logger.debug("Loaded config from file")
        if config_from_file is None:
            logger.debug("Config file is empty, starting with no accounts")
            config_from_file = CLIConfig(accounts=[])
        self.use_env_config = False
        self.config = config_from_file
        return self.config

    def config_is_empty(self) -> bool:
        """Check if there is no meaningful configuration on disk."""
        if not config_file_exists() or config_file_is_blank():
            return True
        self.load()
        if self.config is None:
            return True
        data = self.config.model_dump(exclude_none=True)
        return set(data) <= {"accounts"} and not data.get("accounts")

    def delete(self) -> None:
        """Delete the config file if it holds nothing worth keeping."""
        if not self.use_env_config and self.config_is_empty():
            delete_config_file()
            self.config = None

    def write(self, updated_config: CLIConfig | None = None) -> CLIConfig | None:
        """Persist the config, optionally replacing it first.

        Environment-sourced configuration is never written.
        """
        if not self.use_env_config:
            if updated_config is not None:
                self.config = updated_config
            if self.config is not None:
                write_config_to_file(self.config)
        return self.config

    def validate(self, log_callbacks: LogCallbacks | None = None) -> bool:
        """Check the account list for structural and uniqueness problems.

        Problems are reported through ``log_callbacks`` keyed by: no_config,
        no_config_accounts, empty_account_config, no_account_id,
        duplicate_account_ids, duplicate_account_names, name_contains_spaces.

        Returns:
            True if the config is valid.
        """
        log = make_typed_logger(log_callbacks, "config.cli_configuration.validate")

        if self.config is None:
            log("no_config")
            return False
        if not isinstance(self.config.accounts, list):
            log("no_config_accounts")
            return False

        account_ids: set[int] = set()
        account_names: set[str] = set()

        for account in self.config.accounts:
            if account is None:
                log("empty_account_config")
                return False
            if not account.account_id:
                log("no_account_id")
                return False
            if account.account_id in account_ids:
                log("duplicate_account_ids", account_id=account.account_id)
                return False
            if account.name:
                if account.name in account_names:
                    log("duplicate_account_names", account_name=account.name)
                    return False
                if _WHITESPACE.search(account.name):
                    log("name_contains_spaces", account_name=account.name)
                    return False
                account_names.add(account.name)
            account_ids.add(account.account_id)

        return True

    def _accounts(self) -> list[CLIAccount]:
        if self.config is None or not self.config.accounts:
            return []
        return [account for account in self.config.accounts if account is not None]

    def get_account(self, name_or_id: str | int | None = None) -> CLIAccount | None:
        """Find an account by name or ID, defaulting to the default account.

        Integers and all-digit strings are treated as account IDs, anything
        else as an account name.
        """
        if self.config is None:
            return None

        to_check = name_or_id if name_or_id else self.get_default_account()
        if not to_check:
            return None

        name: str | None = None
        account_id: int | None = None
        if isinstance(to_check, int):
            account_id = to_check
        elif _DIGITS.match(to_check):
            account_id = int(to_check)
        else:
            name = to_check

        for account in self._accounts():
            if name is not None and account.name == name:
                return account
            if account_id is not None and account.account_id == account_id:
                return account
        return None

    def get_account_id(self, name_or_id: str | int | None) -> int | None:
        account = self.get_account(name_or_id)
        return account.account_id if account else None

    def get_default_account(self) -> str | int | None:
        if self.config and self.config.default_account:
            return self.config.default_account
        return None

    def get_resolved_default_account_for_cwd(
        self, name_or_id: str | int | None = None, cwd: str | Path | None = None
    ) -> CLIAccount | None:
        """Resolve the account to use for a working directory.

        An explicit name or ID wins. Otherwise the closest entry in
        ``default_account_overrides`` for ``cwd`` or one of its parents is
        used, falling back to the default account.
        """
        if name_or_id:
            return self.get_account(name_or_id)

        overrides = self.config.default_account_overrides if self.config else None
        if overrides:
            directory = Path(cwd or os.getcwd()).expanduser().resolve()
            resolved = {
                Path(path).expanduser().resolve(): account
                for path, account in overrides.items()
            }
            for candidate in (directory, *directory.parents):
                if candidate in resolved:
                    logger.debug(f"Using default account override for {candidate}")
                    return self.get_account(resolved[candidate])

        return self.get_account()

    def get_config_account_index(self, account_id: int) -> int:
        if self.config is None or not self.config.accounts:
            return -1
        for index, account in enumerate(self.config.accounts):
            if account is not None and account.account_id == account_id:
                return index
        return -1

    def is_account_in_config(self, name_or_id: str | int) -> bool:
        return self.config is not None and bool(self.get_account_id(name_or_id))

    def get_and_load_config_if_needed(
        self, options: CLIOptions | None = None
    ) -> CLIConfig:
        if self.config is None:
            self.init(options)
        return self.config  # type: ignore[return-value]

    def get_env(self, name_or_id: str | int | None = None) -> str:
        """Get the environment for an account, falling back to the config's."""
        account = self.get_account(name_or_id)
        if account and account.account_id and account.env:
            return account.env
        if self.config and self.config.env:
            return self.config.env
        return ENVIRONMENTS["PROD"]

    # ==================== UPDATES ====================

    def _require_config(self) -> CLIConfig:
        if self.config is None:
            raise ConfigError("No config loaded.")
        return self.config

    def update_account(
        self,
        account_id: int | None,
        *,
        name: str | None = None,
        env: str | None = None,
        auth_type: str | None = None,
        api_key: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        scopes: list[str] | None = None,
        token_info: TokenInfo | None = None,
        default_mode: str | None = None,
        personal_access_key: str | None = None,
        sandbox_account_type: str | None = None,
        parent_account_id: int | None = None,
        write_update: bool = True,
    ) -> CLIAccount | None:
        """Create or update an account record.

        Every argument that is not None overrides the stored value; the rest
        of the existing record is kept.

        Args:
            account_id: ID of the account to update or create.
            write_update: Persist the config after updating.

        Returns:
            The updated account, or None if no config is loaded.

        Raises:
            ConfigError: If no account ID is given or the default mode is invalid.
        """
        if not account_id:
            raise ConfigError("An account ID is required to update the config.")
        if self.config is None:
            logger.debug("No config to update")
            return None

        current = self.get_account(account_id)
        next_account = current.model_copy(deep=True) if current else CLIAccount()

        auth: AccountAuth | None = None
        auth_fields = {
            "client_id": client_id,
            "client_secret": client_secret,
            "scopes": scopes,
            "token_info": token_info,
        }
        if any(value is not None for value in auth_fields.values()):
            auth = next_account.auth.model_copy() if next_account.auth else AccountAuth()
            for field, value in auth_fields.items():
                if value is not None:
                    setattr(auth, field, value)

        updated_env = get_valid_env(env or (current.env if current else None))

        updated_default_mode = default_mode.lower() if default_mode else None
        if updated_default_mode is not None and updated_default_mode not in DEFAULT_MODES:
            raise ConfigError(
                f'The mode "{default_mode}" is invalid. Valid values are: '
                f"{', '.join(DEFAULT_MODES.values())}."
            )

        updates = {
            "name": name,
            "env": updated_env,
            "account_id": account_id,
            "auth_type": auth_type,
            "auth": auth,
        }
        for field, value in updates.items():
            if value is not None:
                setattr(next_account, field, value)

        # API keys are only kept for accounts that authenticate with one
        if next_account.auth_type == AUTH_METHODS["API_KEY"] and api_key is not None:
            next_account.api_key = api_key

        remaining = {
            "default_mode": DEFAULT_MODES.get(updated_default_mode or ""),
            "personal_access_key": personal_access_key,
            "sandbox_account_type": sandbox_account_type,
            "parent_account_id": parent_account_id,
        }
        for field, value in remaining.items():
            if value is not None:
                setattr(next_account, field, value)

        index = self.get_config_account_index(account_id)
        if index >= 0:
            logger.debug(f"Updating config for account {account_id}")
            self.config.accounts[index] = next_account  # type: ignore[index]
        else:
            logger.debug(f"Adding config entry for account {account_id}")
            if self.config.accounts is None:
                self.config.accounts = [next_account]
            else:
                self.config.accounts.append(next_account)

        if write_update:
            self.write()

        return next_account

    def update_default_account(self, default_account: str | int) -> CLIConfig | None:
        """Set the default account by name or ID.

        Raises:
            ConfigError: If no config is loaded or the value is invalid.
        """
        config = self._require_config()
        if (
            not default_account
            or isinstance(default_account, bool)
            or not isinstance(default_account, (str, int))
        ):
            raise ConfigError(
                "A 'default_account' with value of number or string is required "
                "to update the config."
            )
        config.default_account = default_account
        return self.write()

    def rename_account(self, current_name: str, new_name: str) -> None:
        """Rename an account, moving the default pointer along with it.

        Raises:
            ConfigError: If the account does not exist or the new name is
                invalid or already in use.
        """
        self._require_config()
        account_id = self.get_account_id(current_name)
        account = self.get_account(account_id) if account_id else None
        if account is None or account_id is None:
            raise ConfigError(f"Cannot find account with identifier {current_name}")

        if not new_name or _WHITESPACE.search(new_name):
            raise ConfigError(f'The account name "{new_name}" cannot contain spaces.')
        existing = self.get_account(new_name)
        if existing is not None and existing.account_id != account_id:
            raise ConfigError(f'An account named "{new_name}" already exists.')

        self.update_account(account_id, name=new_name)

        if account.name and account.name == self.get_default_account():
            self.update_default_account(new_name)

    def remove_account_from_config(self, name_or_id: str | int) -> bool:
        """Remove an account.

        Returns:
            True if the removed account was the default account. The default
            pointer is cleared in that case.

        Raises:
            ConfigError: If no config is loaded or the account does not exist.
        """
        config = self._require_config()
        account_id = self.get_account_id(name_or_id)
        if not account_id:
            raise ConfigError(
                f"Unable to find account for {name_or_id}, cannot remove it."
            )

        removed_account_is_default = False
        account = self.get_account(account_id)
        if account is not None:
            logger.debug(f"Removing account {account_id} from config")
            index = self.get_config_account_index(account_id)
            config.accounts.pop(index)  # type: ignore[union-attr]

            default = self.get_default_account()
            if default is not None and default in (
                account.name,
                account.account_id,
                str(account.account_id),
            ):
                removed_account_is_default = True
                config.default_account = None

            self.write()

        return removed_account_is_default

    def update_default_mode(self, default_mode: str) -> CLIConfig | None:
        """Set the default mode ("publish" or "draft").

        Raises:
            ConfigError: If no config is loaded or the mode is invalid.
        """
        config = self._require_config()
        valid_modes = list(DEFAULT_MODES.values())
        if not default_mode or default_mode not in valid_modes:
            raise ConfigError(
                f'The mode "{default_mode}" is invalid. Valid values are: '
                f"{', '.join(valid_modes)}."
            )
        config.default_mode = default_mode
        return self.write()

    def update_http_timeout(self, timeout: str | int) -> CLIConfig | None:
        """Set the HTTP timeout in milliseconds.

        Raises:
            ConfigError: If no config is loaded or the timeout is not an
                integer of at least MIN_HTTP_TIMEOUT.
        """
        config = self._require_config()
        try:
            parsed_timeout = int(timeout)
        except (TypeError, ValueError):
            parsed_timeout = None
        if parsed_timeout is None or parsed_timeout < MIN_HTTP_TIMEOUT:
            raise ConfigError(
                f"The value {timeout} is invalid. The value must be a number "
                f"greater than {MIN_HTTP_TIMEOUT}."
            )
        config.http_timeout = parsed_timeout
        return self.write()

    def update_allow_usage_tracking(self, is_enabled: bool) -> CLIConfig | None:
        """Enable or disable usage tracking.

        Raises:
            ConfigError: If no config is loaded or the value is not a bool.
        """
        config = self._require_config()
        if not isinstance(is_enabled, bool):
            raise ConfigError(
                f"Unable to update allowUsageTracking. The value {is_enabled} is "
                "invalid. The value must be a boolean."
            )
        config.allow_usage_tracking = is_enabled
        return self.write()


cli_configuration = CLIConfiguration()
