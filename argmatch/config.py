# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Settings and roster loaders for argmatch.

Settings are an explicit value: build an `ArgmatchSettings` once at startup and
pass it to the `ArgumentEngine`. Both settings and rosters can be loaded from
YAML or TOML files.

Example settings file (YAML):
    max_suggestions: 20
    ambiguous_max_entries: 5
    name_min_completion_input: 1
    debug_options: ["commands"]
    messages:
      candidate_not_found: "Aucun joueur '{argument}'."

Example roster file (YAML):
    users:
      - id: 1
        name: Anna
      - id: 2
        name: Annabelle
        display_name: "§bBelle"
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from argmatch.debug import DebugOptions
from argmatch.exceptions import ConfigError
from argmatch.logger import logger
from argmatch.messages import MessageCatalog
from argmatch.roster import Roster, User

DEFAULT_MAX_SUGGESTIONS = 20
DEFAULT_AMBIGUOUS_MAX_ENTRIES = 5
DEFAULT_NAME_MIN_COMPLETION_INPUT = 0
DEFAULT_ID_MIN_COMPLETION_INPUT = 3


class ArgmatchSettings(BaseModel):
    """Engine-wide settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_suggestions: int = Field(default=DEFAULT_MAX_SUGGESTIONS, ge=1)
    ambiguous_max_entries: int = Field(default=DEFAULT_AMBIGUOUS_MAX_ENTRIES, ge=1)
    name_min_completion_input: int = Field(
        default=DEFAULT_NAME_MIN_COMPLETION_INPUT, ge=0
    )
    id_min_completion_input: int = Field(default=DEFAULT_ID_MIN_COMPLETION_INPUT, ge=0)
    debug_options: tuple[str, ...] = ()
    messages: MessageCatalog = Field(default_factory=MessageCatalog)

    @field_validator("debug_options", mode="before")
    @classmethod
    def validate_debug_options(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        unknown = [
            option for option in value if option.strip().lower() not in DebugOptions.ALL
        ]
        if unknown:
            raise ValueError(
                f"Unknown debug options: {unknown}. "
                f"Must be one of: {', '.join(DebugOptions.ALL)}"
            )
        return tuple(option.strip().lower() for option in value)

    @property
    def debug(self) -> DebugOptions:
        return DebugOptions(self.debug_options)


def _read_file(file_path: Path | str) -> dict[str, Any]:
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse '{path}': {error}") from error

    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ConfigError(f"'{path}' must contain a mapping at the top level.")
    return raw_config


def load_settings(file_path: Path | str) -> ArgmatchSettings:
    """
    Load `ArgmatchSettings` from a YAML or TOML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file cannot be parsed or holds invalid settings.
    """
    raw_config = _read_file(file_path)
    try:
        settings = ArgmatchSettings.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid settings in '{file_path}':\n{error}") from error
    logger.debug("Loaded settings from '%s': %s", file_path, settings)
    return settings


def load_roster(file_path: Path | str) -> Roster:
    """
    Load a `Roster` of `User`s from a YAML or TOML file.

    The file must contain a `users` list; each entry needs at least `id` and `name`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file cannot be parsed or holds invalid users.
    """
    raw_config = _read_file(file_path)
    raw_users = raw_config.get("users")
    if not isinstance(raw_users, list):
        raise ConfigError(
            f"'{file_path}' must contain a 'users' list.\n"
            "Example:\n"
            "users:\n"
            "  - id: 1\n"
            "    name: 'Anna'"
        )
    try:
        users = [User.model_validate(entry) for entry in raw_users]
        roster = Roster(users)
    except (ValidationError, ValueError) as error:
        raise ConfigError(f"Invalid roster in '{file_path}':\n{error}") from error
    logger.debug("Loaded %d users from '%s'.", len(roster), file_path)
    return roster
