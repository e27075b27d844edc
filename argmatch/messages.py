# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Message templates for user-facing parse errors.

`MessageCatalog` holds one `str.format`-style template per message. Hosts that
localize their messages override individual fields, usually through the
`messages` table of the settings file. Unknown placeholders are left in place
instead of raising, so a mistyped template degrades to an odd message rather
than a crash in the middle of parsing.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def format_template(template: str, **arguments: Any) -> str:
    """Format `template`, leaving unknown placeholders untouched."""
    return template.format_map(_KeepMissing(arguments))


class MessageCatalog(BaseModel):
    """Templates for every message argmatch can produce."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    argument_missing: str = "Missing argument '{argument_format}'."
    argument_invalid: str = "Invalid argument '{argument}'."
    argument_unexpected: str = "Unexpected argument '{argument}'."
    argument_rejected: str = "Argument '{argument}' is not allowed here."
    invalid_value: str = "Invalid value '{argument}' for {argument_name}: {reason}"
    invalid_choice: str = "Invalid choice '{argument}'. Expected one of: {choices}."
    candidate_missing: str = "Missing user '{argument_format}'."
    candidate_not_found: str = "No user found for '{argument}'."
    candidate_id_invalid: str = "Invalid user id '{argument}'."
    ambiguous_name: str = "There are multiple matches for the name '{name}'!"
    ambiguous_name_entry: str = "  - {name} ({id})"
    ambiguous_name_more: str = "  ...and {count} more"

    def render(self, key: str, **arguments: Any) -> str:
        """Render the template stored under `key` with the given arguments."""
        return format_template(getattr(self, key), **arguments)
