"""Pure mapping functions between commands, entities and records."""

from .series_mapper import (
    DEFAULT_EXPANSION_SEPARATOR,
    ExpansionSerializer,
    create_command_to_domain,
    create_command_to_record,
    record_to_domain,
    update_command_to_domain,
    update_command_to_record,
)

__all__ = [
    "DEFAULT_EXPANSION_SEPARATOR",
    "ExpansionSerializer",
    "create_command_to_domain",
    "create_command_to_record",
    "record_to_domain",
    "update_command_to_domain",
    "update_command_to_record",
]
