"""Conversions between series commands, entities and stored records.

Every function here is pure: timestamps and the expansion serializer come
in as arguments, nothing is read from the environment.
"""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from application.commands import CreateSeriesCommand, UpdateSeriesCommand
from domain.entities import Expansion, Series, SeriesRecord
from domain.exceptions import InvalidDataException

DEFAULT_EXPANSION_SEPARATOR = ", "


class ExpansionSerializer:
    """
    Flattens expansions into the delimited string kept by the store.
    
    Only expansion codes are written, so reading back yields code-only
    expansions. Codes that would not read back unchanged are rejected.
    """

    def __init__(self, separator: str = DEFAULT_EXPANSION_SEPARATOR):
        if not separator or not separator.strip():
            raise ValueError("Expansion separator must contain a non-blank character")
        self.separator = separator

    def serialize(self, expansions: Sequence[Expansion]) -> Optional[str]:
        if not expansions:
            return None
        for expansion in expansions:
            self._check_code(expansion.code)
        return self.separator.join(expansion.code for expansion in expansions)

    def deserialize(self, raw: Optional[str]) -> list[Expansion]:
        if not raw:
            return []
        delimiter = self.separator.strip()
        return [
            Expansion(code=fragment.strip())
            for fragment in raw.split(delimiter)
            if fragment.strip()
        ]

    def _check_code(self, code: str) -> None:
        delimiter = self.separator.strip()
        if code != code.strip():
            raise InvalidDataException(
                "Expansion code must not have leading or trailing whitespace", code=code
            )
        if delimiter in code:
            raise InvalidDataException(
                f"Expansion code must not contain '{delimiter}'", code=code
            )


def create_command_to_domain(command: CreateSeriesCommand, now: datetime) -> Series:
    """Build the pending series validated before creation."""
    return Series(
        id=None,
        code=command.code,
        name=command.name,
        release_year=command.release_year,
        image_url=command.image_url,
        expansions=list(command.expansions),
        created_at=now,
        updated_at=now,
    )


def create_command_to_record(
    command: CreateSeriesCommand,
    now: datetime,
    serializer: ExpansionSerializer,
) -> SeriesRecord:
    """Build the record inserted on creation."""
    return SeriesRecord(
        id=None,
        code=command.code,
        name=command.name,
        release_year=command.release_year,
        image_url=command.image_url,
        expansions=serializer.serialize(command.expansions),
        created_at=now,
        updated_at=now,
    )


def update_command_to_domain(command: UpdateSeriesCommand, now: datetime) -> Series:
    """
    Build the candidate validated before an update.
    
    The candidate keeps the command's own id, which may be None.
    """
    return Series(
        id=command.id,
        code=command.code,
        name=command.name,
        release_year=command.release_year,
        image_url=command.image_url,
        expansions=list(command.expansions),
        created_at=None,
        updated_at=now,
    )


def update_command_to_record(
    command: UpdateSeriesCommand,
    series_id: UUID,
    now: datetime,
    serializer: ExpansionSerializer,
) -> SeriesRecord:
    """Build the record upserted for the target series."""
    return SeriesRecord(
        id=series_id,
        code=command.code,
        name=command.name,
        release_year=command.release_year,
        image_url=command.image_url,
        expansions=serializer.serialize(command.expansions),
        created_at=None,
        updated_at=now,
    )


def record_to_domain(record: SeriesRecord, serializer: ExpansionSerializer) -> Series:
    """Rebuild a series from its stored record."""
    return Series(
        id=record.id,
        code=record.code,
        name=record.name,
        release_year=record.release_year,
        image_url=record.image_url,
        expansions=serializer.deserialize(record.expansions),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )
