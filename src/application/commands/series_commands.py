"""Commands for Series write operations.

Commands are transient, immutable inputs for a single use case call. They
validate their own fields at construction, before any use case logic runs.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from domain.entities import Expansion
from domain.exceptions import InvalidDataException

MIN_RELEASE_YEAR = 1998
MAX_CODE_LENGTH = 10
MAX_NAME_LENGTH = 100
MAX_IMAGE_URL_LENGTH = 255


def _validate_series_fields(
    code: str, name: str, release_year: int, image_url: Optional[str]
) -> None:
    """Check the fields shared by create and update commands."""
    if not isinstance(code, str) or not code.strip():
        raise InvalidDataException("Code must not be blank")
    if not isinstance(name, str) or not name.strip():
        raise InvalidDataException("Name must not be blank")
    if len(code) > MAX_CODE_LENGTH:
        raise InvalidDataException(
            f"Code must have at most {MAX_CODE_LENGTH} characters", code=code
        )
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidDataException(
            f"Name must have at most {MAX_NAME_LENGTH} characters", name=name
        )
    # bool is an int subclass
    if not isinstance(release_year, int) or isinstance(release_year, bool):
        raise InvalidDataException("Release year must be an integer")
    if release_year <= MIN_RELEASE_YEAR:
        raise InvalidDataException(
            f"Release year must be greater than {MIN_RELEASE_YEAR}",
            release_year=release_year,
        )
    if image_url is not None and len(image_url) > MAX_IMAGE_URL_LENGTH:
        raise InvalidDataException(
            f"Image URL must have at most {MAX_IMAGE_URL_LENGTH} characters"
        )


@dataclass(frozen=True)
class CreateSeriesCommand:
    """
    Request to create a new series.
    
    Raises:
        InvalidDataException: If code or name is blank or too long, or the
            release year is not after 1998, or the image URL is too long
    """

    code: str
    name: str
    release_year: int
    image_url: Optional[str] = None
    expansions: tuple[Expansion, ...] = ()

    def __post_init__(self) -> None:
        _validate_series_fields(self.code, self.name, self.release_year, self.image_url)
        object.__setattr__(self, "expansions", tuple(self.expansions))


@dataclass(frozen=True)
class UpdateSeriesCommand:
    """
    Request to replace the fields of an existing series.
    
    `id` may be None here; the update validators report it as invalid data.
    """

    code: str
    name: str
    release_year: int
    id: Optional[UUID] = None
    image_url: Optional[str] = None
    expansions: tuple[Expansion, ...] = ()

    def __post_init__(self) -> None:
        _validate_series_fields(self.code, self.name, self.release_year, self.image_url)
        object.__setattr__(self, "expansions", tuple(self.expansions))


@dataclass(frozen=True)
class DeleteSeriesCommand:
    """Request to delete a series by identifier."""

    id: UUID

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidDataException("Invalid series id")
