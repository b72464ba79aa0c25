"""Database backend configuration models."""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


class FileExtension(str, Enum):
    """Suffix of the files a file-backed database stores documents in."""

    YAML = "yaml"
    JSON = "json"


def _default_extension(value: Any) -> Any:
    # An unset extension falls back to YAML
    if value is None or value == "":
        return FileExtension.YAML
    return value


Extension = Annotated[FileExtension, BeforeValidator(_default_extension)]


class File(BaseModel):
    """Location of a file-backed database on disk."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    folder: str = Field(min_length=1, description="Directory holding the database files")
    file_extension: Extension = Field(
        default=FileExtension.YAML,
        description="Suffix used for the database files (yaml or json)",
    )


class Database(BaseModel):
    """Backend descriptor for the application database.

    Exactly which backend is in use is given by which field is set.
    Only the file backend exists today.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    file: File | None = Field(default=None, description="File-backed database")

    @model_validator(mode="after")
    def check_backend(self) -> "Database":
        """Require a backend to be configured."""
        if self.file is None:
            raise ValueError("you must specify the database configuration")
        return self
