"""Root configuration model for Perses."""

from pydantic import BaseModel, ConfigDict, Field

from perses.config.models.database import Database

ENV_PREFIX = "PERSES"


class Config(BaseModel):
    """Root configuration object.

    Built fresh by each resolution and immutable once returned.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    database: Database = Field(description="Database backend configuration")
