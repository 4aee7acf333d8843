"""Configuration model for the normalizer command line."""

import os
from typing import Literal

from pydantic import BaseModel, Field

LOG_LEVEL_ENV = "TEST_EVENT_NORMALIZER_LOG_LEVEL"


class NormalizerConfig(BaseModel):
    """Runtime options for normalizing lifecycle events."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level for diagnostics on stderr"
    )
    indent: int = Field(default=2, ge=0, description="JSON output indent")
    strict_duplicates: bool = Field(
        default=False,
        description="Fail instead of taking the first match on duplicate names",
    )

    @classmethod
    def from_options(
        cls, log_level: str, indent: int, strict_duplicates: bool
    ) -> "NormalizerConfig":
        """Build config from CLI options, letting the environment set the level."""
        level = os.environ.get(LOG_LEVEL_ENV) or log_level
        return cls(
            log_level=level.upper(),  # type: ignore[arg-type]
            indent=indent,
            strict_duplicates=strict_duplicates,
        )
