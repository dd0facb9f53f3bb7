"""
Process-wide configuration for csv-normalize.

``NormalizerConfig`` is a frozen Pydantic model holding the constants the
pipeline needs: the source/target time zones for timestamp conversion,
the zip code width, the two-digit-year cutoff and the read chunk size.

There are no CLI flags or environment variables; the CLI always uses
``DEFAULT_CONFIG``. Library callers and tests may build their own
instance, but once built it cannot be changed.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

from csv_normalize.exceptions import ConfigValidationError

US_PACIFIC = "America/Los_Angeles"
US_EASTERN = "America/New_York"


class NormalizerConfig(BaseModel):
    """Immutable settings for one normalization run."""

    model_config = ConfigDict(frozen=True)

    source_zone: str = Field(
        US_PACIFIC, description="Zone the input timestamps are wall-clock times in"
    )
    target_zone: str = Field(
        US_EASTERN, description="Zone the output timestamps are expressed in"
    )
    zip_width: int = Field(5, ge=1, description="Width zip codes are zero-padded to")
    two_digit_year_cutoff: int = Field(
        60,
        ge=0,
        le=99,
        description="Two-digit years above this are 19xx, the rest 20xx",
    )
    chunk_size: int = Field(
        64 * 1024, gt=0, description="Characters read from the input per chunk"
    )

    @field_validator("source_zone", "target_zone")
    @classmethod
    def _check_zone(cls, value: str) -> str:
        """Reject zone names the tz database does not know."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigValidationError(f"Unknown time zone: '{value}'") from e
        return value

    @property
    def source_tz(self) -> ZoneInfo:
        return ZoneInfo(self.source_zone)

    @property
    def target_tz(self) -> ZoneInfo:
        return ZoneInfo(self.target_zone)


DEFAULT_CONFIG = NormalizerConfig()
