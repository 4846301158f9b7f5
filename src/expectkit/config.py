"""Framework configuration."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExpectkitSettings(BaseSettings):
    """Runtime settings for test discovery and reporting.

    Loads from environment variables automatically:
        EXPECTKIT_TEST_PREFIX, EXPECTKIT_VERBOSE, EXPECTKIT_COLOR
    """

    test_prefix: str = Field(default="test_", description="Method name prefix marking a test")
    verbose: bool = Field(default=False, description="Print every record instead of failures only")
    color: bool = Field(default=True, description="Color result kinds on capable terminals")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="EXPECTKIT_",
    )

    @field_validator("test_prefix")
    @classmethod
    def prefix_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("test_prefix must not be empty")
        return v


@lru_cache(maxsize=1)
def get_settings() -> ExpectkitSettings:
    """Settings loaded once from the environment."""
    return ExpectkitSettings()
