from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from js2ts.config.groups import ConversionConfig, ObservabilityConfig


class Settings(BaseSettings):
    """
    js2ts Application Settings

    Environment variables use the JS2TS_ prefix.
    Example: JS2TS_RECURSIVE=true, JS2TS_TARGET_SUFFIX=.tsx

    Grouped access:
        settings.conversion     # ConversionConfig
        settings.observability  # ObservabilityConfig
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JS2TS_",
        extra="ignore",
    )

    # ========================================================================
    # Grouped Config Accessors
    # ========================================================================

    @cached_property
    def conversion(self) -> ConversionConfig:
        """Conversion settings group."""
        return ConversionConfig(
            source_suffix=self.source_suffix,
            target_suffix=self.target_suffix,
            recursive=self.recursive,
            overwrite=self.overwrite,
            continue_on_error=self.continue_on_error,
            grammar=self.grammar,
            encoding=self.encoding,
        )

    @cached_property
    def observability(self) -> ObservabilityConfig:
        """Logging settings group."""
        return ObservabilityConfig(log_level=self.log_level, log_format=self.log_format)

    # ========================================================================
    # Conversion
    # ========================================================================
    source_suffix: str = ".js"
    target_suffix: str = ".ts"
    recursive: bool = False
    overwrite: bool = True
    continue_on_error: bool = True
    grammar: str = "tsx"
    encoding: str = "utf-8"

    # ========================================================================
    # Observability
    # ========================================================================
    log_level: str = "INFO"
    log_format: str = "console"


def get_settings() -> Settings:
    """Load settings from the environment (and .env, when present)."""
    return Settings()
