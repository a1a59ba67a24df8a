"""IRC Minutes configuration via Pydantic BaseSettings.

All settings load from environment variables with the IRCMINUTES_ prefix.
For example, IRCMINUTES_LOGO_URL sets logo_url.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class MinutesSettings(BaseSettings):
    """Settings for the converter, the MCP server and the command line.

    Attributes:
        logo_url: Image shown at the top of the minutes.
        logo_alt: Alt text of the logo image.
        transcript_pattern: Default glob used by batch conversion.
        log_level: Level of the ircminutes loggers.
    """

    model_config = SettingsConfigDict(
        env_prefix="IRCMINUTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logo_url: str = "https://www.w3.org/Icons/w3c_home"
    logo_alt: str = "W3C Logo"
    transcript_pattern: str = "*.txt"
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> MinutesSettings:
    return MinutesSettings()
