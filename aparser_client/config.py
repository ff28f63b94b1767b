"""
A-Parser connection settings.

Loaded from ``APARSER_*`` environment variables or a local ``.env`` file and
consumed by ``AparserClient.from_settings``.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class AparserSettings(BaseSettings):
    """A-Parser configuration from environment."""

    url: str = ""
    password: str = ""
    timeout: Optional[float] = None

    class Config:
        env_prefix = "APARSER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
