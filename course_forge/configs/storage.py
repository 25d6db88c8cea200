"""
Saved content storage configuration.

Dependencies: pydantic_settings
System role: Result store selection and location
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Result store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    backend: Literal["memory", "file"] = Field(
        default="file",
        description="Result store implementation",
    )
    file_path: str = Field(
        default=".course_forge/saved-contents.json",
        description="JSON document used by the file-backed store",
    )
    key: str = Field(
        default="euron-saved-contents",
        description="Key holding the saved content list inside the document",
    )
