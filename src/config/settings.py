"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use FEATUREGATE_ prefix (e.g., FEATUREGATE_IGNORE_FILENAME=.skip).

Settings can also be loaded from a .env file in the working directory.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use FEATUREGATE_ prefix. List values are given
    as JSON.

    Examples:
        FEATUREGATE_IGNORE_FILENAME=.buildignore
        FEATUREGATE_DEFAULT_SKIP='["node_modules", ".git"]'
        FEATUREGATE_EXTENSIONS='[".js", ".vue"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="FEATUREGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Skip-list configuration
    ignore_filename: str = Field(
        default=".featuregateignore",
        description="Name of the skip-list file read from the source root",
    )

    default_skip: List[str] = Field(
        default=["node_modules", "dist", ".git", ".DS_Store"],
        description="Entry names always left out of the output tree",
    )

    # Preprocessing configuration
    extensions: List[str] = Field(
        default=[".js", ".ts", ".jsx", ".py", ".txt", ".html", ".css"],
        description="File suffixes run through the preprocessor; others are copied unchanged",
    )

    encoding: str = Field(
        default="utf-8",
        description="Text encoding of preprocessed files",
    )

    @field_validator("extensions")
    @classmethod
    def extensions_normalize(cls, value: List[str]) -> List[str]:
        """Ensure every suffix carries its leading dot (e.g. 'js' -> '.js')"""
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]


# Singleton instance - import this in your code
appsettings = AppSettings()
