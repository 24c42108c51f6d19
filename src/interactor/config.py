"""Centralized interactor configuration.

All settings are read from INTERACTOR_-prefixed environment variables (or a
.env.interactor file). Every field has a default, so a bare judge sandbox
runs the standard 50-move puzzle reading answer.txt from the working
directory.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INTERACTOR_",
        env_file=".env.interactor", env_file_encoding="utf-8",
    )

    # Game
    moves_limit: int = 50

    # Initial position: "wk wq bk" square tokens
    answer_path: str = "answer.txt"

    # Logging (stderr; stdout belongs to the solver protocol)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
