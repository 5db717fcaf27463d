"""Application settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    data_dir: Path = Path(".alfredo")
    tasks_dir_name: str = "tasks"
    checkpoints_dir_name: str = "checkpoints"
    reinject_threshold: int = Field(default=5, ge=1)
    focus_auto_initialize: bool = True

    model_config = SettingsConfigDict(
        env_prefix="TASK_STATUS_",
        extra="ignore",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
    )

    @property
    def tasks_dir(self) -> Path:
        return self.data_dir / self.tasks_dir_name

    @property
    def checkpoints_dir(self) -> Path:
        return self.data_dir / self.checkpoints_dir_name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
