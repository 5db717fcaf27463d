"""Configuration."""

from task_status_checker.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
