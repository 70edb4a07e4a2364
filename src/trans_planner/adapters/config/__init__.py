"""Configuration adapters."""

from trans_planner.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
