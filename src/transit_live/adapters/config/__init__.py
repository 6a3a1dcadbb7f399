"""Configuration adapters."""

from transit_live.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
