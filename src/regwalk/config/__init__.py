"""Configuration for regwalk runs."""

from regwalk.config.settings import WalkSettings, load_settings

__all__ = ["WalkSettings", "load_settings"]
