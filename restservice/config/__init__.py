"""Configuration module for restservice."""

from .settings import Settings, parse_port, resolve_port, settings

__all__ = ["Settings", "parse_port", "resolve_port", "settings"]
