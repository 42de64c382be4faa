"""
Configuration management for the GitHub organization client.
"""

from .config_loader import ConfigLoader, DEFAULT_CONFIG

__all__ = ["ConfigLoader", "DEFAULT_CONFIG"]
