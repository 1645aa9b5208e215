"""Utilities."""

from .config import Config, get_config, reset_config

__all__ = ['Config', 'get_config', 'reset_config']
