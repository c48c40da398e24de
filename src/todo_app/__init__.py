"""Application-wide configuration and logging helpers."""

from .config import Config, load_config
from .logger import setup_logger

__all__ = ["Config", "load_config", "setup_logger"]
