"""Configuration management for ydt."""

from .config import YdtConfig
from .defaults import BROWSER_USER_AGENT, PROJECT_USER_AGENT, create_default_config

__all__ = ["YdtConfig", "create_default_config", "PROJECT_USER_AGENT", "BROWSER_USER_AGENT"]
