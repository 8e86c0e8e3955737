"""Default configuration values for ydt."""

from ydt import __url__, __version__

from .config import YdtConfig

PROJECT_USER_AGENT = f"ydt/{__version__} (+{__url__})"
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36"
)


def create_default_config(**overrides) -> YdtConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        YdtConfig with defaults and overrides applied

    Example:
        config = create_default_config(request_timeout=5.0)
    """
    values = {
        "project_user_agent": PROJECT_USER_AGENT,
        "browser_user_agent": BROWSER_USER_AGENT,
    }
    values.update(overrides)
    return YdtConfig(**values)
