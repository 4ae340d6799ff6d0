"""Configuration management for AdminView"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from adminview.utils.constants import ActionLogQuery, GridNames, PageOptionKeys, SiteNamePosition


@dataclass
class Config:
    """Application configuration"""

    app_name: str = "AdminView"
    organization_name: str = "AdminView"
    version: str = "1.0.0"

    # Window settings
    window_width: int = 1000
    window_height: int = 640
    window_min_width: int = 640
    window_min_height: int = 400

    # Window titles: site name before/after the page title, or left out
    site_name: str = "AdminView"
    sitename_pagetitles: int = SiteNamePosition.NONE

    # Grid
    form_name: str = GridNames.DEFAULT_FORM
    latest_actions_count: int = ActionLogQuery.DEFAULT_COUNT
    # Page-level options store, e.g. {"js-multiselect": {"formName": "..."}}
    page_options: Dict[str, Any] = field(default_factory=dict)

    # Data
    action_log_file: Optional[str] = None

    # Logging
    log_dir: Optional[str] = None
    log_level: str = "INFO"


def load_config() -> Config:
    """Load configuration (currently returns defaults)"""
    config = Config()

    app_dir = Path.home() / '.adminview'
    app_dir.mkdir(exist_ok=True)

    config.log_dir = str(app_dir / 'logs')
    Path(config.log_dir).mkdir(exist_ok=True)

    return config


def resolve_form_name(page_options: Optional[Mapping[str, Any]] = None,
                      default: str = GridNames.DEFAULT_FORM) -> str:
    """
    Pick the container a grid selection controller binds to.

    Args:
        page_options: Page-level options store, e.g.
            ``{"js-multiselect": {"formName": "articleList"}}``
        default: Form name used when no override is present

    Returns:
        The overriding ``formName`` if one is set, otherwise ``default``
    """
    if not page_options:
        return default
    multiselect = page_options.get(PageOptionKeys.MULTISELECT) or {}
    return multiselect.get(PageOptionKeys.FORM_NAME) or default
