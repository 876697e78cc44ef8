from .environment import is_beta_mode
from .loader import load_config
from .models import (
    ContentConfig,
    RenderConfig,
    SiteConfig,
)

__all__ = [
    "ContentConfig",
    "RenderConfig",
    "SiteConfig",
    "is_beta_mode",
    "load_config",
]
