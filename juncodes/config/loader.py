"""Site config from YAML, with ${VAR} expansion from the environment."""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import SiteConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "juncodes.yaml"


def _search_paths() -> list[Path]:
    return [Path(CONFIG_FILENAME), Path.home() / ".juncodes" / "config.yaml"]


def _read_mapping(path: Path) -> dict[str, Any] | None:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping at the top level")
    return _expand_env_vars(raw)


def load_config(cli_path: str | None = None) -> SiteConfig:
    """Resolve the site config.

    An explicit path must exist. Otherwise ./juncodes.yaml, then
    ~/.juncodes/config.yaml, are tried in turn; empty files are skipped and
    the defaults apply when nothing is found.
    """
    if cli_path is not None and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    candidates = [Path(cli_path)] if cli_path else []
    candidates += [p for p in _search_paths() if p.is_file()]

    for path in candidates:
        data = _read_mapping(path)
        if data is None:
            continue
        try:
            config = SiteConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("Loaded config from %s", path)
        return config

    logger.debug("No config file found, using defaults")
    return SiteConfig()


_ENV_REF_RE = re.compile(r"\$\{(\w+)\}")


def _expand_env_vars(value: Any) -> Any:
    """Replace ${VAR} in every string of a parsed YAML tree. Unset vars become empty strings."""
    if isinstance(value, dict):
        return {key: _expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    if not isinstance(value, str):
        return value
    return _ENV_REF_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)


# Default YAML template for `juncodes config init`
DEFAULT_CONFIG_TEMPLATE = """\
# juncodes.yaml

# Content directories
content:
  base_dir: "src/content"      # one subdirectory per content kind (blog, jobs)
  extension: ".md"

# Markdown rendering
render:
  words_per_minute: 200
  languages:                   # fenced code languages that get highlighted
    - typescript
    - json
    - rust
    - kotlin
    - latex
    - zsh
    - terraform
    - java
    - diff
    - python
    - bash
    - javascript
    - yaml
    - toml
  highlight_style: "default"   # any Pygments style name
  math_errors: "raise"         # raise | source
  unique_heading_ids: true

# Deployments that show unpublished posts
beta_hosts:
  - "beta.jun.codes"

# Logging
log_level: "info"              # debug | info | warn | error
"""
