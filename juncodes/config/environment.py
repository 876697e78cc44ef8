"""Deployment environment detection."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .models import SiteConfig

_HOST_VARS = ("VERCEL_URL", "NEXT_PUBLIC_VERCEL_URL")


def is_beta_mode(
    config: SiteConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """True for local development and beta deployments, where drafts are shown."""
    env = os.environ if environ is None else environ
    hosts = (config or SiteConfig()).beta_hosts

    if env.get("JUNCODES_ENV") == "development":
        return True
    return any(env.get(var) in hosts for var in _HOST_VARS)
