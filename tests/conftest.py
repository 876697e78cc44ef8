"""Shared test fixtures for juncodes."""

import textwrap
from pathlib import Path

import pytest

from juncodes.config.models import ContentConfig, SiteConfig


def make_post(
    title: str = "Hello",
    date: str = "2024-03-05",
    published: bool = True,
    tags: list[str] | None = None,
    body: str = "Some words here.",
    description: str = "A post",
) -> str:
    tags = ["rust"] if tags is None else tags
    tag_lines = "\n".join(f"  - {t}" for t in tags)
    return (
        "---\n"
        f"title: {title}\n"
        f"description: {description}\n"
        f"date: {date}\n"
        f"published: {'true' if published else 'false'}\n"
        "tags:\n"
        f"{tag_lines}\n"
        "---\n\n"
        f"{body}\n"
    )


SAMPLE_JOB = textwrap.dedent("""\
    ---
    title: Software Engineer
    company: Acme
    location: Oslo, Norway
    begin: 2021-08-01
    end: present
    type: full-time
    highlights:
      - Shipped the billing service
      - Mentored two interns
    skills:
      - Rust
      - TypeScript
    ---

    Worked on payments.
    """)


@pytest.fixture
def content_dir(tmp_path) -> Path:
    """A content root with empty blog/ and jobs/ directories."""
    root = tmp_path / "content"
    (root / "blog").mkdir(parents=True)
    (root / "jobs").mkdir()
    return root


@pytest.fixture
def site_config(content_dir) -> SiteConfig:
    return SiteConfig(content=ContentConfig(base_dir=str(content_dir)))


@pytest.fixture
def write_post(content_dir):
    def _write(slug: str, **kwargs) -> Path:
        path = content_dir / "blog" / f"{slug}.md"
        path.write_text(make_post(**kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _no_beta_env(monkeypatch):
    """Keep the caller's shell environment from switching on beta mode."""
    for var in ("JUNCODES_ENV", "VERCEL_URL", "NEXT_PUBLIC_VERCEL_URL"):
        monkeypatch.delenv(var, raising=False)
