from pydantic import BaseModel, Field
from typing import Literal


DEFAULT_LANGUAGES = [
    "typescript",
    "json",
    "rust",
    "kotlin",
    "latex",
    "zsh",
    "terraform",
    "java",
    "diff",
    "python",
    "bash",
    "javascript",
    "yaml",
    "toml",
]


class ContentConfig(BaseModel):
    base_dir: str = "src/content"
    extension: str = ".md"


class RenderConfig(BaseModel):
    words_per_minute: int = Field(default=200, gt=0)
    languages: list[str] = Field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    highlight_style: str = "default"
    math_errors: Literal["raise", "source"] = "raise"
    unique_heading_ids: bool = True


class SiteConfig(BaseModel):
    content: ContentConfig = Field(default_factory=ContentConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    beta_hosts: list[str] = Field(default_factory=lambda: ["beta.jun.codes"])
    log_level: Literal["debug", "info", "warn", "error"] = "info"
