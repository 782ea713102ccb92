from pathlib import Path
from string import ascii_lowercase
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Curated endings, ordered by how often they are searched
DEFAULT_SUFFIXES: Tuple[str, ...] = ("er", "ed", "ly", "al", "el", "st", "th", "es", "s")


class BuildConfig(BaseModel):
    """Everything a site build needs; passed explicitly to the builder."""

    model_config = ConfigDict(frozen=True)

    site_url: str = Field(
        default="https://letterpatternsolver.com",
        description="Absolute base URL used for canonical links and the sitemap.",
    )
    word_list_path: Path = Path("data") / "answers.txt"
    output_root: Path = Path(".")
    word_length: int = Field(default=5, ge=1)
    letters: str = ascii_lowercase
    suffixes: Tuple[str, ...] = DEFAULT_SUFFIXES
    prefix_min_words: int = Field(
        default=15,
        ge=1,
        description="Prefix groups smaller than this are not published (thin pages).",
    )
    suffix_min_words: int = Field(
        default=30,
        ge=1,
        description="Suffix groups smaller than this are not published (thin pages).",
    )
    home_path: str = "/"
    hub_path: str = Field(
        default="/5-letter-word-lists/",
        description="Defaults to '/<word_length>-letter-word-lists/'.",
    )
    static_paths: Tuple[str, ...] = ("/about/", "/privacy/", "/contact/")
    privacy_path: Optional[str] = Field(
        default="/privacy/",
        description="Linked from every page footer; must be one of static_paths. None drops the link.",
    )

    @model_validator(mode="before")
    @classmethod
    def _default_hub_path(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("hub_path"):
            length = data.get("word_length", 5)
            data = {**data, "hub_path": f"/{length}-letter-word-lists/"}
        return data

    @field_validator("site_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("site_url must be an absolute http(s) URL.")
        return value

    @field_validator("letters")
    @classmethod
    def _normalise_letters(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("letters must not be empty.")
        # one page per letter: drop repeats, keep first-seen order
        return "".join(dict.fromkeys(value))

    @field_validator("suffixes")
    @classmethod
    def _normalise_suffixes(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        cleaned = tuple(s.strip().lower() for s in value)
        if any(not s for s in cleaned):
            raise ValueError("suffixes must not contain empty strings.")
        return tuple(dict.fromkeys(cleaned))

    @field_validator("home_path", "hub_path", "privacy_path")
    @classmethod
    def _check_path(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _validate_url_path(value)

    @field_validator("static_paths")
    @classmethod
    def _check_static_paths(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(_validate_url_path(p) for p in value))

    @model_validator(mode="after")
    def _privacy_page_is_published(self) -> "BuildConfig":
        if self.privacy_path is not None and self.privacy_path not in self.static_paths:
            raise ValueError(f"privacy_path '{self.privacy_path}' is not one of static_paths.")
        return self


def _validate_url_path(value: str) -> str:
    """Site paths are directory-style: they start and end with ``/``."""
    if not value.startswith("/") or not value.endswith("/"):
        raise ValueError(f"Path '{value}' must start and end with '/'.")
    return value
