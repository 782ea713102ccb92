from typing import List, Literal

from pydantic import BaseModel, ConfigDict


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str
    text: str


class WordGroup(BaseModel):
    """Words sharing a starting letter (``prefix``) or an ending (``suffix``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["prefix", "suffix"]
    key: str
    words: List[str]  # sorted, no duplicates


class PageSpec(BaseModel):
    """Everything needed to render one word-list page."""

    model_config = ConfigDict(frozen=True)

    title: str
    canonical: str
    description: str
    heading: str
    intro_html: str  # trusted markup; interpolated values must be escaped by the caller
    words: List[str]
    related: List[Link] = []


class HubSpec(BaseModel):
    """The index page linking every generated word-list page."""

    model_config = ConfigDict(frozen=True)

    title: str
    canonical: str
    description: str
    heading: str
    intro_html: str
    prefix_links: List[Link]
    suffix_links: List[Link]


class SiteChrome(BaseModel):
    """Navigation shared by every page: header links, footer links, solver link."""

    model_config = ConfigDict(frozen=True)

    nav: List[Link]
    footer: List[Link] = []
    home_path: str = "/"
