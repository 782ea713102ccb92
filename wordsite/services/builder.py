"""Site build: word list -> groups -> pages -> hub + sitemap.

The build is a single synchronous pass.  Any I/O error propagates and aborts
the whole run; a partially written output tree is simply rebuilt next time.
"""

import logging
from pathlib import Path
from typing import List, Tuple

from wordsite.models.config import BuildConfig
from wordsite.models.page import HubSpec, Link, PageSpec, SiteChrome, WordGroup
from wordsite.models.summary import BuildSummary
from wordsite.services.filters import prefix_groups, suffix_groups
from wordsite.services.loader import filter_by_length, load_word_list
from wordsite.services.normalizer import canonical_url, prefix_path, suffix_path
from wordsite.services.renderer import escape_text, render_hub, render_page
from wordsite.services.sitemap import render_sitemap, sitemap_paths
from wordsite.services.writer import write_file, write_page

logger = logging.getLogger(__name__)

SITEMAP_FILENAME = "sitemap.xml"


def site_chrome(config: BuildConfig) -> SiteChrome:
    """Header and footer navigation shared by every generated page."""
    nav = [
        Link(href=config.home_path, text="Solver"),
        Link(href=config.hub_path, text="Word lists"),
    ]
    # "/about/" -> "About", "/terms-of-use/" -> "Terms Of Use"
    nav.extend(Link(href=p, text=p.strip("/").replace("-", " ").title()) for p in config.static_paths)
    footer = []
    if config.privacy_path is not None:
        footer.append(Link(href=config.privacy_path, text="Privacy Policy"))
    return SiteChrome(nav=nav, footer=footer, home_path=config.home_path)


def _related(config: BuildConfig) -> List[Link]:
    return [
        Link(href=config.hub_path, text=f"All {config.word_length}-letter word lists"),
        Link(href=config.home_path, text="Open the solver"),
    ]


def page_path(group: WordGroup, config: BuildConfig) -> str:
    if group.kind == "prefix":
        return prefix_path(group.key, config.word_length)
    return suffix_path(group.key, config.word_length)


def prefix_page_spec(group: WordGroup, config: BuildConfig) -> PageSpec:
    label = group.key.upper()
    title = f"{config.word_length}-letter words starting with {label}"
    strong = escape_text(title)
    return PageSpec(
        title=title,
        canonical=canonical_url(config.site_url, page_path(group, config)),
        description=f"{title}. Browse the word list and narrow puzzles faster.",
        heading=title,
        intro_html=(
            f"<p>Browse <strong>{strong}</strong>. "
            "Useful for Wordle-style puzzles and pattern matching.</p>\n"
            "<p>Combine this with excluded letters in the solver to narrow results quickly.</p>"
        ),
        words=group.words,
        related=_related(config),
    )


def suffix_page_spec(group: WordGroup, config: BuildConfig) -> PageSpec:
    label = group.key.upper()
    title = f"{config.word_length}-letter words ending in {label}"
    strong = escape_text(title)
    return PageSpec(
        title=title,
        canonical=canonical_url(config.site_url, page_path(group, config)),
        description=f"{title}. Browse the word list and filter patterns faster.",
        heading=title,
        intro_html=(
            f"<p>Browse <strong>{strong}</strong>.</p>\n"
            "<p>Tip: endings often constrain vowel placement, so use the solver "
            "to lock the middle letters.</p>"
        ),
        words=group.words,
        related=_related(config),
    )


def hub_spec(
    prefixes: List[WordGroup],
    suffixes: List[WordGroup],
    config: BuildConfig,
) -> HubSpec:
    n = config.word_length
    return HubSpec(
        title=f"{n}-letter word lists | LetterPatternSolver",
        canonical=canonical_url(config.site_url, config.hub_path),
        description=f"Browse curated {n}-letter word lists by starting letter and common endings.",
        heading=f"{n}-letter word lists",
        intro_html=(
            "<p>These curated pages target common searches (starting letters and popular "
            f'endings). For full pattern control, use the <a href="{escape_text(config.home_path)}">'
            "solver</a>.</p>"
        ),
        prefix_links=[
            Link(href=page_path(g, config), text=f"Starting with {g.key.upper()}") for g in prefixes
        ],
        suffix_links=[
            Link(href=page_path(g, config), text=f"Ending in {g.key.upper()}") for g in suffixes
        ],
    )


def _write_group_pages(
    groups: List[WordGroup],
    config: BuildConfig,
    chrome: SiteChrome,
) -> List[str]:
    paths: List[str] = []
    for group in groups:
        spec = prefix_page_spec(group, config) if group.kind == "prefix" else suffix_page_spec(group, config)
        path = page_path(group, config)
        write_page(config.output_root, path, render_page(spec, chrome))
        paths.append(path)
    return paths


def build_groups(words: List[str], config: BuildConfig) -> Tuple[List[WordGroup], List[WordGroup]]:
    """Return the publishable (prefix, suffix) groups for *words*."""
    candidates = filter_by_length(words, config.word_length)
    return (
        prefix_groups(candidates, config.letters, config.prefix_min_words),
        suffix_groups(candidates, config.suffixes, config.suffix_min_words),
    )


def build_site(config: BuildConfig) -> BuildSummary:
    """Run the full build described by *config* and return what was generated."""
    words = load_word_list(config.word_list_path)
    prefixes, suffixes = build_groups(words, config)
    chrome = site_chrome(config)

    prefix_pages = _write_group_pages(prefixes, config, chrome)
    suffix_pages = _write_group_pages(suffixes, config, chrome)

    write_page(config.output_root, config.hub_path, render_hub(hub_spec(prefixes, suffixes, config), chrome))

    paths = sitemap_paths(
        [config.home_path, config.hub_path],
        config.static_paths,
        prefix_pages,
        suffix_pages,
    )
    write_file(Path(config.output_root) / SITEMAP_FILENAME, render_sitemap(config.site_url, paths))

    summary = BuildSummary(
        words_loaded=len(words),
        prefix_pages=prefix_pages,
        suffix_pages=suffix_pages,
        hub_path=config.hub_path,
        sitemap_urls=[canonical_url(config.site_url, p) for p in paths],
    )
    logger.info(
        "Site build finished",
        extra={
            "prefix_pages": len(prefix_pages),
            "suffix_pages": len(suffix_pages),
            "sitemap_urls": len(paths),
        },
    )
    return summary
