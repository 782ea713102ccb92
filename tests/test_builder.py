"""End-to-end tests for wordsite.services.builder.build_site."""

from xml.etree import ElementTree

import pytest
from bs4 import BeautifulSoup

from wordsite.models.config import BuildConfig
from wordsite.models.page import WordGroup
from wordsite.services.builder import (
    build_groups,
    build_site,
    hub_spec,
    prefix_page_spec,
    site_chrome,
    suffix_page_spec,
)
from wordsite.services.sitemap import SITEMAP_NS

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------

A_WORDS = [
    "actor", "acute", "adapt", "adult", "agent", "alarm", "album", "alert",
    "alpha", "above", "angle", "apple", "arena", "arrow", "aside", "audio",
]

# 30 words ending in "er": enough for a suffix page
ER_WORDS = [
    "baker", "boxer", "cider", "cover", "diner", "eater", "fewer", "filer",
    "giver", "hiker", "inner", "joker", "lever", "liver", "lower", "miner",
    "never", "odder", "order", "other", "paper", "power", "racer", "river",
    "rover", "sober", "tiger", "timer", "toner", "water",
]

B_WORDS = ["badge", "basic", "beach"]  # too few for a prefix page


def _write_words(tmp_path, words) -> BuildConfig:
    source = tmp_path / "answers.txt"
    source.write_text("\n".join(words) + "\n", encoding="utf-8")
    return BuildConfig(
        site_url="https://example.com",
        word_list_path=source,
        output_root=tmp_path / "site",
    )


def _soup(path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "lxml")


def _sitemap_locs(path) -> list:
    root = ElementTree.fromstring(path.read_bytes())
    return [loc.text for loc in root.iter(f"{{{SITEMAP_NS}}}loc")]


@pytest.fixture
def built(tmp_path):
    words = A_WORDS + ER_WORDS + B_WORDS + ["apples", "ant", "zz"]
    config = _write_words(tmp_path, words)
    return config, build_site(config)


class TestBuildSite:
    def test_prefix_page_written_with_sorted_words(self, built):
        config, _ = built
        page = config.output_root / "5-letter-words-starting-with-a" / "index.html"
        assert page.exists()
        items = [li.get_text() for li in _soup(page).select(".grid li")]
        assert items == sorted(A_WORDS)

    def test_only_five_letter_words_listed(self, built):
        config, _ = built
        page = config.output_root / "5-letter-words-starting-with-a" / "index.html"
        items = [li.get_text() for li in _soup(page).select(".grid li")]
        assert "apples" not in items
        assert "ant" not in items

    def test_thin_prefix_group_not_written(self, built):
        config, summary = built
        assert not (config.output_root / "5-letter-words-starting-with-b").exists()
        assert "/5-letter-words-starting-with-b/" not in summary.prefix_pages

    def test_suffix_page_written(self, built):
        config, summary = built
        assert summary.suffix_pages == ["/5-letter-words-ending-in-er/"]
        page = config.output_root / "5-letter-words-ending-in-er" / "index.html"
        items = [li.get_text() for li in _soup(page).select(".grid li")]
        assert items == sorted(ER_WORDS)

    def test_thin_suffix_groups_not_written(self, built):
        config, _ = built
        assert not (config.output_root / "5-letter-words-ending-in-s").exists()
        assert not (config.output_root / "5-letter-words-ending-in-ly").exists()

    def test_page_canonical_and_title(self, built):
        config, _ = built
        soup = _soup(config.output_root / "5-letter-words-starting-with-a" / "index.html")
        assert soup.title.get_text() == "5-letter words starting with A"
        assert soup.find("link", rel="canonical")["href"] == (
            "https://example.com/5-letter-words-starting-with-a/"
        )

    def test_hub_page_links_every_generated_page(self, built):
        config, summary = built
        soup = _soup(config.output_root / "5-letter-word-lists" / "index.html")
        hrefs = [a["href"] for a in soup.select(".cols a")]
        assert hrefs == summary.prefix_pages + summary.suffix_pages

    def test_sitemap_lists_static_and_generated_pages(self, built):
        config, summary = built
        locs = _sitemap_locs(config.output_root / "sitemap.xml")
        assert locs == [
            "https://example.com/",
            "https://example.com/5-letter-word-lists/",
            "https://example.com/about/",
            "https://example.com/privacy/",
            "https://example.com/contact/",
            "https://example.com/5-letter-words-starting-with-a/",
            "https://example.com/5-letter-words-ending-in-er/",
        ]
        assert len(locs) == len(set(locs))
        assert locs == summary.sitemap_urls

    def test_summary_counts(self, built):
        _, summary = built
        assert summary.words_loaded == len(A_WORDS) + len(ER_WORDS) + len(B_WORDS) + 3
        assert summary.prefix_pages == ["/5-letter-words-starting-with-a/"]
        assert summary.pages_written == 3

    def test_rebuild_overwrites_in_place(self, built):
        config, first = built
        second = build_site(config)
        assert second == first

    def test_missing_word_list_raises(self, tmp_path):
        config = BuildConfig(word_list_path=tmp_path / "nope.txt", output_root=tmp_path / "site")
        with pytest.raises(FileNotFoundError):
            build_site(config)
        assert not (tmp_path / "site" / "sitemap.xml").exists()

    def test_empty_word_list_still_writes_hub_and_sitemap(self, tmp_path):
        config = _write_words(tmp_path, [])
        summary = build_site(config)
        assert summary.prefix_pages == []
        assert summary.suffix_pages == []
        assert (config.output_root / "5-letter-word-lists" / "index.html").exists()
        assert len(_sitemap_locs(config.output_root / "sitemap.xml")) == 5


class TestBuildGroups:
    def test_uses_configured_thresholds(self):
        config = BuildConfig(prefix_min_words=3, suffix_min_words=100)
        prefixes, suffixes = build_groups(B_WORDS + ER_WORDS, config)
        assert "b" in [g.key for g in prefixes]
        assert suffixes == []

    def test_word_length_applied_before_grouping(self):
        config = BuildConfig(prefix_min_words=1)
        prefixes, _ = build_groups(["apple", "apples", "ant"], config)
        assert prefixes[0].words == ["apple"]


class TestPageSpecs:
    def test_prefix_spec(self):
        group = WordGroup(kind="prefix", key="a", words=["apple"])
        spec = prefix_page_spec(group, BuildConfig(site_url="https://example.com"))
        assert spec.title == "5-letter words starting with A"
        assert spec.canonical == "https://example.com/5-letter-words-starting-with-a/"
        assert spec.words == ["apple"]
        assert [link.href for link in spec.related] == ["/5-letter-word-lists/", "/"]

    def test_suffix_spec(self):
        group = WordGroup(kind="suffix", key="er", words=["baker"])
        spec = suffix_page_spec(group, BuildConfig())
        assert spec.heading == "5-letter words ending in ER"
        assert spec.canonical.endswith("/5-letter-words-ending-in-er/")

    def test_hub_spec_labels(self):
        prefixes = [WordGroup(kind="prefix", key="c", words=["crane"])]
        suffixes = [WordGroup(kind="suffix", key="st", words=["first"])]
        hub = hub_spec(prefixes, suffixes, BuildConfig())
        assert [link.text for link in hub.prefix_links] == ["Starting with C"]
        assert [link.text for link in hub.suffix_links] == ["Ending in ST"]

    def test_site_chrome_nav(self):
        chrome = site_chrome(BuildConfig())
        assert [(link.href, link.text) for link in chrome.nav] == [
            ("/", "Solver"),
            ("/5-letter-word-lists/", "Word lists"),
            ("/about/", "About"),
            ("/privacy/", "Privacy"),
            ("/contact/", "Contact"),
        ]

    def test_site_chrome_footer_and_home(self):
        chrome = site_chrome(BuildConfig(home_path="/solver/"))
        assert [(link.href, link.text) for link in chrome.footer] == [("/privacy/", "Privacy Policy")]
        assert chrome.home_path == "/solver/"

    def test_site_chrome_without_privacy_page(self):
        chrome = site_chrome(BuildConfig(static_paths=("/about/",), privacy_path=None))
        assert chrome.footer == []


class TestBuildSiteConfigVariants:
    def test_footer_and_solver_link_follow_config(self, tmp_path):
        source = tmp_path / "answers.txt"
        source.write_text(" ".join(A_WORDS), encoding="utf-8")
        config = BuildConfig(
            word_list_path=source,
            output_root=tmp_path / "site",
            home_path="/solver/",
            static_paths=("/about/", "/legal/privacy/"),
            privacy_path="/legal/privacy/",
        )
        build_site(config)
        soup = _soup(config.output_root / "5-letter-words-starting-with-a" / "index.html")
        assert [a["href"] for a in soup.footer.find_all("a")] == ["/legal/privacy/"]
        assert soup.find("a", string="solver")["href"] == "/solver/"
        sitemap = _sitemap_locs(config.output_root / "sitemap.xml")
        assert "https://letterpatternsolver.com/legal/privacy/" in sitemap
        assert "https://letterpatternsolver.com/privacy/" not in sitemap

    def test_repeated_letters_write_one_page(self, tmp_path):
        source = tmp_path / "answers.txt"
        source.write_text(" ".join(A_WORDS), encoding="utf-8")
        config = BuildConfig(word_list_path=source, output_root=tmp_path / "site", letters="aab")
        summary = build_site(config)
        assert summary.prefix_pages == ["/5-letter-words-starting-with-a/"]
        soup = _soup(config.output_root / "5-letter-word-lists" / "index.html")
        assert [a["href"] for a in soup.select(".cols a")] == ["/5-letter-words-starting-with-a/"]

    def test_hub_path_follows_word_length(self, tmp_path):
        source = tmp_path / "answers.txt"
        source.write_text(" ".join(w + "s" for w in A_WORDS), encoding="utf-8")
        config = BuildConfig(word_list_path=source, output_root=tmp_path / "site", word_length=6)
        summary = build_site(config)
        assert summary.hub_path == "/6-letter-word-lists/"
        assert summary.prefix_pages == ["/6-letter-words-starting-with-a/"]
        assert (config.output_root / "6-letter-word-lists" / "index.html").exists()
