"""URL normalisation utilities: slugs, page paths, canonical URLs."""

import re
import unicodedata


def slugify(value: str) -> str:
    """Turn *value* into a URL slug.

    The slug is lowercased, ASCII-only, and uses hyphens as separators.
    """
    # Normalise unicode, keep only ASCII
    slug = unicodedata.normalize("NFKD", value)
    slug = slug.encode("ascii", "ignore").decode("ascii")

    # Lowercase and replace runs of non-alphanumeric chars with a single hyphen
    slug = re.sub(r"[^a-z0-9]+", "-", slug.lower())
    return slug.strip("-")


def prefix_path(letter: str, word_length: int = 5) -> str:
    """Return the site path of the page listing words starting with *letter*."""
    return f"/{word_length}-letter-words-starting-with-{slugify(letter)}/"


def suffix_path(suffix: str, word_length: int = 5) -> str:
    """Return the site path of the page listing words ending in *suffix*."""
    return f"/{word_length}-letter-words-ending-in-{slugify(suffix)}/"


def canonical_url(site_url: str, path: str) -> str:
    """Join *site_url* and a root-relative *path* into an absolute URL."""
    return site_url.rstrip("/") + "/" + path.lstrip("/")
