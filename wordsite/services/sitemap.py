"""Sitemap assembly (https://www.sitemaps.org/protocol.html)."""

from typing import Iterable, List
from xml.etree import ElementTree

from wordsite.services.normalizer import canonical_url

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def sitemap_paths(*groups: Iterable[str]) -> List[str]:
    """Concatenate the path *groups* in order, keeping the first occurrence of each path."""
    paths: List[str] = []
    seen: set = set()
    for group in groups:
        for path in group:
            if path in seen:
                continue
            seen.add(path)
            paths.append(path)
    return paths


def render_sitemap(site_url: str, paths: Iterable[str]) -> str:
    """Return a ``<urlset>`` document with one ``<url><loc>`` per path."""
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NS)
    for path in paths:
        url = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(url, "loc").text = canonical_url(site_url, path)
    ElementTree.indent(urlset, space="  ")
    return _XML_DECLARATION + ElementTree.tostring(urlset, encoding="unicode") + "\n"
