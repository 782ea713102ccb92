"""HTML rendering for word-list pages and the hub page.

Rendering is pure string assembly: no templating engine and no scripts.
Every interpolated value goes through :func:`escape_text` except the intro
markup, which the page builders assemble from already-escaped pieces.
"""

import html
from typing import Iterable

from wordsite.models.page import HubSpec, Link, PageSpec, SiteChrome

_BASE_STYLE = """\
    :root { color-scheme: light dark; }
    body{font-family:system-ui,-apple-system,Segoe UI,Roboto,Arial,sans-serif;margin:0}
    header,footer{padding:12px 16px;background:rgba(127,127,127,.12)}
    header a, footer a{margin-right:12px}
    main{max-width:980px;margin:0 auto;padding:16px}
    .card{padding:12px 14px;border:1px solid rgba(127,127,127,.25);border-radius:10px}"""

_PAGE_STYLE = """\
    .meta{opacity:.8}
    .grid{display:grid;grid-template-columns:repeat(4,minmax(0,1fr));gap:8px}
    @media (max-width:820px){.grid{grid-template-columns:repeat(3,minmax(0,1fr))}}
    @media (max-width:560px){.grid{grid-template-columns:repeat(2,minmax(0,1fr))}}
    ul{padding-left:18px;margin:8px 0}"""

_HUB_STYLE = """\
    .cols{display:grid;grid-template-columns:repeat(2,minmax(0,1fr));gap:14px}
    @media (max-width:700px){.cols{grid-template-columns:1fr}}"""


def escape_text(value: object) -> str:
    """Escape ``& < > " '`` so *value* is safe as element text or attribute value."""
    return html.escape(str(value), quote=True)


def _link_items(links: Iterable[Link]) -> str:
    return "".join(
        f'<li><a href="{escape_text(link.href)}">{escape_text(link.text)}</a></li>'
        for link in links
    )


def _nav(links: Iterable[Link]) -> str:
    return "\n".join(
        f'  <a href="{escape_text(link.href)}">{escape_text(link.text)}</a>' for link in links
    )


def _head(title: str, description: str, canonical: str, style: str) -> str:
    return f"""<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>{escape_text(title)}</title>
  <meta name="description" content="{escape_text(description)}" />
  <link rel="canonical" href="{escape_text(canonical)}" />
  <meta name="robots" content="index,follow" />
  <style>
{_BASE_STYLE}
{style}
  </style>
</head>"""


def _document(head: str, chrome: SiteChrome, main: str) -> str:
    return f"""<!doctype html>
<html lang="en">
{head}
<body>
<header>
{_nav(chrome.nav)}
</header>

<main>
{main}
</main>

<footer>
{_nav(chrome.footer)}
</footer>
</body>
</html>
"""


def render_page(page: PageSpec, chrome: SiteChrome) -> str:
    """Render a word-list page to a complete HTML document."""
    word_items = "".join(f"<li>{escape_text(w)}</li>" for w in page.words)
    main = f"""  <h1>{escape_text(page.heading)}</h1>
  <div class="card">
    {page.intro_html}
    <p class="meta"><strong>Total:</strong> {len(page.words)}</p>
  </div>

  <h2>Words</h2>
  <div class="grid"><ul>{word_items}</ul></div>

  <h2>Related</h2>
  <ul>{_link_items(page.related)}</ul>

  <p class="meta">Tip: For more control (known letters, exclusions, positions), use the <a href="{escape_text(chrome.home_path)}">solver</a>.</p>"""
    head = _head(page.title, page.description, page.canonical, _PAGE_STYLE)
    return _document(head, chrome, main)


def render_hub(hub: HubSpec, chrome: SiteChrome) -> str:
    """Render the hub page with one column of prefix links and one of suffix links."""
    main = f"""  <h1>{escape_text(hub.heading)}</h1>
  {hub.intro_html}

  <div class="cols">
    <div class="card">
      <h2>Starting letter</h2>
      <ul>{_link_items(hub.prefix_links)}</ul>
    </div>
    <div class="card">
      <h2>Common endings</h2>
      <ul>{_link_items(hub.suffix_links)}</ul>
    </div>
  </div>"""
    head = _head(hub.title, hub.description, hub.canonical, _HUB_STYLE)
    return _document(head, chrome, main)
