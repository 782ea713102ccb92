import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def write_file(path: PathLike, contents: str) -> Path:
    """Create the parent directories of *path* if needed, then write *contents*.

    An existing file is overwritten.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(contents, encoding="utf-8")
    return target


def page_dir(output_root: PathLike, url_path: str) -> Path:
    """Map a site path such as ``/a/b/`` to ``<output_root>/a/b``."""
    return Path(output_root) / url_path.strip("/")


def write_page(output_root: PathLike, url_path: str, html: str) -> Path:
    """Write *html* as ``index.html`` in the directory serving *url_path*."""
    target = write_file(page_dir(output_root, url_path) / "index.html", html)
    logger.debug("Wrote page %s -> %s", url_path, target)
    return target
