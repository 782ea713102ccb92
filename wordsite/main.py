import logging
import logging.config
from typing import Optional

from wordsite.models.config import BuildConfig
from wordsite.models.summary import BuildSummary
from wordsite.services.builder import build_site

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
}

logger = logging.getLogger(__name__)


def format_summary(summary: BuildSummary) -> str:
    return (
        f"Generated: {len(summary.prefix_pages)} prefix pages, "
        f"{len(summary.suffix_pages)} suffix pages, hub, and sitemap.xml"
    )


def main(config: Optional[BuildConfig] = None) -> int:
    """Build the site with *config* (defaults when omitted) and print a summary line.

    I/O errors are logged and re-raised so the process exits non-zero.
    """
    logging.config.dictConfig(LOGGING_CONFIG)
    config = config or BuildConfig()

    try:
        summary = build_site(config)
    except OSError:
        logger.exception("Site build failed")
        raise

    print(format_summary(summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
