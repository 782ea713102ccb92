from typing import List

from pydantic import BaseModel


class BuildSummary(BaseModel):
    words_loaded: int
    prefix_pages: List[str]
    suffix_pages: List[str]
    hub_path: str
    sitemap_urls: List[str]

    @property
    def pages_written(self) -> int:
        """List pages plus the hub page."""
        return len(self.prefix_pages) + len(self.suffix_pages) + 1
