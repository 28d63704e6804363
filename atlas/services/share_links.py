# atlas/services/share_links.py
from typing import Optional
from urllib.parse import urlencode, urlparse, parse_qs, urlunparse

WORLD_PARAM = "world"


def build_share_link(app_url: str, world_id: str) -> str:
    """Link that opens the atlas directly on a world"""
    parts = urlparse(app_url)
    query = parse_qs(parts.query)
    query[WORLD_PARAM] = [world_id]
    return urlunparse(parts._replace(query=urlencode(query, doseq=True)))


def parse_share_link(url: str) -> Optional[str]:
    """World id carried by a link, or None when the link selects no world"""
    values = parse_qs(urlparse(url).query).get(WORLD_PARAM)
    if not values or not values[0].strip():
        return None
    return values[0].strip()
