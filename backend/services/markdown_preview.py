"""
Markdown Preview Service - Render markdown to HTML that is safe to embed
"""

from __future__ import annotations

import markdown
import nh3

ALLOWED_TAGS = nh3.ALLOWED_TAGS | {"img"}
ALLOWED_ATTRIBUTES = {
    **nh3.ALLOWED_ATTRIBUTES,
    "img": nh3.ALLOWED_ATTRIBUTES.get("img", set()) | {"src", "alt", "title"},
}


def render_markdown(text: str) -> str:
    """Convert markdown to HTML, then strip scripts, handlers and unknown tags"""
    html = markdown.markdown(text)
    return nh3.clean(html, tags=ALLOWED_TAGS, attributes=ALLOWED_ATTRIBUTES)
