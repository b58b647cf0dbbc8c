# frontend/api/utils/rich_text.py
import html

import nh3
from markupsafe import Markup

# Tags the admin rich-text editor can produce
ALLOWED_TAGS = {
    "p", "br", "strong", "b", "em", "i", "u", "s", "blockquote",
    "ul", "ol", "li", "h1", "h2", "h3", "h4", "a", "span", "pre", "code",
}
ALLOWED_ATTRIBUTES = {
    "a": {"href", "title", "target"},
    "span": {"class"},
    "p": {"class"},
}


def sanitize_html(value) -> str:
    if not value:
        return ""
    return nh3.clean(
        str(value),
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        url_schemes={"http", "https", "mailto"},
        link_rel="noopener noreferrer",
    )


def rich_text(value) -> Markup:
    """Jinja filter: sanitized HTML safe to render without escaping."""
    return Markup(sanitize_html(value))


def plain_text(value) -> str:
    """Strip every tag; used for table previews. Autoescape handles the result."""
    if not value:
        return ""
    return html.unescape(nh3.clean(str(value), tags=set())).strip()
