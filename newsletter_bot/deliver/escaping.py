"""HTML escaping for text inserted into the email template."""

from markupsafe import Markup

# Ampersand first so the entities produced below are not escaped twice.
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str) -> str:
    """Escape the five HTML special characters."""
    for char, entity in _REPLACEMENTS:
        text = text.replace(char, entity)
    return text


def escape_filter(value: object) -> Markup:
    """Jinja2 filter: escape a value and mark it safe for autoescaping."""
    return Markup(escape_html(str(value)))
