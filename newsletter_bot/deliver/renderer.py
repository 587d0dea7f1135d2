"""
Email template rendering using Jinja2.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from newsletter_bot.logging_config import get_logger
from newsletter_bot.models import Digest

from .escaping import escape_filter

logger = get_logger("renderer")

# Template directory
TEMPLATE_DIR = Path(__file__).parent / "templates"

FOOTER = "Demo email. Reply STOP to unsubscribe (placeholder)."


class EmailRenderer:
    """Renders a digest to HTML and plain text email bodies."""

    def __init__(self, template_dir: Path | None = None):
        self.template_dir = template_dir or TEMPLATE_DIR

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["esc"] = escape_filter

    def render_html(self, digest: Digest) -> str:
        """
        Render digest to HTML email.

        Every model-supplied string goes through the ``esc`` filter.

        Args:
            digest: Digest to render

        Returns:
            Rendered HTML string
        """
        template = self.env.get_template("digest.html")
        return template.render(digest=digest, footer=FOOTER)

    def render_text(self, digest: Digest) -> str:
        """
        Render digest to plain text email.

        Text is emitted verbatim, without escaping.

        Args:
            digest: Digest to render

        Returns:
            Rendered plain text string
        """
        template = self.env.get_template("digest.txt")
        return template.render(digest=digest, footer=FOOTER)

    def render(self, digest: Digest) -> tuple[str, str]:
        """
        Render digest to both HTML and plain text.

        Args:
            digest: Digest to render

        Returns:
            Tuple of (html, text)
        """
        html = self.render_html(digest)
        text = self.render_text(digest)

        logger.debug(f"Rendered email: {len(html)} chars HTML, {len(text)} chars text")

        return html, text


_default_renderer: EmailRenderer | None = None


def _renderer() -> EmailRenderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = EmailRenderer()
    return _default_renderer


def render_html(digest: Digest) -> str:
    """Render a digest to HTML with the packaged templates."""
    return _renderer().render_html(digest)


def render_text(digest: Digest) -> str:
    """Render a digest to plain text with the packaged templates."""
    return _renderer().render_text(digest)
