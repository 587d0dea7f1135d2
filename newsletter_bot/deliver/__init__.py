"""
Email delivery module.

Handles rendering and sending of digest emails.
"""

from .email import EmailSender, SendResult
from .escaping import escape_html
from .renderer import EmailRenderer, render_html, render_text

__all__ = [
    "EmailRenderer",
    "EmailSender",
    "SendResult",
    "escape_html",
    "render_html",
    "render_text",
]
