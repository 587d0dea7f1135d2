"""Generate a digest email with Gemini and deliver it through Resend."""

__version__ = "0.1.0"
