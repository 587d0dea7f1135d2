"""Exception hierarchy shared across the pipeline stages."""


class NewsletterBotError(Exception):
    """Base class for every error raised by the pipeline."""


class GenerationError(NewsletterBotError):
    """The model response contained no parseable JSON object."""


class ValidationError(NewsletterBotError):
    """Parsed JSON does not have the shape of a digest."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("model returned a malformed digest: " + "; ".join(errors))


class DeliveryError(NewsletterBotError):
    """The email provider rejected or failed the send."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Resend error: {detail}")
