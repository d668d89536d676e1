"""
Error taxonomy for the research core.
"""


class UpstreamError(Exception):
    """An upstream provider call failed (non-success status, transport error, model error)."""

    def __init__(
        self, message: str, status: int | None = None, body: str | None = None
    ):
        super().__init__(message)
        self.status = status
        self.body = body

    def __str__(self) -> str:
        message = super().__str__()
        if self.status is None:
            return message
        if not self.body:
            return f"{message} (status {self.status})"
        return f"{message} (status {self.status}): {self.body}"


class OrchestrationError(RuntimeError):
    """The synthesis step failed, so no combined result could be produced."""

    def __init__(self, topic: str, message: str | None = None):
        self.topic = topic
        super().__init__(message or f"Failed to conduct research on topic: '{topic}'")


class ValidationError(ValueError):
    """A research request was malformed."""
