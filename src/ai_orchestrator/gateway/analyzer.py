"""
Text-analysis leg.

Single-shot prompts against a general-purpose model through the Strands Agents SDK.
"""

from strands import Agent
from strands.models.model import Model
from strands.types.content import ContentBlock, Message

from ..errors import UpstreamError
from ..models import ModelFactory
from ..settings import Settings


def extract_content_text(c: ContentBlock) -> str:
    """Extract text from a content block; non-text blocks contribute nothing."""
    text = c.get("text")
    return text if isinstance(text, str) else ""


def extract_message_text(message: Message | None) -> str:
    """Join the text blocks of a model response message."""
    if not message:
        return ""
    content = message.get("content") or []
    return "".join(map(extract_content_text, content))


class TextAnalyzer:
    """Runs one prompt per call against a fresh, history-free agent."""

    def __init__(self, model: Model | None = None, *, settings: Settings | None = None):
        self.model = model or ModelFactory.create_model(settings=settings)

    async def analyze(self, prompt: str, context: str | None = None) -> str:
        """
        Analyze a prompt, optionally with supporting context.

        Args:
            prompt: The task for the model
            context: Optional context, prepended as "Context: ...\\n\\nTask: ..."

        Returns:
            The response text, or "" when the response has no text block

        Raises:
            UpstreamError: If the model call fails
        """
        full_prompt = f"Context: {context}\n\nTask: {prompt}" if context else prompt

        # A new agent per call keeps calls independent of each other's history
        agent = Agent(model=self.model, callback_handler=None)
        try:
            result = await agent.invoke_async(full_prompt)
        except Exception as e:
            raise UpstreamError(f"Analysis request failed: {e}") from e

        return extract_message_text(getattr(result, "message", None))
