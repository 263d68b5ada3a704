"""
Gemini generative chat adapter.

Non-user turns are sent with Gemini's ``model`` role. When web search
results are available they are prepended to the prompt.

Dependencies: langchain_google_genai
System role: Search-augmented generative chat provider
"""

from langchain_google_genai import ChatGoogleGenerativeAI

from tutor_backend.boundary.providers.base import ChatAdapter
from tutor_backend.models.message import SENDER_GEMINI


class GeminiChatAdapter(ChatAdapter):
    """Generative chat provider, optionally grounded on search results."""

    name = SENDER_GEMINI
    uses_search = True

    @classmethod
    def from_api_key(
        cls,
        api_key: str,
        model: str = "gemini-pro",
        temperature: float = 0.7,
    ) -> "GeminiChatAdapter":
        chat_model = ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=temperature,
        )
        return cls(chat_model)

    def compose_prompt(self, prompt: str, context: str | None) -> str:
        if not context:
            return prompt
        return (
            "Use these web search results as reference material where relevant:\n"
            f"{context}\n\n"
            f"Student question:\n{prompt}"
        )
