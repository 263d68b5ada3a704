"""
OpenAI chat completion adapter.

Dependencies: langchain_openai
System role: Primary tutor chat provider
"""

from langchain_openai import ChatOpenAI

from tutor_backend.boundary.providers.base import ChatAdapter
from tutor_backend.models.message import SENDER_OPENAI

TUTOR_SYSTEM_PROMPT = "You are a helpful tutor assistant."


class OpenAIChatAdapter(ChatAdapter):
    """Chat-completion provider with a tutor system prompt."""

    name = SENDER_OPENAI

    @classmethod
    def from_api_key(
        cls,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        temperature: float = 0.7,
    ) -> "OpenAIChatAdapter":
        chat_model = ChatOpenAI(model=model, api_key=api_key, temperature=temperature)
        return cls(chat_model, system_prompt=TUTOR_SYSTEM_PROMPT)
