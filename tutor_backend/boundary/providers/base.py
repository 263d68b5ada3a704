"""
Shared chat adapter behaviour.

Maps stored history onto LangChain messages, issues one ``ainvoke`` and
unwraps the text of the returned message.

Dependencies: langchain_core
System role: Base class for chat provider adapters
"""

import logging
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from tutor_backend.core.exceptions import UpstreamCallError
from tutor_backend.models.message import SENDER_USER, chat_turns

logger = logging.getLogger(__name__)


def history_to_messages(history: list[dict[str, Any]]) -> list[BaseMessage]:
    """
    Convert stored history into LangChain messages.

    ``user`` turns become human messages; every other sender is treated as
    the assistant, which each provider serializes into its own role name.
    """
    messages: list[BaseMessage] = []
    for sender, text in chat_turns(history):
        if sender == SENDER_USER:
            messages.append(HumanMessage(content=text))
        else:
            messages.append(AIMessage(content=text))
    return messages


def message_text(message: BaseMessage) -> str:
    """Extract plain text from a chat model response envelope."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class ChatAdapter:
    """One chat provider behind the normalized history + prompt contract."""

    name = "chat"
    uses_search = False

    def __init__(self, chat_model: BaseChatModel, system_prompt: str | None = None) -> None:
        """
        Initialize adapter.

        Args:
            chat_model: LangChain chat model bound to this provider
            system_prompt: Optional system instruction sent first
        """
        self._model = chat_model
        self._system_prompt = system_prompt

    def build_messages(
        self,
        history: list[dict[str, Any]],
        prompt: str,
        context: str | None = None,
    ) -> list[BaseMessage]:
        messages: list[BaseMessage] = []
        if self._system_prompt:
            messages.append(SystemMessage(content=self._system_prompt))
        messages.extend(history_to_messages(history))
        messages.append(HumanMessage(content=self.compose_prompt(prompt, context)))
        return messages

    def compose_prompt(self, prompt: str, context: str | None) -> str:
        return prompt

    async def generate(
        self,
        history: list[dict[str, Any]],
        prompt: str,
        context: str | None = None,
    ) -> str:
        """
        Generate an answer to ``prompt`` given the prior history.

        Raises:
            UpstreamCallError: Provider call failed
        """
        messages = self.build_messages(history, prompt, context)
        logger.info(
            "generate - Calling provider",
            extra={"provider": self.name, "message_count": len(messages)},
        )
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:  # pylint: disable=broad-except
            logger.error("generate - %s call failed: %s: %s", self.name, type(e).__name__, e)
            raise UpstreamCallError(f"{self.name} call failed: {e}", provider=self.name) from e
        return message_text(response)
