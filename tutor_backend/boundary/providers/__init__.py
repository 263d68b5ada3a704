"""
External AI provider adapters.

Exports: ChatAdapter, OpenAIChatAdapter, GeminiChatAdapter, GoogleSearchAdapter
"""

from .base import ChatAdapter, history_to_messages, message_text
from .gemini_chat import GeminiChatAdapter
from .google_search import GoogleSearchAdapter, extract_domain, format_results
from .openai_chat import OpenAIChatAdapter

__all__ = [
    "ChatAdapter",
    "GeminiChatAdapter",
    "GoogleSearchAdapter",
    "OpenAIChatAdapter",
    "extract_domain",
    "format_results",
    "history_to_messages",
    "message_text",
]
