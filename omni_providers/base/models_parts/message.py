"""
Message DTO used by chat completion requests.

Defines the `Message` dataclass and the `Role` literal representing the sender
role. Content may be either plain text or a list of `ContentBlock` objects for
vision-augmented messages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Union

from .content_block import ContentBlock


# Message roles accepted by the chat completions endpoint.
Role = Literal["system", "user", "assistant"]


@dataclass
class Message:
    """A chat message.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Either a plain text string or a list of `ContentBlock` items.

    Methods:
        is_structured: Returns True when content is a list of blocks.
        to_dict: Renders the wire shape, preserving block order.
    """

    role: Role
    content: Union[str, List[ContentBlock]]

    def is_structured(self) -> bool:
        """Return True if the message content is a structured list of blocks."""
        return isinstance(self.content, list)

    def to_dict(self) -> Dict[str, Any]:
        if isinstance(self.content, list):
            return {"role": self.role, "content": [b.to_dict() for b in self.content]}
        return {"role": self.role, "content": self.content}


__all__ = [
    "Message",
    "Role",
]
