"""
Chat Session
------------
Multi-turn conversation on top of the OpenAI Responses API.
The remote side keeps the history; we only carry the id of the last
response forward.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ChatSession:
    def __init__(
        self,
        client,
        model: str,
        *,
        instructions: str,
        schema: Dict[str, Any],
        schema_name: str = "game_response",
        max_output_tokens: Optional[int] = None,
    ):
        """
        client: already-authenticated OpenAI client
        schema: JSON schema the reply text must follow (strict mode)
        """
        self.client = client
        self.model = model
        self.instructions = instructions
        self.schema = schema
        self.schema_name = schema_name
        self.max_output_tokens = max_output_tokens
        self.response_id: Optional[str] = None
        self.turns = 0

    def send_message(self, message: str) -> str:
        """
        Send one user turn and return the raw reply text ("" if none).
        Errors from the client propagate unchanged.
        """
        request: Dict[str, Any] = {
            "model": self.model,
            # Instructions are not inherited through previous_response_id.
            "instructions": self.instructions,
            "input": [{"role": "user", "content": message}],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": self.schema_name,
                    "schema": self.schema,
                    "strict": True,
                }
            },
        }
        if self.response_id:
            request["previous_response_id"] = self.response_id
        if self.max_output_tokens:
            request["max_output_tokens"] = self.max_output_tokens

        response = self.client.responses.create(**request)

        self.response_id = getattr(response, "id", None) or self.response_id
        self.turns += 1
        logger.debug("chat turn=%s response_id=%s", self.turns, self.response_id)
        return self._extract_text(response)

    # =========================
    # INTERNALS
    # =========================

    def _extract_text(self, response) -> str:
        """
        Collect output_text parts from Responses API output.
        """
        parts = []
        for item in getattr(response, "output", None) or []:
            if getattr(item, "type", None) == "message":
                for c in item.content:
                    if getattr(c, "type", None) == "output_text":
                        parts.append(c.text)
        return "".join(parts).strip()
