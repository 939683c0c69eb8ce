"""Example model client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseModelClient and register the provider in ModelClientFactory.
"""

import json
from typing import ClassVar

from app.generation.client_base import BaseModelClient


class ExampleClientAdapter(BaseModelClient):
    """Example adapter that returns a fixed valid certificate JSON.

    No network calls. Useful for local development without an API key.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "header": "休養許可証",
        "title": "戦略的活動停止の承認",
        "description": "申請者の心身は既に限界稼働域にあり、休養は組織防衛上の必須措置と認める",
        "prescription": "温かい布団で好きなだけ休むこと",
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self.DEFAULT_RESPONSE, ensure_ascii=False)
