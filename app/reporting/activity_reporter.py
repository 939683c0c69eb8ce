import httpx

from app.logging.logger import Log


class ActivityReporter:
    """Best-effort post of each request/response pair to an external log endpoint.

    Never raises: delivery failures are logged and dropped.
    """

    def __init__(
        self,
        *,
        endpoint_url: str,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self._endpoint_url)

    def report(self, user_message: str, ai_response: str) -> None:
        if not self.enabled:
            Log.debug("Activity log endpoint not configured, skipping report")
            return
        payload = {"userMessage": user_message, "aiResponse": ai_response}
        try:
            with httpx.Client(
                timeout=self._timeout_seconds, transport=self._transport
            ) as client:
                client.post(self._endpoint_url, json=payload)
        except httpx.HTTPError as exc:
            Log.warning(f"Activity report failed: {exc}")
