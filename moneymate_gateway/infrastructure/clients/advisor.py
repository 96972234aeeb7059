"""LLM advisor HTTP client for free-text budgeting advice"""

import httpx
from moneymate_gateway.domain.exceptions import AdvisorAPIError
from moneymate_gateway.domain.prompts import ADVISOR_SYSTEM_PROMPT
from moneymate_gateway.config import settings
from moneymate_gateway.infrastructure.observability.metrics import advisor_latency_histogram


class AdvisorClient:
    """Client for an OpenAI-compatible chat-completion endpoint"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.llm_api_base
        self.api_key = api_key if api_key is not None else settings.llm_api_key
        self.model = model or settings.llm_model
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def generate_advice(self, prompt: str) -> str:
        """
        Send one prompt and return the model's reply verbatim.

        A single attempt is made; there is no retry.

        Raises:
            AdvisorAPIError: On timeout, HTTP errors, or an unexpected response shape
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with advisor_latency_histogram.time():
                    response = await client.post(
                        f"{self.base_url}/chat/completions",
                        headers={"Authorization": f"Bearer {self.api_key}"},
                        json={
                            "model": self.model,
                            "messages": [
                                {"role": "system", "content": ADVISOR_SYSTEM_PROMPT},
                                {"role": "user", "content": prompt},
                            ],
                            "max_tokens": settings.llm_max_tokens,
                            "temperature": settings.llm_temperature,
                        },
                    )
                response.raise_for_status()
                data = response.json()

                content = data["choices"][0]["message"]["content"]
                if not isinstance(content, str):
                    raise TypeError("message content is not text")
                return content

            except httpx.TimeoutException as e:
                raise AdvisorAPIError(f"Advisor API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise AdvisorAPIError(f"Advisor API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise AdvisorAPIError(f"Advisor API unreachable: {e}") from e
            except (KeyError, IndexError, ValueError, TypeError) as e:
                raise AdvisorAPIError(f"Invalid response from advisor API: {e}") from e
