"""Unit tests for the LLM advisor client"""

import json
import httpx
import pytest
from moneymate_gateway.domain.exceptions import AdvisorAPIError
from moneymate_gateway.infrastructure.clients.advisor import AdvisorClient


def make_client(handler) -> AdvisorClient:
    return AdvisorClient(
        base_url="https://llm.test/v1",
        api_key="sk-test",
        model="test-model",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


async def test_generate_advice_returns_message_content():
    """Test the request shape and verbatim reply"""
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["auth"] = request.headers["Authorization"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "Save 20% of income."}}]})

    advice = await make_client(handler).generate_advice("How am I doing?")

    assert advice == "Save 20% of income."
    assert captured["url"] == "https://llm.test/v1/chat/completions"
    assert captured["auth"] == "Bearer sk-test"
    assert captured["body"]["model"] == "test-model"
    assert [m["role"] for m in captured["body"]["messages"]] == ["system", "user"]
    assert captured["body"]["messages"][1]["content"] == "How am I doing?"


async def test_generate_advice_http_error():
    """Test a 5xx surfaces once as AdvisorAPIError without retry"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, text="upstream failure")

    with pytest.raises(AdvisorAPIError, match="500"):
        await make_client(handler).generate_advice("prompt")

    assert len(calls) == 1


async def test_generate_advice_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(AdvisorAPIError, match="timeout"):
        await make_client(handler).generate_advice("prompt")


async def test_generate_advice_malformed_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": []})

    with pytest.raises(AdvisorAPIError, match="Invalid response"):
        await make_client(handler).generate_advice("prompt")
