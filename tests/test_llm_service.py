"""Tests for the Ollama LLM service."""

import json
import httpx
import pytest
from resume_architect.errors import GenerationError
from resume_architect.models.resume_schema import RESUME_SCHEMA
from resume_architect.services.llm_service import LLMService, OllamaSettings


def _service(handler, **settings):
    config = OllamaSettings(
        ollama_base_url="http://ollama.test/",
        ollama_model="test-model",
        **settings,
    )
    return LLMService(settings=config, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_generate_structured_request():
    """Test that the payload carries model, prompt and schema."""
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["payload"] = json.loads(request.content)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"response": '{"summary": "ok"}'})

    service = _service(handler, ollama_api_key="secret")
    text = await service.generate("prompt text", response_format=RESUME_SCHEMA, max_tokens=50)

    assert text == '{"summary": "ok"}'
    assert seen["url"] == "http://ollama.test/api/generate"
    assert seen["payload"]["model"] == "test-model"
    assert seen["payload"]["prompt"] == "prompt text"
    assert seen["payload"]["stream"] is False
    assert seen["payload"]["format"] == RESUME_SCHEMA
    assert seen["payload"]["options"]["num_predict"] == 50
    assert seen["auth"] == "Bearer secret"


@pytest.mark.asyncio
async def test_generate_freeform_request_has_no_format():
    """Test that unconstrained generation sends no format."""
    seen = {}

    def handler(request):
        seen["payload"] = json.loads(request.content)
        return httpx.Response(200, json={"response": "Dear Hiring Manager"})

    text = await _service(handler).generate("write a letter")

    assert text == "Dear Hiring Manager"
    assert "format" not in seen["payload"]


@pytest.mark.asyncio
async def test_generate_quota_rejection():
    """Test that a 429 becomes a GenerationError."""
    service = _service(lambda request: httpx.Response(429, json={"error": "quota"}))

    with pytest.raises(GenerationError, match="429"):
        await service.generate("prompt")


@pytest.mark.asyncio
async def test_generate_network_failure():
    """Test that transport errors become a GenerationError."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GenerationError, match="Failed to communicate"):
        await _service(handler).generate("prompt")


@pytest.mark.asyncio
async def test_generate_timeout():
    """Test that timeouts become a GenerationError."""
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(GenerationError, match="timed out"):
        await _service(handler).generate("prompt")


@pytest.mark.asyncio
async def test_generate_unexpected_body():
    """Test that a body without a response field is rejected."""
    service = _service(lambda request: httpx.Response(200, json={"done": True}))

    with pytest.raises(GenerationError, match="Unexpected response format"):
        await service.generate("prompt")


@pytest.mark.asyncio
async def test_generate_non_json_body():
    """Test that a non-JSON body is rejected."""
    service = _service(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(GenerationError, match="non-JSON"):
        await service.generate("prompt")
