import asyncio

import pytest

from conftest import completion, fake_openai_client
from kisaanmitra.ai.summary import FALLBACK_SUMMARY, generate_journey_summary
from kisaanmitra.ai.verifier import (
    OpenAIProofVerifier,
    Verdict,
    parse_verdict,
    to_data_uri,
)
from kisaanmitra.catalog.library import WHEAT
from kisaanmitra.core.errors import VerificationServiceError


def test_parse_verdict_reads_json_answer():
    verdict = parse_verdict('{"verified": true, "reasoning": "  Seedlings visible in rows. "}')
    assert verdict == Verdict(True, "Seedlings visible in rows.")


@pytest.mark.parametrize("raw", [
    None,
    "",
    "   ",
    "not json",
    "[true]",
    '{"verified": "yes", "reasoning": "ok"}',
    '{"verified": true}',
    '{"reasoning": "missing verdict"}',
])
def test_parse_verdict_rejects_malformed_answers(raw):
    with pytest.raises(VerificationServiceError):
        parse_verdict(raw)


def test_to_data_uri():
    assert to_data_uri("AAAA") == "data:image/jpeg;base64,AAAA"
    assert to_data_uri("AAAA", "image/png") == "data:image/png;base64,AAAA"
    assert to_data_uri("data:image/webp;base64,BBBB") == "data:image/webp;base64,BBBB"


def test_openai_verifier_sends_task_and_image():
    requests = []

    async def create(**kwargs):
        requests.append(kwargs)
        return completion('{"verified": false, "reasoning": "Field is not ploughed."}')

    verifier = OpenAIProofVerifier(client=fake_openai_client(create), model="test-model")
    verdict = asyncio.run(verifier.verify("Sowing", "Drill the seed.", "AAAA"))

    assert verdict == Verdict(False, "Field is not ploughed.")
    request = requests[0]
    assert request["model"] == "test-model"
    assert request["response_format"] == {"type": "json_object"}
    text, image = request["messages"][1]["content"]
    assert "Verify task: Sowing. Desc: Drill the seed." in text["text"]
    assert image["image_url"]["url"] == "data:image/jpeg;base64,AAAA"


def test_openai_verifier_times_out():
    async def create(**kwargs):
        await asyncio.sleep(5)

    verifier = OpenAIProofVerifier(client=fake_openai_client(create), timeout=0.01)
    with pytest.raises(VerificationServiceError, match="timed out"):
        asyncio.run(verifier.verify("Sowing", "Drill the seed.", "AAAA"))


def test_openai_verifier_wraps_client_errors():
    async def create(**kwargs):
        raise ConnectionError("network down")

    verifier = OpenAIProofVerifier(client=fake_openai_client(create))
    with pytest.raises(VerificationServiceError):
        asyncio.run(verifier.verify("Sowing", "Drill the seed.", "AAAA"))


def test_openai_verifier_without_key_fails():
    # Tests run with OPENAI_API_KEY unset, so there is no shared client
    with pytest.raises(VerificationServiceError):
        asyncio.run(OpenAIProofVerifier().verify("Sowing", "Drill the seed.", "AAAA"))


def test_summary_uses_model_text():
    async def create(**kwargs):
        assert "Wheat (Grade A)" in kwargs["messages"][1]["content"]
        return completion("  Four phases from ploughing to harvest.  ")

    summary = asyncio.run(generate_journey_summary(WHEAT, client=fake_openai_client(create)))
    assert summary == "Four phases from ploughing to harvest."


def test_summary_falls_back_on_failure():
    async def create(**kwargs):
        raise RuntimeError("boom")

    assert asyncio.run(generate_journey_summary(WHEAT, client=fake_openai_client(create))) == FALLBACK_SUMMARY


def test_summary_falls_back_on_empty_text():
    async def create(**kwargs):
        return completion("")

    assert asyncio.run(generate_journey_summary(WHEAT, client=fake_openai_client(create))) == FALLBACK_SUMMARY


def test_summary_without_key_falls_back():
    assert asyncio.run(generate_journey_summary(WHEAT)) == FALLBACK_SUMMARY
