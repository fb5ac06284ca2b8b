"""
Proof verification: does this photo show the cultivation task was done?

The engine only depends on the ProofVerifier protocol. OpenAIProofVerifier
is the production implementation; tests inject fakes.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from kisaanmitra.ai.openai_client import get_client, set_last_error
from kisaanmitra.core.config import VERIFIER_MODEL, VERIFIER_TIMEOUT_SECONDS
from kisaanmitra.core.errors import VerificationServiceError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a field officer verifying farm work for a cultivation training app. "
    "You receive one task and one photo. Decide whether the photo plausibly shows the "
    "task being done or finished. Answer ONLY with a JSON object: "
    '{"verified": true|false, "reasoning": "<one or two short sentences for the farmer>"}.'
)


@dataclass(frozen=True)
class Verdict:
    verified: bool
    reasoning: str


class ProofVerifier(Protocol):
    async def verify(self, title: str, description: str, image_b64: str) -> Verdict:
        ...


def parse_verdict(raw: Optional[str]) -> Verdict:
    """Parse the model's JSON answer; anything malformed is a service error."""
    if not raw or not raw.strip():
        raise VerificationServiceError("verifier returned an empty response")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise VerificationServiceError(f"verifier returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise VerificationServiceError("verifier response is not a JSON object")
    verified = data.get("verified")
    reasoning = data.get("reasoning")
    if not isinstance(verified, bool) or not isinstance(reasoning, str):
        raise VerificationServiceError("verifier response is missing 'verified' or 'reasoning'")
    return Verdict(verified=verified, reasoning=reasoning.strip())


def to_data_uri(image_b64: str, mime_type: str = "image/jpeg") -> str:
    if image_b64.startswith("data:"):
        return image_b64
    return f"data:{mime_type};base64,{image_b64}"


class OpenAIProofVerifier:
    def __init__(self, client=None, model: str = VERIFIER_MODEL,
                 timeout: float = VERIFIER_TIMEOUT_SECONDS):
        self._client = client
        self.model = model
        self.timeout = timeout

    @property
    def client(self):
        return self._client if self._client is not None else get_client()

    async def _ask(self, client, title: str, description: str, image_b64: str) -> str:
        response = await client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": f"Verify task: {title}. Desc: {description}. Return JSON."},
                        {"type": "image_url", "image_url": {"url": to_data_uri(image_b64)}},
                    ],
                },
            ],
            response_format={"type": "json_object"},
            max_tokens=200,
            temperature=0.2,
        )
        return response.choices[0].message.content

    async def verify(self, title: str, description: str, image_b64: str) -> Verdict:
        client = self.client
        if client is None:
            raise VerificationServiceError("OPENAI_API_KEY is not configured")

        logger.info("[VERIFIER] checking task=%r image_chars=%d", title, len(image_b64))
        try:
            raw = await asyncio.wait_for(
                self._ask(client, title, description, image_b64), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            set_last_error(f"verifier timed out after {self.timeout}s")
            raise VerificationServiceError(f"verifier timed out after {self.timeout}s") from e
        except VerificationServiceError:
            raise
        except Exception as e:
            set_last_error(f"{type(e).__name__}: {e}")
            raise VerificationServiceError(f"verifier call failed: {type(e).__name__}") from e

        verdict = parse_verdict(raw)
        logger.info("[VERIFIER] task=%r verified=%s", title, verdict.verified)
        return verdict
