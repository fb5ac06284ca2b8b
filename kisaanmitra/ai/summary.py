"""
Short AI summary shown before a farmer confirms a new journey.
"""
import logging

from kisaanmitra.ai.openai_client import get_client, set_last_error
from kisaanmitra.catalog.models import CropDefinition
from kisaanmitra.core.config import SUMMARY_MODEL

logger = logging.getLogger(__name__)

FALLBACK_SUMMARY = "Expert cultivation roadmap ready for deployment."


async def generate_journey_summary(crop: CropDefinition, client=None) -> str:
    """Two sentence overview of the crop's journey; never raises."""
    client = client if client is not None else get_client()
    if client is None:
        return FALLBACK_SUMMARY

    phases = ", ".join(step.title for step in crop.workflow) or "no recorded phases"
    try:
        response = await client.chat.completions.create(
            model=SUMMARY_MODEL,
            messages=[
                {"role": "system", "content": "You are an agronomist writing for Indian smallholder farmers. Two sentences, plain language."},
                {"role": "user", "content": f"Summary for {crop.name} journey ({crop.season.value} season). Phases: {phases}."},
            ],
            max_tokens=120,
            temperature=0.5,
        )
        text = (response.choices[0].message.content or "").strip()
    except Exception as e:
        # Summary is decoration: log and fall back, never block starting a journey
        set_last_error(f"{type(e).__name__}: {e}")
        logger.warning("[SUMMARY] crop=%s failed: %r", crop.id, e)
        return FALLBACK_SUMMARY

    return text or FALLBACK_SUMMARY
