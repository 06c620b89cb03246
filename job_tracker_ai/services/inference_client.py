"""OpenAI chat completion call for job posting extraction."""

from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from job_tracker_ai.config import LLM_MAX_TOKENS, LLM_TEMPERATURE, MODEL_NAME, OPENAI_API_KEY
from job_tracker_ai.errors import InferenceError
from job_tracker_ai.schemas.page import PromptPayload
from job_tracker_ai.utils.logger import get_logger

logger = get_logger(__name__)


async def complete_chat(payload: PromptPayload, client: Optional[AsyncOpenAI] = None) -> str:
    """
    Send the system instruction and page content as a two-message chat and
    return the first choice's text. No retry: any API failure or an empty
    answer raises InferenceError.
    """
    if client is None:
        if not OPENAI_API_KEY:
            raise InferenceError("OPENAI_API_KEY is not set")
        client = AsyncOpenAI(api_key=OPENAI_API_KEY)

    try:
        response = await client.chat.completions.create(
            model=MODEL_NAME,
            messages=[
                {"role": "system", "content": payload.system_prompt},
                {"role": "user", "content": payload.user_content},
            ],
            temperature=LLM_TEMPERATURE,
            max_tokens=LLM_MAX_TOKENS,
        )
    except OpenAIError as e:
        logger.error("OpenAI request failed: %s", e)
        raise InferenceError(f"OpenAI request failed: {e}") from e

    choice = response.choices[0] if response.choices else None
    if not choice or not choice.message or not choice.message.content:
        raise InferenceError("No response from OpenAI")
    logger.debug("OpenAI response: %s", choice.message.content)
    return choice.message.content
