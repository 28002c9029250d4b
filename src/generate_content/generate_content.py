import json
import logging
from typing import Any

import openai
from openai import OpenAI

from common.errors import GenerationError
from common.text import truncate_text
from generate_content.fallbacks import (
    FALLBACK_POST,
    FALLBACK_TAKEAWAYS,
    FALLBACK_THREAD,
    MIN_POST_LENGTH,
    MIN_THREAD_LENGTH,
    canned_content,
)
from generate_content.instructions import PROMPT_STYLES, RESPONSE_FORMAT
from generate_content.models import GenerationConfig, RepurposedContent

logger = logging.getLogger(__name__)

THREAD_SEPARATOR = "\n\n"


def build_messages(article: str, prompt_style: str = "detailed") -> list[dict[str, str]]:
    """Build the system and user messages for an article."""
    try:
        system_instructions, template = PROMPT_STYLES[prompt_style]
    except KeyError:
        raise ValueError(
            f"Unknown prompt style {prompt_style!r}, expected one of {sorted(PROMPT_STYLES)}"
        ) from None

    prompt = template.format(article=article, response_format=RESPONSE_FORMAT)
    return [
        {"role": "system", "content": system_instructions},
        {"role": "user", "content": prompt},
    ]


def request_completion(
    client: OpenAI,
    messages: list[dict[str, str]],
    config: GenerationConfig,
) -> str | None:
    """Call the chat completion API and return the reply text."""
    kwargs: dict[str, Any] = {
        "model": config.model,
        "messages": messages,
        "temperature": config.temperature,
        "top_p": config.top_p,
        "max_tokens": config.max_tokens,
    }
    if config.json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    try:
        response = client.chat.completions.create(**kwargs)
    except openai.OpenAIError as e:
        logger.error("Model API call failed: %s", e)
        raise GenerationError(f"Model API error: {e}") from e

    if not response.choices:
        return None
    return response.choices[0].message.content


def parse_reply(reply: str | None) -> dict[str, Any] | None:
    """Parse a model reply as a JSON object. Returns None if it is not one."""
    if not reply:
        return None
    try:
        data = json.loads(reply)
    except json.JSONDecodeError as e:
        logger.warning("Model reply is not valid JSON: %s", e)
        logger.warning("Raw reply: %s", reply)
        return None
    if not isinstance(data, dict):
        logger.warning("Model reply is JSON but not an object: %s", type(data).__name__)
        return None
    return data


def _thread_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        tweets = [item for item in value if isinstance(item, str) and item.strip()]
        if tweets:
            return THREAD_SEPARATOR.join(tweets)
    return None


def validate_reply(data: dict[str, Any]) -> RepurposedContent:
    """Keep each usable field verbatim and substitute fallbacks for the rest."""
    thread = _thread_text(data.get("twitterThread"))
    if thread is None or len(thread) < MIN_THREAD_LENGTH:
        logger.info("Thread missing or too short, using fallback")
        thread = FALLBACK_THREAD

    post = data.get("linkedinPost")
    if not isinstance(post, str) or len(post) < MIN_POST_LENGTH:
        logger.info("Long-form post missing or too short, using fallback")
        post = FALLBACK_POST

    raw_takeaways = data.get("keyTakeaways")
    takeaways = []
    if isinstance(raw_takeaways, list):
        takeaways = [item for item in raw_takeaways if isinstance(item, str) and item.strip()]
    if not takeaways:
        logger.info("Takeaways missing or empty, using fallback")
        takeaways = list(FALLBACK_TAKEAWAYS)

    return RepurposedContent(thread=thread, long_form_post=post, takeaways=takeaways)


def generate_content(
    article: str,
    client: OpenAI,
    config: GenerationConfig | None = None,
) -> RepurposedContent:
    """
    Generate a thread, a long-form post and takeaways from article text.

    Malformed or incomplete model output degrades to fallback content; only a
    failing model API raises (GenerationError).
    """
    config = config or GenerationConfig()

    truncated = truncate_text(article, config.max_input_chars)
    logger.info("Original content length: %d characters", len(article))
    logger.info("Truncated content length: %d characters", len(truncated))

    messages = build_messages(truncated, config.prompt_style)
    reply = request_completion(client, messages, config)

    data = parse_reply(reply)
    if data is None:
        logger.warning("Unusable model reply, returning canned content")
        return canned_content()

    return validate_reply(data)
