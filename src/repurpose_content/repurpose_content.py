import logging

import requests
from openai import OpenAI

from common.errors import ExtractionError
from extract_article.extract_article import INSUFFICIENT_CONTENT_MESSAGE, extract_article
from generate_content.generate_content import generate_content
from generate_content.models import RepurposedContent
from repurpose_content.config import AppConfig

logger = logging.getLogger(__name__)


def repurpose_url(
    url: str,
    session: requests.Session,
    llm_client: OpenAI,
    config: AppConfig,
) -> RepurposedContent:
    """
    Turn one article URL into a thread, a long-form post and takeaways.

    Text shorter than config.min_viable_length is rejected before the model
    is called.

    Raises:
        FetchError: The page could not be fetched.
        ExtractionError: Not enough article text was found.
        GenerationError: The model API call failed.
    """
    logger.info("Processing URL: %s", url)

    article = extract_article(
        url,
        session,
        config.extraction,
        timeout=config.fetch.request_timeout,
    )
    if len(article) < config.min_viable_length:
        logger.warning(
            "Extracted %d characters from %s, need at least %d",
            len(article), url, config.min_viable_length,
        )
        raise ExtractionError(INSUFFICIENT_CONTENT_MESSAGE)

    logger.info("Extracted content length: %d characters", len(article))

    content = generate_content(article, llm_client, config.generation)
    logger.info("Content generation completed successfully")
    return content
