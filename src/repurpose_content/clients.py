"""Builders for the reusable outbound clients."""

import logging

import requests
from openai import OpenAI

from extract_article.fetch_page import build_session
from repurpose_content.config import AppConfig

logger = logging.getLogger(__name__)


def build_http_session(config: AppConfig) -> requests.Session:
    return build_session(config.fetch.user_agent)


def build_llm_client(config: AppConfig) -> OpenAI:
    """Build an OpenAI-compatible client for the configured provider.

    Raises:
        RuntimeError: If the API key environment variable is not set.
    """
    provider = config.provider
    if not provider.api_key:
        raise RuntimeError(f"{provider.api_key_env} is not set")

    logger.info("Using model provider at %s", provider.base_url)
    return OpenAI(api_key=provider.api_key, base_url=provider.base_url)
