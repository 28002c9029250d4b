"""Repurposing service shared by every request."""

import requests
from openai import OpenAI

from generate_content.models import RepurposedContent
from repurpose_content.config import AppConfig
from repurpose_content.repurpose_content import repurpose_url


class RepurposeService:
    """Holds the stateless outbound clients and runs the pipeline per URL."""

    def __init__(self, config: AppConfig, session: requests.Session, llm_client: OpenAI):
        self.config = config
        self.session = session
        self.llm_client = llm_client

    def repurpose(self, url: str) -> RepurposedContent:
        return repurpose_url(url, self.session, self.llm_client, self.config)

    def close(self) -> None:
        self.session.close()
