import logging

import requests
from lxml import etree
from lxml import html as lxml_html

from common.errors import ExtractionError
from common.text import normalize_whitespace
from extract_article.fetch_page import fetch_page
from extract_article.models import ExtractionConfig
from extract_article.selectors import BOILERPLATE_XPATH, CONTENT_SELECTORS, PARAGRAPH_XPATH

logger = logging.getLogger(__name__)

INSUFFICIENT_CONTENT_MESSAGE = "Could not extract sufficient content from the URL"


def extract_article(
    url: str,
    session: requests.Session,
    config: ExtractionConfig | None = None,
    timeout: float | None = 30,
) -> str:
    """
    Fetch a URL and reduce it to the article body as plain text.

    Raises:
        FetchError: The page could not be fetched.
        ExtractionError: The page held no usable text.
    """
    html = fetch_page(url, session, timeout=timeout)
    return extract_text(html, config)


def extract_text(html: str | bytes, config: ExtractionConfig | None = None) -> str:
    """
    Extract the main article text from an HTML document.

    Order:
    1. content selectors, most specific first; first match over
       min_content_length wins
    2. every paragraph longer than min_paragraph_length, joined

    Returns whitespace-normalized text. Raises ExtractionError if nothing
    usable is left.
    """
    config = config or ExtractionConfig()

    tree = _parse_html(html)
    _strip_boilerplate(tree)

    content = _extract_from_selectors(tree, config.min_content_length)
    if content is None:
        logger.info("No content selector matched, falling back to paragraphs")
        content = _extract_from_paragraphs(tree, config.min_paragraph_length)

    content = normalize_whitespace(content)
    if not content:
        raise ExtractionError(INSUFFICIENT_CONTENT_MESSAGE)
    return content


def _parse_html(html: str | bytes) -> lxml_html.HtmlElement:
    if not html or not html.strip():
        raise ExtractionError(INSUFFICIENT_CONTENT_MESSAGE)

    source = _decode_utf8(html) if isinstance(html, bytes) else html
    if isinstance(source, str) and source.lstrip().startswith("<?xml"):
        # lxml rejects str input that carries an encoding declaration
        source = source.encode("utf-8")

    try:
        return lxml_html.document_fromstring(source)
    except etree.ParserError as e:
        raise ExtractionError(INSUFFICIENT_CONTENT_MESSAGE) from e


def _decode_utf8(raw: bytes) -> str | bytes:
    """Decode UTF-8 bodies; anything else stays bytes for lxml's <meta charset> sniffing."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw


def _strip_boilerplate(tree: lxml_html.HtmlElement) -> None:
    for element in tree.xpath(BOILERPLATE_XPATH):
        if element.getparent() is not None:
            element.drop_tree()


def _extract_from_selectors(tree: lxml_html.HtmlElement, min_length: int) -> str | None:
    for selector in CONTENT_SELECTORS:
        matches = tree.xpath(selector.xpath)
        if not matches:
            continue
        text = normalize_whitespace(matches[0].text_content())
        if len(text) > min_length:
            logger.info("Matched selector %r (%d characters)", selector.name, len(text))
            return text
    return None


def _extract_from_paragraphs(tree: lxml_html.HtmlElement, min_length: int) -> str:
    paragraphs = []
    for element in tree.xpath(PARAGRAPH_XPATH):
        text = element.text_content().strip()
        if len(text) > min_length:
            paragraphs.append(text)
    return " ".join(paragraphs)
