"""Tests for generate_content.generate_content module."""

from __future__ import annotations

import json
from dataclasses import replace
from unittest.mock import Mock

import openai
import pytest

from common.errors import GenerationError
from generate_content.fallbacks import (
    CANNED_CONTENT,
    FALLBACK_POST,
    FALLBACK_TAKEAWAYS,
    FALLBACK_THREAD,
    canned_content,
)
from generate_content.generate_content import (
    build_messages,
    generate_content,
    parse_reply,
    validate_reply,
)
from generate_content.instructions import DETAILED_SYSTEM_INSTRUCTIONS, SIMPLE_SYSTEM_INSTRUCTIONS
from generate_content.models import GenerationConfig

ARTICLE = "Remote teams ship faster when they write things down. " * 10

THREAD = (
    "1/ Remote teams that document decisions ship faster.\n\n"
    "2/ Written context beats meetings for async work. #remote\n\n"
    "3/ What's one doc your team can't live without?"
)
POST = (
    "Most remote teams lose hours every week re-explaining decisions.\n\n"
    "The fix is a culture of writing: decision logs, short RFCs and clear owners.\n\n"
    "How does your team keep context alive?"
)
TAKEAWAYS = [
    "Keep a decision log",
    "Prefer short written proposals to meetings",
    "Assign an owner to every document",
]


def _fake_client(content: str | None) -> Mock:
    client = Mock()
    message = Mock()
    message.content = content
    client.chat.completions.create.return_value = Mock(choices=[Mock(message=message)])
    return client


def _reply(**fields) -> str:
    data = {"twitterThread": THREAD, "linkedinPost": POST, "keyTakeaways": TAKEAWAYS}
    data.update(fields)
    return json.dumps({k: v for k, v in data.items() if v is not None})


class TestBuildMessages:
    def test_detailed_style(self) -> None:
        messages = build_messages("Article body", "detailed")
        assert messages[0] == {"role": "system", "content": DETAILED_SYSTEM_INSTRUCTIONS}
        assert messages[1]["role"] == "user"
        assert "Article body" in messages[1]["content"]
        for key in ["twitterThread", "linkedinPost", "keyTakeaways"]:
            assert key in messages[1]["content"]

    def test_simple_style(self) -> None:
        messages = build_messages("Article body", "simple")
        assert messages[0]["content"] == SIMPLE_SYSTEM_INSTRUCTIONS
        assert "Article body" in messages[1]["content"]

    def test_article_with_braces(self) -> None:
        messages = build_messages("Use {placeholders} freely", "detailed")
        assert "Use {placeholders} freely" in messages[1]["content"]

    def test_unknown_style_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown prompt style"):
            build_messages("Article body", "poetic")


class TestParseReply:
    def test_json_object(self) -> None:
        assert parse_reply('{"a": 1}') == {"a": 1}

    def test_not_json(self) -> None:
        assert parse_reply("Sure! Here is your thread:") is None

    def test_json_but_not_object(self) -> None:
        assert parse_reply("[1, 2, 3]") is None

    def test_empty(self) -> None:
        assert parse_reply("") is None
        assert parse_reply(None) is None


class TestValidateReply:
    def test_valid_fields_unmodified(self) -> None:
        content = validate_reply(json.loads(_reply()))
        assert content.thread == THREAD
        assert content.long_form_post == POST
        assert content.takeaways == TAKEAWAYS

    def test_missing_takeaways_only_replaces_takeaways(self) -> None:
        content = validate_reply({"twitterThread": THREAD, "linkedinPost": POST})
        assert content.thread == THREAD
        assert content.long_form_post == POST
        assert content.takeaways == list(FALLBACK_TAKEAWAYS)

    def test_short_thread_replaced(self) -> None:
        content = validate_reply(json.loads(_reply(twitterThread="Too short")))
        assert content.thread == FALLBACK_THREAD
        assert content.long_form_post == POST

    def test_short_post_replaced(self) -> None:
        content = validate_reply(json.loads(_reply(linkedinPost="Brief post.")))
        assert content.long_form_post == FALLBACK_POST
        assert content.thread == THREAD

    def test_non_string_post_replaced(self) -> None:
        content = validate_reply(json.loads(_reply(linkedinPost=["paragraph"])))
        assert content.long_form_post == FALLBACK_POST

    def test_empty_takeaways_replaced(self) -> None:
        content = validate_reply(json.loads(_reply(keyTakeaways=[])))
        assert content.takeaways == list(FALLBACK_TAKEAWAYS)

    def test_takeaways_as_string_replaced(self) -> None:
        content = validate_reply(json.loads(_reply(keyTakeaways="One big takeaway")))
        assert content.takeaways == list(FALLBACK_TAKEAWAYS)

    def test_blank_and_non_string_takeaways_dropped(self) -> None:
        content = validate_reply(json.loads(_reply(keyTakeaways=["Keep", "", 3, "  ", "Ship"])))
        assert content.takeaways == ["Keep", "Ship"]

    def test_thread_list_joined(self) -> None:
        tweets = [
            "1/ Remote teams that document decisions ship faster.",
            "2/ Written context beats meetings.",
        ]
        content = validate_reply(json.loads(_reply(twitterThread=tweets)))
        assert content.thread == "\n\n".join(tweets)

    def test_all_fields_missing(self) -> None:
        content = validate_reply({})
        assert content.thread == FALLBACK_THREAD
        assert content.long_form_post == FALLBACK_POST
        assert content.takeaways == list(FALLBACK_TAKEAWAYS)


class TestCannedContent:
    def test_fully_populated(self) -> None:
        content = canned_content()
        assert content.thread
        assert content.long_form_post
        assert len(content.takeaways) >= 1

    def test_returns_independent_copy(self) -> None:
        content = canned_content()
        content.takeaways.append("mutated")
        assert "mutated" not in CANNED_CONTENT.takeaways


class TestGenerateContent:
    def test_valid_reply_round_trip(self) -> None:
        client = _fake_client(_reply())
        content = generate_content(ARTICLE, client)
        assert content.thread == THREAD
        assert content.long_form_post == POST
        assert content.takeaways == TAKEAWAYS

    def test_unparseable_reply_returns_canned(self) -> None:
        client = _fake_client("Here's a thread about remote work!")
        content = generate_content(ARTICLE, client)
        assert content == CANNED_CONTENT
        assert content.thread and content.long_form_post and content.takeaways

    def test_empty_reply_returns_canned(self) -> None:
        client = _fake_client(None)
        assert generate_content(ARTICLE, client) == CANNED_CONTENT

    def test_no_choices_returns_canned(self) -> None:
        client = Mock()
        client.chat.completions.create.return_value = Mock(choices=[])
        assert generate_content(ARTICLE, client) == CANNED_CONTENT

    def test_request_parameters(self) -> None:
        client = _fake_client(_reply())
        config = GenerationConfig(model="test-model", temperature=0.1, top_p=0.8, max_tokens=500)

        generate_content(ARTICLE, client, config)

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["temperature"] == 0.1
        assert kwargs["top_p"] == 0.8
        assert kwargs["max_tokens"] == 500
        assert kwargs["response_format"] == {"type": "json_object"}
        assert [m["role"] for m in kwargs["messages"]] == ["system", "user"]

    def test_json_mode_disabled(self) -> None:
        client = _fake_client(_reply())
        generate_content(ARTICLE, client, replace(GenerationConfig(), json_mode=False))
        assert "response_format" not in client.chat.completions.create.call_args.kwargs

    def test_long_article_truncated(self) -> None:
        client = _fake_client(_reply())
        generate_content("a" * 5000, client, GenerationConfig(max_input_chars=3000))

        prompt = client.chat.completions.create.call_args.kwargs["messages"][1]["content"]
        assert "a" * 3000 + "..." in prompt
        assert "a" * 3001 not in prompt

    def test_api_failure_raises_generation_error(self) -> None:
        client = Mock()
        client.chat.completions.create.side_effect = openai.OpenAIError("invalid api key")

        with pytest.raises(GenerationError, match="invalid api key"):
            generate_content(ARTICLE, client)
