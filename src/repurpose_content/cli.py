"""CLI for repurposing a single article URL."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from datetime import datetime, timezone

from common.cli_helpers import save_json_local, setup_logging
from common.errors import RepurposeError
from generate_content.instructions import PROMPT_STYLES
from repurpose_content.clients import build_http_session, build_llm_client
from repurpose_content.config import load_config
from repurpose_content.repurpose_content import repurpose_url

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Turn a blog post into a thread, a long-form post and key takeaways.",
    )
    parser.add_argument("url", help="Article URL to repurpose.")
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under repurpose_content/configs (default: $REPURPOSE_CONFIG or prod).",
    )
    parser.add_argument("--model", default=None, help="Override the configured model.")
    parser.add_argument(
        "--prompt-style",
        choices=sorted(PROMPT_STYLES),
        default=None,
        help="Override the configured prompt style.",
    )
    parser.add_argument("--save-local", action="store_true")
    parser.add_argument("--output-dir", default="output")
    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Failed to load config: %s", e)
        return 1

    overrides = {}
    if args.model:
        overrides["model"] = args.model
    if args.prompt_style:
        overrides["prompt_style"] = args.prompt_style
    if overrides:
        config.generation = replace(config.generation, **overrides)

    try:
        llm_client = build_llm_client(config)
    except RuntimeError as e:
        logger.error("Failed to create model client: %s", e)
        return 1

    session = build_http_session(config)

    try:
        content = repurpose_url(args.url, session, llm_client, config)
    except RepurposeError as e:
        logger.error("Failed to repurpose %s: %s", args.url, e)
        return 1
    finally:
        session.close()

    result = content.to_dict()
    print(json.dumps(result, ensure_ascii=False, indent=2))

    if args.save_local:
        filepath = save_json_local(
            result,
            prefix="repurposed",
            timestamp=datetime.now(timezone.utc),
            output_dir=args.output_dir,
        )
        logger.info("Saved result to %s", filepath)

    return 0


if __name__ == "__main__":
    sys.exit(main())
