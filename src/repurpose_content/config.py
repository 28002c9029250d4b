"""Configuration loader for the repurposing pipeline and API server."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from extract_article.models import DEFAULT_USER_AGENT, ExtractionConfig
from generate_content.models import GenerationConfig

load_dotenv()

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
CONFIG_ENV_VAR = "REPURPOSE_CONFIG"


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3001


@dataclass
class FetchConfig:
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float | None = 30


@dataclass
class ProviderConfig:
    base_url: str = "https://api.groq.com/openai/v1"
    api_key_env: str = "GROQ_API_KEY"
    api_key: str | None = None


@dataclass
class AppConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    min_viable_length: int = 100
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)


def load_config(config_name: str | None = None) -> AppConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses REPURPOSE_CONFIG env var or "prod".

    Returns:
        Loaded AppConfig; the API key and port are read from the environment.
    """
    if config_name is None:
        config_name = os.environ.get(CONFIG_ENV_VAR, "prod")

    config_path = CONFIG_DIR / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return _parse_config(data)


def _port_from_env(default: int) -> int:
    """PORT overrides the YAML port; blank counts as unset."""
    value = os.environ.get("PORT", "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"PORT must be an integer, got {value!r}") from e


def _parse_config(data: dict) -> AppConfig:
    """Parse config dictionary into AppConfig, applying environment overrides."""
    server_raw = data.get("server", {})
    server = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=_port_from_env(server_raw.get("port", 3001)),
    )

    fetch_raw = data.get("fetch", {})
    fetch = FetchConfig(
        user_agent=fetch_raw.get("user_agent", DEFAULT_USER_AGENT),
        request_timeout=fetch_raw.get("request_timeout", 30),
    )

    extraction_raw = data.get("extraction", {})
    extraction = ExtractionConfig(
        min_content_length=extraction_raw.get("min_content_length", 500),
        min_paragraph_length=extraction_raw.get("min_paragraph_length", 50),
    )

    provider_raw = data.get("provider", {})
    api_key_env = provider_raw.get("api_key_env", "GROQ_API_KEY")
    provider = ProviderConfig(
        base_url=provider_raw.get("base_url", "https://api.groq.com/openai/v1"),
        api_key_env=api_key_env,
        api_key=os.environ.get(api_key_env) or None,
    )

    generation_raw = data.get("generation", {})
    generation = GenerationConfig(
        model=generation_raw.get("model", "openai/gpt-oss-20b"),
        prompt_style=generation_raw.get("prompt_style", "detailed"),
        temperature=generation_raw.get("temperature", 0.3),
        top_p=generation_raw.get("top_p", 0.9),
        max_tokens=generation_raw.get("max_tokens", 2000),
        max_input_chars=generation_raw.get("max_input_chars", 3000),
        json_mode=generation_raw.get("json_mode", True),
    )

    return AppConfig(
        server=server,
        fetch=fetch,
        extraction=extraction,
        min_viable_length=extraction_raw.get("min_viable_length", 100),
        provider=provider,
        generation=generation,
    )


# Global config instance (loaded on first access)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the current configuration (lazy-loaded)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: AppConfig):
    """Set the global configuration (useful for testing)."""
    global _config
    _config = config


def reset_config():
    """Reset the global configuration (forces reload on next access)."""
    global _config
    _config = None
