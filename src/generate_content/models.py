"""Data models for the generate_content stage."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RepurposedContent:
    """Social-media drafts generated from one article."""
    thread: str
    long_form_post: str
    takeaways: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "thread": self.thread,
            "longFormPost": self.long_form_post,
            "takeaways": list(self.takeaways),
        }


@dataclass(frozen=True)
class GenerationConfig:
    model: str = "openai/gpt-oss-20b"
    prompt_style: str = "detailed"  # "detailed" or "simple"
    temperature: float = 0.3
    top_p: float = 0.9
    max_tokens: int = 2000
    max_input_chars: int = 3000
    json_mode: bool = True
