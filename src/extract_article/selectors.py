"""XPath selectors for boilerplate removal and content-container probing.

CSS-style names are kept alongside each XPath so logs read like the
selectors a person would write by hand.
"""

from extract_article.models import ContentSelector


def has_class(name: str) -> str:
    """XPath predicate matching a whole class token (like CSS `.name`)."""
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"


BOILERPLATE_TAGS = ["script", "style", "nav", "header", "footer", "aside"]
BOILERPLATE_CLASSES = ["advertisement", "ads", "sidebar"]

BOILERPLATE_XPATH = " | ".join(
    [f"//{tag}" for tag in BOILERPLATE_TAGS]
    + [f"//*[{has_class(cls)}]" for cls in BOILERPLATE_CLASSES]
)

# Most specific first; the first match long enough wins.
CONTENT_SELECTORS = [
    ContentSelector("article .content", f"//article//*[{has_class('content')}]"),
    ContentSelector("article .post-content", f"//article//*[{has_class('post-content')}]"),
    ContentSelector("article .entry-content", f"//article//*[{has_class('entry-content')}]"),
    ContentSelector("article .article-content", f"//article//*[{has_class('article-content')}]"),
    ContentSelector("article", "//article"),
    ContentSelector(".post-content", f"//*[{has_class('post-content')}]"),
    ContentSelector(".entry-content", f"//*[{has_class('entry-content')}]"),
    ContentSelector(".article-content", f"//*[{has_class('article-content')}]"),
    ContentSelector(".content", f"//*[{has_class('content')}]"),
    ContentSelector("main", "//main"),
    ContentSelector('[role="main"]', "//*[@role='main']"),
]

PARAGRAPH_XPATH = "//p"
