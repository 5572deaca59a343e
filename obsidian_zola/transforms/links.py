"""Link markup factories for obsidian-zola.

Each factory returns a function that renders one reference in the output
syntax. The rewriter takes them as parameters so the markup can be swapped
without touching resolution.
"""

from typing import Callable, Optional

LinkTransform = Callable[[str, str, Optional[str]], str]
FallbackTransform = Callable[[str], str]


def _title_suffix(title: Optional[str]) -> str:
    if title is None:
        return ""
    if '"' in title:
        return f" '{title}'"
    return f' "{title}"'


def markdown_link() -> LinkTransform:
    """Create a transform producing ``[text](target "title")``.

    Returns:
        A transform function (text, target, title) -> markdown
    """
    def transform(text: str, target: str, title: Optional[str] = None) -> str:
        return f"[{text}]({target}{_title_suffix(title)})"
    return transform


def markdown_image() -> LinkTransform:
    """Create a transform producing ``![alt](target "title")``.

    Returns:
        A transform function (alt, target, title) -> markdown
    """
    def transform(alt: str, target: str, title: Optional[str] = None) -> str:
        return f"![{alt}]({target}{_title_suffix(title)})"
    return transform


def emphasis(marker: str = "*") -> FallbackTransform:
    """Create a transform wrapping text in emphasis, used for broken links.

    Args:
        marker: Emphasis delimiter

    Returns:
        A transform function text -> markdown
    """
    def transform(text: str) -> str:
        return f"{marker}{text}{marker}"
    return transform
