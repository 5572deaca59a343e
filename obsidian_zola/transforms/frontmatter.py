"""Frontmatter handling for exported notes.

Frontmatter is never rewritten: it is split off before link rewriting and
written back verbatim according to the chosen strategy.
"""

import logging
import re
from enum import Enum
from typing import Tuple

import yaml

logger = logging.getLogger(__name__)

DELIMITER = '---'

# Opening and closing delimiter lines, LF or CRLF
_FRONTMATTER = re.compile(r'\A---\r?\n(.*?\r?\n)?---\r?\n', re.S)


class FrontmatterStrategy(Enum):
    """When to write a frontmatter block to exported notes."""
    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


def split_frontmatter(raw_content: str) -> Tuple[str, str]:
    """Split a note into its frontmatter text and body.

    Args:
        raw_content: Full file content including frontmatter

    Returns:
        Tuple of (frontmatter YAML text, body). The YAML text is empty when
        the note has no valid frontmatter block.
    """
    match = _FRONTMATTER.match(raw_content)
    if match is None:
        return "", raw_content
    frontmatter = match.group(1) or ""

    try:
        data = yaml.safe_load(frontmatter)
    except yaml.YAMLError as e:
        logger.warning("Ignoring invalid YAML frontmatter: %s", e)
        return "", raw_content

    if data is not None and not isinstance(data, dict):
        return "", raw_content

    return frontmatter, raw_content[match.end():]


def build_output(frontmatter: str, body: str, strategy: FrontmatterStrategy) -> str:
    """Join frontmatter and body for writing.

    The delimiter lines use the same line ending as the frontmatter text.

    Args:
        frontmatter: YAML text as returned by split_frontmatter
        body: Rewritten body
        strategy: Frontmatter strategy

    Returns:
        Complete note text
    """
    if strategy is FrontmatterStrategy.NEVER:
        return body
    if strategy is FrontmatterStrategy.AUTO and not frontmatter:
        return body
    newline = '\r\n' if frontmatter.endswith('\r\n') else '\n'
    return f"{DELIMITER}{newline}{frontmatter}{DELIMITER}{newline}{body}"
