"""Reference scanner for rendered Markdown.

Block structure comes from markdown-it-py so that code blocks, fences and
HTML blocks are never touched; only the lines backing inline content are
searched for link, image and wikilink constructs.
"""

import re
from bisect import bisect_right
from collections import defaultdict
from typing import Dict, Iterator, List, Tuple

from markdown_it import MarkdownIt

from obsidian_zola.core.models import Reference, ReferenceKind

# Stands in for masked characters; not whitespace, brackets or parens
_FILLER = "\x1a"

_LINE_BREAK = re.compile(r'\r\n|\r|\n')

_BACKTICKS = re.compile(r'`+')

_ESCAPE = re.compile(r'\\[!-/:-@\[-`{-~]')

# [[target]], [[target|text]], [text](dest "title") and their ! forms
_REFERENCE_PATTERN = re.compile(
    r'(?P<bang>!?)'
    r'(?:'
    r'\[\[(?P<wiki>[^\[\]|\n]+)(?:\|(?P<wikitext>[^\[\]\n]*))?\]\]'
    r'|'
    r'\[(?P<text>(?:[^\[\]]|\[[^\[\]]*\])*)\]'
    r'\(\s*(?P<dest><[^<>\n]*>|(?:[^\s()<>]|\([^\s()]*\))*)'
    r'(?:\s+(?P<title>"[^"\n]*"|\'[^\'\n]*\'))?\s*\)'
    r')'
)

_parser = MarkdownIt("commonmark").enable("table")


def scan_references(text: str) -> Iterator[Reference]:
    """Yield every reference in ``text`` in document order.

    Args:
        text: Markdown source

    Yields:
        Reference objects whose offsets index into ``text``
    """
    for region_start, region_end in _inline_regions(text):
        segment = text[region_start:region_end]
        masked = _mask(segment)
        for match in _REFERENCE_PATTERN.finditer(masked):
            yield _to_reference(segment, match, region_start)


def _inline_regions(text: str) -> List[Tuple[int, int]]:
    """Character ranges of the lines that hold inline content."""
    line_starts = [0]
    for match in _LINE_BREAK.finditer(text):
        line_starts.append(match.end())
    if line_starts[-1] != len(text):
        line_starts.append(len(text))
    last_line = len(line_starts) - 1

    spans = []
    current_map = None
    for token in _parser.parse(text):
        if token.map is not None:
            current_map = token.map
        if token.type != "inline" or current_map is None:
            continue
        first, last = current_map
        start = line_starts[min(first, last_line)]
        end = line_starts[min(last, last_line)]
        if start < end:
            spans.append((start, end))

    merged: List[Tuple[int, int]] = []
    for start, end in sorted(set(spans)):
        if merged and start < merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def _mask(segment: str) -> str:
    """Blank out code spans and backslash escapes, preserving offsets."""
    chars = list(segment)
    for start, end in _code_spans(segment):
        chars[start:end] = _FILLER * (end - start)
    masked = "".join(chars)
    return _ESCAPE.sub(lambda m: _FILLER * len(m.group(0)), masked)


def _code_spans(segment: str) -> List[Tuple[int, int]]:
    """Locate inline code spans using CommonMark backtick-run matching.

    A backslash escapes only the first backtick of an opening run; closing
    runs are never escaped.
    """
    runs = [(m.start(), m.end()) for m in _BACKTICKS.finditer(segment)]
    by_width: Dict[int, List[int]] = defaultdict(list)
    for index, (start, end) in enumerate(runs):
        by_width[end - start].append(index)

    spans = []
    i = 0
    while i < len(runs):
        start, end = runs[i]
        if start > 0 and segment[start - 1] == "\\":
            start += 1
        closers = by_width.get(end - start, [])
        position = bisect_right(closers, i)
        if end > start and position < len(closers):
            closer = closers[position]
            spans.append((start, runs[closer][1]))
            i = closer + 1
        else:
            i += 1
    return spans


def _to_reference(segment: str, match: re.Match, offset: int) -> Reference:
    """Build a Reference, reading groups back from the unmasked segment."""
    def group(name):
        if match.start(name) == -1:
            return None
        return segment[match.start(name):match.end(name)]

    embedded = bool(match.group("bang"))
    start = offset + match.start()
    end = offset + match.end()

    if match.start("wiki") != -1:
        return Reference(
            kind=ReferenceKind.EMBED if embedded else ReferenceKind.LINK,
            target=group("wiki").strip(),
            text=group("wikitext"),
            start=start,
            end=end,
            wikilink=True,
        )

    dest = group("dest")
    if dest.startswith("<") and dest.endswith(">"):
        dest = dest[1:-1]
    title = group("title")
    if title is not None:
        title = title[1:-1]

    return Reference(
        kind=ReferenceKind.IMAGE if embedded else ReferenceKind.LINK,
        target=dest,
        text=group("text"),
        start=start,
        end=end,
        title=title,
    )
