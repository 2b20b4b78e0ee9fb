"""
Text normalization utilities for pasted contact blurbs.

Handles the artifacts of copying from email threads, texts and DMs:
- normalize_text(): canonical multi-line form (one space between words, "\n" between lines)
- strip_list_markers(): removes numbering / bullets / letter markers from a single line
- split_numbered_tokens(): recovers "1. foo 2. bar" items that arrived as one paragraph
- extract_clean_lines(): the decoration-free lines offered for manual field assignment
"""

from typing import List, Tuple

from app.core.field_extractors import PATTERNS


def normalize_text(text: str) -> str:
    """
    Collapse line-break variants to "\n" and whitespace runs to a single space.

    Examples:
      "SAUL\r\n\r\n  Jonathan   Weinstein " -> "SAUL\nJonathan Weinstein"
      "   "                                 -> ""
    """
    # splitlines() also breaks on \v, \f, \x85 and the Unicode line separators
    lines = (" ".join(line.split()) for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def strip_list_markers(line: str, letter_markers: bool = True) -> str:
    """
    Strip leading list decoration until nothing more can be removed.

    Only 1-2 digit numbers count as markers so a phone number at the start of a
    line keeps its area code. A letter marker is left alone when another initial
    follows it, and ``letter_markers=False`` keeps single initials as well.

    Examples:
      "1. Kevin VanderWal" -> "Kevin VanderWal"
      "• b) SAUL"          -> "SAUL"
      "A. J. Smith"        -> "A. J. Smith"
      "760-595-1290"       -> "760-595-1290"
    """
    markers = PATTERNS.list_markers
    if letter_markers:
        markers += (PATTERNS.letter_marker,)

    cleaned = line.strip()
    while True:
        before = cleaned
        for marker in markers:
            cleaned = marker.sub("", cleaned, count=1).strip()
        if cleaned == before:
            return cleaned


def split_numbered_tokens(text: str) -> Tuple[str, List[Tuple[int, str]]]:
    """
    Split text on numeric list markers wherever they follow whitespace.

    Returns (preamble, [(number, content), ...]) where preamble is whatever
    preceded the first marker.

    Example:
      "1. Kevin 2. K3VO 3. 619k3vo@gmail.com"
        -> ("", [(1, "Kevin"), (2, "K3VO"), (3, "619k3vo@gmail.com")])
    """
    markers = list(PATTERNS.numbered_marker.finditer(text))
    if not markers:
        return text.strip(), []

    preamble = text[:markers[0].start()].strip()
    tokens: List[Tuple[int, str]] = []
    for i, m in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(text)
        content = text[m.end():end].strip()
        if content:
            tokens.append((int(m.group(1)), content))
    return preamble, tokens


def extract_clean_lines(text: str) -> List[str]:
    lines = [line.strip() for line in text.split("\n") if line.strip()]

    # A whole numbered list pasted as one paragraph
    if len(lines) == 1:
        preamble, tokens = split_numbered_tokens(lines[0])
        if len({number for number, _ in tokens}) >= 2:
            lines = ([preamble] if preamble else []) + [content for _, content in tokens]

    cleaned = (strip_list_markers(line) for line in lines)
    return [line for line in cleaned if line]
