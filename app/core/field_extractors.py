"""
Field-level detectors for contact blurbs.

Each extractor looks at a piece of text, returns the first value it recognizes and a
confidence for it. Extractors never raise; a miss is FieldMatch(None, 0.0).

Confidence Scale (shared with the strategies):
  0.95  = Regex exact (email) or explicitly labeled field
  0.9   = Regex exact with canonical formatting (10-digit phone, @handle)
  0.8   = Canonical after dropping a country code / legal-name heuristic
  0.7   = Positional guess for a handle without "@"
  0.6   = Weak signal (unformatted digits, single-token name)
  0.5   = Raw value stored because position says so, format not validated
  0.3   = Something phone-like was found but could not be validated
"""

import re
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple


# Optional "+1" / "1-" prefix shared by all phone families
_COUNTRY_CODE = r"(?:\+?1[-.\s]?)?"


@dataclass(frozen=True)
class PatternTable:
    """Every pattern the engine matches against. Built once, shared read-only."""

    email: re.Pattern = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

    # Order matters: earlier families are narrower and win over later, broader ones
    phone_families: Tuple[re.Pattern, ...] = (
        re.compile(_COUNTRY_CODE + r"\(\d{3}\)[-.\s]*\d{3}[-.\s]*\d{4}"),  # (858) 692-1601
        re.compile(_COUNTRY_CODE + r"\d{3}[-.\s]+\d{3}[-.\s]+\d{4}"),  # 512-712-2689 / 760.595.1290
        re.compile(_COUNTRY_CODE + r"\d{10}"),  # 8054537433
        re.compile(_COUNTRY_CODE + r"\d{3}[-.\s]+\d{7}"),  # 760-5951290
    )

    instagram: re.Pattern = re.compile(r"@[\w.]+\\?")

    # "1. Kevin" at the start of a line
    numbered_line: re.Pattern = re.compile(r"^\s*(\d{1,2})[.)](?!\d)\s*(.+)$", re.MULTILINE)
    # "1." anywhere it follows whitespace (run-on paragraphs)
    numbered_marker: re.Pattern = re.compile(r"(?:^|(?<=\s))(\d{1,2})[.)](?!\d)\s*")
    # " 3. leftover" leaked from the next item
    trailing_item: re.Pattern = re.compile(r"\s+\d{1,2}[.)]\s+.*$")
    trailing_label: re.Pattern = re.compile(r"\s*(?:\([^)]*\)|\[[^\]]*\])\s*$")

    # List decoration stripped from cleaned lines, applied in this order
    list_markers: Tuple[re.Pattern, ...] = (
        re.compile(r"^\d{1,2}[.)]\s+"),  # "1. " / "12) "
        re.compile(r"^\d{1,2}\s*-\s+"),  # "4 - "
        re.compile(r"^[•\-*+]\s+"),  # bullets
    )
    # "a. " / "B) ", but not the first of several initials ("A. J. Smith")
    letter_marker: re.Pattern = re.compile(r"^[A-Za-z][.)]\s+(?![A-Za-z][.)]\s)")

    # (field, cue) pairs; first cue found on a line wins
    label_cues: Tuple[Tuple[str, re.Pattern], ...] = (
        ("legal_name", re.compile(r"[(\[]\s*(?:dj\s+)?full\s+name\s*[)\]]", re.IGNORECASE)),
        ("stage_name", re.compile(r"[(\[]\s*dj(?:\s+name)?\s*[)\]]", re.IGNORECASE)),
        ("phone", re.compile(r"[(\[]\s*(?:phone|tel)\s*[)\]]", re.IGNORECASE)),
        ("email", re.compile(r"[(\[]\s*e-?mail\s*[)\]]", re.IGNORECASE)),
        ("instagram_handle", re.compile(r"[(\[]\s*insta(?:gram)?\s*[)\]]", re.IGNORECASE)),
    )

    stage_name_markers: Tuple[str, ...] = ("DJ", "dj", "Dj")


PATTERNS = PatternTable()


class FieldMatch(NamedTuple):
    value: Optional[str]
    confidence: float


class NameAnalysis(NamedTuple):
    is_stage_name: bool
    confidence: float


NO_MATCH = FieldMatch(None, 0.0)


def extract_email(text: str) -> FieldMatch:
    m = PATTERNS.email.search(text)
    if not m:
        return NO_MATCH
    return FieldMatch(m.group(0), 0.95)


def canonicalize_phone(raw: str) -> FieldMatch:
    """
    Normalize a matched phone substring.

    Examples:
      '(858) 692-1601'  -> ('858-692-1601', 0.9)
      '1-760-595-1290'  -> ('760-595-1290', 0.8)
      '555-1234'        -> ('5551234', 0.6)
      '12-34'           -> ('12-34', 0.3)
    """
    digits = re.sub(r"\D", "", raw)

    if len(digits) == 10:
        return FieldMatch(f"{digits[:3]}-{digits[3:6]}-{digits[6:]}", 0.9)
    if len(digits) == 11 and digits.startswith("1"):
        local = digits[1:]
        return FieldMatch(f"{local[:3]}-{local[3:6]}-{local[6:]}", 0.8)
    if len(digits) >= 7:
        return FieldMatch(digits, 0.6)
    return FieldMatch(raw, 0.3)


def extract_phone(text: str) -> FieldMatch:
    for family in PATTERNS.phone_families:
        m = family.search(text)
        if m:
            return canonicalize_phone(m.group(0).strip())
    return NO_MATCH


def ensure_handle_prefix(value: str) -> str:
    return "@" + value.strip().lstrip("@")


def extract_instagram(text: str) -> FieldMatch:
    m = PATTERNS.instagram.search(text)
    if not m:
        return NO_MATCH
    # Copy-pasted handles sometimes carry a stray trailing backslash
    handle = m.group(0).rstrip("\\")
    return FieldMatch(handle, 0.9)


def analyze_name(line: str) -> NameAnalysis:
    """
    Decide whether a line reads as a stage (DJ) name or a legal name.

    Rules are checked in priority order; only the first that applies counts:
      'DJ Sunset'          -> stage, 0.9  (DJ marker)
      'SAUL'               -> stage, 0.7  (all caps)
      'K3vo'               -> stage, 0.6  (single token)
      'Jonathan Weinstein' -> legal, 0.8
    """
    text = line.strip()

    if any(marker in text for marker in PATTERNS.stage_name_markers):
        return NameAnalysis(True, 0.9)

    letters = [c for c in text if c.isalpha()]
    if len(letters) >= 2 and text.isupper():
        return NameAnalysis(True, 0.7)

    if " " not in text:
        return NameAnalysis(True, 0.6)

    return NameAnalysis(False, 0.8)
