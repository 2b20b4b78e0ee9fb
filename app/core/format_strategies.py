"""
Parsing strategies for contact blurbs.

Each strategy reads the normalized text (or the cleaned lines) and returns a
ContactCandidate with per-field confidence. Strategies are independent; the
arbitrator decides which result to keep.

Formats seen in practice:

  Structured-Positional (caller says "this is in order"):
    Kevin VanderWal / K3VO / 760-595-1290 / 619k3vo@gmail.com / @sd.k3vo

  Numbered list (multi-line or one run-on paragraph):
    1. Kevin VanderWal 2. K3VO 3. 619k3vo@gmail.com 4. 760-5951290 5. @sd.k3vo

  Labeled:
    Ricardo Haynes (DJ Full Name)
    DJ SUNSET (DJ Name)
    8054537433 (phone)

  Bare lines:
    SAUL
    Jonathan Weinstein
    (858) 692-1601
"""

from typing import List, Optional, Tuple

from app.core.field_extractors import (
    PATTERNS,
    analyze_name,
    ensure_handle_prefix,
    extract_email,
    extract_instagram,
    extract_phone,
)
from app.core.schemas import ContactCandidate
from app.core.text_normalization import split_numbered_tokens, strip_list_markers


def _lines(text: str) -> List[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def _claim_contact_field(candidate: ContactCandidate, line: str) -> bool:
    """
    Sniff a line for email, phone, then Instagram and store the first match whose
    field is still empty. Returns True if the line looked like contact data at all,
    even when every matching field was already taken.
    """
    matched = False
    for field_name, extractor in (
        ("email", extract_email),
        ("phone", extract_phone),
        ("instagram_handle", extract_instagram),
    ):
        found = extractor(line)
        if not found.value:
            continue
        matched = True
        if not getattr(candidate, field_name):
            candidate.assign(field_name, found.value, found.confidence)
            return True
    return matched


# --- Structured-Positional ---

def parse_structured_positional(lines: List[str]) -> ContactCandidate:
    """
    Fixed order: legal name, stage name, phone, email, Instagram.
    Lines past the fifth are ignored; missing lines leave fields unset.
    """
    candidate = ContactCandidate()
    slots = (lines + [""] * 5)[:5]
    legal, stage, phone_line, email_line, instagram_line = slots

    if legal:
        candidate.assign("legal_name", legal, 0.9)
    if stage:
        candidate.assign("stage_name", stage, 0.9)

    if phone_line:
        phone = extract_phone(phone_line)
        if phone.value:
            candidate.assign("phone", phone.value, phone.confidence)
        else:
            # Position says phone even if the format is off
            candidate.assign("phone", phone_line, 0.5)

    if email_line:
        email = extract_email(email_line)
        if email.value:
            candidate.assign("email", email.value, email.confidence)
        else:
            candidate.assign("email", email_line, 0.5)

    if instagram_line:
        instagram = extract_instagram(instagram_line)
        if instagram.value:
            candidate.assign("instagram_handle", instagram.value, instagram.confidence)
        else:
            candidate.assign("instagram_handle", ensure_handle_prefix(instagram_line), 0.7)

    return candidate


# --- Numbered list ---

def _numbered_tokens(text: str) -> List[Tuple[int, str]]:
    tokens = [(int(m.group(1)), m.group(2).strip()) for m in PATTERNS.numbered_line.finditer(text)]
    if len(tokens) >= 2:
        return tokens

    # One paragraph holding the whole list: "1. foo 2. bar 3. baz"
    _, run_on = split_numbered_tokens(text)
    return run_on if len(run_on) > len(tokens) else tokens


def _clean_numbered_content(content: str) -> str:
    content = PATTERNS.trailing_item.sub("", content).strip()
    # "(DJ Full Name)" style labels
    return PATTERNS.trailing_label.sub("", content).strip()


def parse_numbered_list(text: str) -> ContactCandidate:
    """
    Standard order: 1. Full Name, 2. DJ Name, 3. Email, 4. Phone, 5. Instagram.
    Items 3 and 4 are sniffed since people swap email and phone all the time.
    """
    candidate = ContactCandidate()

    for number, raw_content in _numbered_tokens(text):
        content = _clean_numbered_content(raw_content)
        if not content:
            continue

        if number == 1:
            candidate.assign("legal_name", content, 0.9)

        elif number == 2:
            candidate.assign("stage_name", content, 0.9)

        elif number == 3:
            email = extract_email(content)
            phone = extract_phone(content)
            instagram = extract_instagram(content)
            if email.value:
                candidate.assign("email", email.value, email.confidence)
            elif phone.value:
                candidate.assign("phone", phone.value, phone.confidence)
            elif instagram.value:
                candidate.assign("instagram_handle", instagram.value, instagram.confidence)
            else:
                candidate.assign("email", content, 0.5)

        elif number == 4:
            email = extract_email(content)
            phone = extract_phone(content)
            instagram = extract_instagram(content)
            if phone.value:
                candidate.assign("phone", phone.value, phone.confidence)
            elif email.value and not candidate.email:
                candidate.assign("email", email.value, email.confidence)
            elif instagram.value:
                candidate.assign("instagram_handle", instagram.value, instagram.confidence)
            else:
                candidate.assign("phone", content, 0.5)

        elif number == 5:
            instagram = extract_instagram(content)
            if instagram.value:
                candidate.assign("instagram_handle", instagram.value, instagram.confidence)
            else:
                candidate.assign("instagram_handle", ensure_handle_prefix(content), 0.7)

    return candidate


# --- Labeled ---

def _match_label(line: str) -> Tuple[Optional[str], str]:
    """Return (field_name, value without the label cue), or (None, line)."""
    for field_name, cue in PATTERNS.label_cues:
        if cue.search(line):
            value = strip_list_markers(cue.sub(" ", line, count=1), letter_markers=False)
            return field_name, " ".join(value.split())
    return None, line


def parse_labeled(text: str) -> ContactCandidate:
    """
    Lines carrying an explicit cue like "(DJ Name)" or "[email]".

    A labeled value always overwrites; unlabeled lines only fill empty fields.
    """
    candidate = ContactCandidate()

    for line in _lines(text):
        field_name, value = _match_label(line)

        if field_name is None:
            _claim_contact_field(candidate, line)
            continue

        if field_name in ("legal_name", "stage_name"):
            if value:
                candidate.assign(field_name, value, 0.95)

        elif field_name == "phone":
            phone = extract_phone(value)
            if phone.value:
                candidate.assign("phone", phone.value, 0.95)

        elif field_name == "email":
            email = extract_email(value)
            if email.value:
                candidate.assign("email", email.value, 0.95)

        elif field_name == "instagram_handle":
            instagram = extract_instagram(value)
            if instagram.value:
                candidate.assign("instagram_handle", instagram.value, 0.95)
            elif value and " " not in value:
                # "Djsunset.fv (instagram)": the label vouches for a handle typed without "@"
                candidate.assign("instagram_handle", ensure_handle_prefix(value), 0.7)

    return candidate


# --- Line by line ---

def parse_line_by_line(text: str) -> ContactCandidate:
    """
    Classify every line on its own. Contact-looking lines fill email/phone/Instagram;
    everything else is a name candidate.

    Only the first two name candidates are considered; any further name-like lines
    are dropped.
    """
    candidate = ContactCandidate()
    name_lines: List[str] = []

    for line in _lines(text):
        if not _claim_contact_field(candidate, line):
            name_lines.append(line)

    if len(name_lines) >= 2:
        first, second = name_lines[0], name_lines[1]
        first_analysis = analyze_name(first)
        second_analysis = analyze_name(second)

        if first_analysis.is_stage_name:
            candidate.assign("stage_name", first, first_analysis.confidence)
            candidate.assign("legal_name", second, second_analysis.confidence)
        else:
            candidate.assign("legal_name", first, first_analysis.confidence)
            candidate.assign("stage_name", second, second_analysis.confidence)

    elif len(name_lines) == 1:
        analysis = analyze_name(name_lines[0])
        field_name = "stage_name" if analysis.is_stage_name else "legal_name"
        candidate.assign(field_name, name_lines[0], analysis.confidence)

    return candidate
