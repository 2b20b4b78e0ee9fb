import logging
import re
from typing import List

from app.core.arbitration import arbitrate
from app.core.confidence_calculator import DEFAULT_THRESHOLDS, ArbitrationThresholds, ConfidenceCalculator
from app.core.field_extractors import PATTERNS, analyze_name
from app.core.schemas import ContactCandidate, ParsedContact, ParseOutcome
from app.core.text_normalization import extract_clean_lines, normalize_text

logger = logging.getLogger(__name__)

NO_TEXT_ERROR = "No text provided"
NO_NAME_ERROR = "Could not identify any names in the text"
EMAIL_WARNING = "Email format may be invalid"
PHONE_WARNING = "Phone number may be incomplete"


def _disambiguate_single_name(candidate: ContactCandidate) -> None:
    """A lone name that reads like a stage name ('SAUL', 'DJ Nova') belongs in stage_name."""
    if candidate.stage_name or not candidate.legal_name:
        return

    analysis = analyze_name(candidate.legal_name)
    if analysis.is_stage_name:
        candidate.assign("stage_name", candidate.legal_name, analysis.confidence)
        candidate.clear("legal_name")


def _validation_warnings(candidate: ContactCandidate) -> List[str]:
    warnings: List[str] = []

    if candidate.email and not PATTERNS.email.search(candidate.email):
        warnings.append(EMAIL_WARNING)

    if candidate.phone and len(re.sub(r"\D", "", candidate.phone)) < 10:
        warnings.append(PHONE_WARNING)

    return warnings


def parse_contact_text(
    text: str,
    prefer_structured: bool = False,
    thresholds: ArbitrationThresholds = DEFAULT_THRESHOLDS,
) -> ParseOutcome:
    """
    Turn a pasted contact blurb into a confidence-scored contact record.

    Never raises for string input. Problems are reported in the outcome:
      - errors:   nothing to parse, or no name anywhere (success=False)
      - warnings: a field was found but looks malformed
      - requires_manual_assignment: too little was found to trust automatically;
        cleaned_lines are provided so a person can assign them by hand
    """
    normalized = normalize_text(text)

    if not normalized:
        return ParseOutcome(
            success=False,
            data=ParsedContact(),
            errors=[NO_TEXT_ERROR],
            warnings=[],
            cleaned_lines=[],
            requires_manual_assignment=True,
        )

    cleaned_lines = extract_clean_lines(normalized)
    result = arbitrate(normalized, cleaned_lines, prefer_structured=prefer_structured, thresholds=thresholds)

    candidate = result.candidate.model_copy(deep=True)
    _disambiguate_single_name(candidate)

    warnings = _validation_warnings(candidate)
    errors: List[str] = []
    if not candidate.stage_name and not candidate.legal_name:
        errors.append(NO_NAME_ERROR)

    requires_manual = ConfidenceCalculator.requires_manual_assignment(candidate, thresholds)
    if requires_manual:
        logger.debug(
            f"Manual assignment required: fields={ConfidenceCalculator.fields_found(candidate)}, "
            f"score={ConfidenceCalculator.aggregate_score(candidate):.2f}"
        )

    return ParseOutcome(
        success=not errors,
        data=ParsedContact(raw_input=text, **candidate.model_dump()),
        errors=errors,
        warnings=warnings,
        cleaned_lines=cleaned_lines,
        requires_manual_assignment=requires_manual,
        strategy=result.strategy,
    )
