import logging
from typing import Callable, List, NamedTuple, Optional, Tuple

from app.core.confidence_calculator import DEFAULT_THRESHOLDS, ArbitrationThresholds, ConfidenceCalculator
from app.core.format_strategies import (
    parse_labeled,
    parse_line_by_line,
    parse_numbered_list,
    parse_structured_positional,
)
from app.core.schemas import ContactCandidate

logger = logging.getLogger(__name__)

STRUCTURED_STRATEGY = "structured_positional"

# Evaluation order doubles as the tie-breaker: earlier strategies win ties
HEURISTIC_STRATEGIES: Tuple[Tuple[str, Callable[[str], ContactCandidate]], ...] = (
    ("numbered_list", parse_numbered_list),
    ("labeled", parse_labeled),
    ("line_by_line", parse_line_by_line),
)


class ArbitrationResult(NamedTuple):
    candidate: ContactCandidate
    strategy: Optional[str]
    score: float


def arbitrate(
    text: str,
    cleaned_lines: List[str],
    prefer_structured: bool = False,
    thresholds: ArbitrationThresholds = DEFAULT_THRESHOLDS,
) -> ArbitrationResult:
    """
    Run the applicable strategies and keep the candidate with the highest aggregate score.

    When the caller prefers structured input and there are at least two lines, the
    positional strategy runs first. If it finds enough fields with enough confidence
    its result is returned immediately; otherwise it becomes the score to beat.
    """
    best = ArbitrationResult(ContactCandidate(), None, 0.0)

    if prefer_structured and len(cleaned_lines) >= 2:
        structured = parse_structured_positional(cleaned_lines)
        score = ConfidenceCalculator.aggregate_score(structured)

        if ConfidenceCalculator.should_short_circuit(structured, thresholds):
            logger.debug(f"Structured parse accepted: score={score:.2f}, fields={structured.populated_fields()}")
            return ArbitrationResult(structured, STRUCTURED_STRATEGY, score)

        logger.debug(f"Structured parse below threshold (score={score:.2f}), trying heuristic strategies")
        best = ArbitrationResult(structured, STRUCTURED_STRATEGY, score)

    for name, strategy in HEURISTIC_STRATEGIES:
        candidate = strategy(text)
        score = ConfidenceCalculator.aggregate_score(candidate)
        logger.debug(f"Strategy '{name}' scored {score:.2f} with fields {candidate.populated_fields()}")

        if score > best.score:
            best = ArbitrationResult(candidate, name, score)

    logger.debug(f"Selected strategy: {best.strategy} (score={best.score:.2f})")
    return best
