"""
Confidence aggregation for contact extraction.

Every strategy scores each field independently (see field_extractors for the scale).
This module turns those per-field scores into the two decisions the caller cares about:

  - which strategy's candidate to keep (aggregate score, sum of the five fields)
  - whether the result can populate the booking form or needs a human to assign lines

Aggregate scale (five fields, max 5.0):
  >= 2.5 with 3+ fields = trustworthy enough to skip the heuristic strategies
  <  2.0 or < 2 fields  = manual assignment required
"""

from dataclasses import dataclass

from app.core.schemas import CONTACT_FIELDS, ContactCandidate


@dataclass(frozen=True)
class ArbitrationThresholds:
    """Tunable cut-offs for arbitration and the manual-assignment gate."""
    structured_min_fields: int = 3
    structured_min_score: float = 2.5
    manual_min_fields: int = 2
    manual_min_score: float = 2.0


DEFAULT_THRESHOLDS = ArbitrationThresholds()


class ConfidenceCalculator:
    """Central place for all confidence arithmetic."""

    @staticmethod
    def fields_found(candidate: ContactCandidate) -> int:
        return len(candidate.populated_fields())

    @staticmethod
    def aggregate_score(candidate: ContactCandidate) -> float:
        """
        Sum of the five field confidences.

        Absent fields count as 0. Rounded so that strategies with the same
        per-field scores compare equal regardless of summation order.
        """
        total = sum(getattr(candidate.confidence, name) for name in CONTACT_FIELDS)
        return round(total, 4)

    @staticmethod
    def should_short_circuit(
        candidate: ContactCandidate,
        thresholds: ArbitrationThresholds = DEFAULT_THRESHOLDS,
    ) -> bool:
        """A structured-positional result good enough to skip the other strategies."""
        return (
            ConfidenceCalculator.fields_found(candidate) >= thresholds.structured_min_fields
            and ConfidenceCalculator.aggregate_score(candidate) >= thresholds.structured_min_score
        )

    @staticmethod
    def requires_manual_assignment(
        candidate: ContactCandidate,
        thresholds: ArbitrationThresholds = DEFAULT_THRESHOLDS,
    ) -> bool:
        return (
            ConfidenceCalculator.fields_found(candidate) < thresholds.manual_min_fields
            or ConfidenceCalculator.aggregate_score(candidate) < thresholds.manual_min_score
        )
