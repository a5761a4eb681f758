from household_categorizer.logger import get_logger
from household_categorizer.models import ClassificationResult

logger = get_logger(__name__)

# Fixed on purpose; tests guard against drift.
AUTO_APPLY_CONFIDENCE = 0.85


def should_auto_apply(confidence: float) -> bool:
    return confidence >= AUTO_APPLY_CONFIDENCE


def auto_apply_reason(result: ClassificationResult) -> str | None:
    """
    Return None when the result can be written without review, otherwise the
    reason it has to wait for a human.

    Cache hits are confirmed corrections and always apply.
    """
    if result.source == "cache":
        return None

    confidence = result.confidence if result.confidence is not None else 0.0
    if not should_auto_apply(confidence):
        logger.debug(
            "[AUTO-APPLY] Confidence %.2f below threshold %.2f; suggesting '%s' (rule %s).",
            confidence,
            AUTO_APPLY_CONFIDENCE,
            result.category_id,
            result.rule_id,
        )
        return "low_confidence"
    return None


def is_auto_applicable(result: ClassificationResult) -> bool:
    return auto_apply_reason(result) is None
