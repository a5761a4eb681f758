from collections.abc import Iterable, Mapping

from household_categorizer.logger import get_logger
from household_categorizer.manager import CategorizerService
from household_categorizer.models import (
    BatchItem,
    BatchOutcome,
    CategoryRule,
    ClassificationResult,
    Transaction,
)
from household_categorizer.services.approval import is_auto_applicable

logger = get_logger(__name__)


def _to_item(transaction: Transaction, result: ClassificationResult) -> BatchItem:
    return BatchItem(
        transaction_id=transaction.id,
        category_id=result.category_id,
        source=result.source,
        confidence=result.confidence,
        rule_id=result.rule_id,
    )


def categorize_batch(
    transactions: Iterable[Transaction],
    cache: Mapping[str, str],
    rules: Iterable[CategoryRule],
    *,
    service: CategorizerService | None = None,
) -> BatchOutcome:
    """
    Split transactions into applied, suggested and skipped buckets.

    Nothing is persisted; the caller writes ``applied`` and queues
    ``suggested`` for review. Each bucket keeps input order.
    """
    service = service or CategorizerService()
    rule_list = list(rules)
    outcome = BatchOutcome()

    for transaction in transactions:
        result = service.categorize(transaction, cache, rule_list)
        if result is None:
            outcome.skipped.append(transaction)
            outcome.stats.skipped += 1
        elif is_auto_applicable(result):
            outcome.applied.append(_to_item(transaction, result))
            if result.source == "cache":
                outcome.stats.by_cache += 1
            else:
                outcome.stats.by_rules += 1
        else:
            outcome.suggested.append(_to_item(transaction, result))
            outcome.stats.suggested += 1

    logger.info(
        "[BATCH] applied=%d (cache=%d, rules=%d) suggested=%d skipped=%d",
        len(outcome.applied),
        outcome.stats.by_cache,
        outcome.stats.by_rules,
        outcome.stats.suggested,
        outcome.stats.skipped,
    )
    return outcome
