from collections.abc import Mapping

from household_categorizer.domain.text import merchant_fingerprint
from household_categorizer.models import ClassificationResult, Transaction

from .base import Classifier


def apply_cache_first(
    transaction: Transaction, cache: Mapping[str, str]
) -> ClassificationResult | None:
    """Look up the merchant fingerprint in the correction cache; never mutates it."""
    fingerprint = merchant_fingerprint(transaction.description)
    if not fingerprint:
        return None
    category_id = cache.get(fingerprint)
    if not category_id:
        return None
    return ClassificationResult(category_id=category_id, source="cache")


class CacheMatcher(Classifier):
    def __init__(self, cache: Mapping[str, str]):
        self.cache = cache

    def classify(self, transaction: Transaction) -> ClassificationResult | None:
        return apply_cache_first(transaction, self.cache)
