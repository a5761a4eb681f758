from collections.abc import Iterable, Mapping

from household_categorizer.classifiers.base import Classifier
from household_categorizer.classifiers.cache import CacheMatcher
from household_categorizer.classifiers.rules import RuleMatcher
from household_categorizer.logger import get_logger
from household_categorizer.models import CategoryRule, ClassificationResult, Transaction

logger = get_logger(__name__)


class CategorizerService:
    """
    Cache first, then rules. Holds no state between calls: the cache and the
    rule set are handed in on every call.
    """

    def __init__(self, regex_timeout: float | None = None, default_flags: str | None = None):
        self.regex_timeout = regex_timeout
        self.default_flags = default_flags

    def build_classifiers(
        self, cache: Mapping[str, str], rules: Iterable[CategoryRule]
    ) -> list[Classifier]:
        return [
            CacheMatcher(cache),
            RuleMatcher(rules, regex_timeout=self.regex_timeout, default_flags=self.default_flags),
        ]

    def categorize(
        self,
        transaction: Transaction,
        cache: Mapping[str, str],
        rules: Iterable[CategoryRule],
    ) -> ClassificationResult | None:
        for classifier in self.build_classifiers(cache, rules):
            classifier_name = classifier.__class__.__name__
            logger.debug(f"Trying {classifier_name} for: '{transaction.description[:50]}'")

            result = classifier.classify(transaction)

            if result:
                logger.debug(
                    f"{classifier_name} returned: '{result.category_id}' "
                    f"(source: {result.source}, rule: {result.rule_id})"
                )
                return result
            logger.debug(f"{classifier_name} returned: None")

        logger.debug(f"No classifier matched for transaction {transaction.id}")
        return None


_default_service = CategorizerService()


def categorize_one(
    transaction: Transaction,
    cache: Mapping[str, str],
    rules: Iterable[CategoryRule],
) -> ClassificationResult | None:
    return _default_service.categorize(transaction, cache, rules)
