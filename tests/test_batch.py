import pytest

from household_categorizer.domain.text import merchant_fingerprint
from household_categorizer.models import CategoryRule, Transaction
from household_categorizer.services.batch import categorize_batch


@pytest.fixture
def rules() -> list[CategoryRule]:
    return [
        CategoryRule(id="uber", category_id="transport", pattern="UBER", priority=80, confidence=0.95),
        CategoryRule(id="bar", category_id="leisure", pattern="BAR", priority=50, confidence=0.75),
    ]


def test_batch_splits_applied_suggested_and_skipped(rules: list[CategoryRule]):
    transactions = [
        Transaction(id="1", description="PADARIA DO JOAO"),
        Transaction(id="2", description="UBER *TRIP 29,90"),
        Transaction(id="3", description="BAR DO ZE"),
        Transaction(id="4", description="XYZ 123"),
    ]
    cache = {merchant_fingerprint("Padaria do João"): "food"}

    outcome = categorize_batch(transactions, cache, rules)

    assert [item.transaction_id for item in outcome.applied] == ["1", "2"]
    assert outcome.applied[0].source == "cache"
    assert outcome.applied[1].rule_id == "uber"
    assert [item.transaction_id for item in outcome.suggested] == ["3"]
    assert outcome.suggested[0].confidence == 0.75
    assert [tx.id for tx in outcome.skipped] == ["4"]

    assert outcome.stats.by_cache == 1
    assert outcome.stats.by_rules == 1
    assert outcome.stats.suggested == 1
    assert outcome.stats.skipped == 1


def test_batch_with_no_transactions(rules: list[CategoryRule]):
    outcome = categorize_batch([], {}, rules)
    assert outcome.applied == []
    assert outcome.suggested == []
    assert outcome.skipped == []
    assert outcome.stats.skipped == 0


def test_batch_consumes_rule_iterators_once(rules: list[CategoryRule]):
    transactions = [
        Transaction(id="1", description="UBER"),
        Transaction(id="2", description="UBER TRIP"),
    ]
    outcome = categorize_batch(transactions, {}, iter(rules))
    assert outcome.stats.by_rules == 2
