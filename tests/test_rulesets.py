import pytest
from pydantic import ValidationError

from household_categorizer.domain.categories import ALLOWED_CATEGORIES, is_valid_category
from household_categorizer.domain.rulesets import merge_rule_sets, validate_rule
from household_categorizer.models import CategoryRule


def _rule(rule_id: str, **overrides) -> CategoryRule:
    values = {"id": rule_id, "category_id": "food", "pattern": "PADARIA"}
    values.update(overrides)
    return CategoryRule(**values)


def test_merge_is_a_union_keeping_first_occurrence():
    global_rules = [_rule("g1"), _rule("shared", category_id="other")]
    household_rules = [_rule("h1", family_id="fam-1"), _rule("shared", family_id="fam-1")]

    merged = merge_rule_sets(global_rules, household_rules)

    assert [rule.id for rule in merged] == ["g1", "shared", "h1"]
    assert merged[1].family_id is None


def test_merge_with_empty_household():
    assert [rule.id for rule in merge_rule_sets([_rule("g1")], [])] == ["g1"]


def test_valid_rule_has_no_problems():
    assert validate_rule(_rule("r1")) == []
    assert validate_rule(_rule("r2", match_type="regex", pattern=r"\bpadaria\b")) == []
    assert validate_rule(_rule("r3", category_id="custom:8f2a")) == []


def test_validate_reports_bad_regex():
    problems = validate_rule(_rule("r1", match_type="regex", pattern="(padaria"))
    assert len(problems) == 1
    assert problems[0].startswith("invalid regex")


def test_validate_reports_unknown_flag():
    problems = validate_rule(_rule("r1", match_type="regex", pattern="padaria", flags="iq"))
    assert problems == ["unsupported regex flag 'q'"]


def test_validate_reports_match_type_pattern_and_category():
    problems = validate_rule(_rule("r1", match_type="fuzzy", category_id="invented"))
    assert any("unsupported match type 'fuzzy'" in p for p in problems)
    assert any("unknown category 'invented'" in p for p in problems)

    assert validate_rule(_rule("r2", pattern="  ...  ")) == ["empty pattern"]


def test_allowed_categories():
    assert len(ALLOWED_CATEGORIES) == 8
    for category in ALLOWED_CATEGORIES:
        assert is_valid_category(category)


def test_custom_and_invented_categories():
    assert is_valid_category("custom:1234")
    assert not is_valid_category("custom:")
    assert not is_valid_category("invented")
    assert not is_valid_category("")
    assert not is_valid_category(None)


def test_rule_confidence_is_validated_at_construction():
    with pytest.raises(ValidationError):
        _rule("r1", confidence=1.5)
    with pytest.raises(ValidationError):
        _rule("r2", confidence=-0.1)
