from collections.abc import Iterable

from household_categorizer.classifiers.rules import (
    MATCH_TYPE_SPECIFICITY,
    RuleError,
    compile_pattern,
)
from household_categorizer.core import settings
from household_categorizer.domain.categories import is_valid_category
from household_categorizer.domain.text import fold_text
from household_categorizer.models import CategoryRule


def merge_rule_sets(
    global_rules: Iterable[CategoryRule], household_rules: Iterable[CategoryRule]
) -> list[CategoryRule]:
    """
    Union of global and household rules, de-duplicated by id.

    Household rules get no implicit precedence; their priority decides.
    """
    merged: list[CategoryRule] = []
    seen: set[str] = set()
    for rule in [*global_rules, *household_rules]:
        if rule.id not in seen:
            merged.append(rule)
            seen.add(rule.id)
    return merged


def validate_rule(rule: CategoryRule) -> list[str]:
    problems: list[str] = []

    if rule.match_type not in MATCH_TYPE_SPECIFICITY:
        supported = ", ".join(MATCH_TYPE_SPECIFICITY)
        problems.append(f"unsupported match type '{rule.match_type}' (expected one of: {supported})")
    elif rule.match_type == "regex":
        try:
            compile_pattern(rule.pattern, rule.flags or settings.get_default_regex_flags())
        except RuleError as exc:
            problems.append(str(exc))
    elif not fold_text(rule.pattern):
        problems.append("empty pattern")

    if not is_valid_category(rule.category_id):
        problems.append(f"unknown category '{rule.category_id}'")

    return problems
