from collections.abc import Iterable
from functools import lru_cache

import regex

from household_categorizer.core import settings
from household_categorizer.domain.text import fold_text, normalize_text
from household_categorizer.logger import get_logger
from household_categorizer.models import CategoryRule, ClassificationResult, Transaction

from .base import Classifier

logger = get_logger(__name__)

# Higher is more specific; used to break priority ties.
MATCH_TYPE_SPECIFICITY = {
    "equals": 4,
    "startsWith": 3,
    "contains": 2,
    "regex": 1,
}

_FLAG_BITS = {
    "i": regex.IGNORECASE,
    "m": regex.MULTILINE,
    "s": regex.DOTALL,
}
# JavaScript flags with no meaning for a single search.
_IGNORED_FLAGS = frozenset("guy")


class RuleError(ValueError):
    """A rule that cannot be evaluated: bad pattern, flags or match type."""


def parse_flags(flags: str) -> int:
    bits = 0
    for letter in flags:
        if letter in _FLAG_BITS:
            bits |= _FLAG_BITS[letter]
        elif letter not in _IGNORED_FLAGS:
            raise RuleError(f"unsupported regex flag '{letter}'")
    return bits


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str, flags: str) -> regex.Pattern:
    if not pattern.strip():
        raise RuleError("empty regex pattern")
    try:
        return regex.compile(pattern, parse_flags(flags))
    except regex.error as exc:
        raise RuleError(f"invalid regex: {exc}") from exc


def _match_literal(match_type: str, pattern: str, normalized: str, folded: str) -> int | None:
    target = normalize_text(pattern)
    text = normalized
    if not target:
        # Pattern made only of noise words; compare it literally.
        target = fold_text(pattern)
        text = folded
        if not target:
            raise RuleError("empty pattern")

    if match_type == "equals":
        matched = text == target
    elif match_type == "startsWith":
        matched = text.startswith(target)
    else:
        matched = target in text
    return len(target) if matched else None


def match_rule(
    rule: CategoryRule,
    normalized: str,
    folded: str,
    *,
    timeout: float,
    default_flags: str,
) -> int | None:
    """
    Test one rule against an already normalized description.

    Returns the length of the matched text, or None when the rule does not
    match. Raises RuleError when the rule itself is malformed or its regex
    runs past ``timeout`` seconds.
    """
    if rule.match_type not in MATCH_TYPE_SPECIFICITY:
        raise RuleError(f"unsupported match type '{rule.match_type}'")

    if rule.match_type != "regex":
        return _match_literal(rule.match_type, rule.pattern, normalized, folded)

    # None and "" both mean the default flags.
    compiled = compile_pattern(rule.pattern, rule.flags or default_flags)
    if not normalized:
        return None
    try:
        found = compiled.search(normalized, timeout=timeout)
    except TimeoutError as exc:
        raise RuleError(f"regex exceeded {timeout * 1000:.0f} ms") from exc
    return len(found.group(0)) if found else None


def _rank(candidate: tuple[CategoryRule, int]) -> tuple[int, int, float, int]:
    rule, match_length = candidate
    return (
        rule.priority,
        MATCH_TYPE_SPECIFICITY[rule.match_type],
        rule.confidence,
        match_length,
    )


def apply_rules(
    transaction: Transaction,
    rules: Iterable[CategoryRule],
    *,
    regex_timeout: float | None = None,
    default_flags: str | None = None,
) -> ClassificationResult | None:
    """
    Pick the winning active rule for a transaction description.

    Ranking: priority, then match-type specificity
    (equals > startsWith > contains > regex), then confidence, then matched
    length. Remaining ties go to the rule that comes first in ``rules``.
    Malformed rules are logged and skipped.
    """
    folded = fold_text(transaction.description)
    if not folded:
        return None
    normalized = normalize_text(transaction.description)

    if regex_timeout is None:
        regex_timeout = settings.get_regex_timeout()
    if default_flags is None:
        default_flags = settings.get_default_regex_flags()

    candidates: list[tuple[CategoryRule, int]] = []
    for rule in rules:
        if not rule.is_active:
            continue
        try:
            match_length = match_rule(
                rule,
                normalized,
                folded,
                timeout=regex_timeout,
                default_flags=default_flags,
            )
        except RuleError as exc:
            logger.warning("[RULES] Skipping rule %s (%s): %s", rule.id, rule.match_type, exc)
            continue
        if match_length is not None:
            candidates.append((rule, match_length))

    if not candidates:
        return None

    # max() keeps the first of equally ranked candidates.
    winner, _ = max(candidates, key=_rank)
    return ClassificationResult(
        category_id=winner.category_id,
        source="rule",
        rule_id=winner.id,
        confidence=winner.confidence,
        match_type=winner.match_type,
    )


class RuleMatcher(Classifier):
    def __init__(
        self,
        rules: Iterable[CategoryRule],
        regex_timeout: float | None = None,
        default_flags: str | None = None,
    ):
        self.rules = list(rules)
        self.regex_timeout = regex_timeout
        self.default_flags = default_flags

    def classify(self, transaction: Transaction) -> ClassificationResult | None:
        return apply_rules(
            transaction,
            self.rules,
            regex_timeout=self.regex_timeout,
            default_flags=self.default_flags,
        )
