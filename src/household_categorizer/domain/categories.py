ALLOWED_CATEGORIES: tuple[str, ...] = (
    "bills",
    "food",
    "leisure",
    "shopping",
    "transport",
    "health",
    "education",
    "other",
)

CUSTOM_CATEGORY_PREFIX = "custom:"

_ALLOWED_SET = frozenset(ALLOWED_CATEGORIES)


def is_custom_category(category_id: str) -> bool:
    return (
        isinstance(category_id, str)
        and category_id.startswith(CUSTOM_CATEGORY_PREFIX)
        and bool(category_id[len(CUSTOM_CATEGORY_PREFIX):].strip())
    )


def is_valid_category(category_id: str) -> bool:
    """Fixed app categories, or a household category written as ``custom:<id>``."""
    if not isinstance(category_id, str):
        return False
    return category_id in _ALLOWED_SET or is_custom_category(category_id)
