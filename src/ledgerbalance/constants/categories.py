"""
Default expense categories offered to every owner.
Owners may add their own names; expenses keep whatever label they were saved with.
"""

DEFAULT_CATEGORY = "other"

DEFAULT_EXPENSE_CATEGORIES = [
    "food",
    "shopping",
    "health",
    "leisure",
    "transport",
    "bills",
    DEFAULT_CATEGORY,
]

CATEGORY_LABELS = {
    "food": "Food",
    "shopping": "Shopping",
    "health": "Health",
    "leisure": "Leisure",
    "transport": "Transport",
    "bills": "Bills",
    "other": "Other",
}

# Share of a month's spend above which a savings suggestion is raised.
SUGGESTION_THRESHOLDS = {
    "food": 30,
    "leisure": 20,
}


def category_label(name: str) -> str:
    """Return the display label for a category, falling back to the raw name."""

    return CATEGORY_LABELS.get(name, name)
