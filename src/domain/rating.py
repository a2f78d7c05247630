"""Codeforces rating colour bands."""

# Upper bounds (exclusive) for each colour; anything above is red.
RATING_BANDS = (
    (1200, "gray"),
    (1400, "green"),
    (1600, "cyan"),
    (1900, "blue"),
    (2100, "violet"),
    (2400, "orange"),
)


def rating_class(rating: int | None) -> str:
    """CSS class name for a rating badge, e.g. ``rating-blue``."""
    if not rating:
        return "rating-gray"
    for upper, colour in RATING_BANDS:
        if rating < upper:
            return f"rating-{colour}"
    return "rating-red"
