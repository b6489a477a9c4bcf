"""Link label normalization."""

from __future__ import annotations


def normalize_label(label: str) -> str:
    """Normalize a link label into its lookup key.

    Case-folds the label, collapses every run of whitespace into a single
    space, and trims both ends, so labels that differ only in case or
    spacing share one key.

    Args:
        label: Raw label text, without the surrounding brackets.

    Returns:
        str: Normalized key. Empty when the label holds only whitespace.

    Examples:
        normalize_label("Foo  Bar")  # "foo bar"
        normalize_label(" STRASSE ")  # "strasse"
        normalize_label("Straße")  # "strasse"
    """
    return " ".join(label.casefold().split())
