"""Dataset names derived from file names"""
import os
import re

WORD_PATTERN = re.compile(r'[a-z0-9]+')


def sanitize_name(name: str) -> str:
    """
    Lowercase word characters of `name` joined by underscores.

    Names must start with a letter, so a leading digit gets a 'd_' prefix.
    Returns 'unnamed' when nothing usable is left.

    Example: sanitize_name("2024 Sales (EU)") -> "d_2024_sales_eu"
    """
    words = WORD_PATTERN.findall((name or '').lower())
    if not words:
        return "unnamed"
    result = '_'.join(words)
    return result if result[0].isalpha() else f"d_{result}"


def dataset_name_from_path(path: str) -> str:
    """
    Default dataset name for a data file.

    Example: dataset_name_from_path("exports/Q1 Orders-2024.csv") -> "q1_orders_2024"
    """
    stem = os.path.splitext(os.path.basename(path))[0]
    return sanitize_name(stem)
