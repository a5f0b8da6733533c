import numpy as np
from typing import List, Sequence, Union, Tuple

from config.analytics_config import DOMAIN_CONFIG


def ensure_valid_pick(pick: Union[Sequence[int], np.ndarray],
                      numbers_count: int = DOMAIN_CONFIG['main_picks'],
                      min_value: int = 1,
                      max_value: int = DOMAIN_CONFIG['main_max']) -> List[int]:
    """
    Ensure a user pick is a valid set of lottery numbers.

    Args:
        pick: List, tuple or array of chosen numbers
        numbers_count: Expected count of numbers (default: 5)
        min_value: Minimum valid number (default: 1)
        max_value: Maximum valid number (default: 50)

    Returns:
        List of validated and sorted numbers

    Raises:
        ValueError: If the pick is invalid
    """
    if isinstance(pick, np.ndarray):
        pick = pick.tolist()

    if not isinstance(pick, (list, tuple)):
        raise ValueError(f"Pick must be a list or tuple, got {type(pick).__name__}")

    if len(pick) != numbers_count:
        raise ValueError(f"Pick must contain exactly {numbers_count} numbers, got {len(pick)}")

    if not all(isinstance(n, (int, np.integer)) and not isinstance(n, bool) for n in pick):
        raise ValueError("All picked numbers must be integers")
    pick = [int(n) for n in pick]

    if not all(min_value <= n <= max_value for n in pick):
        out_of_range = [n for n in pick if not (min_value <= n <= max_value)]
        raise ValueError(f"All numbers must be between {min_value} and {max_value}, got {out_of_range}")

    if len(set(pick)) != len(pick):
        duplicates = sorted({n for n in pick if pick.count(n) > 1})
        raise ValueError(f"Pick contains duplicate numbers: {duplicates}")

    return sorted(pick)


def _check_numbers(label: str, numbers: Tuple[int, ...], count: int, max_value: int) -> List[str]:
    errors = []
    if len(numbers) != count:
        errors.append(f"{label} must contain {count} numbers, got {len(numbers)}")
    if any(not (1 <= n <= max_value) for n in numbers):
        errors.append(f"{label} out of range 1..{max_value}: {list(numbers)}")
    if len(set(numbers)) != len(numbers):
        errors.append(f"{label} contain duplicates: {list(numbers)}")
    return errors


def validate_draw(draw) -> List[str]:
    """
    Check a draw record against the game rules.

    Returns:
        List of error messages, empty when the draw is valid
    """
    errors = []
    errors += _check_numbers('Main numbers', draw.mains,
                             DOMAIN_CONFIG['main_picks'], DOMAIN_CONFIG['main_max'])
    errors += _check_numbers('Euro numbers', draw.euros,
                             DOMAIN_CONFIG['euro_picks'], DOMAIN_CONFIG['euro_max'])

    classes = range(1, DOMAIN_CONFIG['prize_classes'] + 1)
    bad_classes = [k for k in draw.payouts if k not in classes]
    if bad_classes:
        errors.append(f"Unknown prize classes: {bad_classes}")
    negative = [k for k, v in draw.payouts.items() if v < 0]
    if negative:
        errors.append(f"Negative payouts for classes: {negative}")
    return errors
