"""
Per-draw feature distributions.

Every helper here follows the same reduction: compute a feature for each
draw, then either tally the feature values or keep them as a time series
indexed by draw date.
"""

import logging
import math
from collections import Counter
from collections.abc import Iterable
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from config.analytics_config import DISTRIBUTION_CONFIG, DOMAIN_CONFIG
from .cooccurrence import unique_mains
from .draws import Draw

logger = logging.getLogger(__name__)

WEEKDAYS = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']
MONTHS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


def tally(draws: Sequence[Draw], feature: Callable[[Draw], object]) -> Counter:
    """
    Count feature values over all draws.

    The feature may return a single value or an iterable of values
    (strings count as single values).
    """
    counter = Counter()
    for draw in draws:
        value = feature(draw)
        if isinstance(value, Iterable) and not isinstance(value, str):
            counter.update(value)
        else:
            counter[value] += 1
    return counter


def feature_series(draws: Sequence[Draw], feature: Callable[[Draw], float], name: str) -> pd.Series:
    """One feature value per draw as a Series indexed by draw date."""
    index = pd.DatetimeIndex([d.date for d in draws], name='Draw Date')
    values = [feature(d) for d in draws]
    return pd.Series(values, index=index, name=name, dtype=None if values else 'float64')


def sum_series(draws: Sequence[Draw]) -> pd.Series:
    return feature_series(draws, lambda d: sum(d.mains), 'sum')


def range_series(draws: Sequence[Draw]) -> pd.Series:
    """max - min of the sorted unique mains per draw, 0 for a draw without mains."""
    def spread(draw):
        mains = sorted(set(draw.mains))
        return mains[-1] - mains[0] if mains else 0
    return feature_series(draws, spread, 'range')


def parity_series(draws: Sequence[Draw]) -> pd.DataFrame:
    """Odd and even main-number counts per draw."""
    odd = feature_series(draws, lambda d: sum(1 for n in d.mains if n % 2 == 1), 'odd')
    even = feature_series(draws, lambda d: sum(1 for n in d.mains if n % 2 == 0), 'even')
    return pd.concat([odd, even], axis=1)


def parity_totals(draws: Sequence[Draw]) -> Dict[str, int]:
    counts = tally(draws, lambda d: ['odd' if n % 2 == 1 else 'even' for n in d.mains])
    return {'odd': counts.get('odd', 0), 'even': counts.get('even', 0)}


def low_high_series(draws: Sequence[Draw],
                    split: int = DISTRIBUTION_CONFIG['low_high_split']) -> pd.DataFrame:
    """Low (n <= split) and high main-number counts per draw."""
    low = feature_series(draws, lambda d: sum(1 for n in d.mains if n <= split), 'low')
    high = feature_series(draws, lambda d: sum(1 for n in d.mains if n > split), 'high')
    return pd.concat([low, high], axis=1)


def last_digit_counts(draws: Sequence[Draw]) -> Dict[int, int]:
    counts = tally(draws, lambda d: [n % 10 for n in d.mains])
    return {digit: counts.get(digit, 0) for digit in range(10)}


def modulo_counts(draws: Sequence[Draw], base: int) -> Dict[int, int]:
    """Main numbers bucketed by residue modulo base, all residues present."""
    if base < 1:
        raise ValueError(f"Modulo base must be at least 1, got {base}")
    counts = tally(draws, lambda d: [n % base for n in d.mains])
    return {r: counts.get(r, 0) for r in range(base)}


def weekday_counts(draws: Sequence[Draw]) -> Dict[str, int]:
    """Draws per weekday, Mon..Sun, only weekdays that occur."""
    counts = tally(draws, lambda d: WEEKDAYS[d.date.weekday()])
    return {day: counts[day] for day in WEEKDAYS if day in counts}


def weekday_effect(draws: Sequence[Draw]) -> Dict:
    """
    Weekday counts plus a rough Tuesday/Friday imbalance badge:
    'likely' when |tue - fri| exceeds sqrt(total draws), else 'ns'.
    """
    counts = weekday_counts(draws)
    total = sum(counts.values())
    diff = abs(counts.get('Tue', 0) - counts.get('Fri', 0))
    return {'counts': counts, 'badge': 'likely' if diff > math.sqrt(total) else 'ns'}


def monthly_counts(draws: Sequence[Draw]) -> Dict[str, int]:
    counts = tally(draws, lambda d: MONTHS[d.date.month - 1])
    return {month: counts.get(month, 0) for month in MONTHS}


def consecutive_pairs(draws: Sequence[Draw]) -> Dict:
    """Neighbouring consecutive mains (e.g. 17-18) across all draws."""
    def pairs(draw):
        mains = sorted(set(draw.mains))
        return [f"{a}-{b}" for a, b in zip(mains, mains[1:]) if b == a + 1]

    counts = tally(draws, pairs)
    return {'total_pairs': sum(counts.values()), 'counts': dict(counts)}


def positional_bias(draws: Sequence[Draw], domain_max: int = DOMAIN_CONFIG['main_max'],
                    positions: int = DISTRIBUTION_CONFIG['positions']) -> pd.DataFrame:
    """
    How often each number lands at each sorted position (1st..5th smallest).

    Each row is normalised by its own maximum, so positions are comparable
    on a 0..1 scale.

    Returns:
        DataFrame indexed by position 1..positions with columns 1..domain_max
    """
    matrix = np.zeros((positions, domain_max + 1), dtype=float)
    for draw in draws:
        for i, n in enumerate(unique_mains(draw, domain_max)[:positions]):
            matrix[i, n] += 1

    row_max = np.maximum(matrix.max(axis=1, keepdims=True), 1.0)
    normalized = matrix / row_max
    return pd.DataFrame(
        normalized[:, 1:],
        index=pd.RangeIndex(1, positions + 1, name='position'),
        columns=range(1, domain_max + 1),
    )


def rolling_mean(values: Sequence[float], window: int) -> List[Optional[float]]:
    """
    Fixed-window moving average using a running sum.

    Indices before the first full window are None.
    """
    if window < 1:
        raise ValueError(f"Window must be at least 1, got {window}")
    values = list(values)
    out: List[Optional[float]] = [None] * len(values)
    acc = 0.0
    for i, v in enumerate(values):
        acc += v
        if i >= window:
            acc -= values[i - window]
        if i >= window - 1:
            out[i] = acc / window
    return out
