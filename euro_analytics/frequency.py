"""Frequency and recency statistics per number."""

import logging
from typing import Dict, List, Sequence

import numpy as np
from scipy.stats import chisquare

from config.analytics_config import DOMAIN_CONFIG, FREQUENCY_CONFIG
from .draws import Draw, numbers_for

logger = logging.getLogger(__name__)


def count_frequencies(draws: Sequence[Draw], domain_max: int, pool: str = 'mains') -> Dict[int, int]:
    """
    Count how often every number of the domain was drawn.

    Args:
        draws: Draws in chronological order
        domain_max: Largest number of the domain (numbers run 1..domain_max)
        pool: 'mains' or 'euros'

    Returns:
        Mapping number -> hit count covering the whole domain. Values
        outside 1..domain_max are ignored.
    """
    counts = np.zeros(domain_max + 1, dtype=int)
    for draw in draws:
        for n in numbers_for(draw, pool):
            if 1 <= n <= domain_max:
                counts[n] += 1
    return {n: int(counts[n]) for n in range(1, domain_max + 1)}


def main_frequencies(draws: Sequence[Draw]) -> Dict[int, int]:
    return count_frequencies(draws, DOMAIN_CONFIG['main_max'], 'mains')


def euro_frequencies(draws: Sequence[Draw]) -> Dict[int, int]:
    return count_frequencies(draws, DOMAIN_CONFIG['euro_max'], 'euros')


def recency_weights(draws: Sequence[Draw], domain_max: int, pool: str = 'mains',
                    decay: float = FREQUENCY_CONFIG['decay']) -> Dict[int, float]:
    """
    Recency-decayed hit counts; the draw at index t of N weighs decay^(N-1-t).

    The newest draw contributes 1.0 to each of its numbers, older draws
    contribute exponentially less.
    """
    total = len(draws)
    weights = np.zeros(domain_max + 1, dtype=float)
    for t, draw in enumerate(draws):
        weight = decay ** (total - 1 - t)
        for n in numbers_for(draw, pool):
            if 1 <= n <= domain_max:
                weights[n] += weight
    return {n: float(weights[n]) for n in range(1, domain_max + 1)}


def zscore(values: Sequence[float]) -> np.ndarray:
    """Population z-score, standard deviation falls back to 1 when it is zero."""
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return arr
    std = float(np.std(arr)) or 1.0
    return (arr - float(np.mean(arr))) / std


def weight_vector(draws: Sequence[Draw], domain_max: int, pool: str = 'mains',
                  decay: float = FREQUENCY_CONFIG['decay'],
                  alpha: float = FREQUENCY_CONFIG['alpha'],
                  beta: float = FREQUENCY_CONFIG['beta']) -> Dict[int, float]:
    """
    Combine raw frequency and recency into a sampling weight per number.

    weight[n] = (count[n] + alpha) * (1 + beta * zscore(recency)[n])

    Args:
        draws: Draws in chronological order
        domain_max: Largest number of the domain
        pool: 'mains' or 'euros'
        decay: Per-draw recency decay
        alpha: Laplace smoothing, keeps unseen numbers above zero
        beta: Strength of the recency adjustment

    Returns:
        Mapping number -> weight for 1..domain_max
    """
    counts = count_frequencies(draws, domain_max, pool)
    recency = recency_weights(draws, domain_max, pool, decay)
    numbers = range(1, domain_max + 1)
    z = zscore([recency[n] for n in numbers])
    return {n: float((counts[n] + alpha) * (1 + beta * z[n - 1])) for n in numbers}


def top_numbers(table: Dict[int, float], n: int = FREQUENCY_CONFIG['top_n'],
                reverse: bool = True) -> List[int]:
    """
    Numbers with the highest (or, with reverse=False, lowest) values.

    Ties are broken by the smaller number first.
    """
    if reverse:
        ranked = sorted(table.items(), key=lambda item: (-item[1], item[0]))
    else:
        ranked = sorted(table.items(), key=lambda item: (item[1], item[0]))
    return [num for num, _ in ranked[:n]]


def uniformity_test(table: Dict[int, int]) -> Dict[str, float]:
    """Chi-square test of a frequency table against a uniform distribution."""
    observed = np.array([table[k] for k in sorted(table)], dtype=float)
    if observed.size < 2 or observed.sum() == 0:
        return {'statistic': 0.0, 'p_value': 1.0}
    chi2, p = chisquare(observed)
    return {'statistic': float(chi2), 'p_value': float(p)}
