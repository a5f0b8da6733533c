"""Overdue (draws since last seen), hot/cold runs and inter-arrival gaps."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence

import numpy as np

from config.analytics_config import DISTRIBUTION_CONFIG
from .draws import Draw, numbers_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverduePoint:
    number: int
    gap: int
    last_seen: Optional[date] = None


@dataclass
class StreakRuns:
    hot_runs: List[int] = field(default_factory=list)
    cold_runs: List[int] = field(default_factory=list)


def _presence_matrix(draws: Sequence[Draw], domain_max: int, pool: str) -> np.ndarray:
    """Boolean matrix [draw index, number], column 0 unused."""
    presence = np.zeros((len(draws), domain_max + 1), dtype=bool)
    for i, draw in enumerate(draws):
        for n in numbers_for(draw, pool):
            if 1 <= n <= domain_max:
                presence[i, n] = True
    return presence


def compute_overdue(draws: Sequence[Draw], domain_max: int, pool: str = 'mains') -> List[OverduePoint]:
    """
    Draws elapsed since each number was last drawn.

    A number in the latest draw has gap 0. A number never drawn has gap
    len(draws) and no last-seen date.

    Returns:
        One OverduePoint per number, in number order
    """
    last_index: Dict[int, int] = {}
    for i, draw in enumerate(draws):
        for n in numbers_for(draw, pool):
            if 1 <= n <= domain_max:
                last_index[n] = i

    total = len(draws)
    points = []
    for n in range(1, domain_max + 1):
        if n in last_index:
            idx = last_index[n]
            points.append(OverduePoint(number=n, gap=(total - 1) - idx, last_seen=draws[idx].date))
        else:
            points.append(OverduePoint(number=n, gap=total, last_seen=None))
    return points


def most_overdue(draws: Sequence[Draw], domain_max: int, pool: str = 'mains',
                 top_n: int = DISTRIBUTION_CONFIG['overdue_top_n']) -> List[OverduePoint]:
    """Numbers ranked by descending gap, ties by ascending number."""
    points = compute_overdue(draws, domain_max, pool)
    points.sort(key=lambda p: (-p.gap, p.number))
    return points[:top_n]


def hot_cold_runs(draws: Sequence[Draw], domain_max: int, pool: str = 'mains') -> StreakRuns:
    """
    Lengths of every maximal run of consecutive presence (hot) or absence
    (cold), over all numbers of the domain.

    Returns:
        StreakRuns with both lists sorted ascending
    """
    presence = _presence_matrix(draws, domain_max, pool)
    runs = StreakRuns()
    if len(draws) == 0:
        return runs

    for n in range(1, domain_max + 1):
        column = presence[:, n]
        current = column[0]
        length = 1
        for hit in column[1:]:
            if hit == current:
                length += 1
                continue
            (runs.hot_runs if current else runs.cold_runs).append(length)
            current = hit
            length = 1
        # final run is always flushed
        (runs.hot_runs if current else runs.cold_runs).append(length)

    runs.hot_runs.sort()
    runs.cold_runs.sort()
    return runs


def inter_arrival_gaps(draws: Sequence[Draw], domain_max: int, pool: str = 'mains') -> Dict[int, List[int]]:
    """Index differences between consecutive appearances of each number."""
    presence = _presence_matrix(draws, domain_max, pool)
    gaps = {}
    for n in range(1, domain_max + 1):
        indices = np.flatnonzero(presence[:, n])
        gaps[n] = [int(g) for g in np.diff(indices)]
    return gaps
