"""Evaluate a chosen 5+2 set against the draw history and summarise payouts."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, NamedTuple, Optional, Sequence

import pandas as pd

from config.analytics_config import DOMAIN_CONFIG
from .draws import Draw, sort_draws
from .utils import ensure_valid_pick, log_analysis_errors

logger = logging.getLogger(__name__)

ALL_CLASSES = list(range(1, DOMAIN_CONFIG['prize_classes'] + 1))

# (main matches, euro matches) -> prize class, best class first
PRIZE_CLASSES = {
    (5, 2): 1,
    (5, 1): 2,
    (5, 0): 3,
    (4, 2): 4,
    (4, 1): 5,
    (4, 0): 6,
    (3, 2): 7,
    (2, 2): 8,
    (3, 1): 9,
    (3, 0): 10,
    (1, 2): 11,
    (2, 1): 12,
}


class Win(NamedTuple):
    date: date
    prize_class: int
    amount: float


@dataclass
class EvaluationResult:
    hits_per_class: Dict[int, int] = field(default_factory=lambda: {k: 0 for k in ALL_CLASSES})
    payout_per_class: Dict[int, float] = field(default_factory=lambda: {k: 0.0 for k in ALL_CLASSES})
    grand_total: float = 0.0
    best_class: Optional[int] = None
    wins: List[Win] = field(default_factory=list)


@dataclass(frozen=True)
class PrizeClassStat:
    prize_class: int
    count: int
    total: float
    average: float


def match_to_class(main_matches: int, euro_matches: int) -> Optional[int]:
    """Prize class for a match combination, None when it wins nothing."""
    return PRIZE_CLASSES.get((main_matches, euro_matches))


@log_analysis_errors
def evaluate_numbers(draws: Sequence[Draw], mains: Sequence[int], euros: Sequence[int]) -> EvaluationResult:
    """
    Replay a 5+2 pick against every historical draw.

    Args:
        draws: Draw history
        mains: The 5 chosen main numbers
        euros: The 2 chosen Euro numbers

    Returns:
        EvaluationResult with hits and payouts per class, the grand total,
        the best class ever hit and every individual win

    Raises:
        ValueError: If the pick is not 5 distinct mains in 1..50 and
            2 distinct euros in 1..12
    """
    main_set = set(ensure_valid_pick(list(mains), DOMAIN_CONFIG['main_picks'], 1, DOMAIN_CONFIG['main_max']))
    euro_set = set(ensure_valid_pick(list(euros), DOMAIN_CONFIG['euro_picks'], 1, DOMAIN_CONFIG['euro_max']))

    result = EvaluationResult()
    for draw in draws:
        main_matches = sum(1 for n in draw.mains if n in main_set)
        euro_matches = sum(1 for n in draw.euros if n in euro_set)
        prize_class = match_to_class(main_matches, euro_matches)
        if prize_class is None:
            continue

        payout = draw.payouts.get(prize_class, 0.0)
        result.hits_per_class[prize_class] += 1
        result.payout_per_class[prize_class] += payout
        result.grand_total += payout
        result.wins.append(Win(draw.date, prize_class, payout))
        if result.best_class is None or prize_class < result.best_class:
            result.best_class = prize_class

    logger.info(f"Evaluated {sorted(main_set)} + {sorted(euro_set)} over {len(draws)} draws: "
                f"{len(result.wins)} wins, total {result.grand_total:.2f}")
    return result


def prize_class_stats(draws: Sequence[Draw]) -> List[PrizeClassStat]:
    """Number of draws with a recorded payout, total and average, per class."""
    stats = []
    for k in ALL_CLASSES:
        amounts = [d.payouts[k] for d in draws if k in d.payouts]
        total = float(sum(amounts))
        stats.append(PrizeClassStat(
            prize_class=k,
            count=len(amounts),
            total=total,
            average=total / len(amounts) if amounts else 0.0,
        ))
    return stats


def jackpot_series(draws: Sequence[Draw]) -> pd.Series:
    """Class 1 payout per draw (0 when not recorded), ascending by date."""
    ordered = sort_draws(draws)
    return pd.Series(
        [float(d.payouts.get(1, 0.0)) for d in ordered],
        index=pd.DatetimeIndex([d.date for d in ordered], name='Draw Date'),
        name='jackpot',
        dtype='float64',
    )
