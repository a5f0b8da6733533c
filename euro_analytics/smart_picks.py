"""
Smart Picks: data-informed, diversified ticket suggestions.

This is not a prediction. Candidate tickets are sampled in proportion to
frequency/recency weights, scored with mild pair-lift bonuses and shape
heuristics (spread, spacing, parity, last-digit diversity, sum band),
penalised for popular human patterns (birthdays, runs, repeated endings),
and finally diversified so the suggestions do not overlap too much.
"""

import logging
import math
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from config.analytics_config import DOMAIN_CONFIG, FREQUENCY_CONFIG, SMART_PICKS_CONFIG
from .cooccurrence import PairMatrix, pair_matrix
from .draws import Draw
from .frequency import weight_vector
from .utils import log_analysis_errors

logger = logging.getLogger(__name__)

MAIN_MAX = DOMAIN_CONFIG['main_max']
EURO_MAX = DOMAIN_CONFIG['euro_max']
MAIN_PICKS = DOMAIN_CONFIG['main_picks']
EURO_PICKS = DOMAIN_CONFIG['euro_picks']

WEIGHT_FLOOR = SMART_PICKS_CONFIG['weight_floor']
UNIFORM_FLOOR = SMART_PICKS_CONFIG['uniform_floor']
BONUSES = SMART_PICKS_CONFIG['bonuses']
PENALTIES = SMART_PICKS_CONFIG['penalties']


@dataclass
class Ticket:
    mains: Tuple[int, ...]
    euros: Tuple[int, ...]
    score: float = 0.0
    badges: List[str] = field(default_factory=list)


class SumBand(NamedTuple):
    lo: int
    hi: int

    def includes(self, total: int) -> bool:
        return self.lo <= total <= self.hi


def compute_sum_band(draws: Sequence[Draw]) -> SumBand:
    """
    20th..80th percentile (nearest rank) of historical main-number sums.

    Falls back to a fixed band when there is no history.
    """
    sums = sorted(sum(d.mains) for d in draws)
    if not sums:
        return SumBand(*SMART_PICKS_CONFIG['fallback_sum_band'])
    lo_pct, hi_pct = SMART_PICKS_CONFIG['sum_band_percentiles']
    last = len(sums) - 1
    return SumBand(sums[math.floor(lo_pct * last)], sums[math.floor(hi_pct * last)])


def sample_k(domain_max: int, k: int, weights: Dict[int, float],
             rng: np.random.Generator) -> List[int]:
    """
    Weighted sampling without replacement using exponential keys.

    Every number gets key u^(1/w) with u uniform; the k largest keys are
    selected, so a heavier number is proportionally more likely to be picked.

    Returns:
        The k chosen numbers, sorted ascending
    """
    numbers = np.arange(1, domain_max + 1)
    w = np.maximum(WEIGHT_FLOOR, np.array([weights.get(int(n), 0.0) for n in numbers], dtype=float))
    u = np.maximum(UNIFORM_FLOOR, rng.random(domain_max))
    keys = u ** (1.0 / w)
    chosen = np.argsort(-keys, kind='stable')[:k]
    return sorted(int(numbers[i]) for i in chosen)


def _longest_run(mains: Sequence[int]) -> int:
    longest = run = 1
    for prev, cur in zip(mains, mains[1:]):
        run = run + 1 if cur == prev + 1 else 1
        longest = max(longest, run)
    return longest


def score_ticket(mains: Sequence[int], euros: Sequence[int],
                 main_weights: Dict[int, float], euro_weights: Dict[int, float],
                 pairs: PairMatrix, sum_band: SumBand) -> Tuple[float, List[str]]:
    """
    Heuristic score of one candidate ticket.

    Args:
        mains: Sorted main numbers
        euros: Sorted Euro numbers
        main_weights: Weight vector of the main numbers
        euro_weights: Weight vector of the Euro numbers
        pairs: Co-occurrence matrix used for lift bonuses
        sum_band: Accepted range for the sum of the mains

    Returns:
        Tuple of (score, badges) where badges name every bonus and penalty applied
    """
    mains = sorted(mains)
    badges = []
    score = sum(math.log(max(WEIGHT_FLOOR, main_weights.get(m, 0.0))) for m in mains)
    score += sum(math.log(max(WEIGHT_FLOOR, euro_weights.get(e, 0.0))) for e in euros)

    for i in range(len(mains)):
        for j in range(i + 1, len(mains)):
            lift = pairs.lift(mains[i], mains[j])
            if lift > 1:
                score += SMART_PICKS_CONFIG['lift_weight'] * min(SMART_PICKS_CONFIG['lift_cap'], lift - 1.0)

    low, high = mains[0], mains[-1]
    avg_gap = (high - low) / (len(mains) - 1) if len(mains) > 1 else 0
    odd = sum(1 for m in mains if m % 2 == 1)
    endings = Counter(m % 10 for m in mains)

    rules = [
        ('wide spread', low <= 10 and high >= 40),
        ('good spacing', avg_gap >= 7),
        ('odd/even balance', odd in (2, 3)),
        ('digit diversity', len(endings) >= 4),
        ('sum in band', sum_band.includes(sum(mains))),
    ]
    for badge, applies in rules:
        if applies:
            score += BONUSES[badge]
            badges.append(badge)

    # popular human patterns share jackpots more often
    rules = [
        ('avoids birthdays', all(m <= 31 for m in mains)),
        ('avoids long runs', _longest_run(mains) >= 3),
        ('avoids same endings', max(endings.values()) >= 3),
    ]
    for badge, applies in rules:
        if applies:
            score -= PENALTIES[badge]
            badges.append(badge)

    return score, badges


def ticket_distance(a: Ticket, b: Ticket) -> int:
    """(5 - shared mains) + (2 - shared euros)"""
    shared_mains = len(set(a.mains) & set(b.mains))
    shared_euros = len(set(a.euros) & set(b.euros))
    return (MAIN_PICKS - shared_mains) + (EURO_PICKS - shared_euros)


def select_diverse(pool: Sequence[Ticket], want: int = SMART_PICKS_CONFIG['count'],
                   min_distance: int = SMART_PICKS_CONFIG['min_distance']) -> List[Ticket]:
    """
    Greedily pick tickets far enough from every ticket already picked.

    The pool is walked in order (best first). If fewer than `want` tickets
    clear the distance threshold, the remaining slots are filled with the
    next pool tickets whose numbers are not already picked,
    regardless of overlap.
    """
    picks: List[Ticket] = []
    for cand in pool:
        if all(ticket_distance(p, cand) >= min_distance for p in picks):
            picks.append(cand)
            if len(picks) == want:
                return picks

    for cand in pool:
        if len(picks) >= want:
            break
        if not any((p.mains, p.euros) == (cand.mains, cand.euros) for p in picks):
            picks.append(cand)
    return picks


@log_analysis_errors
def generate_smart_picks(draws: Sequence[Draw], seed: Optional[int] = None,
                         count: int = SMART_PICKS_CONFIG['count'],
                         samples: int = SMART_PICKS_CONFIG['samples'],
                         top_pool: int = SMART_PICKS_CONFIG['top_pool'],
                         min_distance: int = SMART_PICKS_CONFIG['min_distance'],
                         decay: float = FREQUENCY_CONFIG['decay'],
                         alpha: float = FREQUENCY_CONFIG['alpha'],
                         beta: float = FREQUENCY_CONFIG['beta']) -> List[Ticket]:
    """
    Generate diversified ticket suggestions from the draw history.

    Args:
        draws: Draws in chronological order
        seed: Random seed; the same seed and history give the same tickets,
            a new seed re-rolls
        count: Number of tickets to return
        samples: Candidate tickets to sample (clamped to 500..6000)
        top_pool: Best candidates kept for diversification
        min_distance: Minimum ticket distance during diversification
        decay: Per-draw recency decay
        alpha: Laplace smoothing for the weights
        beta: Strength of the recency adjustment

    Returns:
        Tickets sorted by descending score, empty when there is no history
    """
    if not draws:
        logger.info("No draw history, no smart picks generated")
        return []

    start_time = time.time()

    main_weights = weight_vector(draws, MAIN_MAX, 'mains', decay, alpha, beta)
    euro_weights = weight_vector(draws, EURO_MAX, 'euros', decay, alpha, beta)
    pairs = pair_matrix(draws, MAIN_MAX)
    sum_band = compute_sum_band(draws)

    rng = np.random.default_rng(seed)
    n_samples = int(np.clip(samples, SMART_PICKS_CONFIG['min_samples'], SMART_PICKS_CONFIG['max_samples']))

    pool = []
    for _ in range(n_samples):
        mains = sample_k(MAIN_MAX, MAIN_PICKS, main_weights, rng)
        euros = sample_k(EURO_MAX, EURO_PICKS, euro_weights, rng)
        score, badges = score_ticket(mains, euros, main_weights, euro_weights, pairs, sum_band)
        pool.append(Ticket(mains=tuple(mains), euros=tuple(euros), score=score, badges=badges))

    pool.sort(key=lambda t: t.score, reverse=True)
    picks = select_diverse(pool[:top_pool], count, min_distance)
    picks.sort(key=lambda t: t.score, reverse=True)

    duration = time.time() - start_time
    logger.info(f"Generated {len(picks)} smart picks from {n_samples} samples in {duration:.2f} seconds")
    logger.debug(f"Sum band: {sum_band.lo}..{sum_band.hi}, seed: {seed}")
    return picks
