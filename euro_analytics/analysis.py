"""History summary combining the individual engines."""

import logging
import time
from typing import Dict, Sequence

import numpy as np

from config.analytics_config import DISTRIBUTION_CONFIG, DOMAIN_CONFIG, FREQUENCY_CONFIG
from .cooccurrence import pair_matrix, top_triplets
from .distributions import (
    consecutive_pairs,
    modulo_counts,
    parity_totals,
    rolling_mean,
    sum_series,
    weekday_effect,
)
from .draws import Draw
from .frequency import euro_frequencies, main_frequencies, top_numbers, uniformity_test
from .overdue import hot_cold_runs, most_overdue
from .smart_picks import compute_sum_band
from .utils import log_analysis_errors

logger = logging.getLogger(__name__)


@log_analysis_errors
def analyze_draws(draws: Sequence[Draw], recent_window: int = 50) -> Dict:
    """
    Summarise a draw history.

    Args:
        draws: Draws in chronological order
        recent_window: Number of latest draws used for the recent hot list

    Returns:
        Dictionary of statistics: totals, date range, frequencies, hot and
        cold numbers, uniformity test, overdue numbers, top pairs and
        triplets, streak extremes, sum statistics with the latest
        rolling means and the modulo residue tables
    """
    start_time = time.time()

    main_freq = main_frequencies(draws)
    euro_freq = euro_frequencies(draws)
    recent_freq = main_frequencies(draws[-recent_window:] if recent_window > 0 else [])
    top_n = FREQUENCY_CONFIG['top_n']
    main_max = DOMAIN_CONFIG['main_max']

    runs = hot_cold_runs(draws, main_max, 'mains')
    sums = sum_series(draws)
    band = compute_sum_band(draws)

    stats = {
        'total_draws': len(draws),
        'date_range': {
            'start': draws[0].iso_date if draws else None,
            'end': draws[-1].iso_date if draws else None,
        },
        'main_frequencies': main_freq,
        'euro_frequencies': euro_freq,
        'hot_numbers': top_numbers(main_freq, top_n),
        'cold_numbers': top_numbers(main_freq, top_n, reverse=False),
        'recent_hot_numbers': top_numbers(recent_freq, top_n),
        'hot_euros': top_numbers(euro_freq, 3),
        'uniformity': uniformity_test(main_freq),
        'most_overdue': [
            {'number': p.number, 'gap': p.gap,
             'last_seen': p.last_seen.isoformat() if p.last_seen else None}
            for p in most_overdue(draws, main_max, 'mains', DISTRIBUTION_CONFIG['overdue_top_n'])
        ],
        'top_pairs': [list(p) for p in pair_matrix(draws, main_max).top_pairs(10)],
        'top_triplets': [{'triplet': list(t), 'count': c} for t, c in top_triplets(draws, 10)],
        'consecutive_pairs': consecutive_pairs(draws)['total_pairs'],
        'parity': parity_totals(draws),
        'weekday_effect': weekday_effect(draws),
        'streaks': {
            'longest_hot': max(runs.hot_runs, default=0),
            'longest_cold': max(runs.cold_runs, default=0),
        },
        'sum_statistics': {
            'mean': float(np.mean(sums)) if len(sums) else 0.0,
            'std': float(np.std(sums)) if len(sums) else 0.0,
            'band': [band.lo, band.hi],
            'rolling_mean': {
                window: rolling_mean(sums.tolist(), window)[-1] if len(sums) else None
                for window in DISTRIBUTION_CONFIG['rolling_windows']
            },
        },
        'modulo': {base: modulo_counts(draws, base) for base in DISTRIBUTION_CONFIG['modulo_bases']},
    }

    duration = time.time() - start_time
    logger.info(f"Analysis completed in {duration:.2f} seconds. Total draws: {len(draws)}")
    logger.info(f"Hot numbers: {stats['hot_numbers']}")
    return stats
