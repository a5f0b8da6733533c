"""
EuroJackpot draw analytics.

Frequency/recency weights, co-occurrence and lift, overdue and streak
statistics, per-draw distributions, Smart Picks ticket suggestions and
prize-class evaluation over an in-memory draw history.
"""

__version__ = '0.3.0'

from .draws import Draw, draws_from_frame, draws_to_frame, numbers_for, sort_draws
from .frequency import (
    count_frequencies,
    euro_frequencies,
    main_frequencies,
    recency_weights,
    top_numbers,
    uniformity_test,
    weight_vector,
    zscore,
)
from .cooccurrence import (
    PairMatrix,
    combination_counts,
    cooccurrence_network,
    pair_matrix,
    top_triplets,
)
from .overdue import (
    OverduePoint,
    StreakRuns,
    compute_overdue,
    hot_cold_runs,
    inter_arrival_gaps,
    most_overdue,
)
from .distributions import (
    consecutive_pairs,
    feature_series,
    last_digit_counts,
    low_high_series,
    modulo_counts,
    monthly_counts,
    parity_series,
    parity_totals,
    positional_bias,
    range_series,
    rolling_mean,
    sum_series,
    tally,
    weekday_counts,
    weekday_effect,
)
from .smart_picks import (
    SumBand,
    Ticket,
    compute_sum_band,
    generate_smart_picks,
    sample_k,
    score_ticket,
    select_diverse,
    ticket_distance,
)
from .evaluation import (
    PRIZE_CLASSES,
    EvaluationResult,
    PrizeClassStat,
    Win,
    evaluate_numbers,
    jackpot_series,
    match_to_class,
    prize_class_stats,
)
from .analysis import analyze_draws

__all__ = [
    # Draws
    'Draw', 'draws_from_frame', 'draws_to_frame', 'numbers_for', 'sort_draws',

    # Frequency / recency
    'count_frequencies', 'main_frequencies', 'euro_frequencies', 'recency_weights',
    'zscore', 'weight_vector', 'top_numbers', 'uniformity_test',

    # Co-occurrence
    'PairMatrix', 'pair_matrix', 'combination_counts', 'top_triplets', 'cooccurrence_network',

    # Overdue / streaks
    'OverduePoint', 'StreakRuns', 'compute_overdue', 'most_overdue', 'hot_cold_runs',
    'inter_arrival_gaps',

    # Distributions
    'tally', 'feature_series', 'sum_series', 'range_series', 'parity_series', 'parity_totals',
    'low_high_series', 'last_digit_counts', 'modulo_counts', 'weekday_counts', 'weekday_effect',
    'monthly_counts', 'consecutive_pairs', 'positional_bias', 'rolling_mean',

    # Smart picks
    'Ticket', 'SumBand', 'compute_sum_band', 'sample_k', 'score_ticket', 'ticket_distance',
    'select_diverse', 'generate_smart_picks',

    # Evaluation
    'PRIZE_CLASSES', 'Win', 'EvaluationResult', 'PrizeClassStat', 'match_to_class',
    'evaluate_numbers', 'prize_class_stats', 'jackpot_series',

    # Summary
    'analyze_draws',
]
