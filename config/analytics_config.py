"""
Configuration file for EuroJackpot draw analytics.
Default constants for the frequency, distribution and smart-pick engines.
"""

# Game domain
DOMAIN_CONFIG = {
    'main_max': 50,        # Main numbers are drawn from 1..50
    'euro_max': 12,        # Euro numbers are drawn from 1..12
    'main_picks': 5,       # Main numbers per ticket
    'euro_picks': 2,       # Euro numbers per ticket
    'prize_classes': 12,   # Prize classes 1 (jackpot) .. 12
}

# Frequency / recency weighting
FREQUENCY_CONFIG = {
    'decay': 0.995,        # Per-draw recency decay, newest draw weighs 1.0
    'alpha': 1.0,          # Laplace smoothing added to raw counts
    'beta': 0.35,          # Influence of the recency z-score on the weight
    'top_n': 10,           # Size of hot/cold lists
}

# Smart picks sampling, scoring and diversification
SMART_PICKS_CONFIG = {
    'count': 5,
    'samples': 2000,
    'min_samples': 500,
    'max_samples': 6000,
    'top_pool': 200,
    'min_distance': 5,
    'fallback_sum_band': (95, 185),
    'sum_band_percentiles': (0.20, 0.80),
    'weight_floor': 1e-9,
    'uniform_floor': 1e-12,
    'lift_weight': 0.5,
    'lift_cap': 2.0,
    'bonuses': {
        'wide spread': 1.0,
        'good spacing': 1.0,
        'odd/even balance': 0.5,
        'digit diversity': 0.5,
        'sum in band': 0.5,
    },
    'penalties': {
        'avoids birthdays': 1.5,
        'avoids long runs': 1.0,
        'avoids same endings': 0.75,
    },
}

# Distribution helpers
DISTRIBUTION_CONFIG = {
    'low_high_split': 25,          # n <= split counts as low
    'positions': 5,
    'rolling_windows': [50, 100],
    'modulo_bases': [5, 7, 10],
    'overdue_top_n': 15,
    'triplets_top_n': 50,
    'network_min_weight': 2,
    'network_top_edges': 200,
}
