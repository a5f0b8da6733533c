import logging
from datetime import date, timedelta

import numpy as np
import pytest

from euro_analytics.draws import Draw
from euro_analytics.frequency import (
    count_frequencies,
    euro_frequencies,
    main_frequencies,
    recency_weights,
    top_numbers,
    uniformity_test,
    weight_vector,
    zscore,
)

# Setup logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def make_draws(mains_list, start=date(2023, 1, 3)):
    return [
        Draw(date=start + timedelta(days=7 * i), mains=mains, euros=(1, 2))
        for i, mains in enumerate(mains_list)
    ]


@pytest.fixture
def sample_draws():
    """Fixture with three small draws."""
    return [
        Draw(date(2023, 1, 3), (1, 2, 3, 4, 5), (1, 2)),
        Draw(date(2023, 1, 6), (1, 10, 20, 30, 40), (2, 3)),
        Draw(date(2023, 1, 10), (5, 15, 25, 35, 45), (1, 12)),
    ]


def test_count_covers_full_domain(sample_draws):
    """Every number of the domain is present, unseen numbers map to 0."""
    freq = main_frequencies(sample_draws)
    assert sorted(freq) == list(range(1, 51))
    assert freq[1] == 2
    assert freq[5] == 2
    assert freq[50] == 0


def test_count_total_matches_in_range_numbers(sample_draws):
    freq = main_frequencies(sample_draws)
    assert sum(freq.values()) == 15

    euros = euro_frequencies(sample_draws)
    assert sorted(euros) == list(range(1, 13))
    assert sum(euros.values()) == 6
    assert euros[1] == 2 and euros[2] == 2 and euros[12] == 1


def test_count_ignores_out_of_range_values():
    draws = [Draw(date(2023, 1, 3), (0, 51, 3, 4, 5), (1, 13))]
    freq = count_frequencies(draws, 50, 'mains')
    assert sum(freq.values()) == 3
    assert freq[3] == 1

    euros = count_frequencies(draws, 12, 'euros')
    assert sum(euros.values()) == 1


def test_count_unknown_pool_raises(sample_draws):
    with pytest.raises(ValueError):
        count_frequencies(sample_draws, 50, 'bonus')


def test_count_empty_history():
    freq = main_frequencies([])
    assert len(freq) == 50
    assert all(v == 0 for v in freq.values())


def test_recency_weights_decay(sample_draws):
    """With decay 0.5 the draws weigh 0.25, 0.5 and 1.0 (oldest first)."""
    rec = recency_weights(sample_draws, 50, 'mains', decay=0.5)
    assert rec[1] == pytest.approx(0.75)
    assert rec[5] == pytest.approx(1.25)
    assert rec[45] == pytest.approx(1.0)
    assert rec[2] == pytest.approx(0.25)
    assert rec[50] == 0.0


def test_recency_weight_grows_with_later_occurrence():
    """Same raw count, a later appearance gives a larger recency weight."""
    early = make_draws([(7, 11, 12, 13, 14), (21, 22, 23, 24, 25), (31, 32, 33, 34, 35)])
    late = make_draws([(21, 22, 23, 24, 25), (31, 32, 33, 34, 35), (7, 11, 12, 13, 14)])

    assert main_frequencies(early)[7] == main_frequencies(late)[7]
    rec_early = recency_weights(early, 50, 'mains')
    rec_late = recency_weights(late, 50, 'mains')
    assert rec_late[7] > rec_early[7]


def test_zscore_population_statistics():
    z = zscore([1.0, 2.0, 3.0])
    std = np.sqrt(2.0 / 3.0)
    np.testing.assert_allclose(z, [-1 / std, 0.0, 1 / std])


def test_zscore_zero_variance_falls_back():
    np.testing.assert_allclose(zscore([4.0, 4.0, 4.0]), [0.0, 0.0, 0.0])
    assert zscore([]).size == 0


def test_weight_vector_empty_history_is_smoothing_only():
    weights = weight_vector([], 12, 'euros', alpha=1.0, beta=0.35)
    assert len(weights) == 12
    assert all(w == pytest.approx(1.0) for w in weights.values())


def test_weight_vector_positive_and_favours_frequent(sample_draws):
    weights = weight_vector(sample_draws, 50, 'mains')
    assert all(w > 0 for w in weights.values())
    assert weights[5] > weights[50]
    assert weights[1] > weights[2]


def test_weight_vector_formula(sample_draws):
    decay, alpha, beta = 0.9, 1.0, 0.35
    counts = main_frequencies(sample_draws)
    rec = recency_weights(sample_draws, 50, 'mains', decay)
    z = zscore([rec[n] for n in range(1, 51)])
    weights = weight_vector(sample_draws, 50, 'mains', decay, alpha, beta)
    for n in (1, 5, 17, 45):
        assert weights[n] == pytest.approx((counts[n] + alpha) * (1 + beta * z[n - 1]))


def test_top_numbers_ordering():
    table = {1: 3, 2: 5, 3: 5, 4: 0, 5: 1}
    assert top_numbers(table, 3) == [2, 3, 1]
    assert top_numbers(table, 2, reverse=False) == [4, 5]


def test_uniformity_test():
    assert uniformity_test({n: 0 for n in range(1, 13)}) == {'statistic': 0.0, 'p_value': 1.0}

    uniform = uniformity_test({n: 10 for n in range(1, 13)})
    assert uniform['statistic'] == pytest.approx(0.0)
    assert uniform['p_value'] == pytest.approx(1.0)

    skewed = uniformity_test({n: (100 if n == 1 else 1) for n in range(1, 13)})
    assert skewed['p_value'] < 0.01
