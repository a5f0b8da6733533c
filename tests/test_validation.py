import logging
from datetime import date

import numpy as np
import pytest

from euro_analytics.draws import Draw
from euro_analytics.utils import ensure_valid_pick, log_analysis_errors, validate_draw

# Setup logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def test_ensure_valid_pick_sorts():
    assert ensure_valid_pick([5, 3, 1, 4, 2]) == [1, 2, 3, 4, 5]
    assert ensure_valid_pick((12, 1), numbers_count=2, max_value=12) == [1, 12]
    assert ensure_valid_pick(np.array([50, 10, 20, 30, 40])) == [10, 20, 30, 40, 50]


@pytest.mark.parametrize('pick', [
    {1, 2, 3, 4, 5},
    [1, 2, 3, 4],
    [1, 2, 3, 4, 5, 6],
    [1, 2, 3, 4, 5.0],
    [1, 2, 3, 4, True],
    [0, 2, 3, 4, 5],
    [1, 2, 3, 4, 51],
    [1, 2, 2, 4, 5],
])
def test_ensure_valid_pick_rejects(pick):
    with pytest.raises(ValueError):
        ensure_valid_pick(pick)


def test_validate_draw_accepts_valid_draw():
    draw = Draw(date(2023, 1, 3), (1, 2, 3, 4, 5), (1, 12), {1: 1000.0, 12: 0.0})
    assert validate_draw(draw) == []


def test_validate_draw_reports_every_problem():
    draw = Draw(date(2023, 1, 3), (1, 1, 2, 3, 60), (13,), {0: 5.0, 2: -1.0})
    errors = validate_draw(draw)
    assert len(errors) == 6
    assert any('Main numbers out of range' in e for e in errors)
    assert any('Main numbers contain duplicates' in e for e in errors)
    assert any('Euro numbers must contain 2' in e for e in errors)
    assert any('Euro numbers out of range' in e for e in errors)
    assert any('Unknown prize classes' in e for e in errors)
    assert any('Negative payouts' in e for e in errors)


def test_log_analysis_errors_reraises(caplog):
    @log_analysis_errors
    def failing():
        raise ValueError("bad input")

    with caplog.at_level(logging.ERROR):
        with pytest.raises(ValueError, match='bad input'):
            failing()
    assert 'Error in failing' in caplog.text


def test_log_analysis_errors_passes_result():
    @log_analysis_errors
    def double(x):
        """Double a value."""
        return 2 * x

    assert double(21) == 42
    assert double.__name__ == 'double'
    assert double.__doc__ == 'Double a value.'
