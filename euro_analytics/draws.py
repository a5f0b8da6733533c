"""Draw records and conversion from/to the tabular draw history."""

import ast
import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

import pandas as pd

from config.analytics_config import DOMAIN_CONFIG
from .utils import validate_draw

logger = logging.getLogger(__name__)

POOLS = ('mains', 'euros')
REQUIRED_COLUMNS = ['Draw Date', 'Main_Numbers', 'Euro_Numbers']
PAYOUT_COLUMNS = [f"GKL{k}" for k in range(1, DOMAIN_CONFIG['prize_classes'] + 1)]


def _to_date(value) -> date:
    if pd.isna(value):
        raise ValueError("Draw date is missing")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


@dataclass(frozen=True)
class Draw:
    """
    One historical draw: date, 5 main numbers, 2 Euro numbers and the
    recorded payout per prize class.
    """
    date: date
    mains: Tuple[int, ...]
    euros: Tuple[int, ...]
    payouts: Mapping[int, float] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'date', _to_date(self.date))
        object.__setattr__(self, 'mains', tuple(int(n) for n in self.mains))
        object.__setattr__(self, 'euros', tuple(int(n) for n in self.euros))
        object.__setattr__(self, 'payouts', MappingProxyType(
            {int(k): float(v) for k, v in dict(self.payouts).items()}
        ))

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()


def numbers_for(draw: Draw, pool: str) -> Tuple[int, ...]:
    """Return the main or Euro numbers of a draw."""
    if pool == 'mains':
        return draw.mains
    if pool == 'euros':
        return draw.euros
    raise ValueError(f"Unknown number pool '{pool}', expected one of {POOLS}")


def sort_draws(draws: Iterable[Draw]) -> List[Draw]:
    """Return draws in chronological order (oldest first)."""
    return sorted(draws, key=lambda d: d.date)


def _parse_numbers(value) -> List[int]:
    if isinstance(value, str):
        # lists written by draws_to_frame come back from CSV as "[1, 2, 3]"
        parts = [p for p in re.split(r'[\s,;]+', value.strip().strip('[]')) if p]
        return [int(p) for p in parts]
    return [int(n) for n in value]


def _row_payouts(row: pd.Series) -> Dict[int, float]:
    payouts = row.get('Payouts')
    if isinstance(payouts, str) and payouts.strip():
        payouts = ast.literal_eval(payouts)
    if isinstance(payouts, Mapping):
        return {int(k): float(v) for k, v in payouts.items() if not pd.isna(v)}

    result = {}
    for k, column in enumerate(PAYOUT_COLUMNS, start=1):
        if column in row.index and not pd.isna(row[column]):
            result[k] = float(row[column])
    return result


def draws_from_frame(df: pd.DataFrame) -> List[Draw]:
    """
    Convert a draw history DataFrame into validated Draw records.

    Args:
        df: DataFrame with 'Draw Date', 'Main_Numbers' and 'Euro_Numbers'
            columns, plus either a 'Payouts' mapping column or GKL1..GKL12
            amount columns.

    Returns:
        Valid draws sorted by date. Rows that cannot be parsed or break the
        game rules are skipped with a warning.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        logger.error(f"Missing columns in draw DataFrame: {missing}")
        raise ValueError(f"DataFrame must contain columns {REQUIRED_COLUMNS}, missing {missing}")

    draws = []
    skipped = 0
    for idx, row in df.iterrows():
        try:
            draw = Draw(
                date=row['Draw Date'],
                mains=_parse_numbers(row['Main_Numbers']),
                euros=_parse_numbers(row['Euro_Numbers']),
                payouts=_row_payouts(row),
            )
        except (TypeError, ValueError, SyntaxError) as e:
            logger.warning(f"Skipping row {idx}: {e}")
            skipped += 1
            continue

        errors = validate_draw(draw)
        if errors:
            logger.warning(f"Skipping row {idx} ({draw.iso_date}): {'; '.join(errors)}")
            skipped += 1
            continue
        draws.append(draw)

    logger.info(f"Loaded {len(draws)} draws ({skipped} skipped)")
    return sort_draws(draws)


def draws_to_frame(draws: Sequence[Draw]) -> pd.DataFrame:
    """Convert draws into a DataFrame with one row per draw."""
    return pd.DataFrame({
        'Draw Date': pd.to_datetime([d.date for d in draws]),
        'Main_Numbers': [list(d.mains) for d in draws],
        'Euro_Numbers': [list(d.euros) for d in draws],
        'Payouts': [dict(d.payouts) for d in draws],
    })
