"""Command-line entry point for the draw analytics."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from config.analytics_config import DISTRIBUTION_CONFIG, DOMAIN_CONFIG, SMART_PICKS_CONFIG
from .analysis import analyze_draws
from .draws import Draw, draws_from_frame
from .evaluation import evaluate_numbers
from .frequency import count_frequencies
from .overdue import most_overdue
from .smart_picks import generate_smart_picks
from .utils import NumpyEncoder, setup_logging

logger = logging.getLogger(__name__)

DATA_PATH = Path("data/eurojackpot.csv")


def load_draws(data_path: str) -> List[Draw]:
    """Read a draw CSV and convert it to validated draws."""
    path = Path(data_path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    df = pd.read_csv(path)
    logger.info(f"Read {len(df)} rows from {path}")
    return draws_from_frame(df)


def _pool_domain(pool: str) -> int:
    return DOMAIN_CONFIG['main_max'] if pool == 'mains' else DOMAIN_CONFIG['euro_max']


def run_command(args: argparse.Namespace, draws: List[Draw]) -> Dict:
    if args.command == 'summary':
        return analyze_draws(draws, recent_window=args.recent)

    if args.command == 'frequencies':
        return {'pool': args.pool, 'frequencies': count_frequencies(draws, _pool_domain(args.pool), args.pool)}

    if args.command == 'overdue':
        points = most_overdue(draws, _pool_domain(args.pool), args.pool, args.top)
        return {'pool': args.pool, 'overdue': [asdict(p) for p in points]}

    if args.command == 'picks':
        tickets = generate_smart_picks(draws, seed=args.seed, count=args.count, samples=args.samples)
        return {'seed': args.seed, 'tickets': [asdict(t) for t in tickets]}

    if args.command == 'evaluate':
        result = evaluate_numbers(draws, args.mains, args.euros)
        return {
            'hits_per_class': result.hits_per_class,
            'payout_per_class': result.payout_per_class,
            'grand_total': result.grand_total,
            'best_class': result.best_class,
            'wins': [w._asdict() for w in result.wins],
        }

    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='EuroJackpot draw analytics')
    parser.add_argument('--data', default=str(DATA_PATH),
                        help='CSV with Draw Date, Main_Numbers, Euro_Numbers and optional GKL1..GKL12 columns')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--log-file', default=None, help='Log file path (default: logs/analytics.log)')

    sub = parser.add_subparsers(dest='command', required=True)

    summary = sub.add_parser('summary', help='Summary statistics of the history')
    summary.add_argument('--recent', type=int, default=50, help='Draws in the recent window')

    freq = sub.add_parser('frequencies', help='Hit count per number')
    freq.add_argument('--pool', choices=['mains', 'euros'], default='mains')

    overdue = sub.add_parser('overdue', help='Most overdue numbers')
    overdue.add_argument('--pool', choices=['mains', 'euros'], default='mains')
    overdue.add_argument('--top', type=int, default=DISTRIBUTION_CONFIG['overdue_top_n'])

    picks = sub.add_parser('picks', help='Smart Picks ticket suggestions')
    picks.add_argument('--seed', type=int, default=None, help='Random seed (vary it to re-roll)')
    picks.add_argument('--count', type=int, default=SMART_PICKS_CONFIG['count'])
    picks.add_argument('--samples', type=int, default=SMART_PICKS_CONFIG['samples'])

    evaluate = sub.add_parser('evaluate', help='Evaluate a 5+2 pick against the history')
    evaluate.add_argument('--mains', type=int, nargs=5, required=True)
    evaluate.add_argument('--euros', type=int, nargs=2, required=True)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(log_file=args.log_file, log_level=getattr(logging, args.log_level))

    try:
        draws = load_draws(args.data)
        output = run_command(args, draws)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Error running '{args.command}': {e}")
        return 1

    print(json.dumps(output, indent=2, cls=NumpyEncoder))
    return 0


if __name__ == "__main__":
    sys.exit(main())
