"""Pairwise co-occurrence counts, lift and k-subset counting over main numbers."""

import logging
from collections import Counter
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, List, Sequence, Tuple

import numpy as np

from config.analytics_config import DISTRIBUTION_CONFIG, DOMAIN_CONFIG
from .draws import Draw

logger = logging.getLogger(__name__)

LIFT_EPSILON = 1e-9


def unique_mains(draw: Draw, domain_max: int = DOMAIN_CONFIG['main_max']) -> List[int]:
    """Deduplicated, sorted in-range main numbers of a draw."""
    return sorted({n for n in draw.mains if 1 <= n <= domain_max})


@dataclass(frozen=True)
class PairMatrix:
    """
    Symmetric co-occurrence counts of main numbers.

    counts[a][b] is the number of draws holding both a and b; row and
    column 0 are unused and the diagonal stays zero. seen[a] is the number
    of draws holding a.
    """
    counts: np.ndarray
    seen: np.ndarray
    total_draws: int

    @property
    def domain_max(self) -> int:
        return self.counts.shape[0] - 1

    def count(self, a: int, b: int) -> int:
        if a == b:
            return 0
        return int(self.counts[a, b])

    def lift(self, a: int, b: int) -> float:
        """P(a,b) / (P(a) * P(b)); values above 1 mean positive association."""
        if a == b:
            return 0.0
        n = max(1, self.total_draws)
        p_ab = self.counts[a, b] / n
        denom = max(LIFT_EPSILON, (self.seen[a] / n) * (self.seen[b] / n))
        return float(p_ab / denom)

    def top_pairs(self, n: int = 30) -> List[Tuple[int, int, int]]:
        """Most frequent pairs as (a, b, count), a < b, count > 0."""
        pairs = []
        for a in range(1, self.domain_max + 1):
            for b in range(a + 1, self.domain_max + 1):
                c = int(self.counts[a, b])
                if c > 0:
                    pairs.append((a, b, c))
        pairs.sort(key=lambda p: (-p[2], p[0], p[1]))
        return pairs[:n]


def pair_matrix(draws: Sequence[Draw], domain_max: int = DOMAIN_CONFIG['main_max']) -> PairMatrix:
    """Count, per draw, every unordered pair of distinct main numbers."""
    counts = np.zeros((domain_max + 1, domain_max + 1), dtype=int)
    seen = np.zeros(domain_max + 1, dtype=int)
    for draw in draws:
        mains = unique_mains(draw, domain_max)
        for m in mains:
            seen[m] += 1
        for a, b in combinations(mains, 2):
            counts[a, b] += 1
            counts[b, a] += 1
    return PairMatrix(counts=counts, seen=seen, total_draws=len(draws))


def combination_counts(draws: Sequence[Draw], k: int,
                       domain_max: int = DOMAIN_CONFIG['main_max']) -> Counter:
    """
    Count every k-subset of the main numbers per draw.

    Returns:
        Counter keyed by the sorted k-tuple
    """
    if k < 1:
        raise ValueError(f"Subset size must be at least 1, got {k}")
    counter = Counter()
    for draw in draws:
        counter.update(combinations(unique_mains(draw, domain_max), k))
    return counter


def top_triplets(draws: Sequence[Draw], top_n: int = DISTRIBUTION_CONFIG['triplets_top_n'],
                 domain_max: int = DOMAIN_CONFIG['main_max']) -> List[Tuple[Tuple[int, int, int], int]]:
    """Most frequent main-number triplets, ties ordered by the triplet itself."""
    counts = combination_counts(draws, 3, domain_max)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:top_n]


def cooccurrence_network(draws: Sequence[Draw],
                         min_weight: int = DISTRIBUTION_CONFIG['network_min_weight'],
                         top_edges: int = DISTRIBUTION_CONFIG['network_top_edges'],
                         domain_max: int = DOMAIN_CONFIG['main_max']) -> Dict:
    """
    Strongest co-occurrence edges and the weighted degree of every number.

    Returns:
        Dictionary with 'edges' (list of (a, b, weight)), 'degrees'
        (number -> summed weight of kept edges), 'max_weight' and 'max_degree'
    """
    pairs = pair_matrix(draws, domain_max)
    edges = []
    for a in range(1, domain_max + 1):
        for b in range(a + 1, domain_max + 1):
            w = int(pairs.counts[a, b])
            if w >= min_weight:
                edges.append((a, b, w))
    edges.sort(key=lambda e: (-e[2], e[0], e[1]))
    edges = edges[:top_edges]

    degrees = {n: 0 for n in range(1, domain_max + 1)}
    for a, b, w in edges:
        degrees[a] += w
        degrees[b] += w

    network = {
        'edges': edges,
        'degrees': degrees,
        'max_weight': max([w for _, _, w in edges] + [1]),
        'max_degree': max(list(degrees.values()) + [1]),
    }
    logger.debug(f"Co-occurrence network: {len(edges)} edges (min weight {min_weight})")
    return network
