"""
Engine statistics: roots, schemes, derivative density and frequencies,
plus the shape of the pattern store.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from .root_types import classify_root


@dataclass
class MorphologyStatistics:
    """Snapshot of the engine contents."""
    total_roots: int = 0
    total_patterns: int = 0
    total_derivatives: int = 0
    density: float = 0.0
    total_occurrences: int = 0
    mean_frequency: float = 0.0
    max_frequency: int = 0
    roots: Dict[str, List[str]] = field(default_factory=dict)
    root_types: Dict[str, int] = field(default_factory=dict)
    capacity: int = 0
    load_factor: float = 0.0
    longest_chain: int = 0

    def to_dict(self) -> Dict:
        return {
            'totalRoots': self.total_roots,
            'totalPatterns': self.total_patterns,
            'totalDerivatives': self.total_derivatives,
            'density': round(self.density, 4),
            'totalOccurrences': self.total_occurrences,
            'meanFrequency': round(self.mean_frequency, 4),
            'maxFrequency': self.max_frequency,
            'roots': self.roots,
            'rootTypes': self.root_types,
            'capacity': self.capacity,
            'loadFactor': round(self.load_factor, 4),
            'longestChain': self.longest_chain,
        }


def compute_statistics(state) -> MorphologyStatistics:
    """
    Compute statistics over an EngineState.

    Density is the number of distinct derivatives per root; frequency
    figures count every recorded occurrence.
    """
    nodes = state.roots.nodes()
    per_root = np.array([len(node.derivatives) for node in nodes], dtype=np.int64)
    frequencies = np.array(
        [d.frequency for node in nodes for d in node.derivatives], dtype=np.int64)
    chains = np.array(state.patterns.chain_lengths(), dtype=np.int64)

    type_counts = Counter(classify_root(node.root).name for node in nodes)

    return MorphologyStatistics(
        total_roots=len(nodes),
        total_patterns=state.patterns.size,
        total_derivatives=int(per_root.sum()),
        density=float(per_root.mean()) if per_root.size else 0.0,
        total_occurrences=int(frequencies.sum()),
        mean_frequency=float(frequencies.mean()) if frequencies.size else 0.0,
        max_frequency=int(frequencies.max()) if frequencies.size else 0,
        roots={node.root: [d.word for d in node.derivatives] for node in nodes},
        root_types=dict(sorted(type_counts.items())),
        capacity=state.patterns.capacity,
        load_factor=state.patterns.load_factor,
        longest_chain=int(chains.max()) if chains.size else 0,
    )
