"""Hand type distribution over an enumerated population."""

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from threecard.hand_evaluator import Hand, HandType


@dataclass
class TypeDistribution:
    """Count and frequency of each hand type."""

    counts: np.ndarray  # indexed by HandType value

    @classmethod
    def from_hands(cls, hands: Sequence[Hand]) -> "TypeDistribution":
        types = np.fromiter((h.score[0] for h in hands), dtype=np.int64, count=len(hands))
        return cls(counts=np.bincount(types, minlength=len(HandType)))

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    @property
    def frequencies(self) -> np.ndarray:
        if self.total == 0:
            return np.zeros(len(self.counts))
        return self.counts / self.total

    def count(self, hand_type: HandType) -> int:
        return int(self.counts[hand_type])

    def rows(self) -> list[tuple[HandType, int, float]]:
        """(type, count, frequency) from strongest to weakest."""
        freqs = self.frequencies
        return [(t, int(self.counts[t]), float(freqs[t])) for t in sorted(HandType, reverse=True)]

    def plot(self, save_path: str | Path | None = None, show: bool = False) -> None:
        """Bar chart of hand type frequencies."""
        labels = [str(t) for t in HandType]

        fig, ax = plt.subplots(figsize=(10, 5))
        ax.bar(labels, self.frequencies * 100, color="steelblue")
        ax.set_ylabel("Frequency (%)")
        ax.set_title(f"Hand Type Distribution ({self.total:,} hands)")
        ax.grid(True, axis="y", alpha=0.3)

        plt.tight_layout()

        if save_path:
            Path(save_path).parent.mkdir(parents=True, exist_ok=True)
            plt.savefig(save_path, dpi=150, bbox_inches="tight")
        if show:
            plt.show()

        plt.close(fig)
