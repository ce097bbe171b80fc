# agents/minimax/statistics.py

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class MoveRecord:
    column: int
    seconds: float


@dataclass
class MoveStatistics:
    """Append-only log of the column chosen and the time spent for every move."""
    records: List[MoveRecord] = field(default_factory=list)

    def record(self, column: int, seconds: float) -> MoveRecord:
        entry = MoveRecord(column, seconds)
        self.records.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self.records)

    @property
    def columns(self) -> List[int]:
        return [r.column for r in self.records]

    @property
    def times(self) -> List[float]:
        return [r.seconds for r in self.records]

    @property
    def total_time(self) -> float:
        return sum(self.times)

    def to_table(self) -> str:
        lines = [
            "================= Table of Statistics =================",
            f"{'Move':<10} | {'Column':<17} | {'Time (seconds)':<20}",
            "-------------------------------------------------------",
        ]
        for i, r in enumerate(self.records, start=1):
            lines.append(f"{i:<10d} | {r.column:<17d} | {r.seconds:<20.4f}")
        lines.append("-------------------------------------------------------")
        lines.append(f"{'Total':<10} | {'':<17} | {self.total_time:<20.4f}")
        return "\n".join(lines)
