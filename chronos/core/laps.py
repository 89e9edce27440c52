# chronos/core/laps.py
# Lap ledger: split recording & on-demand fastest/slowest/average/delta statistics

from __future__ import annotations

from typing import Iterable

from .types import Lap, LapRow, LapStatistics


# * Ordered lap splits measured against cumulative elapsed time
class LapLedger:
    def __init__(self) -> None:
        self._laps: list[Lap] = []
        # cumulative elapsed at the start of the lap in progress
        self.lap_start_ms: float = 0.0

    @property
    def laps(self) -> tuple[Lap, ...]:
        return tuple(self._laps)

    def __len__(self) -> int:
        return len(self._laps)

    # append split ending at total_now & start the next lap there
    def record(self, total_now: float) -> Lap:
        lap = Lap(lap_ms=total_now - self.lap_start_ms, total_ms=total_now)
        self._laps.append(lap)
        self.lap_start_ms = total_now
        return lap

    # drop laps but keep continuity: the next lap measures from snapshot_ms
    def clear(self, snapshot_ms: float) -> None:
        self._laps = []
        self.lap_start_ms = snapshot_ms

    def reset(self) -> None:
        self._laps = []
        self.lap_start_ms = 0.0

    # replace laps w/ a persisted history; lap_start_ms stays put, so restored totals belong to an
    # earlier session & new laps restart from this session's elapsed time
    def restore(self, laps: Iterable[Lap]) -> None:
        self._laps = list(laps)

    def current_lap_ms(self, total_now: float) -> float:
        return total_now - self.lap_start_ms

    # * Recompute statistics from the current laps (never cached)
    def statistics(self) -> LapStatistics:
        if not self._laps:
            return LapStatistics()

        times = [lap.lap_ms for lap in self._laps]
        fastest = min(times)
        slowest = max(times)
        # average & deltas only make sense w/ two or more laps
        average = sum(times) / len(times) if len(times) >= 2 else None
        return LapStatistics(
            count=len(times),
            fastest_ms=fastest,
            slowest_ms=slowest,
            average_ms=average,
            tied=fastest == slowest,
        )

    # * Build display rows; every lap sharing an extreme is flagged unless all laps tie
    def rows(self) -> list[LapRow]:
        stats = self.statistics()
        rows: list[LapRow] = []
        for index, lap in enumerate(self._laps):
            delta = lap.lap_ms - stats.average_ms if stats.average_ms is not None else None
            rows.append(
                LapRow(
                    number=index + 1,
                    lap=lap,
                    is_fastest=not stats.tied and lap.lap_ms == stats.fastest_ms,
                    is_slowest=not stats.tied and lap.lap_ms == stats.slowest_ms,
                    delta_ms=delta,
                )
            )
        return rows
