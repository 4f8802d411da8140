"""CPU scheduling simulations: round robin and shortest remaining time first."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["ProcessStats", "Schedule", "round_robin", "shortest_remaining_time_first"]


@dataclass(frozen=True)
class ProcessStats:
    """Timing of one process; pid counts from 1 in input order."""

    pid: int
    arrival: int
    burst: int
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


@dataclass(frozen=True)
class Schedule:
    """The outcome of a scheduling run, processes in input order."""

    processes: tuple[ProcessStats, ...]

    @property
    def average_waiting(self) -> float:
        return sum(p.waiting for p in self.processes) / len(self.processes)

    @property
    def average_turnaround(self) -> float:
        return sum(p.turnaround for p in self.processes) / len(self.processes)


def _check_bursts(burst_times: Sequence[int]) -> None:
    if not burst_times:
        raise ValueError("at least one process is needed")
    if any(burst <= 0 for burst in burst_times):
        raise ValueError("burst times must be positive")


def round_robin(burst_times: Sequence[int], quantum: int) -> Schedule:
    """Run processes that all arrive at time 0, each for at most one quantum per turn."""
    _check_bursts(burst_times)
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    remaining = list(burst_times)
    completion = [0] * len(burst_times)
    clock = 0
    while any(remaining):
        for index, left in enumerate(remaining):
            if left == 0:
                continue
            step = min(left, quantum)
            clock += step
            remaining[index] -= step
            if remaining[index] == 0:
                completion[index] = clock
    return Schedule(
        tuple(
            ProcessStats(pid, 0, burst, done)
            for pid, (burst, done) in enumerate(zip(burst_times, completion), 1)
        )
    )


def shortest_remaining_time_first(
    arrival_times: Sequence[int], burst_times: Sequence[int]
) -> Schedule:
    """Preemptive scheduling: each time unit goes to the arrived process with least work left.

    Ties go to the process listed first.
    """
    if len(arrival_times) != len(burst_times):
        raise ValueError("arrival and burst times differ in length")
    _check_bursts(burst_times)
    if any(arrival < 0 for arrival in arrival_times):
        raise ValueError("arrival times must be non-negative")
    remaining = list(burst_times)
    completion = [0] * len(burst_times)
    finished = 0
    clock = 0
    while finished < len(remaining):
        ready = [
            index
            for index, left in enumerate(remaining)
            if left > 0 and arrival_times[index] <= clock
        ]
        if not ready:
            clock = min(
                arrival_times[index] for index, left in enumerate(remaining) if left > 0
            )
            continue
        chosen = min(ready, key=remaining.__getitem__)
        remaining[chosen] -= 1
        clock += 1
        if remaining[chosen] == 0:
            completion[chosen] = clock
            finished += 1
    return Schedule(
        tuple(
            ProcessStats(pid, arrival, burst, done)
            for pid, (arrival, burst, done) in enumerate(
                zip(arrival_times, burst_times, completion), 1
            )
        )
    )