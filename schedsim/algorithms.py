from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .metrics import compute_summary
from .models import Process, ProcessMetrics, ScheduleResult, ScheduledSlice

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2

FCFS_TITLE = "First-come, first-serve"
SJF_TITLE = "Shortest-job-first"
PRIORITY_TITLE = "Priority"
RR_TITLE = "Round-robin"


def _collect_rows(
    order: Sequence[Process], waiting: Sequence[int]
) -> Tuple[List[ProcessMetrics], List[ScheduledSlice]]:
    """
    Build metrics rows and timeline intervals for ``order``.

    Each interval stops at the latest completion time observed up to and
    including that process, so the stop column never decreases.
    """
    metrics: List[ProcessMetrics] = []
    timeline: List[ScheduledSlice] = []
    latest_completion = 0

    for p, waiting_time in zip(order, waiting):
        completion_time = p.burst_time + p.arrival_time + waiting_time
        latest_completion = max(latest_completion, completion_time)

        timeline.append(
            ScheduledSlice(
                pid=p.pid,
                start_time=waiting_time + p.arrival_time,
                end_time=latest_completion,
            )
        )
        metrics.append(
            ProcessMetrics(
                pid=p.pid,
                priority=p.priority,
                burst_time=p.burst_time,
                arrival_time=p.arrival_time,
                waiting_time=waiting_time,
                turnaround_time=p.burst_time + waiting_time,
                completion_time=completion_time,
            )
        )

    return metrics, timeline


def schedule_fcfs(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive).

    Processes run in the order given; the batch is assumed to already be in
    arrival order and is not re-sorted.
    """
    service_time = 0
    waiting_time = 0
    timeline: List[ScheduledSlice] = []
    metrics: List[ProcessMetrics] = []

    for p in processes:
        if p.arrival_time > 0:
            waiting_time = max(0, service_time - p.arrival_time)
        # else: a process arriving at time zero keeps the previous process's
        # waiting time (zero for the first process).

        start_time = waiting_time + p.arrival_time
        completion_time = p.burst_time + p.arrival_time + waiting_time
        service_time += p.burst_time

        timeline.append(ScheduledSlice(pid=p.pid, start_time=start_time, end_time=service_time))
        metrics.append(
            ProcessMetrics(
                pid=p.pid,
                priority=p.priority,
                burst_time=p.burst_time,
                arrival_time=p.arrival_time,
                waiting_time=waiting_time,
                turnaround_time=p.burst_time + waiting_time,
                completion_time=completion_time,
            )
        )
        logger.debug("fcfs: pid=%s start=%s completion=%s", p.pid, start_time, completion_time)

    result = ScheduleResult(algorithm=FCFS_TITLE, quantum=None, processes=metrics, timeline=timeline)
    compute_summary(result)
    return result


def select_shortest(processes: Sequence[Process], remaining: Sequence[int], tick: int) -> Optional[int]:
    """
    Index of the arrived, unfinished process with the least remaining time.

    Processes are scanned in index order and only a strictly smaller
    remaining time replaces the current pick, so ties go to the lowest index.
    Returns None when nothing is eligible at ``tick``.
    """
    shortest: Optional[int] = None
    for i, p in enumerate(processes):
        if p.arrival_time > tick or remaining[i] <= 0:
            continue
        if shortest is None or remaining[i] < remaining[shortest]:
            shortest = i
    return shortest


def schedule_sjf(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First, preemptive (shortest remaining time first).

    Time advances one tick at a time; on every tick the eligible process with
    the least remaining burst runs for that tick.
    """
    remaining = [p.burst_time for p in processes]
    waiting = [0] * len(processes)
    complete = 0
    tick = 0

    while complete < len(processes):
        shortest = select_shortest(processes, remaining, tick)

        if shortest is None:
            # CPU idle: jump to the next arrival among unfinished processes.
            tick = min(
                p.arrival_time for i, p in enumerate(processes) if remaining[i] > 0 and p.arrival_time > tick
            )
            continue

        remaining[shortest] -= 1

        if remaining[shortest] == 0:
            p = processes[shortest]
            complete += 1
            finish_time = tick + 1
            waiting[shortest] = max(0, finish_time - p.burst_time - p.arrival_time)
            logger.debug("sjf: pid=%s finished at %s", p.pid, finish_time)

        tick += 1

    metrics, timeline = _collect_rows(processes, waiting)
    result = ScheduleResult(algorithm=SJF_TITLE, quantum=None, processes=metrics, timeline=timeline)
    compute_summary(result)
    return result


def priority_order(processes: Sequence[Process]) -> List[Process]:
    """
    Processes in ascending priority value; equal priorities keep their
    original relative order.
    """
    indexed = sorted(enumerate(processes), key=lambda item: (item[1].priority, item[0]))
    return [p for _, p in indexed]


def schedule_priority(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority. The whole batch is
    ordered once up front; arrival times do not affect the order.

    Waiting time follows the simulator's historical recurrence::

        waiting[0] = 0
        waiting[i] = waiting[i - 1] + burst[i - 1] - arrival[i]

    which is not the textbook formula and may go negative. It is left
    unclamped.
    """
    order = priority_order(processes)
    waiting: List[int] = []

    for i, p in enumerate(order):
        if i == 0:
            waiting.append(0)
        else:
            prev = order[i - 1]
            waiting.append(waiting[i - 1] + prev.burst_time - p.arrival_time)
        logger.debug("priority: pid=%s priority=%s waiting=%s", p.pid, p.priority, waiting[i])

    metrics, timeline = _collect_rows(order, waiting)
    result = ScheduleResult(algorithm=PRIORITY_TITLE, quantum=None, processes=metrics, timeline=timeline)
    compute_summary(result)
    return result


def schedule_rr(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    The cursor walks the batch in index order. After each step it wraps to 0
    at the end of the batch, and also wraps to 0 whenever the next process
    has not arrived yet, so late arrivals are only reached once the clock
    catches up with them.
    """
    if quantum is None:
        quantum = DEFAULT_QUANTUM
    if quantum <= 0:
        raise ValueError(f"Round Robin requires a positive quantum, got {quantum}")

    n = len(processes)
    remaining = [p.burst_time for p in processes]
    waiting = [0] * n
    unfinished = n
    clock = 0
    cursor = 0
    ran_this_sweep = False

    while unfinished:
        p = processes[cursor]
        just_completed = False

        if 0 < remaining[cursor] <= quantum:
            clock += remaining[cursor]
            remaining[cursor] = 0
            just_completed = True
            ran_this_sweep = True
        elif remaining[cursor] > 0:
            remaining[cursor] -= quantum
            clock += quantum
            ran_this_sweep = True

        if just_completed:
            waiting[cursor] = clock - p.arrival_time - p.burst_time
            unfinished -= 1
            logger.debug("rr: pid=%s finished at %s", p.pid, clock)

        if cursor == n - 1:
            cursor = 0
            ran_this_sweep = False
        elif processes[cursor + 1].arrival_time <= clock:
            cursor += 1
        else:
            if not ran_this_sweep:
                # Everything reachable is done; idle until the next arrival.
                logger.debug("rr: idle from %s to %s", clock, processes[cursor + 1].arrival_time)
                clock = processes[cursor + 1].arrival_time
            cursor = 0
            ran_this_sweep = False

    metrics, timeline = _collect_rows(processes, waiting)
    result = ScheduleResult(algorithm=RR_TITLE, quantum=quantum, processes=metrics, timeline=timeline)
    compute_summary(result)
    return result


ALGORITHMS: Dict[str, Callable[..., ScheduleResult]] = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "priority": schedule_priority,
    "rr": schedule_rr,
}


def run_algorithm(name: str, processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Quantum is only used by round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}'")

    func = ALGORITHMS[name]
    return func(processes, quantum=quantum)
