from __future__ import annotations

from typing import List, Optional

from .models import ProcessMetrics, ScheduleResult, ScheduleSummary


def summarize_process_metrics(processes: List[ProcessMetrics]) -> Optional[ScheduleSummary]:
    """
    Average waiting and turnaround over all rows, plus throughput against
    the latest completion time.

    Returns None for an empty batch rather than dividing by zero.
    """
    if not processes:
        return None

    n = len(processes)
    makespan = max(p.completion_time for p in processes)
    # Negative waiting times can pull every completion to zero or below.
    throughput = n / makespan if makespan > 0 else 0.0

    return ScheduleSummary(
        avg_waiting=sum(p.waiting_time for p in processes) / n,
        avg_turnaround=sum(p.turnaround_time for p in processes) / n,
        throughput=throughput,
        makespan=makespan,
    )


def compute_summary(result: ScheduleResult) -> Optional[ScheduleSummary]:
    """
    Compute the aggregate metrics for a populated result and attach them.
    """
    summary = summarize_process_metrics(result.processes)
    result.summary = summary
    return summary
