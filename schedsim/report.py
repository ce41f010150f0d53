from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .models import ScheduleResult, ScheduledSlice

PID_CELL_WIDTH = 8


def render_title(title: str) -> str:
    rule = "-" * (len(title) * 2)
    return "\n".join([rule, " " * (len(title) // 2) + " " + title, rule])


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text timeline: one centred cell per interval, then the start time
    of each interval separated by tabs, closed by the last stop time.
    """
    cells = "|"
    for sl in slices:
        pid = str(sl.pid)
        padding = " " * ((PID_CELL_WIDTH - len(pid)) // 2)
        cells += padding + pid + padding + "|"

    marks = "\t".join(str(sl.start_time) for sl in slices)
    if slices:
        marks += "\t" + str(slices[-1].end_time)

    return "\n".join(["Gantt schedule", cells, marks, ""])


def build_schedule_table(result: ScheduleResult) -> Table:
    """
    Per-process metrics with averages and throughput in the footer.
    """
    summary = result.summary

    def footer(label: str, value: Optional[str]) -> str:
        return f"{label}\n{value if value is not None else 'n/a'}"

    table = Table(title="Schedule table", box=box.ASCII, show_footer=True)
    table.add_column("ID", justify="center")
    table.add_column("Priority", justify="right")
    table.add_column("Burst", justify="right")
    table.add_column("Arrival", justify="right")
    table.add_column(
        "Wait",
        justify="right",
        footer=footer("Average", f"{summary.avg_waiting:.2f}" if summary else None),
    )
    table.add_column(
        "Turnaround",
        justify="right",
        footer=footer("Average", f"{summary.avg_turnaround:.2f}" if summary else None),
    )
    table.add_column(
        "Exit",
        justify="right",
        footer=footer("Throughput", f"{summary.throughput:.2f}/t" if summary else None),
    )

    for p in result.processes:
        table.add_row(
            str(p.pid),
            str(p.priority),
            str(p.burst_time),
            str(p.arrival_time),
            str(p.waiting_time),
            str(p.turnaround_time),
            str(p.completion_time),
        )

    return table


def print_result(result: ScheduleResult, console: Optional[Console] = None) -> None:
    """
    Write one report block: title banner, timeline and schedule table.
    """
    console = console or Console()

    console.out(render_title(result.algorithm), highlight=False)
    console.out(render_gantt(result.timeline), highlight=False)
    console.print(build_schedule_table(result))
