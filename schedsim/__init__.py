"""
Scheduling simulator package.

Runs a fixed batch of processes through FCFS, preemptive SJF, Priority and
Round-robin scheduling and reports per-process timing metrics.
"""

__all__ = ["cli"]
