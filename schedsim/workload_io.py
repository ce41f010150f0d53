from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List, Sequence

from .models import Process

logger = logging.getLogger(__name__)


class WorkloadError(ValueError):
    """Raised when a workload file cannot be turned into a process batch."""


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload into a list of Process objects.

    ``.json`` files hold a list of objects; anything else is read as
    headerless CSV records of ``id, burst, arrival[, priority]``.
    """
    path = Path(path)

    if path.suffix.lower() == ".json":
        processes = _load_json(path)
    else:
        processes = _load_csv(path)

    _check_unique_ids(processes)
    logger.info("Loaded %d processes from %s", len(processes), path)
    return processes


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        try:
            for row in reader:
                if not row:
                    continue
                processes.append(_process_from_record(row, line=reader.line_num))
        except csv.Error as exc:
            raise WorkloadError(f"{path}: line {reader.line_num}: {exc}") from exc
    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise WorkloadError(f"{path}: invalid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of process objects")

    processes: List[Process] = []
    for entry in raw:
        processes.append(_process_from_mapping(entry))
    return processes


def _process_from_record(record: Sequence[str], line: int) -> Process:
    if len(record) not in (3, 4):
        raise WorkloadError(f"line {line}: expected 3 or 4 fields, got {len(record)}: {record!r}")

    try:
        pid, burst_time, arrival_time = (int(field) for field in record[:3])
        priority = int(record[3]) if len(record) == 4 else 0
        return Process(pid=pid, burst_time=burst_time, arrival_time=arrival_time, priority=priority)
    except ValueError as exc:
        raise WorkloadError(f"line {line}: invalid process record {record!r}: {exc}") from exc


def _process_from_mapping(mapping) -> Process:
    try:
        pid = int(mapping["id"])
        burst_time = int(mapping["burst"])
        arrival_time = int(mapping["arrival"])
        priority_val = mapping.get("priority")
        priority = int(priority_val) if priority_val not in (None, "") else 0
        return Process(pid=pid, burst_time=burst_time, arrival_time=arrival_time, priority=priority)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise WorkloadError(f"Invalid process entry: {mapping!r}") from exc


def _check_unique_ids(processes: Sequence[Process]) -> None:
    seen = set()
    for p in processes:
        if p.pid in seen:
            raise WorkloadError(f"Duplicate process id {p.pid}")
        seen.add(p.pid)
