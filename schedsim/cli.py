from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .algorithms import ALGORITHMS, DEFAULT_QUANTUM, run_algorithm
from .report import print_result
from .workload_io import WorkloadError, load_workload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, SJF, Priority, Round-robin).",
    )
    parser.add_argument(
        "workload",
        help="Path to a CSV workload (id,burst,arrival[,priority] per line) or a JSON list.",
    )
    return parser


def _configure_logging(console: Console) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)
    _configure_logging(err_console)

    workload_path = Path(args.workload)
    try:
        processes = load_workload(workload_path)
    except OSError as exc:
        err_console.print(f"Error opening scheduling file: {exc}", style="red", markup=False, highlight=False)
        return 1
    except WorkloadError as exc:
        err_console.print(f"Error: {exc}", style="red", markup=False, highlight=False)
        return 1
    except UnicodeDecodeError as exc:
        err_console.print(f"Error: {workload_path} is not UTF-8 text: {exc}", style="red", markup=False, highlight=False)
        return 1

    if not processes:
        logger.warning("Workload %s contains no processes", workload_path)

    for name in ALGORITHMS:
        quantum = DEFAULT_QUANTUM if name == "rr" else None
        result = run_algorithm(name, processes, quantum=quantum)
        print_result(result, console)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
