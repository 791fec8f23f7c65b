"""Execution policy and executor selection utilities."""

import os
import sys
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import TypeAlias

from degrees_of_separation.graph.bfs import load_worker_adjacency
from degrees_of_separation.graph.types import AdjacencyList

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Environment variable to override executor selection.
DOS_EXECUTOR_ENV = "DOS_EXECUTOR"

EXECUTOR_CHOICES = ("serial", "threads", "processes")


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def executor_class_for(name: str) -> ExecutorClass:
    """Map a policy name onto an executor class."""
    name = name.lower()
    if name == "threads":
        return ThreadPoolExecutor
    if name == "processes":
        return ProcessPoolExecutor
    if name == "serial":
        return None
    raise ValueError(f"unknown executor {name!r}, expected one of {', '.join(EXECUTOR_CHOICES)}")


def get_executor_class(override: str | None = None) -> ExecutorClass:
    """
    Select the appropriate executor class.

    Priority:
    1. Explicit override (e.g. from the command line)
    2. DOS_EXECUTOR env var ("threads", "processes", or "serial")
    3. Auto-select based on GIL status (disabled -> threads, enabled -> processes)

    "serial" mode runs in the main thread - useful for debugging with breakpoints.
    """
    if override:
        return executor_class_for(override)

    executor_override = os.environ.get(DOS_EXECUTOR_ENV, "").lower()
    if executor_override in EXECUTOR_CHOICES:
        return executor_class_for(executor_override)

    if is_gil_enabled():
        return ProcessPoolExecutor
    return ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    if executor_class is ThreadPoolExecutor:
        return "threads"
    return "processes"


def create_executor(
    executor_class: type[ThreadPoolExecutor] | type[ProcessPoolExecutor],
    workers: int | None,
    adjacency: AdjacencyList,
) -> Executor:
    """Create a pool; process workers receive the adjacency once at startup."""
    if executor_class is ProcessPoolExecutor:
        return ProcessPoolExecutor(
            max_workers=workers,
            initializer=load_worker_adjacency,
            initargs=(adjacency,),
        )
    return executor_class(max_workers=workers)
