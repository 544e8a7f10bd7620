"""Shared fixtures for building graph files on disk."""

from __future__ import annotations

import struct
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from offline_graph.bin_writer import write_graph
from offline_graph.graph import OfflineGraph


@pytest.fixture
def make_graph(tmp_path: Path) -> Callable[[Sequence[Sequence[int]]], OfflineGraph]:
    """Write successor lists to a fresh file and load it offline."""
    counter = 0

    def _make(successor_lists: Sequence[Sequence[int]]) -> OfflineGraph:
        nonlocal counter
        counter += 1
        path = tmp_path / f"graph{counter}.bin"
        write_graph(path, successor_lists)
        return OfflineGraph(path)

    return _make


@pytest.fixture
def raw_file(tmp_path: Path) -> Callable[..., Path]:
    """Write big-endian u64 values verbatim, for malformed inputs."""

    def _write(*values: int, name: str = "raw.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(struct.pack(">" + "Q" * len(values), *values))
        return path

    return _write
