"""pytest-benchmark configuration for Fission benchmarks.

Configures benchmark defaults and shared inputs.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add Fission metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "Fission"
    output_json["python_version"] = "3.13+"


@pytest.fixture(params=[1024, 10240, 102400], ids=["1KB", "10KB", "100KB"])
def data_file(request: pytest.FixtureRequest, tmp_path: Path) -> Path:
    """File of roughly the requested size filled with key/value lines."""
    size: int = request.param
    line = "key = value with some padding text\n"
    path = tmp_path / "bench.txt"
    path.write_text(line * (size // len(line) + 1), encoding="utf-8")
    return path
