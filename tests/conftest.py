"""Shared pytest fixtures for engine and CLI checks."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture(autouse=True)
def _clear_bracefmt_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BRACEFMT_MAX_NESTING_DEPTH",
        "BRACEFMT_NESTED_SPEC_CAPACITY",
        "BRACEFMT_ENCODING",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_env(package_root: Path) -> dict[str, str]:
    env = os.environ.copy()
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}{os.pathsep}{existing}"
    env["PYTHONIOENCODING"] = "utf-8"
    for name in list(env):
        if name.startswith("BRACEFMT_"):
            del env[name]
    return env


@pytest.fixture
def run_bracefmt(tmp_path: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(
        args: list[str],
        *,
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
        timeout: float = 15.0,
    ) -> CliResult:
        merged_env = dict(cli_env)
        if env:
            merged_env.update(env)
        completed = subprocess.run(
            [sys.executable, "-m", "bracefmt", *args],
            cwd=cwd or tmp_path,
            env=merged_env,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
