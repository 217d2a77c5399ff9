#!/usr/bin/env python3
"""
Pipeline de CI local para textkey.

Cada paso es (nombre, comando, bloqueante). Un paso no bloqueante que falla
solo deja aviso; uno bloqueante corta el pipeline con su código de salida.

Uso: python scripts/ci_pipeline.py [--skip-performance]
"""

from __future__ import annotations

import argparse
import subprocess
import sys
import time
from typing import NamedTuple


class Step(NamedTuple):
    name: str
    command: list[str]
    blocking: bool = True


BASE_STEPS = [
    Step("lint", ["ruff", "check", "src", "tests", "scripts"], blocking=False),
    Step("tipos (core)", ["mypy", "src/textkey/core", "--ignore-missing-imports"]),
    Step("unitarios", ["pytest", "tests/core", "tests/infrastructure", "-q"]),
    Step("e2e", ["pytest", "tests/e2e", "-q"]),
]
PERFORMANCE_STEP = Step(
    "benchmarks",
    ["pytest", "tests/performance", "-m", "performance", "--benchmark-only", "-q"],
)


def run_step(step: Step) -> int:
    started = time.perf_counter()
    result = subprocess.run(step.command, capture_output=True, text=True)
    elapsed = time.perf_counter() - started

    mark = "✅" if result.returncode == 0 else ("❌" if step.blocking else "⚠️ ")
    print(f"{mark} {step.name:<14} {elapsed:6.2f}s  $ {' '.join(step.command)}")
    if result.returncode != 0:
        print(result.stdout[-4000:])
        print(result.stderr[-4000:], file=sys.stderr)
    return result.returncode


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CI local de textkey")
    parser.add_argument("--skip-performance", action="store_true")
    args = parser.parse_args(argv)

    steps = list(BASE_STEPS)
    if not args.skip_performance:
        steps.append(PERFORMANCE_STEP)

    print("🚀 textkey CI")
    for step in steps:
        code = run_step(step)
        if code != 0 and step.blocking:
            print(f"⛔ Pipeline detenido en '{step.name}'")
            return code

    print("🎉 Todos los pasos bloqueantes pasaron")
    return 0


if __name__ == "__main__":
    sys.exit(main())
