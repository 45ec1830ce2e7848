"""Run the flattree quality gates (ruff, mypy, pytest) and keep each tool's output.

Usage:
    python run_checks.py            # all checks
    python run_checks.py tests      # only pytest
"""
import subprocess
import sys
from pathlib import Path

OUTPUT_DIR = Path(__file__).resolve().parent / "check_output"

# Using 'uv run' so the tools come from the project's dev extra
CHECKS = {
    "lint": ["uv", "run", "ruff", "check", "src", "tests"],
    "types": ["uv", "run", "mypy"],
    "tests": ["uv", "run", "pytest", "-q"],
}


def run_command(name, command):
    output_file = OUTPUT_DIR / f"{name}.txt"
    print(f"Running: {' '.join(command)}")
    try:
        with open(output_file, "w") as f:
            result = subprocess.run(command, stdout=f, stderr=subprocess.STDOUT, text=True)
    except OSError as e:
        print(f"Error running {' '.join(command)}: {e}")
        return 1
    print(f"Finished: {name} (Exit Code: {result.returncode}) -> {output_file.name}")
    return result.returncode


def main(argv):
    selected = argv or list(CHECKS)
    unknown = [name for name in selected if name not in CHECKS]
    if unknown:
        print(f"Unknown check(s): {', '.join(unknown)}; choose from {', '.join(CHECKS)}")
        return 2

    OUTPUT_DIR.mkdir(exist_ok=True)
    failed = [name for name in selected if run_command(name, CHECKS[name]) != 0]

    if failed:
        print(f"\nFailed: {', '.join(failed)}. See {OUTPUT_DIR}/.")
        return 1
    print("\nAll checks passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
