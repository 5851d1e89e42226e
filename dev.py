"""Development script to run checks (formatting, linting, tests) and a sample run."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally convert a sample module."""
    parser = argparse.ArgumentParser(
        description="Run development checks and an optional sample conversion."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Check only, without reformatting files"
    )
    parser.add_argument(
        "--sample",
        nargs=3,
        metavar=("METADATA", "DOCS", "OUT_DIR"),
        help="Convert a module after the checks pass",
    )
    args = parser.parse_args()

    if args.ci:
        run_command(["ruff", "format", "--check"], "Ruff Format Check")
        run_command(["ruff", "check"], "Ruff Linting")
    else:
        run_command(["ruff", "format"], "Ruff Formatting")
        run_command(["ruff", "check", "--fix"], "Ruff Linting & Fixes")

    run_command([sys.executable, "-m", "pytest"], "Tests")

    if args.sample:
        run_command(
            [sys.executable, "-m", "xmldoc2md.cli", *args.sample],
            "Sample Conversion",
        )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
