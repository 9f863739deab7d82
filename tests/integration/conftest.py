import pytest
from pathlib import Path
import subprocess
import sys

# Define paths relative to the main tests/ directory
TESTS_ROOT_DIR = Path(__file__).parent # This is tests/integration/
PROJECT_ROOT = TESTS_ROOT_DIR.parent.parent # Go up two levels to project root
FIXTURES_DIR = TESTS_ROOT_DIR.parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def run_cli_tool():
    """Fixture to provide a helper function for running the CLI tool."""
    def _run_cli(descriptor_json: Path, output_ts: Path, opt: str = None, verbose: bool = False):
        """Helper function to run the CLI tool as a subprocess."""
        cmd = [
            sys.executable,  # Use the current Python executable
            "-m",
            "proto2ts.cli",  # Invoke the module's entry point
            str(descriptor_json),
            str(output_ts),
        ]
        if opt:
            cmd.extend(["--opt", opt])
        if verbose:
            cmd.append("-v")

        result = subprocess.run(cmd, capture_output=True, text=True, cwd=PROJECT_ROOT, check=False)

        if result.returncode != 0:
            print(f"--- CLI Output for {descriptor_json.name} ---")
            print(f"Command: {' '.join(cmd)}")
            print("STDOUT:", result.stdout)
            print("STDERR:", result.stderr)
        return result

    return _run_cli
