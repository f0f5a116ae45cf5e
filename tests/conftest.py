import os
import sys

import pytest
from click.testing import CliRunner

# Add src to the Python path so the package imports without an install
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
)

from hangulnum import HangulNumberCodec, fixed_seed
from hangulnum.cli.main import cli


@pytest.fixture
def codec():
    """A codec on the standard alphabet with a deterministic seed provider."""
    return HangulNumberCodec(seed_provider=fixed_seed(7))


@pytest.fixture
def cli_test_env(request):
    """
    Provides a helper for running CLI commands in-process.
    """
    runner = CliRunner()

    def run_command(cmd, input=None):
        result = runner.invoke(cli, cmd, input=input)

        if request.config.getoption("capture") == "no":
            print(result.output)

        if result.exit_code != 0:
            print("Error running command:", " ".join(cmd))
            print("Output:", result.output)

        # Allow commands to fail, as we need to test failure cases
        return result

    return run_command
