#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from typing import Callable

# Local ----------------------------------------------------------------------------------------------------------------
from metricnum.cli import main

# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def run_cli(capsys) -> Callable[..., tuple[int, str, str]]:
    """Fixture to run the metricnum CLI and capture (exit code, stdout, stderr)."""

    def _run(*argv: str) -> tuple[int, str, str]:
        try:
            code = main(list(argv))
        except SystemExit as e:
            code = e.code
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
