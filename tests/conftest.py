"""
Pytest configuration and shared fixtures for the gpiosim test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'gpiosim' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from gpiosim.aspeed import AST2400GPIO, AST2500GPIO, AST2600GPIO  # noqa: E402
from gpiosim.core.interrupt_controller import InterruptController  # noqa: E402
from gpiosim.utils.config_loader import clear_config_cache  # noqa: E402


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def write_yaml(temp_yaml_file):
    """Write a dict to the temporary YAML file and return its path as str."""

    def _write(data) -> str:
        temp_yaml_file.write_text(yaml.safe_dump(data), encoding="utf-8")
        return str(temp_yaml_file)

    return _write


@pytest.fixture(autouse=True)
def fresh_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


FULL_SET = {"input": 0xFFFFFFFF, "output": 0xFFFFFFFF, "groups": ["A", "B", "C", "D"]}


class RecordingHandler:
    """Collects every level an IrqLine reports."""

    def __init__(self):
        self.levels = []

    def __call__(self, level: int) -> None:
        self.levels.append(level)

    @property
    def pulses(self) -> int:
        return self.levels.count(1)


@pytest.fixture
def ast2400():
    return AST2400GPIO()


@pytest.fixture
def ast2500():
    return AST2500GPIO()


@pytest.fixture
def ast2600():
    return AST2600GPIO()


@pytest.fixture
def gpio(ast2500):
    """Default controller under test, wired to an interrupt controller."""
    ast2500.attach_interrupt_controller(InterruptController())
    return ast2500


@pytest.fixture
def recorder():
    """Factory for IrqLine handlers that remember every level they see."""
    return RecordingHandler


@pytest.fixture
def valid_variants_dict():
    """
    Fixture providing a minimal valid variants configuration dictionary.
    """
    return {
        "variants": {
            "tiny": {
                "pins": 32,
                "sets": [dict(FULL_SET)],
            },
            "gapped": {
                "pins": 60,
                "gap": 28,
                "sets": [
                    dict(FULL_SET),
                    {"input": 0xFFFFFFFF, "output": 0x0000FFFF, "groups": ["E", "F", "G", "H"]},
                ],
            },
        }
    }


@pytest.fixture
def temp_variants_yaml_file(write_yaml, valid_variants_dict):
    """
    Fixture that creates a temporary YAML file with valid variants.
    """
    return write_yaml(valid_variants_dict)


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
