import logging
import textwrap
from pathlib import Path
from typing import Callable

import pytest

SAMPLE_CONFIG = textwrap.dedent("""\
    # Sample config
    string message = "Hello Universe"   # trailing comment
    float height = 1.5
    int length = 42
    double x = -3.25e2
    bool test_bool = true

    string[] words = ["alpha", "beta  gamma", "# not a comment"]
    int[] primes = [2, 3, 5,
                    7, 11]
    float[] floats = [0.5, -2.25]
    double[] doubles = [1e-3, 2.5]
    bool[] bools = [true, false, true]
    double[] empty_vector = []
""")

# Basic Test Configuration
@pytest.fixture(autouse=True)
def setup_logging() -> None:
    """Configure logging for tests"""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=[logging.StreamHandler()]
    )

@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing config text to a file under tmp_path"""
    def _write(content: str, name: str = "test_config.cfg") -> Path:
        config_file = tmp_path / name
        config_file.write_text(content, encoding='utf-8')
        return config_file
    return _write

@pytest.fixture
def sample_config(write_config: Callable[..., Path]) -> Path:
    """Config file exercising every type in scalar and vector form"""
    return write_config(SAMPLE_CONFIG)
