import sys
from pathlib import Path

import pytest

# Ensure `import bindshift` and `import tests.helpers` work without PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _default_error_code(monkeypatch) -> None:
    monkeypatch.delenv("BINDSHIFT_ERROR_CODE", raising=False)
