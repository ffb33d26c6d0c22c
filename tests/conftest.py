import pytest

import calc


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    # main() flips these module-level switches; restore them after each test
    monkeypatch.setattr(calc, '_SHOULD_LOG_TOKENS', False)
    monkeypatch.setattr(calc, '_SHOULD_LOG_STEPS', False)
