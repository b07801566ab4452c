import pytest
from brace_template import set_config


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Each test starts from a freshly loaded default config."""
    for key in (
        "BRACE_TEMPLATE_EMIT_WARNINGS",
        "BRACE_TEMPLATE_LOG_NON_SCALAR",
        "BRACE_TEMPLATE_ALLOW_PRIVATE",
    ):
        monkeypatch.delenv(key, raising=False)
    set_config(None)
    yield
    set_config(None)
