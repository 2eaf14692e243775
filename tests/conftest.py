import pytest

from psi.config import PsiConfig
from psi.evaluation import evaluate
from psi.printer import format_value
from psi.reader import read
from psi.repl import Repl

# Settings that must not leak from the developer's shell into the tests
_PSI_ENV_VARS = (
    "PSI_PROMPT",
    "PSI_INPUT_BUFFER_SIZE",
    "PSI_MAX_DEPTH",
    "PSI_MAX_LIST_CAPACITY",
    "PSI_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_psi_env(monkeypatch):
    for var in _PSI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def run():
    """Read, evaluate and print one line of source, the way the REPL does."""
    def _run(source: str) -> str:
        return format_value(evaluate(read(source)))
    return _run


@pytest.fixture
def repl():
    return Repl(PsiConfig())
