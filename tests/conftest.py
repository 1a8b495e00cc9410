import pytest

from ninjascript_checker.utils import SourceIndex


@pytest.fixture
def run_checker():
    """Run one checker class over a script and return its issues."""
    def _run(checker_cls, code):
        return checker_cls().check(SourceIndex(code))
    return _run
