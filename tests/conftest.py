import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def debug_enabled(monkeypatch):
    """Fixture that switches on FLAGSCAN_DEBUG tracing."""
    monkeypatch.setenv("FLAGSCAN_DEBUG", "1")


@pytest.fixture
def debug_disabled(monkeypatch):
    """Fixture that makes sure FLAGSCAN_DEBUG tracing is off."""
    monkeypatch.delenv("FLAGSCAN_DEBUG", raising=False)


@pytest.fixture
def mock_process_args(mocker):
    """
    Fixture to replace the process argument vector.

    Usage:
        def test_default_args(mock_process_args):
            mock_process_args(["-v", "file.txt"])
            flags = ArgumentProcessor.parse_flags()
    """

    def _set_argv(args):
        return mocker.patch("sys.argv", ["prog"] + list(args))

    return _set_argv


@pytest.fixture
def sample_args():
    """Mixed argument list with every token shape."""
    return [
        "extra",
        "-v",
        "--name",
        "Alice",
        "file.txt",
        "-o",
        "out.log",
        "--dry-run",
        "-q",
    ]
