import pytest

from medic.checks import CheckRegistry


class RecordingReporter:
    """Reporter that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def notify_progress(self, category, description, details):
        self.events.append(("progress", category, description, details))

    def notify_ok(self):
        self.events.append(("ok",))

    def notify_skipped(self):
        self.events.append(("skipped",))

    def notify_warn(self, output):
        self.events.append(("warn", output))

    def notify_failed(self, output, remedy):
        self.events.append(("failed", output, remedy))

    def of_kind(self, kind):
        return [event for event in self.events if event[0] == kind]


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def registry():
    return CheckRegistry()


@pytest.fixture
def skip_dir(tmp_path):
    path = tmp_path / "skipped"
    path.mkdir()
    return path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def clean_default_registry():
    from medic.checks import default_registry

    saved = dict(default_registry._checks)
    default_registry._checks.clear()
    yield default_registry
    default_registry._checks.clear()
    default_registry._checks.update(saved)
