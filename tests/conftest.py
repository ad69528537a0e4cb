"""Shared fixtures for the macnotary tests."""

from pathlib import Path

import pytest

from macnotary import Launched, LaunchFailed


class FakeRunner:
    """Stands in for run_process, recording every command it is given.

    Outcomes are handed out in order; the last one repeats. When
    create_archives is set, a successful ditto call creates its destination.
    """

    def __init__(self, *outcomes, create_archives: bool = True):
        self.outcomes = list(outcomes) or [Launched(0)]
        self.create_archives = create_archives
        self.calls: list[dict] = []

    @property
    def commands(self) -> list[list[str]]:
        return [call["command"] for call in self.calls]

    def __call__(self, command, relay=False, sink=None, log=None, secrets=None):
        self.calls.append(
            {"command": command, "relay": relay, "sink": sink, "secrets": secrets}
        )
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if (
            self.create_archives
            and command[0] == "ditto"
            and isinstance(outcome, Launched)
            and outcome.ok
        ):
            Path(command[-1]).write_bytes(b"PK\x05\x06" + b"\x00" * 18)
        return outcome


@pytest.fixture
def product(tmp_path: Path) -> Path:
    """Create a minimal .app bundle."""
    bundle = tmp_path / "Test.app"
    macos = bundle / "Contents" / "MacOS"
    macos.mkdir(parents=True)
    (macos / "Test").write_bytes(b"#!/bin/bash\necho hello")
    return bundle


@pytest.fixture
def archive_path(tmp_path: Path) -> Path:
    return tmp_path / "archive.zip"


@pytest.fixture
def fake_runner():
    return FakeRunner


@pytest.fixture
def launch_failed():
    return LaunchFailed("[Errno 2] No such file or directory: 'xcrun'")
