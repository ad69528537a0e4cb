"""Tests for run_process and the outcome types."""

import io
import logging
import sys

from macnotary import (
    Launched,
    LaunchFailed,
    StreamSink,
    redact_command,
    run_process,
)


def python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


class TestOutcomes:
    """Tests for the tagged process outcome."""

    def test_launched_ok(self):
        assert Launched(0).ok
        assert not Launched(1).ok

    def test_launch_failed_never_ok(self):
        assert not LaunchFailed("no such file").ok

    def test_variants_distinguishable(self):
        assert not isinstance(LaunchFailed("x"), Launched)
        assert not isinstance(Launched(1), LaunchFailed)


class TestRunProcess:
    """Tests for run_process against real child processes."""

    def test_exit_zero(self):
        outcome = run_process(python("print('hello')"))
        assert isinstance(outcome, Launched)
        assert outcome.exit_code == 0
        assert outcome.stdout == "hello\n"

    def test_nonzero_exit_is_data(self):
        """Test a failing process is captured, not raised."""
        outcome = run_process(
            python("import sys; sys.stderr.write('bad\\n'); sys.exit(3)")
        )
        assert isinstance(outcome, Launched)
        assert outcome.exit_code == 3
        assert outcome.stderr == "bad\n"

    def test_launch_failure(self, tmp_path):
        """Test a missing executable yields LaunchFailed."""
        outcome = run_process([str(tmp_path / "no-such-tool")])
        assert isinstance(outcome, LaunchFailed)
        assert outcome.reason

    def test_relay_to_sink(self):
        """Test both streams are mirrored to the sink when relaying."""
        out, err = io.StringIO(), io.StringIO()
        outcome = run_process(
            python(
                "import sys; print('one'); print('two'); "
                "sys.stderr.write('warn\\n')"
            ),
            relay=True,
            sink=StreamSink(out, err),
        )
        assert out.getvalue() == "one\ntwo\n"
        assert err.getvalue() == "warn\n"
        # Relayed output is still captured
        assert outcome.stdout == "one\ntwo\n"

    def test_undecodable_output_does_not_hang(self):
        """Test invalid UTF-8 followed by more than a pipe buffer of output."""
        out, err = io.StringIO(), io.StringIO()
        outcome = run_process(
            python(
                "import sys; sys.stdout.buffer.write(b'\\xff\\n'); "
                "sys.stdout.buffer.write(b'x' * 300000); "
                "sys.stderr.buffer.write(b'caf\\xe9\\n')"
            ),
            relay=True,
            sink=StreamSink(out, err),
        )
        assert isinstance(outcome, Launched)
        assert outcome.exit_code == 0
        assert outcome.stdout == "\ufffd\n" + "x" * 300000
        assert outcome.stderr == "caf\ufffd\n"
        assert out.getvalue() == outcome.stdout

    def test_no_relay_by_default(self):
        out, err = io.StringIO(), io.StringIO()
        outcome = run_process(
            python("print('quiet')"), sink=StreamSink(out, err)
        )
        assert out.getvalue() == ""
        assert err.getvalue() == ""
        assert outcome.stdout == "quiet\n"

    def test_command_logged_redacted(self, caplog):
        log = logging.getLogger("test")
        with caplog.at_level(logging.DEBUG, logger="test"):
            run_process(
                python("pass") + ["--password", "hunter2"],
                log=log,
                secrets=["hunter2"],
            )
        assert "hunter2" not in caplog.text
        assert "******" in caplog.text


class TestStreamSink:
    """Tests for StreamSink defaults."""

    def test_defaults_follow_sys_streams(self, capsys):
        sink = StreamSink()
        sink.write_stdout("to out\n")
        sink.write_stderr("to err\n")
        captured = capsys.readouterr()
        assert captured.out == "to out\n"
        assert captured.err == "to err\n"


class TestRedactCommand:
    """Tests for redact_command."""

    def test_redacts_secret(self):
        assert (
            redact_command(["tool", "--password", "pw"], ["pw"])
            == "tool --password ******"
        )

    def test_empty_secret_ignored(self):
        assert redact_command(["tool", ""], [""]) == "tool "
