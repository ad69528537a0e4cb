#!/usr/bin/env python3
"""macnotary - archive a macOS application and notarize it from CI.

This module provides tools for:
1. Archiving an application bundle with ``ditto``
2. Submitting the archive to Apple's notary service with ``notarytool``
   and waiting for the verdict
3. Reporting the result back to GitHub Actions

It is meant to run as a single CI step. Inputs are read the way GitHub
Actions passes them to a step (``INPUT_<NAME>`` environment variables),
with fallbacks to plain environment variables, a ``.env`` file and an
optional ``.macnotary.toml`` file for local runs.

Usage (CLI):
    # Inside a workflow step (inputs come from the environment)
    macnotary

    # Locally
    APP_PASSWORD=xxxx-xxxx-xxxx-xxxx macnotary MyApp.app --apple-id me@example.com

Usage (API):
    from macnotary import Archiver, Notarizer

    archive_path = Archiver().archive("MyApp.app")
    ok = Notarizer().submit(
        "MyApp.app", archive_path, apple_id="me@example.com", password="..."
    )
"""

import argparse
import datetime
import logging
import os
import subprocess
import sys
import threading
import tomllib
import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from dotenv import find_dotenv, load_dotenv

# ----------------------------------------------------------------------------
# Constants

__version__ = "0.1.0"

# Type aliases
Pathlike = Path | str

# Fixed destination of the archive submitted for notarization
DEFAULT_ARCHIVE_PATH = Path("/tmp/archive.zip")

# Input names
INPUT_PRODUCT_PATH = "product-path"
INPUT_APPLE_ID = "apple-id"
INPUT_TEAM_ID = "team-id"
INPUT_APP_PASSWORD = "app-password"
INPUT_VERBOSE = "verbose"

# Plain environment variable fallbacks for local runs
ENV_FALLBACKS = {
    INPUT_PRODUCT_PATH: "PRODUCT_PATH",
    INPUT_APPLE_ID: "APPLE_ID",
    INPUT_TEAM_ID: "TEAM_ID",
    INPUT_APP_PASSWORD: "APP_PASSWORD",
    INPUT_VERBOSE: "NOTARIZE_VERBOSE",
}

# Inputs that must never be read from a config file
SECRET_INPUTS = {INPUT_APP_PASSWORD}

# GitHub Actions environment
ENV_GITHUB_OUTPUT = "GITHUB_OUTPUT"

# Output names
OUTPUT_PRODUCT_PATH = "product-path"

# Config file section holding notarization settings
CONFIG_SECTION = "notarize"

REDACTED = "******"

FAILURE_MESSAGE = "Notarization failed"

# Search from the working directory, not from where this module is installed
load_dotenv(find_dotenv(usecwd=True))

# ----------------------------------------------------------------------------
# Configuration file support


def load_config(config_path: Path | None = None) -> dict[str, object]:
    """Load configuration from a TOML file.

    Searches for configuration in the following order:
    1. Explicit config_path if provided
    2. .macnotary.toml in current directory
    3. macnotary.toml in current directory

    The app password is never read from these files, keep it in the
    environment or in an untracked .env file.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Configuration dictionary (empty if no config found)

    Example .macnotary.toml:
        [notarize]
        apple_id = "me@example.com"
        team_id = "ABCD123456"
        verbose = "true"
    """
    if config_path and config_path.exists():
        paths_to_try = [config_path]
    else:
        cwd = Path.cwd()
        paths_to_try = [
            cwd / ".macnotary.toml",
            cwd / "macnotary.toml",
        ]

    for path in paths_to_try:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    data: dict[str, object] = tomllib.load(f)
                return data
            except (OSError, tomllib.TOMLDecodeError) as e:
                logging.getLogger("macnotary").warning(
                    "Ignoring config file %s: %s", path, e
                )
                continue

    return {}


def get_config_value(
    config: Mapping[str, object],
    section: str,
    key: str,
    default: str | None = None,
) -> str | None:
    """Get a value from config with section.key lookup.

    Booleans are converted to the lowercase strings CI inputs use.

    Args:
        config: Configuration dictionary
        section: Section name (e.g., "notarize")
        key: Key name within section
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    section_config = config.get(section, {})
    if not isinstance(section_config, dict):
        return default
    value = section_config.get(key, default)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None or isinstance(value, str):
        return value
    return default


# ----------------------------------------------------------------------------
# Error handling


class NotaryError(Exception):
    """Base exception class for macnotary errors."""


class CommandError(NotaryError):
    """Exception raised when a command fails."""

    def __init__(
        self, command: str, returncode: int, output: str | None = None
    ):
        self.command = command
        self.returncode = returncode
        self.output = output
        super().__init__(
            f"Command '{command}' failed with return code {returncode}"
        )


class ConfigurationError(NotaryError):
    """Exception raised when configuration is invalid."""


class NotarizationError(NotaryError):
    """Exception raised when a submission cannot be carried out."""


# ----------------------------------------------------------------------------
# Logging configuration


class CustomFormatter(logging.Formatter):
    """Custom logging formatting class with color support."""

    class color:
        """Text colors for terminal output."""

        white = "\x1b[97;20m"
        grey = "\x1b[38;20m"
        green = "\x1b[32;20m"
        yellow = "\x1b[33;20m"
        red = "\x1b[31;20m"
        bold_red = "\x1b[31;1m"
        reset = "\x1b[0m"

    cfmt = (
        f"{color.white}%(delta)s{color.reset} - "
        f"{{}}%(levelname)s{color.reset} - "
        f"{color.white}%(name)s.%(funcName)s{color.reset} - "
        f"{color.grey}%(message)s{color.reset}"
    )

    FORMATS = {
        logging.DEBUG: cfmt.format(color.grey),
        logging.INFO: cfmt.format(color.green),
        logging.WARNING: cfmt.format(color.yellow),
        logging.ERROR: cfmt.format(color.red),
        logging.CRITICAL: cfmt.format(color.bold_red),
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color
        self.fmt = (
            "%(delta)s - %(levelname)s - %(name)s.%(funcName)s - %(message)s"
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with color if enabled."""
        if not self.use_color:
            log_fmt = self.fmt
        else:
            log_fmt = self.FORMATS[record.levelno]
        duration = datetime.datetime.fromtimestamp(
            record.relativeCreated / 1000, datetime.timezone.utc
        )
        record.delta = duration.strftime("%H:%M:%S")
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def setup_logging(debug: bool = False, use_color: bool = True) -> None:
    """Configure logging for the application.

    Args:
        debug: Whether to enable debug logging
        use_color: Whether to use colored output
    """
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(CustomFormatter(use_color))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        handlers=[stream_handler],
        force=True,
    )


# ----------------------------------------------------------------------------
# Inputs and configuration


def input_env_name(name: str) -> str:
    """Return the environment variable GitHub Actions uses for an input."""
    return "INPUT_" + name.replace(" ", "_").upper()


class Inputs:
    """Resolves named step inputs.

    Lookup order (first non-empty value wins):
    1. explicit overrides (command-line options)
    2. ``INPUT_<NAME>`` environment variables set by GitHub Actions
    3. plain environment variables (see ENV_FALLBACKS)
    4. the [notarize] section of the config file (never for secrets)

    Args:
        environ: Environment mapping (default: os.environ)
        overrides: Values that take precedence over everything else
        config: Parsed config file (default: loaded from the working dir)
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        overrides: Mapping[str, str | None] | None = None,
        config: Mapping[str, object] | None = None,
    ) -> None:
        self.environ = os.environ if environ is None else environ
        self.overrides = dict(overrides or {})
        self.config = load_config() if config is None else config

    def _candidates(self, name: str) -> Iterator[str | None]:
        yield self.overrides.get(name)
        yield self.environ.get(input_env_name(name))
        fallback = ENV_FALLBACKS.get(name)
        if fallback:
            yield self.environ.get(fallback)
        if name not in SECRET_INPUTS:
            yield get_config_value(
                self.config, CONFIG_SECTION, name.replace("-", "_")
            )

    def get(self, name: str, required: bool = False) -> str:
        """Return the value of an input, stripped of whitespace.

        Raises:
            ConfigurationError: If a required input has no value
        """
        for value in self._candidates(name):
            if value is not None and value.strip():
                return value.strip()
        if required:
            raise ConfigurationError(
                f"Input required and not supplied: {name}"
            )
        return ""


class Configuration:
    """Validated inputs for a single notarization run."""

    def __init__(
        self,
        product_path: Pathlike,
        apple_id: str,
        password: str,
        team_id: str | None = None,
        verbose: bool = False,
    ) -> None:
        self.product_path = Path(product_path)
        self.apple_id = apple_id
        self.password = password
        self.team_id = team_id or None
        self.verbose = verbose

    def __repr__(self) -> str:
        return (
            f"Configuration(product_path={str(self.product_path)!r}, "
            f"apple_id={self.apple_id!r}, team_id={self.team_id!r}, "
            f"verbose={self.verbose!r})"
        )


def parse_configuration(inputs: Inputs | None = None) -> Configuration:
    """Read and validate the step inputs.

    Raises:
        ConfigurationError: If a required input is missing or the product
            path does not exist
    """
    if inputs is None:
        inputs = Inputs()

    configuration = Configuration(
        product_path=inputs.get(INPUT_PRODUCT_PATH, required=True),
        apple_id=inputs.get(INPUT_APPLE_ID, required=True),
        team_id=inputs.get(INPUT_TEAM_ID),
        password=inputs.get(INPUT_APP_PASSWORD, required=True),
        verbose=inputs.get(INPUT_VERBOSE) == "true",
    )

    if not configuration.product_path.exists():
        raise ConfigurationError(
            f"Product path {configuration.product_path} does not exist."
        )

    return configuration


# ----------------------------------------------------------------------------
# Command execution utilities


class Launched:
    """Outcome of a process that ran and produced an exit status."""

    def __init__(self, exit_code: int, stdout: str = "", stderr: str = ""):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    def __repr__(self) -> str:
        return f"Launched(exit_code={self.exit_code})"


class LaunchFailed:
    """Outcome of a process that never produced an exit status."""

    ok = False

    def __init__(self, reason: str):
        self.reason = reason

    def __repr__(self) -> str:
        return f"LaunchFailed(reason={self.reason!r})"


ProcessOutcome = Launched | LaunchFailed


class StreamSink:
    """Destinations for relayed child process output.

    Unset streams resolve to the current sys.stdout / sys.stderr at write
    time, so redirection done after construction is honored.
    """

    def __init__(
        self, stdout: TextIO | None = None, stderr: TextIO | None = None
    ):
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def write_stdout(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def write_stderr(self, text: str) -> None:
        self.stderr.write(text)
        self.stderr.flush()


def redact_command(command: list[str], secrets: list[str]) -> str:
    """Render a command for logging with secret values replaced."""
    hidden = {s for s in secrets if s}
    return " ".join(REDACTED if part in hidden else part for part in command)


def _pump(pipe: TextIO, buffer: list[str], write=None) -> None:
    """Read lines from a pipe until EOF, optionally relaying each one."""
    try:
        for line in iter(pipe.readline, ""):
            buffer.append(line)
            if write is not None:
                write(line)
    finally:
        pipe.close()


def run_process(
    command: list[str],
    relay: bool = False,
    sink: StreamSink | None = None,
    log: logging.Logger | None = None,
    secrets: list[str] | None = None,
) -> ProcessOutcome:
    """Run a command to completion and capture its outcome.

    Both output streams are read on their own threads and captured in
    full. When relay is set each line is also written to the sink as it
    arrives. A non-zero exit is data, not an error. Uses shell=False.

    Args:
        command: The command as a list of arguments
        relay: Mirror stdout/stderr to the sink while the process runs
        sink: Relay destinations (default: this process's streams)
        log: Optional logger for debug output
        secrets: Values to redact from the logged command line

    Returns:
        Launched with the exit code and captured output, or LaunchFailed
        if the process could not be started
    """
    if log:
        log.debug("%s", redact_command(command, secrets or []))
    if sink is None:
        sink = StreamSink()

    try:
        process = subprocess.Popen(
            command,
            shell=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            bufsize=1,
        )
    except OSError as e:
        return LaunchFailed(str(e))

    stdout_lines: list[str] = []
    stderr_lines: list[str] = []

    stdout_thread = threading.Thread(
        target=_pump,
        args=(
            process.stdout,
            stdout_lines,
            sink.write_stdout if relay else None,
        ),
        daemon=True,
    )
    stderr_thread = threading.Thread(
        target=_pump,
        args=(
            process.stderr,
            stderr_lines,
            sink.write_stderr if relay else None,
        ),
        daemon=True,
    )
    stdout_thread.start()
    stderr_thread.start()
    returncode = process.wait()
    stdout_thread.join()
    stderr_thread.join()

    return Launched(returncode, "".join(stdout_lines), "".join(stderr_lines))


# ----------------------------------------------------------------------------
# Result reporting


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


class ActionsReporter:
    """Reports progress and results to GitHub Actions.

    Writes workflow commands (``::group::``, ``::error::``, ...) to the
    stream and step outputs to the file named by GITHUB_OUTPUT.

    Args:
        stream: Where workflow commands are written (default: sys.stdout)
        output_path: Step output file (default: $GITHUB_OUTPUT)
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        output_path: Pathlike | None = None,
    ) -> None:
        self._stream = stream
        if output_path is None:
            output_path = os.getenv(ENV_GITHUB_OUTPUT) or None
        self.output_path = Path(output_path) if output_path else None
        self.failed = False
        self.failure_message: str | None = None
        self.outputs: dict[str, str] = {}
        self.log = logging.getLogger(self.__class__.__name__)

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()

    def issue(self, command: str, message: str = "", **properties: str) -> None:
        """Write a workflow command."""
        props = ",".join(
            f"{key}={_escape_property(str(value))}"
            for key, value in properties.items()
            if value
        )
        prefix = f"::{command} {props}::" if props else f"::{command}::"
        self._write(prefix + _escape_data(message))

    def info(self, message: str) -> None:
        self._write(message)

    def error(self, message: str) -> None:
        self.issue("error", message)

    def mask(self, value: str | None) -> None:
        """Ask the runner to redact a value from all further log output."""
        if value:
            self.issue("add-mask", value)

    @contextmanager
    def group(self, name: str) -> Iterator[None]:
        """Fold everything written inside the block under a named group."""
        self.issue("group", name)
        try:
            yield
        finally:
            self.issue("endgroup")

    def set_output(self, name: str, value: str) -> None:
        """Set a step output."""
        self.outputs[name] = value
        if self.output_path is not None:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            with open(self.output_path, "a", encoding="utf-8") as out:
                out.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            self.issue("set-output", value, name=name)
        self.log.debug("output %s=%s", name, value)

    def set_failed(self, message: str) -> None:
        """Mark the step as failed."""
        self.failed = True
        self.failure_message = message
        self.error(message)


# ----------------------------------------------------------------------------
# Archiving


def archive_command(product_path: Pathlike, archive_path: Pathlike) -> list[str]:
    """Build the ditto command that zips a bundle, keeping its top folder."""
    return [
        "ditto",
        "-c",  # create an archive
        "-k",  # PKZip format
        "--keepParent",  # embed the bundle directory itself
        str(product_path),
        str(archive_path),
    ]


class Archiver:
    """Creates the zip archive submitted for notarization.

    Failures are reported and signaled by returning None, never raised.

    Args:
        archive_path: Destination of the archive (overwritten if present)
        reporter: Optional CI reporter for error annotations
        runner: Process runner (default: run_process)
    """

    def __init__(
        self,
        archive_path: Pathlike = DEFAULT_ARCHIVE_PATH,
        reporter: ActionsReporter | None = None,
        runner=None,
    ) -> None:
        self.archive_path = Path(archive_path)
        self.reporter = reporter
        self.runner = runner or run_process
        self.log = logging.getLogger(self.__class__.__name__)

    def _report_error(self, message: str) -> None:
        self.log.error("%s", message)
        if self.reporter is not None:
            self.reporter.error(message)

    def archive(self, product_path: Pathlike) -> Path | None:
        """Archive product_path.

        Returns:
            The archive path, or None if archiving failed
        """
        product_path = Path(product_path)
        if not product_path.exists():
            self._report_error(f"Product path {product_path} does not exist.")
            return None

        command = archive_command(product_path, self.archive_path)
        self.log.info("Archiving %s", product_path)
        outcome = self.runner(command, log=self.log)

        if isinstance(outcome, LaunchFailed):
            self._report_error(f"Could not run ditto: {outcome.reason}")
            return None

        if not outcome.ok:
            error = CommandError(
                " ".join(command), outcome.exit_code, outcome.stderr
            )
            detail = (error.output or outcome.stdout).strip()
            self._report_error(f"{error}: {detail}" if detail else str(error))
            return None

        return self.archive_path


# ----------------------------------------------------------------------------
# Notarization


def notarytool_command(
    archive_path: Pathlike,
    apple_id: str,
    password: str,
    team_id: str | None = None,
    verbose: bool = False,
) -> list[str]:
    """Build the notarytool invocation that submits and waits for a verdict.

    --team-id is appended only for a non-empty team id, --verbose only when
    verbose output is requested.
    """
    command = [
        "xcrun",
        "notarytool",
        "submit",
        str(archive_path),
        "--wait",
        "--apple-id",
        apple_id,
        "--password",
        password,
    ]
    if team_id:
        command.extend(["--team-id", team_id])
    if verbose:
        command.append("--verbose")
    return command


class Notarizer:
    """Submits an archive to the notary service and waits for the verdict.

    notarytool polls the service itself (``--wait``), so a single blocking
    invocation resolves the submission.

    Args:
        runner: Process runner (default: run_process)
        sink: Destinations for live output in verbose mode

    Example:
        notarizer = Notarizer()
        accepted = notarizer.submit(
            "MyApp.app", "/tmp/archive.zip", "me@example.com", "secret"
        )
    """

    def __init__(self, runner=None, sink: StreamSink | None = None) -> None:
        self.runner = runner or run_process
        self.sink = sink or StreamSink()
        self.log = logging.getLogger(self.__class__.__name__)

    def submit(
        self,
        product_path: Pathlike,
        archive_path: Pathlike,
        apple_id: str,
        password: str,
        team_id: str | None = None,
        verbose: bool = False,
    ) -> bool:
        """Submit archive_path and wait for the service verdict.

        Returns:
            True if notarytool exited with status 0, False otherwise

        Raises:
            NotarizationError: If the product or archive is missing, or if
                notarytool could not be run at all
        """
        product_path = Path(product_path)
        archive_path = Path(archive_path)

        if not product_path.exists():
            raise NotarizationError(
                f"No product could be found at {product_path}"
            )
        if not archive_path.exists():
            raise NotarizationError(
                f"No archive could be found at {archive_path}"
            )

        command = notarytool_command(
            archive_path, apple_id, password, team_id, verbose
        )
        self.log.info("Submitting %s", archive_path)
        outcome = self.runner(
            command,
            relay=verbose,
            sink=self.sink,
            log=self.log,
            secrets=[password],
        )

        if isinstance(outcome, LaunchFailed):
            raise NotarizationError(
                "Unknown failure - notarytool did not run at all? "
                f"({outcome.reason})"
            )

        if verbose:
            self.log.info("notarytool output:\n%s", outcome.stdout)

        if not outcome.ok:
            self.log.error("notarytool exited with status %d", outcome.exit_code)
        return outcome.ok


# ----------------------------------------------------------------------------
# Functional API


def archive(
    product_path: Pathlike,
    archive_path: Pathlike = DEFAULT_ARCHIVE_PATH,
    reporter: ActionsReporter | None = None,
) -> Path | None:
    """Archive a product; returns the archive path or None on failure."""
    return Archiver(archive_path, reporter=reporter).archive(product_path)


def submit(
    product_path: Pathlike,
    archive_path: Pathlike,
    apple_id: str,
    password: str,
    team_id: str | None = None,
    verbose: bool = False,
) -> bool:
    """Submit an archive for notarization and wait for the verdict."""
    return Notarizer().submit(
        product_path, archive_path, apple_id, password, team_id, verbose
    )


# ----------------------------------------------------------------------------
# Orchestration


def run(
    inputs: Inputs | None = None,
    reporter: ActionsReporter | None = None,
    archiver: Archiver | None = None,
    notarizer: Notarizer | None = None,
) -> bool:
    """Run one archive-and-notarize step.

    Never raises: every failure ends in reporter.set_failed().

    Returns:
        True if the product was notarized
    """
    if reporter is None:
        reporter = ActionsReporter()
    log = logging.getLogger("macnotary")

    try:
        configuration = parse_configuration(inputs)
        reporter.mask(configuration.password)
        log.debug("%r", configuration)

        if archiver is None:
            archiver = Archiver(reporter=reporter)
        if notarizer is None:
            notarizer = Notarizer()

        with reporter.group("Archiving Application"):
            archive_path = archiver.archive(configuration.product_path)
            if archive_path is not None:
                reporter.info(f"Created application archive at {archive_path}")

        if archive_path is None:
            reporter.set_failed(FAILURE_MESSAGE)
            return False

        with reporter.group("Submitting for Notarizing"):
            success = notarizer.submit(
                configuration.product_path,
                archive_path,
                apple_id=configuration.apple_id,
                password=configuration.password,
                team_id=configuration.team_id,
                verbose=configuration.verbose,
            )

        if not success:
            reporter.set_failed(FAILURE_MESSAGE)
            return False
        reporter.info("Submitted package for notarization.")

        reporter.set_output(OUTPUT_PRODUCT_PATH, str(configuration.product_path))
        return True
    except Exception as e:
        log.debug("run failed", exc_info=True)
        reporter.set_failed(
            f"{FAILURE_MESSAGE} with an unexpected error: {e}"
        )
        return False


# ----------------------------------------------------------------------------
# Command-line interface


def main() -> None:
    """Command line interface for macnotary."""
    parser = argparse.ArgumentParser(
        prog="macnotary",
        description=(
            "Archive a macOS application and notarize it with notarytool. "
            "Values not given on the command line are read from "
            "INPUT_<NAME> or plain environment variables, a .env file, "
            "or .macnotary.toml."
        ),
        epilog=(
            "Examples:\n"
            "  macnotary\n"
            "  macnotary MyApp.app --apple-id me@example.com\n"
            "  macnotary MyApp.app --apple-id me@example.com "
            "--team-id ABCD123456 --verbose\n"
            "\n"
            "The app-specific password is read from INPUT_APP-PASSWORD or\n"
            "APP_PASSWORD only.\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "product_path",
        nargs="?",
        metavar="PRODUCT_PATH",
        help="application bundle to notarize (or set INPUT_PRODUCT-PATH)",
    )
    parser.add_argument(
        "-a",
        "--apple-id",
        metavar="ID",
        help="Apple ID used for notarization (or set APPLE_ID)",
    )
    parser.add_argument(
        "-t",
        "--team-id",
        metavar="TEAM",
        help="developer team identifier (or set TEAM_ID)",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="path to a TOML config file (default: .macnotary.toml)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="relay notarytool output and enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="disable colored output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args()

    overrides = {
        INPUT_PRODUCT_PATH: args.product_path,
        INPUT_APPLE_ID: args.apple_id,
        INPUT_TEAM_ID: args.team_id,
        INPUT_VERBOSE: "true" if args.verbose else None,
    }
    config = load_config(Path(args.config)) if args.config else None
    inputs = Inputs(overrides=overrides, config=config)

    try:
        debug = args.verbose or inputs.get(INPUT_VERBOSE) == "true"
        setup_logging(debug, not args.no_color)
        success = run(inputs)
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        sys.exit(130)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
