"""Run a chain of commands connected by pipes, with file and here-document redirections."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from dataclasses import dataclass
from typing import IO, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .linereader import LineReader
from .strutil import split

_FILE_MODE = 0o666
_NOT_RUN = 1


class PipelineError(Exception):
    """Raised when a pipeline cannot be set up or run."""


@dataclass
class Command:
    """One stage of a pipeline and its redirections.

    ``heredoc`` names a delimiter whose here-document feeds the command;
    ``infile`` takes precedence over it when both are given.  Output goes to
    ``outfile`` (appending when ``append`` is set) instead of the next stage.
    """

    argv: Sequence[str]
    infile: Optional[str] = None
    outfile: Optional[str] = None
    append: bool = False
    heredoc: Optional[str] = None

    def __post_init__(self) -> None:
        self.argv = list(self.argv)
        if not self.argv:
            raise ValueError("a command needs at least a name")

    @property
    def name(self) -> str:
        return self.argv[0]


def is_blank(text: str) -> bool:
    """True when ``text`` holds no visible ASCII character."""
    return not any(32 < ord(char) < 127 for char in text)


def collect_heredoc(delimiter: str, lines: Iterable[Union[str, bytes]]) -> str:
    """Gather lines up to the one that is exactly ``delimiter`` plus a newline.

    The delimiter line itself is consumed but not returned.  Running out of
    lines before the delimiter is an error.
    """
    terminator = delimiter + "\n"
    body: List[str] = []
    for line in lines:
        if isinstance(line, (bytes, bytearray)):
            line = bytes(line).decode("utf-8", "surrogateescape")
        if line == terminator:
            return "".join(body)
        body.append(line)
    raise PipelineError(f"here-document ended before delimiter {delimiter!r}")


def find_path_dirs(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the non-empty directories listed in the PATH of ``env``."""
    environment = os.environ if env is None else env
    path = environment.get("PATH")
    if path is None:
        raise PipelineError("PATH is not set")
    return split(path, ":")


def _is_executable(path: str) -> bool:
    return os.access(path, os.X_OK) and not os.path.isdir(path)


def resolve_command(name: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Locate the executable for ``name``, or None when there is none.

    A name starting with ``/`` is used as it stands; any other name is looked
    up in each PATH directory in turn.
    """
    if not name:
        return None
    if name.startswith("/"):
        return name if _is_executable(name) else None
    for directory in find_path_dirs(env):
        candidate = f"{directory}/{name}"
        if _is_executable(candidate):
            return candidate
    return None


def _spool(data: Union[str, bytes]) -> IO[bytes]:
    if isinstance(data, str):
        data = data.encode("utf-8", "surrogateescape")
    spooled = tempfile.TemporaryFile()
    spooled.write(data)
    spooled.seek(0)
    return spooled


class _InputSource:
    """The pipeline's standard input, shared by here-documents and the first stage."""

    def __init__(self, stream: Optional[IO]) -> None:
        self._stream = stream
        self._reader: Optional[LineReader] = None

    def lines(self):
        if self._reader is None:
            self._reader = LineReader(self._stream if self._stream is not None else sys.stdin)
        return iter(self._reader)

    def passthrough(self) -> Tuple[object, bool]:
        """Return what the first stage reads from and whether the caller owns it."""
        if self._reader is None:
            if self._stream is None:
                return None, False
            try:
                self._stream.fileno()
            except (AttributeError, OSError, ValueError):
                return _spool(self._stream.read()), True
            return self._stream, False
        pieces = list(self._reader)
        joiner = b"" if pieces and isinstance(pieces[0], (bytes, bytearray)) else ""
        return _spool(joiner.join(pieces)), True


def _open_output(command: Command) -> IO[bytes]:
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_APPEND if command.append else os.O_TRUNC
    try:
        descriptor = os.open(command.outfile, flags, _FILE_MODE)
    except OSError as error:
        raise PipelineError(f"{command.outfile}: {error.strerror}") from error
    return os.fdopen(descriptor, "wb")


def _open_input(path: str) -> IO[bytes]:
    try:
        return open(path, "rb")
    except OSError as error:
        raise PipelineError(f"{path}: {error.strerror}") from error


class Pipeline:
    """A sequence of commands, each feeding the next through a pipe."""

    def __init__(self, commands: Iterable[Command], env: Optional[Mapping[str, str]] = None) -> None:
        self.commands: List[Command] = list(commands)
        self.env = dict(os.environ if env is None else env)

    def __len__(self) -> int:
        return len(self.commands)

    def _resolve(self, name: str) -> Optional[str]:
        try:
            return resolve_command(name, self.env)
        except PipelineError:
            return None

    def run(self, stdin: Optional[IO] = None) -> List[int]:
        """Run every stage and wait for all of them.

        Returns the exit status of each stage in order; a stage whose program
        cannot be found reports status 1 without being started.
        """
        for command in self.commands:
            if command.name == "":
                raise PipelineError("Command '' not found")
        source = _InputSource(stdin)
        processes: List[Optional[subprocess.Popen]] = []
        incoming: object = None
        incoming_owned = False
        last_index = len(self.commands) - 1
        try:
            for index, command in enumerate(self.commands):
                redirect: Optional[IO[bytes]] = None
                if command.heredoc is not None:
                    redirect = _spool(collect_heredoc(command.heredoc, source.lines()))
                if command.infile is not None:
                    if redirect is not None:
                        redirect.close()
                        redirect = None
                    redirect = _open_input(command.infile)
                if redirect is not None:
                    if incoming_owned:
                        incoming.close()
                    incoming, incoming_owned = redirect, True
                elif index == 0:
                    incoming, incoming_owned = source.passthrough()

                output: Optional[IO[bytes]] = None
                if command.outfile is not None:
                    output = _open_output(command)
                    stdout_arg: object = output
                elif index < last_index:
                    stdout_arg = subprocess.PIPE
                else:
                    stdout_arg = None

                path = self._resolve(command.name)
                process = None
                try:
                    if path is not None:
                        process = subprocess.Popen(
                            command.argv,
                            executable=path,
                            stdin=incoming,
                            stdout=stdout_arg,
                            env=self.env,
                        )
                finally:
                    if output is not None:
                        output.close()
                    if incoming_owned:
                        incoming.close()
                    incoming, incoming_owned = None, False
                processes.append(process)

                if index < last_index:
                    if process is not None and stdout_arg is subprocess.PIPE:
                        incoming, incoming_owned = process.stdout, True
                    else:
                        incoming, incoming_owned = subprocess.DEVNULL, False
        except BaseException:
            if incoming_owned:
                incoming.close()
            for process in processes:
                if process is not None:
                    process.wait()
            raise
        return [process.wait() if process is not None else _NOT_RUN for process in processes]


def run_pipeline(
    commands: Iterable[Command],
    env: Optional[Mapping[str, str]] = None,
    stdin: Optional[IO] = None,
) -> List[int]:
    """Build a pipeline from ``commands`` and run it."""
    return Pipeline(commands, env).run(stdin)