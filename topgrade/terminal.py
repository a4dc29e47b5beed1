"""Terminal output: step separators, results, prompts and notifications."""

from __future__ import annotations

import enum
import logging
import os
import subprocess
import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

from .utils import which

log = logging.getLogger(__name__)

_BOLD = 1
_RED = 31
_GREEN = 32
_YELLOW = 33
_BLUE = 34

_DETECT = object()


def shell() -> str:
    """Return the user's interactive shell."""
    if sys.platform.startswith("win"):
        return "pwsh" if which("pwsh") is not None else "powershell"
    return os.environ.get("SHELL", "sh")


def run_shell() -> None:
    """Run an interactive shell and wait for it to exit."""
    subprocess.run([shell()], env={**os.environ, "IN_TOPGRADE": "1"}, check=False)


class StepResultKind(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    IGNORED = "ignored"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class StepResult:
    """Outcome of a step; skipped steps carry a reason."""

    kind: StepResultKind
    reason: str = ""


def separator_line(prefix: str, message: str, width: int | None, now: datetime) -> str:
    """Build the separator text shown before a step."""
    message = f"{prefix}{now.hour:02}:{now.minute:02}:{now.second:02} - {message}"
    if width is None:
        return f"―― {message} ――"
    border = max(2, min(80, width) - 4 - len(message.encode("utf-8")))
    return f"\n―― {message} {'―' * border}"


def _read_key() -> str:
    stdin = sys.stdin
    if not stdin.isatty():
        ch = stdin.read(1)
        if not ch:
            raise EOFError("end of input")
        return ch
    if os.name == "nt":
        import msvcrt

        return msvcrt.getwch()
    import termios
    import tty

    fd = stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        data = os.read(fd, 8)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    if not data:
        raise EOFError("end of input")
    return data.decode("utf-8", errors="replace")[0]


class Terminal:
    """Writes formatted output to a stream and reads keys from the user."""

    def __init__(self, stream: TextIO | None = None, width=_DETECT, prefix: str | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._tty = bool(getattr(self.stream, "isatty", lambda: False)())
        if width is _DETECT:
            width = self._detect_width()
        self.width: int | None = width
        if prefix is None:
            env_prefix = os.environ.get("TOPGRADE_PREFIX")
            prefix = f"({env_prefix}) " if env_prefix is not None else ""
        self.prefix = prefix
        self._set_title = True
        self.desktop_notification = False
        self.notify_send = which("notify-send") if sys.platform.startswith("linux") else None

    def _detect_width(self) -> int | None:
        if not self._tty:
            return None
        try:
            return os.get_terminal_size(self.stream.fileno()).columns
        except (OSError, ValueError, AttributeError):
            return None

    def _style(self, text: str, *codes: int) -> str:
        if not self._tty:
            return text
        return "".join(f"\x1b[{code}m" for code in codes) + text + "\x1b[0m"

    def _write(self, text: str) -> None:
        try:
            self.stream.write(text)
            self.stream.flush()
        except OSError:
            pass

    def _write_title(self, title: str) -> None:
        if self._tty:
            self._write(f"\x1b]0;{title}\x07")

    def is_dumb(self) -> bool:
        """Tell whether the terminal has no known size."""
        return self.width is None

    def set_desktop_notifications(self, desktop_notifications: bool) -> None:
        self.desktop_notification = desktop_notifications

    def set_title(self, set_title: bool) -> None:
        self._set_title = set_title

    def notify_desktop(self, message: str, timeout: float | None) -> None:
        """Show a desktop notification; timeout is in seconds."""
        log.debug("Desktop notification: %s", message)
        if self.notify_send is None:
            return
        command = [str(self.notify_send)]
        if timeout is not None:
            command += ["-t", str(int(timeout * 1000)), "-a", "Topgrade", message]
        try:
            subprocess.run(command, capture_output=True, check=False)
        except OSError:
            pass

    def print_separator(self, message: str) -> None:
        if self._set_title:
            self._write_title(f"{self.prefix}Topgrade - {message}")
        if self.desktop_notification:
            self.notify_desktop(message, 5)
        line = separator_line(self.prefix, message, self.width, datetime.now())
        if self.width is None:
            self._write(f"{line}\n")
        else:
            self._write(f"{self._style(line, _BOLD)}\n")

    def print_warning(self, message: str) -> None:
        self._write(f"{self._style(message, _YELLOW, _BOLD)}\n")

    def print_info(self, message: str) -> None:
        self._write(f"{self._style(message, _BLUE, _BOLD)}\n")

    def print_result(self, key: str, result: StepResult) -> None:
        if result.kind is StepResultKind.SUCCESS:
            text = self._style("OK", _BOLD, _GREEN)
        elif result.kind is StepResultKind.FAILURE:
            text = self._style("FAILED", _BOLD, _RED)
        elif result.kind is StepResultKind.IGNORED:
            text = self._style("IGNORED", _BOLD, _YELLOW)
        else:
            text = f"{self._style('SKIPPED', _BOLD, _BLUE)}: {result.reason}"
        self._write(f"{key}: {text}\n")

    def prompt_yesno(self, question: str) -> bool:
        """Ask a yes/no question; anything but y/Y after n, N or Enter means no."""
        self._write(self._style(f"{question} (y)es/(N)o", _YELLOW, _BOLD))
        while True:
            key = _read_key()
            if key in ("y", "Y"):
                return True
            if key in ("n", "N", "\r", "\n"):
                return False

    def should_retry(self, interrupted: bool, step_name: str) -> bool:
        """Ask whether a failed step should be retried.

        Raises InterruptedError when the user chooses to quit.
        """
        if self.width is None:
            return False
        if self._set_title:
            self._write_title("Topgrade - Awaiting user")
        self.notify_desktop(f"{step_name} failed", None)
        quit_hint = "/(q)uit" if interrupted else ""
        self._write("\n" + self._style(f"{self.prefix}Retry? (y)es/(N)o/(s)hell{quit_hint}", _YELLOW, _BOLD))

        while True:
            try:
                key = _read_key()
            except (OSError, EOFError) as exc:
                log.error("Error reading from terminal: %s", exc)
                answer = False
                break
            if key in ("y", "Y"):
                answer = True
                break
            if key in ("s", "S"):
                print("\n\nDropping you to shell. Fix what you need and then exit the shell.\n")
                run_shell()
                answer = True
                break
            if key in ("n", "N", "\r", "\n"):
                answer = False
                break
            if key in ("q", "Q"):
                raise InterruptedError("interrupted by user")

        self._write("\n")
        return answer

    def get_key(self) -> str:
        """Read a single key from the user."""
        return _read_key()


_LOCK = threading.Lock()
_TERMINAL: Terminal | None = None


def _terminal() -> Terminal:
    global _TERMINAL
    if _TERMINAL is None:
        _TERMINAL = Terminal()
    return _TERMINAL


def should_retry(interrupted: bool, step_name: str) -> bool:
    with _LOCK:
        return _terminal().should_retry(interrupted, step_name)


def print_separator(message: str) -> None:
    with _LOCK:
        _terminal().print_separator(message)


def print_warning(message: str) -> None:
    with _LOCK:
        _terminal().print_warning(message)


def print_info(message: str) -> None:
    with _LOCK:
        _terminal().print_info(message)


def print_result(key: str, result: StepResult) -> None:
    with _LOCK:
        _terminal().print_result(key, result)


def is_dumb() -> bool:
    """Tell whether the terminal is dumb."""
    with _LOCK:
        return _terminal().is_dumb()


def get_key() -> str:
    with _LOCK:
        return _terminal().get_key()


def set_title(set_title: bool) -> None:
    with _LOCK:
        _terminal().set_title(set_title)


def set_desktop_notifications(desktop_notifications: bool) -> None:
    with _LOCK:
        _terminal().set_desktop_notifications(desktop_notifications)


def prompt_yesno(question: str) -> bool:
    with _LOCK:
        return _terminal().prompt_yesno(question)


def notify_desktop(message: str, timeout: float | None) -> None:
    with _LOCK:
        _terminal().notify_desktop(message, timeout)