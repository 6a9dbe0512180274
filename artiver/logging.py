# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Diagnostic output for artiver.

Parsing, file name extraction, config loading and gate evaluation report
what they decide through a tiny logger protocol. Nothing is printed unless
the application installs a logger that wants the output.

Two levels exist, each line tagged with the component that emitted it:

    [GATES] commons-io: ok (found 2.11.0, minimum 2.5)     verbose
    [VERSION] Parsed '1.0b1' -> 1.0b1                       debug

Enabling debug output also enables verbose output.

Example:
    Show gate decisions while evaluating a lib/ directory:
        ```python
        from artiver.logging import get_logger, set_global_logger

        set_global_logger(get_logger(verbose=True))
        ```

    Capture parser traces in a buffer:
        ```python
        import io
        from artiver.logging import DefaultLogger, set_global_logger

        buf = io.StringIO()
        set_global_logger(DefaultLogger(debug=True, stream=buf))
        ```
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Logger(Protocol):
    """Anything with ``verbose`` and ``debug`` methods taking a tag and text."""

    def verbose(self, prefix: str, message: str) -> None:
        """Report a decision (tag such as "GATES" or "CONFIG")."""
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Report low-level detail (tag such as "VERSION" or "FILENAME")."""
        ...


class DefaultLogger:
    """Writes ``[PREFIX] message`` lines for the enabled levels.

    Args:
        verbose: Emit verbose lines.
        debug: Emit debug lines; turns on verbose lines too.
        stream: Destination. When omitted, sys.stdout as of each write.

    """

    def __init__(
        self, verbose: bool = False, debug: bool = False, stream: TextIO | None = None
    ) -> None:
        self.show_debug = debug
        self.show_verbose = verbose or debug
        self._stream = stream

    def _emit(self, prefix: str, message: str) -> None:
        out = self._stream if self._stream is not None else sys.stdout
        out.write(f"[{prefix}] {message}\n")

    def verbose(self, prefix: str, message: str) -> None:
        if self.show_verbose:
            self._emit(prefix, message)

    def debug(self, prefix: str, message: str) -> None:
        if self.show_debug:
            self._emit(prefix, message)


class SilentLogger:
    """Discards everything. Installed globally until told otherwise."""

    def verbose(self, prefix: str, message: str) -> None:
        return None

    def debug(self, prefix: str, message: str) -> None:
        return None


_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Build a stdout logger; silent when both flags are off."""
    if not (verbose or debug):
        return SilentLogger()
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger library code reports through."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Install ``logger`` for every artiver module.

    The setting is process-wide; tests should restore a SilentLogger
    afterwards.
    """
    global _global_logger
    _global_logger = logger
