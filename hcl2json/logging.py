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

"""Logging interface for hcl2json.

This module provides a configurable logging interface that library modules
can use for output without depending on the CLI. The logger can be configured
globally or passed as a parameter for better isolation.

The logger supports these output levels:
- Step: numbered pipeline stages, e.g. "[2/3] Deep merging 2 document(s)"
- Verbose: progress detail
- Debug: per-input detail and YAML dumps of parsed documents

A plain conversion prints nothing besides its result: steps and verbose
messages appear only in verbose mode, debug output only in debug mode
(which implies verbose). All output goes to stderr, since stdout carries
the converted document.

Example:
    Configure global logger:
        ```python
        from hcl2json.logging import get_logger, set_global_logger

        logger = get_logger(verbose=True, debug=False)
        set_global_logger(logger)
        ```

    Use in library code:
        ```python
        from hcl2json.logging import get_global_logger

        logger = get_global_logger()
        logger.step(2, 3, "Deep merging 3 document(s)")
        logger.debug("PARSE", "Parsed main.tfvars")
        ```

Note:
    The default logger is silent (verbose=False, debug=False), so library
    functions won't print anything unless explicitly configured. The CLI
    configures the global logger before running the pipeline.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol

import yaml


class Logger(Protocol):
    """Protocol for logger implementations."""

    def step(self, step: int, total: int, message: str) -> None:
        """Print a numbered pipeline stage.

        Args:
            step: Current stage number (1-based).
            total: Number of stages in this run.
            message: Stage description.
        """
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Message prefix (e.g., "MERGE", "INPUT").
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Message prefix (e.g., "PARSE", "CONFIG").
            message: Log message.
        """
        ...

    def dump(self, prefix: str, title: str, value: Any) -> None:
        """Print a value as YAML in debug mode.

        Args:
            prefix: Message prefix.
            title: Heading printed before the dump.
            value: Any value of the canonical model.
        """
        ...


class DefaultLogger:
    """Default logger implementation that prints to stderr.

    This logger respects verbose and debug flags and formats output
    consistently with the CLI output format.
    """

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        """Initialize logger with verbosity settings.

        Args:
            verbose: If True, print verbose messages.
            debug: If True, print debug messages (implies verbose).
        """
        self._verbose = verbose or debug
        self._debug = debug

    def step(self, step: int, total: int, message: str) -> None:
        """Print a pipeline stage (only when verbose mode is active)."""
        if self._verbose:
            print(f"[{step}/{total}] {message}", file=sys.stderr)

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message (only when verbose mode is active)."""
        if self._verbose:
            print(f"[{prefix}] {message}", file=sys.stderr)

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message (only when debug mode is active)."""
        if self._debug:
            print(f"[{prefix}] {message}", file=sys.stderr)

    def dump(self, prefix: str, title: str, value: Any) -> None:
        """Print a value as YAML, indented, when debug mode is active."""
        if not self._debug:
            return
        print(f"[{prefix}] --- {title} ---", file=sys.stderr)
        yaml_str = yaml.safe_dump(
            value, default_flow_style=False, sort_keys=False, allow_unicode=True
        )
        for line in yaml_str.split("\n"):
            if line.strip():
                print("    " + line, file=sys.stderr)


class SilentLogger:
    """Logger that suppresses all output.

    Useful for programmatic usage when output is not desired.
    """

    def step(self, step: int, total: int, message: str) -> None:
        """Suppress step output."""
        pass

    def verbose(self, prefix: str, message: str) -> None:
        """Suppress verbose output."""
        pass

    def debug(self, prefix: str, message: str) -> None:
        """Suppress debug output."""
        pass

    def dump(self, prefix: str, title: str, value: Any) -> None:
        """Suppress debug dumps."""
        pass


# Global logger instance (defaults to silent)
_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Get a logger instance with specified verbosity.

    Args:
        verbose: If True, logger will print verbose messages.
        debug: If True, logger will print debug messages (implies verbose).

    Returns:
        A logger instance configured with the specified verbosity.
    """
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Get the global logger instance.

    Returns:
        The current global logger instance.
    """
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance to use as the global logger.

    Example:
        Configure global logger from CLI:
            ```python
            from hcl2json.logging import get_logger, set_global_logger

            logger = get_logger(verbose=args.verbose, debug=args.debug)
            set_global_logger(logger)
            ```

    Note:
        This affects all library functions that use get_global_logger().
    """
    global _global_logger
    _global_logger = logger
