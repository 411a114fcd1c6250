# File: promptdocs/core/logging/channels.py

import fnmatch
import logging
import sys
from dataclasses import dataclass
from typing import Any, List, Optional

INFO = "prompt:info"
ERROR = "prompt:error"
DB = "prompt:db"

ALL_NAMESPACES = (INFO, ERROR, DB)

_handler: Optional[logging.Handler] = None


def logger_name(namespace: str) -> str:
    """Maps a `debug`-style namespace ("prompt:info") to a logger name ("prompt.info")."""
    return namespace.replace(":", ".")


class TraceChannel:
    """
    A named diagnostic channel.
    Every trace is emitted at DEBUG, so channels stay silent until a host
    enables them (enable_debug, PROMPT_DEBUG or a test's caplog).
    """

    def __init__(self, namespace: str):
        self.namespace = namespace
        self.logger = logging.getLogger(logger_name(namespace))

    @property
    def enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def __call__(self, message: str, payload: Any = None, exc_info: Any = None) -> None:
        if not self.enabled:
            return
        if payload is None:
            self.logger.debug(message, exc_info=exc_info)
        else:
            self.logger.debug("%s %r", message, payload, exc_info=exc_info)


@dataclass(frozen=True)
class TraceChannels:
    """The three channels every component writes to."""
    info: TraceChannel
    error: TraceChannel
    db: TraceChannel


channels = TraceChannels(
    info=TraceChannel(INFO),
    error=TraceChannel(ERROR),
    db=TraceChannel(DB),
)


def get_channels() -> TraceChannels:
    return channels


def _parse_patterns(patterns: str):
    included, excluded = [], []
    for raw in patterns.replace(",", " ").split():
        if raw.startswith("-"):
            excluded.append(raw[1:])
        else:
            included.append(raw)
    return included, excluded


def enable_debug(patterns: str = "prompt:*") -> List[str]:
    """
    Turns on every known channel matching the comma-separated globs.
    A leading '-' excludes a namespace ("prompt:*,-prompt:db").

    Returns:
        The namespaces that are now enabled.
    """
    global _handler

    included, excluded = _parse_patterns(patterns)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(message)s"))

    enabled = []
    for namespace in ALL_NAMESPACES:
        if not any(fnmatch.fnmatchcase(namespace, p) for p in included):
            continue
        if any(fnmatch.fnmatchcase(namespace, p) for p in excluded):
            continue

        logger = logging.getLogger(logger_name(namespace))
        logger.setLevel(logging.DEBUG)
        # Printed once, by _handler only
        logger.propagate = False
        if _handler not in logger.handlers:
            logger.addHandler(_handler)
        enabled.append(namespace)

    return enabled


def disable_debug() -> None:
    """Reverts every channel to the inherited (silent) level."""
    for namespace in ALL_NAMESPACES:
        logger = logging.getLogger(logger_name(namespace))
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        if _handler is not None and _handler in logger.handlers:
            logger.removeHandler(_handler)
