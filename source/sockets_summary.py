import os
import json
import time
import datetime
from pathlib import Path
from enum import Enum
from typing import Dict, Tuple, Union
from dataclasses import dataclass

SOCKSTAT_PATH = '/proc/net/sockstat'
DEFAULT_LOG_LEVEL = 'INFO'
NOT_AVAILABLE = 'N/A'

FIELD_PREFIXES = (
    ('SocketsUsed', 'sockets:'),
    ('TCPInUse', 'TCP:'),
    ('UDPInUse', 'UDP:'),
)
FIELD_TOKEN_INDEX = 2


class LogLevel(Enum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class SockstatError(RuntimeError):
    pass


class SourceUnavailable(SockstatError):
    pass


class ReadFailure(SockstatError):
    pass


class EmptyResult(SockstatError):
    pass


class UnknownArgument(SockstatError):
    pass


@dataclass(frozen=True)
class ToolConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    json_output: bool = False
    sockstat_path: str = SOCKSTAT_PATH


@dataclass(frozen=True)
class Snapshot:
    source: str
    text: str

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self.text.splitlines())


def level_rank(level: Union[LogLevel, str]) -> int:
    # Unknown names rank as DEBUG.
    if isinstance(level, LogLevel):
        return level.value
    member = LogLevel.__members__.get(level)
    if member is None:
        return LogLevel.DEBUG.value
    return member.value


class Logger:
    def __init__(self, config: ToolConfig):
        self.config = config

    def log(self, level: Union[LogLevel, str], message: str):
        if level_rank(level) < level_rank(self.config.log_level):
            return

        name = level.name if isinstance(level, LogLevel) else level
        timestamp = datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        print(f'{timestamp} - {name} - {message}')

    def debug(self, message: str):
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str):
        self.log(LogLevel.INFO, message)

    def warning(self, message: str):
        self.log(LogLevel.WARNING, message)

    def error(self, message: str):
        self.log(LogLevel.ERROR, message)


class SockstatReader:
    def __init__(self, config: ToolConfig, logger: Logger):
        self.config = config
        self.logger = logger

    @property
    def path(self) -> str:
        return self.config.sockstat_path

    def check_source_available(self):
        path = Path(self.path)

        if not path.exists() or not os.access(self.path, os.R_OK) or path.is_dir():
            raise SourceUnavailable(
                f"'{self.path}' not found or not readable. "
                "Ensure you are running on a Linux system with appropriate permissions."
            )

        self.logger.debug(f"Source {self.path} is readable")

    def read_source(self) -> Snapshot:
        start_time = time.time()
        self.logger.info(f"Reading socket statistics from {self.path}...")

        try:
            with open(self.path, 'r', encoding='utf-8') as file:
                content = file.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadFailure(f"Failed to read {self.path}: {e}") from e

        if not content.strip():
            raise EmptyResult(f"No data received from {self.path}")

        snapshot = Snapshot(source=self.path, text=content)
        elapsed = time.time() - start_time
        self.logger.debug(f"Read {len(snapshot.lines)} lines from {self.path}")
        self.logger.info(f"Success! Retrieved socket summary in {elapsed:.4f}s.")
        return snapshot


def extract_fields(raw: str) -> Dict[str, str]:
    fields = {name: NOT_AVAILABLE for name, _ in FIELD_PREFIXES}
    found = set()

    for line in raw.splitlines():
        for name, prefix in FIELD_PREFIXES:
            if name in found or not line.startswith(prefix):
                continue
            found.add(name)
            parts = line.split()
            if len(parts) > FIELD_TOKEN_INDEX:
                fields[name] = parts[FIELD_TOKEN_INDEX]

    return fields


def format_raw(snapshot: Snapshot) -> str:
    return snapshot.text


def format_structured(fields: Dict[str, str]) -> str:
    structured = {name: str(fields.get(name, NOT_AVAILABLE)) for name, _ in FIELD_PREFIXES}
    return json.dumps(structured, indent=4)
