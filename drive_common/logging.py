"""
Unified logging with deduplication, shared by the planning code.
Callers pass in their own logger (a stdlib logging.Logger or anything with
info/warning/debug methods) and keep ONE last_event variable around.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class LogLevel(Enum):
    INFO = auto()
    WARN = auto()
    DEBUG = auto()


@dataclass
class LogEvent:
    message: str
    source: str
    level: LogLevel
    counter: int = 0

    def same_identity(self, other: "LogEvent") -> bool:
        return (
            self.level == other.level and
            self.source == other.source and
            self.message == other.message
        )

    def text(self) -> str:
        return f"{self.source}: {self.message}".strip() if self.source else self.message

#--------------------------------------------------------------------------------
def log_event(
    logger,
    event: LogEvent,
    last_event: Optional[LogEvent] = None,
) -> LogEvent:
    """
    Unified logging with dedup multiplier.

    Behavior:
    - If event is same as last_event: increment counter, emit nothing
    - Else: report how often the previous event repeated (if it did),
      emit the new event, reset counter to 0
    """
    if last_event is not None and last_event.same_identity(event):
        event.counter = last_event.counter + 1
        return event

    if last_event is not None and last_event.counter > 0:
        logger.debug(f"previous message repeated {last_event.counter} times: {last_event.text()}")

    if event.level == LogLevel.WARN:
        logger.warning(event.text())
    elif event.level == LogLevel.DEBUG:
        logger.debug(event.text())
    else:
        logger.info(event.text())

    event.counter = 0
    return event

#--------------------------------------------------------------------------------
# Convenience wrappers
def log_info(logger, message: str, source: str = "", last_event: Optional[LogEvent] = None) -> LogEvent:
    return log_event(logger, LogEvent(message=message, source=source, level=LogLevel.INFO), last_event)

#--------------------------------------------------------------------------------
def log_warn(logger, message: str, source: str = "", last_event: Optional[LogEvent] = None) -> LogEvent:
    return log_event(logger, LogEvent(message=message, source=source, level=LogLevel.WARN), last_event)

#--------------------------------------------------------------------------------
def log_debug(logger, message: str, source: str = "", last_event: Optional[LogEvent] = None) -> LogEvent:
    return log_event(logger, LogEvent(message=message, source=source, level=LogLevel.DEBUG), last_event)
