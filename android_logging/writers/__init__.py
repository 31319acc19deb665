"""Writers module - Log output handlers"""

from android_logging.writers.console_writer import ConsoleWriter
from android_logging.writers.queue_writer import MessageQueue

__all__ = ["ConsoleWriter", "MessageQueue"]
