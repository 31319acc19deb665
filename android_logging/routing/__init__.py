"""
Log routing module

Per-sink enable flags and thresholds, and dispatch to the sinks.
"""

from android_logging.routing.sink_config import Sink, SinkConfig
from android_logging.routing.sink_router import SinkRouter

__all__ = ["Sink", "SinkConfig", "SinkRouter"]
