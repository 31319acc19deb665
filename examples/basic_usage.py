#!/usr/bin/env python3
"""Basic usage example"""

import android_logging as log
from android_logging import Logger, LoggerConfig, LogLevel


class Job:
    def __init__(self, name):
        self.name = name
        self.parent = None


def main():
    # Shared logger: stderr at Debug unless configured otherwise
    log.I("Application started")
    log.D("config", {"retries": 3, "hosts": ["a", "b"]})

    # Cycles are written as back-references
    job = Job("nightly")
    job.parent = job
    log.W("job", job)

    try:
        {}["missing"]
    except KeyError as ex:
        log.E("lookup failed", ex)

    # Independent logger that only retains messages
    capture = Logger(LoggerConfig.capture_config())
    capture.info("first")
    capture.trace("second")
    while capture.peek():
        print(capture.pop())

    # Only Warn and more urgent on stdout
    console = Logger()
    console.enable_stdout(LogLevel.WARN)
    console.F("fatal")
    console.I("not shown")


if __name__ == "__main__":
    main()
