#!/usr/bin/env python3
"""Basic usage example"""

import sys

import slog_module as slog
from slog_module import Level, Options, parse_level


def main():
    # Package logger: colored console on stdout
    slog.info("Application started")
    slog.infow("listening", "host", "127.0.0.1", "port", 8080)

    # Switch backend by name
    slog.use("structlog", sys.stdout, parse_level("debug"), Options(formatter="json"))
    slog.debugw("config loaded", "path", "/etc/app.toml", reload=False)
    slog.warnf("%d retries left", 2)

    # Dedicated logger with a fixed timestamp format and no colors
    logger = slog.new_with_options(
        slog.STD_LOGGER_NAME,
        sys.stderr,
        Level.WARN,
        Options(timestamp_format="%H:%M:%S", disable_color=True),
    )
    logger.info("This is hidden")
    logger.errorw("request failed", "status", 502, None, "upstream")

    # Panics can be recovered, fatal calls exit
    try:
        logger.panicw("invariant broken", "id", 42)
    except slog.LoggerPanic as e:
        logger.warn("recovered: ", e.message)


if __name__ == "__main__":
    main()
