#!/usr/bin/env python3
"""Basic usage example"""

from prefix_logger import LoggerBuilder, LoggerConfig, LogLevel
from prefix_logger.writers import FileWriter

def main():
    # Development preset: time, colored tags and file:line
    logger = LoggerConfig.dev_config().build()

    logger.debug("This is debug")
    logger.info("Application started")
    logger.warnf("Retrying in %d seconds\n", 5)
    logger.error("This is error")
    logger.print("Always printed, no level tag")

    # Derived loggers share the sink and add a prefix segment
    db = logger.with_prefix("db")
    db.info("connected")
    db.with_prefix("migrations").infof("applied %(count)d migrations\n", {"count": 3})

    # Builder with a file sink and warnings only
    with FileWriter("logs/example.log") as sink:
        file_logger = (LoggerBuilder()
            .with_level(LogLevel.WARN)
            .with_time(True)
            .with_output(sink)
            .build())

        file_logger.info("suppressed")
        file_logger.warn("written to logs/example.log")

if __name__ == "__main__":
    main()
