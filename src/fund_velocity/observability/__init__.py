from .logging import JsonlLogSink, LogMessage, Logger, LogSink, StdoutLogSink, build_logger

__all__ = ["JsonlLogSink", "LogMessage", "LogSink", "Logger", "StdoutLogSink", "build_logger"]
