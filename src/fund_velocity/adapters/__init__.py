from .input_source import FileInputSource
from .output_sink import FileOutputSink

__all__ = ["FileInputSource", "FileOutputSink"]
