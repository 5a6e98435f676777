from .input_source import InputSource
from .output_sink import OutputSink

# Public port exports keep wiring explicit at composition time.
__all__ = ["InputSource", "OutputSink"]
