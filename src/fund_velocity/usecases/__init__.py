from .duplicate_index import DuplicateIndex
from .evaluate import EvaluationResult, VelocityEngine
from .format_output import FormatOutput
from .parse_load_attempt import ParseLoadAttempt
from .pipeline import run_pipeline

__all__ = [
    "DuplicateIndex",
    "EvaluationResult",
    "FormatOutput",
    "ParseLoadAttempt",
    "VelocityEngine",
    "run_pipeline",
]
