from __future__ import annotations

from fund_velocity.observability.logging import Logger
from fund_velocity.ports.input_source import InputSource
from fund_velocity.ports.output_sink import OutputSink
from fund_velocity.usecases.evaluate import EvaluationResult, VelocityEngine
from fund_velocity.usecases.format_output import FormatOutput
from fund_velocity.usecases.parse_load_attempt import ParseLoadAttempt


def run_pipeline(
    source: InputSource,
    sink: OutputSink,
    *,
    logger: Logger,
    engine: VelocityEngine | None = None,
) -> EvaluationResult:
    """Read, evaluate and write one batch.

    The whole input is parsed before evaluation starts; a ParseError on any
    line aborts the run before anything is written.
    """
    parse = ParseLoadAttempt()
    attempts = [parse(line) for line in source.read()]
    logger.info("Processing load attempts", attempts=len(attempts))

    engine = engine if engine is not None else VelocityEngine()
    result = engine.evaluate(attempts)
    for attempt in result.suppressed:
        logger.debug(
            "Suppressed duplicate load attempt",
            line_no=attempt.line_no,
            id=attempt.id,
            customer_id=attempt.customer_id,
        )

    format_output = FormatOutput()
    sink.write_lines([format_output(decision) for decision in result.decisions])
    return result
