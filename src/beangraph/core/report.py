"""
Report loading and validation.

Validation happens here, before the graph builder runs: the builder
assumes it receives a report with a non-empty contexts map.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .exceptions import BeanGraphError, ReportFormatError, ReportParseError, ReportReadError
from .result import Err, Ok, Result
from .types import RawReport

logger = logging.getLogger(__name__)


def parse_and_validate(text: Union[str, bytes]) -> Result[RawReport, BeanGraphError]:
    """
    Parse report text into a RawReport.

    Returns Err(ReportParseError) for text that is not JSON and
    Err(ReportFormatError) when the JSON lacks a non-empty "contexts" map
    or does not match the expected shape.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.debug("Report rejected, not JSON: %s", e)
        return Err(ReportParseError(str(e)))

    if not isinstance(data, dict):
        return Err(ReportFormatError("top-level value is not an object"))

    contexts = data.get("contexts")
    if not isinstance(contexts, dict) or not contexts:
        return Err(ReportFormatError())

    try:
        report = RawReport.model_validate(data)
    except ValidationError as e:
        logger.debug("Report rejected by schema: %s", e)
        return Err(ReportFormatError(f"{e.error_count()} schema error(s)"))

    logger.debug("Accepted report with %d context(s)", len(report.contexts))
    return Ok(report)


def load_report(path: Union[str, Path]) -> Result[RawReport, BeanGraphError]:
    """Read a report file and validate it."""
    report_path = Path(path)
    try:
        text = report_path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(ReportReadError(str(report_path), e.strerror or str(e)))
    return parse_and_validate(text)
