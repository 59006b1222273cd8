"""
Response phases: getResponse and getFinalResponse.

Both ask the trial's response collector for a response and store the fields
it returns. The first round is written to `trial.data.response` and the final
round to `trial.data.final_response`, so the two rounds cannot overwrite each
other.
"""

import logging
import re
from collections.abc import Mapping
from numbers import Real

from ..collaborators import is_no_response, resolve

logger = logging.getLogger(__name__)

# Response fields holding times are converted to ms since trial start
TIME_FIELD = re.compile(r'time')

TIMEOUT_MESSAGE = "Timeout on response"


def _is_timestamp(field: str, value) -> bool:
    return bool(TIME_FIELD.search(field)) and isinstance(value, Real) and not isinstance(value, bool)


def process_response(trial, data, final: bool = False):
    """
    Store a collector response in the trial's data record.

    Fields whose name contains "time" are converted to ms since the trial
    start. Other fields are copied as-is.

    Args:
        trial: Running trial
        data: Mapping of response fields from the collector
        final: Store in the final-response round instead of the first one

    Returns:
        The trial
    """
    if is_no_response(data):
        return trial

    if not isinstance(data, Mapping):
        raise TypeError(f"Response collector returned {type(data).__name__}, expected a mapping")

    target = trial.data.final_response if final else trial.data.response
    for field, value in data.items():
        if _is_timestamp(field, value):
            value = trial.clock.relative(value)
        target.set(field, value)

    logger.debug(f"Stored response fields {target.columns()}")
    return trial


def _log_timeout(trial, phase: str):
    trial.log.append(TIMEOUT_MESSAGE)
    logger.info(f"{phase}: no response before timeout")


async def get_response(trial):
    """Collect the initial response."""
    config = trial.config
    trial.data['timeResponseOpen'] = trial.trial_time

    result = await resolve(config.response_widget.get_response(config.duration_response))

    trial.data['timeResponseClose'] = trial.trial_time

    if is_no_response(result):
        _log_timeout(trial, 'getResponse')
        return trial

    return process_response(trial, result)


async def get_final_response(trial):
    """Collect the final response without resetting the collector, so earlier markers stay visible."""
    config = trial.config
    trial.data['timeResponseOpenFinal'] = trial.trial_time

    result = await resolve(config.response_widget.get_response(config.final_response_timeout, False))

    trial.data['timeResponseCloseFinal'] = trial.trial_time

    if is_no_response(result):
        _log_timeout(trial, 'getFinalResponse')
        return trial

    return process_response(trial, result, final=True)
