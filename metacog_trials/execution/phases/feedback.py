"""
Feedback and end phases.
"""

import logging

from ..collaborators import resolve

logger = logging.getLogger(__name__)


async def show_feedback(trial):
    """
    Show feedback with the configured callback.

    The callback is called with the trial (use trial.data to read the
    response) and awaited if it returns an awaitable. Without a callback the
    feedback times are recorded as None and the phase ends at once.
    """
    callback = trial.config.display_feedback

    if callback is None:
        trial.data['timeFeedbackOn'] = None
        trial.data['timeFeedbackOff'] = None
        logger.debug("No feedback callback configured")
        return trial

    trial.data['timeFeedbackOn'] = trial.trial_time
    await resolve(callback(trial))
    trial.data['timeFeedbackOff'] = trial.trial_time

    return trial


def end(trial):
    trial.data['timeEnd'] = trial.trial_time
    return trial
