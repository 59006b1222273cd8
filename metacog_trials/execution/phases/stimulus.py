"""
Stimulus phases: begin, showStim, hideStim.

Showing and hiding the stimulus is done by the renderer reacting to the
phase label; these phases only timestamp and pace the trial.
"""

import logging

from ..suspension import wait

logger = logging.getLogger(__name__)


async def begin(trial):
    """Put the stimulus on the display, start the trial clock and hold the pre-stimulus interval."""
    trial.display.show_stimulus(trial.config.stim)
    trial.data.mark_start(trial.clock.start())
    logger.debug(f"Trial started at {trial.data.timestamp_start}")

    await wait(trial.config.duration_pre_stim)

    return trial


async def show_stim(trial):
    trial.data['timeStimOn'] = trial.trial_time

    await wait(trial.config.duration_stim)

    return trial


async def hide_stim(trial):
    trial.data['timeStimOff'] = trial.trial_time

    if trial.config.blank_stim is not None:
        trial.display.show_stimulus(trial.config.blank_stim)

    await wait(trial.config.duration_post_stim)

    return trial
