"""
Advice phases for advised trials: showAdvice and the advised cleanup.
"""

import logging

from ..collaborators import resolve
from ..suspension import wait
from . import cleanup as base_cleanup

logger = logging.getLogger(__name__)


def advisor_prefix(index: int) -> str:
    """Column prefix for the advisor at `index` (e.g. "advisor0")."""
    return f"advisor{index}"


async def show_advice(trial):
    """
    Record and draw each advisor's advice in order.

    For advisor i the record receives `advisor{i}` = i, every entry of the
    advisor's own table as `advisor{i}<key>`, and every entry of its advice
    as `advisor{i}<key>`. Each advisor draws its advice and the trial settles
    before the next advisor is asked.
    """
    config = trial.config

    for i, advisor in enumerate(config.advisors):
        prefix = advisor_prefix(i)
        trial.data[prefix] = i

        for key, value in (await resolve(advisor.to_table())).items():
            trial.data[prefix + key] = value

        advice = await resolve(advisor.get_advice(trial))
        for key, value in advice.items():
            trial.data[prefix + key] = value

        await resolve(advisor.draw_advice())
        logger.debug(f"{prefix}: advice drawn")

        await wait(config.duration_advice_settle)

    if config.duration_show_advice is not None:
        await wait(config.duration_show_advice)

    return trial


async def cleanup(trial):
    """Hide every advisor's advice, then run the base cleanup."""
    for advisor in trial.config.advisors:
        await resolve(advisor.hide_advice())

    return await base_cleanup.cleanup(trial)
