"""
Cleanup phase: hand the shared resources back in a neutral state.
"""

import logging

from ..collaborators import resolve

logger = logging.getLogger(__name__)


async def cleanup(trial):
    """Reset the response collector and the display for the next trial."""
    await resolve(trial.config.response_widget.reset())
    trial.display.reset()
    logger.debug("Response collector and display reset")
    return trial
