"""
Phase-transition markers.

PhaseMarkerObserver is a trial observer that sends one string marker to an
LSL outlet each time a phase starts, so recordings can be aligned with the
trial's phases.
"""

import logging
from typing import Optional

from .logger import MarkerLogger

logger = logging.getLogger(__name__)

DEFAULT_STREAM_NAME = 'TrialPhase_Markers'


def create_marker_outlet(name: str = DEFAULT_STREAM_NAME, source_id: str = 'metacog-trials'):
    """
    Create an LSL outlet for string phase markers.

    Args:
        name: LSL stream name
        source_id: LSL source identifier

    Returns:
        pylsl.StreamOutlet
    """
    from pylsl import StreamInfo, StreamOutlet

    info = StreamInfo(name=name, type='Markers', channel_count=1, nominal_srate=0,
                      channel_format='string', source_id=source_id)
    logger.info(f"LSL marker stream '{name}' created")
    return StreamOutlet(info)


class PhaseMarkerObserver:
    """
    Observer sending a marker at every phase transition.

    The marker is built from `template`, which can use {state} (e.g.
    "Trial-showStim"), {phase}, {behavior} and {number}.

    Example:
        observer = PhaseMarkerObserver(create_marker_outlet(), MarkerLogger("P001"))
        trial = create_trial(config, observer=observer)
        await trial.run()

    Args:
        outlet: LSL StreamOutlet (or anything with push_sample); None = log only
        marker_logger: Optional MarkerLogger recording every marker sent
        template: Marker template
    """

    def __init__(self, outlet=None, marker_logger: Optional[MarkerLogger] = None,
                 template: str = "{state}"):
        self.outlet = outlet
        self.marker_logger = marker_logger
        self.template = template

    def format_marker(self, phase: str, trial) -> str:
        return self.template.format(
            state=trial.state,
            phase=phase,
            behavior=trial.behavior.name,
            number=trial.config.number,
        )

    def __call__(self, phase: str, trial):
        marker = self.format_marker(phase, trial)

        if self.outlet:
            self.outlet.push_sample([marker])
        logger.info(f"Marker: {marker}")

        if self.marker_logger is not None:
            self.marker_logger.log_marker(
                marker=marker,
                phase_name=phase,
                behavior=trial.behavior.name,
                trial_number=trial.config.number
            )
