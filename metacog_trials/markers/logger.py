"""
Marker Logger System

Tracks the phase-transition markers sent while trials run, for:
- Post-session documentation
- Validation and debugging
- Export as a pandas DataFrame
"""

import time
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

import pandas as pd


@dataclass
class MarkerEvent:
    """Record of a single marker event"""
    timestamp: float                     # Time when marker was sent (time.time())
    marker: str                          # Marker value sent to the outlet
    phase_name: str                      # Phase that was starting
    behavior: Optional[str] = None       # Behavior of the trial (e.g. "advised")
    trial_number: Optional[int] = None   # Trial number (if configured)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return asdict(self)


class MarkerLogger:
    """
    Logger for tracking all markers sent during a session.

    Usage:
        # At session start
        marker_logger = MarkerLogger(session_id="P001")

        # During execution (called by PhaseMarkerObserver)
        marker_logger.log_marker("Trial-showStim", phase_name="showStim", behavior="trial")

        # At session end
        df = marker_logger.to_dataframe()
    """

    COLUMNS = ['timestamp', 'relative_time_sec', 'marker', 'phase_name', 'behavior', 'trial_number']

    def __init__(self, session_id: str = "default"):
        """
        Initialize marker logger.

        Args:
            session_id: Unique identifier for this session
        """
        self.session_id = session_id
        self.events: List[MarkerEvent] = []
        self.session_start_time = time.time()

    def log_marker(
        self,
        marker: str,
        phase_name: str,
        behavior: Optional[str] = None,
        trial_number: Optional[int] = None
    ):
        """
        Log a marker event.

        Args:
            marker: Marker value
            phase_name: Name of the phase that was starting
            behavior: Behavior name of the trial
            trial_number: Trial number (if applicable)
        """
        self.events.append(MarkerEvent(
            timestamp=time.time(),
            marker=marker,
            phase_name=phase_name,
            behavior=behavior,
            trial_number=trial_number
        ))

    def get_events(
        self,
        marker: Optional[str] = None,
        phase_name: Optional[str] = None,
        trial_number: Optional[int] = None
    ) -> List[MarkerEvent]:
        """
        Filter events by criteria.

        Args:
            marker: Filter by specific marker value
            phase_name: Filter by phase
            trial_number: Filter by trial number

        Returns:
            List of matching MarkerEvent objects
        """
        filtered = self.events

        if marker is not None:
            filtered = [e for e in filtered if e.marker == marker]

        if phase_name is not None:
            filtered = [e for e in filtered if e.phase_name == phase_name]

        if trial_number is not None:
            filtered = [e for e in filtered if e.trial_number == trial_number]

        return filtered

    def get_marker_counts(self) -> Dict[str, int]:
        """
        Get count of how many times each marker was sent.

        Returns:
            Dictionary mapping marker value to count
        """
        counts = {}
        for event in self.events:
            counts[event.marker] = counts.get(event.marker, 0) + 1
        return counts

    def to_dataframe(self) -> pd.DataFrame:
        """
        All marker events as a DataFrame.

        Columns:
            timestamp, relative_time_sec, marker, phase_name, behavior, trial_number
        """
        rows = []
        for event in self.events:
            row = event.to_dict()
            row['relative_time_sec'] = round(event.timestamp - self.session_start_time, 3)
            rows.append(row)
        return pd.DataFrame(rows, columns=self.COLUMNS)

    def clear(self):
        """Clear all logged events (useful between blocks)"""
        self.events.clear()

    def get_event_count(self) -> int:
        """Get total number of logged events"""
        return len(self.events)

    def get_last_event(self) -> Optional[MarkerEvent]:
        """Get the most recently logged event"""
        return self.events[-1] if self.events else None
