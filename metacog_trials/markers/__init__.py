"""
Phase Marker System

This module provides:
- PhaseMarkerObserver: trial observer sending a marker per phase transition
- create_marker_outlet: LSL outlet for string markers
- MarkerLogger: record of sent markers, exportable as a DataFrame
"""

from .logger import MarkerLogger, MarkerEvent
from .observer import PhaseMarkerObserver, create_marker_outlet

__all__ = [
    'MarkerLogger',
    'MarkerEvent',
    'PhaseMarkerObserver',
    'create_marker_outlet',
]
