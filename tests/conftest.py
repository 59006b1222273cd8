"""
Pytest configuration and fixtures for metacog-trials tests.

Provides fake collaborators (clock, response collector, advisors, LSL outlet)
and trial configurations for unit and integration tests.
"""

import pytest
import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from metacog_trials.config import AdvisedTrialConfig, TrialConfig
from metacog_trials.execution import NO_RESPONSE, PhaseClock


# ==================== PYTEST CONFIGURATION ====================

def pytest_configure(config):
    """Add custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: unit test (fast, no I/O)")
    config.addinivalue_line("markers", "integration: integration test (full trial runs with fakes)")


# ==================== FAKE COLLABORATORS ====================

class FakeClock:
    """
    Manually driven time source in ms.

    Each read advances the time by `step` so successive timestamps increase.
    """

    def __init__(self, start=100, step=0):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value

    def advance(self, ms):
        self.now += ms


class FakeResponseCollector:
    """
    Response collector returning canned responses.

    Args:
        responses: Results returned by successive get_response() calls
                   (a dict, NO_RESPONSE, or an exception to raise)
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.reset_count = 0

    async def get_response(self, timeout_ms, reset_first=True):
        self.calls.append((timeout_ms, reset_first))
        result = self.responses.pop(0) if self.responses else NO_RESPONSE
        if isinstance(result, Exception):
            raise result
        return dict(result) if isinstance(result, dict) else result

    def reset(self):
        self.reset_count += 1


class FakeAdvisor:
    """Advisor giving fixed advice and recording the calls made on it."""

    def __init__(self, advice, table=None, events=None, name="advisor"):
        self.advice = advice
        self.table = table if table is not None else {}
        self.events = events if events is not None else []
        self.name = name
        self.hidden = False

    def to_table(self):
        self.events.append((self.name, 'to_table'))
        return dict(self.table)

    async def get_advice(self, trial):
        self.events.append((self.name, 'get_advice'))
        return dict(self.advice)

    def draw_advice(self):
        self.events.append((self.name, 'draw_advice'))

    def hide_advice(self):
        self.events.append((self.name, 'hide_advice'))
        self.hidden = True


class MockMarkerOutlet:
    """Mock LSL StreamOutlet capturing markers."""

    def __init__(self):
        self.markers_sent = []

    def push_sample(self, marker):
        """Record marker for later verification."""
        if isinstance(marker, list):
            self.markers_sent.extend(marker)
        else:
            self.markers_sent.append(marker)


# ==================== FIXTURES ====================

@pytest.fixture
def fake_clock():
    return FakeClock(start=100)


@pytest.fixture
def phase_clock(fake_clock):
    return PhaseClock(fake_clock)


@pytest.fixture
def mock_outlet():
    return MockMarkerOutlet()


@pytest.fixture
def collector():
    """Collector answering immediately with value 7 at time 120."""
    return FakeResponseCollector({'value': 7, 'time': 120})


@pytest.fixture
def base_config(collector):
    """Trial configuration with no waits and no feedback."""
    return TrialConfig(
        stim="<div class='dots'></div>",
        correct_answer=42,
        response_widget=collector,
        prompt="Which box had more dots?",
        duration_pre_stim=0,
        duration_stim=0,
        duration_post_stim=0,
    )


@pytest.fixture
def advisor():
    return FakeAdvisor({'direction': 'left', 'confidence': 80}, table={'id': 3, 'group': 1})


@pytest.fixture
def advised_config(advisor):
    """Advised configuration with one advisor and no waits."""
    return AdvisedTrialConfig(
        stim="<div class='dots'></div>",
        correct_answer=1,
        response_widget=FakeResponseCollector(
            {'value': 7, 'time': 120},
            {'value': 9, 'time': 150},
        ),
        prompt="Which box had more dots?",
        duration_pre_stim=0,
        duration_stim=0,
        duration_post_stim=0,
        duration_advice_settle=0,
        advisors=[advisor],
    )


@pytest.fixture
def make_collector():
    """Factory for FakeResponseCollector."""
    return FakeResponseCollector


@pytest.fixture
def make_advisor():
    """Factory for FakeAdvisor."""
    return FakeAdvisor


@pytest.fixture
def make_clock():
    """Factory for FakeClock."""
    return FakeClock
