"""
Unit tests for behavior configurations.
"""

import pytest
from metacog_trials.config import AdvisedTrialConfig, ConfigurationError
from metacog_trials.execution import ADVISED_BEHAVIOR, BASE_BEHAVIOR, BehaviorConfiguration


def _noop(trial):
    return trial


# ==================== BUILT-IN BEHAVIOR TESTS ====================

@pytest.mark.unit
def test_base_behavior_phases():
    assert BASE_BEHAVIOR.phases == (
        'begin', 'showStim', 'hideStim', 'getResponse', 'showFeedback', 'end', 'cleanup'
    )


@pytest.mark.unit
def test_advised_behavior_inserts_advice_phases():
    assert ADVISED_BEHAVIOR.phases == (
        'begin', 'showStim', 'hideStim', 'getResponse',
        'showAdvice', 'getFinalResponse',
        'showFeedback', 'end', 'cleanup'
    )


@pytest.mark.unit
def test_advised_behavior_overrides_cleanup():
    assert ADVISED_BEHAVIOR.operation('cleanup') is not BASE_BEHAVIOR.operation('cleanup')
    assert ADVISED_BEHAVIOR.operation('getResponse') is BASE_BEHAVIOR.operation('getResponse')


@pytest.mark.unit
def test_advised_behavior_settings():
    assert ADVISED_BEHAVIOR.config_type is AdvisedTrialConfig
    assert ADVISED_BEHAVIOR.state_prefix == "Trial"
    assert ADVISED_BEHAVIOR.record_fields[-2:] == ('timeResponseOpenFinal', 'timeResponseCloseFinal')
    assert ADVISED_BEHAVIOR.prompt_defaults['end'] == ""


@pytest.mark.unit
def test_behavior_operations_are_read_only():
    with pytest.raises(TypeError):
        BASE_BEHAVIOR.operations['begin'] = _noop


# ==================== EXTENSION TESTS ====================

@pytest.mark.unit
def test_extend_leaves_original_untouched():
    extended = BASE_BEHAVIOR.extend("confidence", insert_after='getResponse', phases={'getConfidence': _noop})

    assert 'getConfidence' in extended.phases
    assert 'getConfidence' not in BASE_BEHAVIOR.phases
    assert extended.phases.index('getConfidence') == BASE_BEHAVIOR.phases.index('getResponse') + 1


@pytest.mark.unit
def test_extend_appends_when_no_anchor():
    extended = BASE_BEHAVIOR.extend("debrief", phases={'debrief': _noop})

    assert extended.phases[-1] == 'debrief'


@pytest.mark.unit
def test_extend_rejects_unknown_anchor():
    with pytest.raises(ConfigurationError):
        BASE_BEHAVIOR.extend("bad", insert_after='showAdvice', phases={'x': _noop})


@pytest.mark.unit
def test_extend_rejects_unknown_override():
    with pytest.raises(ConfigurationError):
        BASE_BEHAVIOR.extend("bad", overrides={'showAdvice': _noop})


@pytest.mark.unit
def test_behavior_rejects_missing_operation():
    with pytest.raises(ConfigurationError) as exc_info:
        BehaviorConfiguration(name="broken", phases=('begin', 'end'), operations={'begin': _noop})

    assert 'end' in str(exc_info.value)


@pytest.mark.unit
def test_behavior_rejects_repeated_phase():
    with pytest.raises(ConfigurationError):
        BehaviorConfiguration(name="loop", phases=('begin', 'begin'), operations={'begin': _noop})


@pytest.mark.unit
def test_behavior_rejects_empty_phase_list():
    with pytest.raises(ConfigurationError):
        BehaviorConfiguration(name="empty", phases=(), operations={})
