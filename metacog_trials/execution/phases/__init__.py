"""
Phase operations for metacog-trials.

Each operation takes the running trial, writes its fields to the trial's
data record and may suspend. Operations are grouped by concern:
- stimulus: begin, showStim, hideStim
- response: getResponse, getFinalResponse
- feedback: showFeedback, end
- advice: showAdvice, advised cleanup
- cleanup: base cleanup
"""

from . import advice, cleanup, feedback, response, stimulus

__all__ = ['advice', 'cleanup', 'feedback', 'response', 'stimulus']
