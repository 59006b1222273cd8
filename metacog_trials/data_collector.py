"""
TrialDataCollector class for metacog-trials.

Gathers the table rows of completed trials into a DataFrame.
"""

import logging
from typing import Any, Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)


class TrialDataCollector:
    """
    Collects one row per trial for tabular export.

    Responsibilities:
    - Read each trial's row with to_table()
    - Track the union of column names in first-seen order
    - Produce a DataFrame with the same columns for every trial

    Writing the data anywhere is left to the caller.
    """

    def __init__(self, experiment_name: str = "experiment"):
        """
        Initialize data collector.

        Args:
            experiment_name: Experiment name, added to each row as 'experiment'
        """
        self.experiment_name = experiment_name
        self.rows: List[Dict[str, Any]] = []
        self.headers: List[str] = []

    def add_trial(self, trial, headers: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Add a trial's row.

        Args:
            trial: Trial (finished or not) to read
            headers: Columns to read (None = the trial's table_headers)

        Returns:
            The row that was added
        """
        if not trial.finished:
            logger.warning(f"Adding row of unfinished {trial!r}")

        row = trial.to_table(headers)
        for header in row:
            if header not in self.headers:
                self.headers.append(header)

        self.rows.append(row)
        logger.info(f"Collected trial {len(self.rows)} ({len(row)} fields)")
        return row

    def to_dataframe(self) -> pd.DataFrame:
        """
        All collected rows as a DataFrame.

        Columns are the union of all row headers; fields a trial lacked are missing values.
        """
        df = pd.DataFrame(self.rows, columns=self.headers)
        df.insert(0, 'experiment', self.experiment_name)
        return df

    def get_trial_count(self) -> int:
        return len(self.rows)

    def clear(self):
        """Clear all collected data."""
        self.rows.clear()
        self.headers.clear()
        logger.info("Collected data cleared")

    def __repr__(self):
        return f"TrialDataCollector(experiment='{self.experiment_name}', trials={len(self.rows)})"
