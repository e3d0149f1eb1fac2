"""Run planned jobs one at a time."""

from __future__ import annotations

import logging
from typing import Sequence

from .errors import ConversionError
from .planner import Job


logger = logging.getLogger(__name__)


def run_all(jobs: Sequence[Job]) -> None:
    """Run ``jobs`` in order, stopping at the first failure.

    Work done by earlier jobs is kept when a later one fails.
    """

    for index, job in enumerate(jobs):
        try:
            job()
        except ConversionError:
            logger.error("Halting at job %d of %d (%s)", index + 1, len(jobs), job.file.filename)
            raise
