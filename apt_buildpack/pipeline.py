from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence

from .apt import Apt

logger = logging.getLogger(__name__)


class Step(Protocol):
    """One stage of the apt pipeline."""

    step_id: str

    def run(self, apt: Apt) -> str:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    outputs: Dict[str, str]


def run_pipeline(
    *,
    apt: Apt,
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order; the first failure propagates."""

    ids = [s.step_id for s in steps]
    for name, value in (("start_at", start_at), ("stop_after", stop_after)):
        if value is not None and value not in ids:
            raise ValueError(f"Unknown {name} step: {value} (known: {', '.join(ids)})")

    ran: List[str] = []
    outputs: Dict[str, str] = {}

    started = start_at is None

    for step in steps:
        if not started:
            if step.step_id == start_at:
                started = True
            else:
                continue

        logger.info("Running step %s", step.step_id)
        outputs[step.step_id] = step.run(apt)
        ran.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    return PipelineResult(ran_steps=ran, outputs=outputs)
