from __future__ import annotations

import logging

from ..apt import Apt

logger = logging.getLogger(__name__)


class SetupStep:
    step_id = "10_setup"

    def run(self, apt: Apt) -> str:
        apt.setup()
        logger.info("Private apt tree ready under %s", apt.cache_dir)
        return ""
