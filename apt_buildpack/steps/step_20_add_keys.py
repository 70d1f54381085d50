from __future__ import annotations

import logging

from ..apt import Apt

logger = logging.getLogger(__name__)


class AddKeysStep:
    step_id = "20_add_keys"

    def run(self, apt: Apt) -> str:
        if not apt.keys:
            logger.info("No keys to add")
        return apt.add_keys()
