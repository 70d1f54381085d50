from __future__ import annotations

import logging

from ..apt import Apt

logger = logging.getLogger(__name__)


class InstallStep:
    step_id = "60_install"

    def run(self, apt: Apt) -> str:
        out = apt.install()
        logger.info("Packages extracted into %s", apt.install_dir)
        return out
