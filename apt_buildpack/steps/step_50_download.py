from __future__ import annotations

import logging

from ..apt import Apt

logger = logging.getLogger(__name__)


class DownloadStep:
    step_id = "50_download"

    def run(self, apt: Apt) -> str:
        if not apt.packages:
            logger.warning("No packages listed in %s", apt.apt_file)
        return apt.download()
