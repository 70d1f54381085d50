from __future__ import annotations

from ..apt import Apt


class UpdateStep:
    step_id = "40_update"

    def run(self, apt: Apt) -> str:
        return apt.update()
