from __future__ import annotations

from ..apt import Apt


class AddReposStep:
    step_id = "30_add_repos"

    def run(self, apt: Apt) -> str:
        apt.add_repos()
        return ""
