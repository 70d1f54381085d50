from .step_10_setup import SetupStep
from .step_20_add_keys import AddKeysStep
from .step_30_add_repos import AddReposStep
from .step_40_update import UpdateStep
from .step_50_download import DownloadStep
from .step_60_install import InstallStep

__all__ = [
    "SetupStep",
    "AddKeysStep",
    "AddReposStep",
    "UpdateStep",
    "DownloadStep",
    "InstallStep",
]
