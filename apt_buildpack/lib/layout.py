from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SOURCES_TEMPLATE = "/etc/apt/sources.list"
DEFAULT_TRUSTED_TEMPLATE = "/etc/apt/trusted.gpg"

# Relative to the cache dir. Every apt operation goes through these.
SOURCES_LIST = "apt/sources/sources.list"
TRUSTED_KEYS = "apt/etc/trusted.gpg"
CACHE = "apt/cache"
STATE = "apt/state"
ARCHIVES = "apt/cache/archives"

DEB_SUFFIX = ".deb"


@dataclass(frozen=True)
class AptLayout:
    """The private apt tree under <cache_dir>/apt."""

    cache_dir: str

    def _join(self, rel: str) -> str:
        return f"{self.cache_dir.rstrip('/')}/{rel}"

    @property
    def sources_list(self) -> str:
        return self._join(SOURCES_LIST)

    @property
    def trusted_keys(self) -> str:
        return self._join(TRUSTED_KEYS)

    @property
    def cache(self) -> str:
        return self._join(CACHE)

    @property
    def state(self) -> str:
        return self._join(STATE)

    @property
    def archives(self) -> str:
        return self._join(ARCHIVES)

    def archive_path(self, filename: str) -> str:
        return f"{self.archives}/{filename}"

    def apt_options(self) -> list[str]:
        """apt-get options binding it to this tree instead of /etc/apt and /var."""
        return [
            "-o", "debug::nolocking=true",
            "-o", f"dir::cache={self.cache}",
            "-o", f"dir::state={self.state}",
            "-o", f"dir::etc::sourcelist={self.sources_list}",
            "-o", f"dir::etc::trusted={self.trusted_keys}",
        ]
