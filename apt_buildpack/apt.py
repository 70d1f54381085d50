from __future__ import annotations

import logging
import posixpath
import shutil
from pathlib import Path
from typing import List
from urllib.parse import urlparse

from .lib.command import Command
from .lib.layout import DEB_SUFFIX, DEFAULT_SOURCES_TEMPLATE, DEFAULT_TRUSTED_TEMPLATE, AptLayout
from .lib.manifests import load_manifest

logger = logging.getLogger(__name__)

# Every tool runs from the filesystem root, so paths handed to tools must be absolute.
WORK_DIR = "/"

# Schemes fetched with curl. Anything else (including "libc6:i386") is an apt package name.
URL_SCHEMES = {"http", "https", "ftp", "file"}


def _is_url(package: str) -> bool:
    return urlparse(package).scheme in URL_SCHEMES


def _copy_file(src: str, dst: str) -> None:
    Path(dst).parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dst)


class Apt:
    """Hermetic apt environment for one build.

    Operations are meant to run in order: setup, add_keys/add_repos,
    update, download, install.
    """

    def __init__(
        self,
        command: Command,
        apt_file: str,
        cache_dir: str,
        install_dir: str,
        *,
        sources_template: str = DEFAULT_SOURCES_TEMPLATE,
        trusted_template: str = DEFAULT_TRUSTED_TEMPLATE,
    ) -> None:
        self.command = command
        self.apt_file = apt_file
        self.cache_dir = cache_dir
        self.install_dir = install_dir
        self.sources_template = sources_template
        self.trusted_template = trusted_template
        self.layout = AptLayout(cache_dir)

        self.keys: List[str] = []
        self.repos: List[str] = []
        self.packages: List[str] = []

    def load(self) -> None:
        """Read keys, repos and packages from the manifest."""
        manifest = load_manifest(self.apt_file)
        self.keys = manifest.keys
        self.repos = manifest.repos
        self.packages = manifest.packages
        logger.info(
            "Loaded %s: %d keys, %d repos, %d packages",
            self.apt_file,
            len(self.keys),
            len(self.repos),
            len(self.packages),
        )

    def setup(self) -> None:
        self.load()
        _copy_file(self.sources_template, self.layout.sources_list)
        _copy_file(self.trusted_template, self.layout.trusted_keys)

    def add_keys(self) -> str:
        out = ""
        for key in self.keys:
            out = self.command.output(
                WORK_DIR,
                "apt-key",
                "--keyring",
                self.layout.trusted_keys,
                "adv",
                "--fetch-keys",
                key,
            )
        return out

    def add_repos(self) -> None:
        if not self.repos:
            return

        p = Path(self.layout.sources_list)
        content = p.read_text(encoding="utf-8")
        p.write_text("\n".join([content, *self.repos]), encoding="utf-8")
        logger.info("Added %d repos to %s", len(self.repos), str(p))

    def update(self) -> str:
        return self.command.output(WORK_DIR, "apt-get", *self.layout.apt_options(), "update")

    def download(self) -> str:
        for package in self.packages:
            if _is_url(package):
                self._download_url(package)
            else:
                self.command.output(
                    WORK_DIR,
                    "apt-get",
                    *self.layout.apt_options(),
                    "-y",
                    "--force-yes",
                    "-d",
                    "install",
                    "--reinstall",
                    package,
                )
        return ""

    def _download_url(self, url: str) -> None:
        filename = posixpath.basename(urlparse(url).path)
        if filename in ("", ".", ".."):
            raise ValueError(f"Cannot derive a package filename from {url}")
        if not filename.endswith(DEB_SUFFIX):
            logger.warning("%s does not end in %s; install will skip it", filename, DEB_SUFFIX)

        Path(self.layout.archives).mkdir(parents=True, exist_ok=True)
        target = self.layout.archive_path(filename)
        # -z only fetches when the remote file is newer than the local one.
        self.command.output(WORK_DIR, "curl", "-s", "-L", "-z", target, "-o", target, url)

    def archives(self) -> List[str]:
        """Downloaded .deb files, sorted by name."""
        d = Path(self.layout.archives)
        if not d.is_dir():
            return []
        return sorted(
            self.layout.archive_path(p.name)
            for p in d.iterdir()
            if p.is_file() and p.name.endswith(DEB_SUFFIX)
        )

    def install(self) -> str:
        for deb in self.archives():
            # dpkg -x only unpacks; no maintainer scripts, no dpkg database.
            self.command.output(WORK_DIR, "dpkg", "-x", deb, self.install_dir)
        return ""
