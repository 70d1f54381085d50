# tests/conftest.py
from unittest.mock import MagicMock

import pytest

from apt_buildpack.apt import Apt


@pytest.fixture
def cache_dir(tmp_path):
    d = tmp_path / "cachedir"
    d.mkdir()
    return str(d)


@pytest.fixture
def install_dir(tmp_path):
    d = tmp_path / "installdir"
    d.mkdir()
    return str(d)


@pytest.fixture
def templates(tmp_path):
    """sources.list / trusted.gpg stand-ins for the stack's /etc/apt files."""
    etc = tmp_path / "etc_apt"
    etc.mkdir()
    sources = etc / "sources.list"
    sources.write_text("deb http://archive.ubuntu.com/ubuntu jammy main\n", encoding="utf-8")
    trusted = etc / "trusted.gpg"
    trusted.write_bytes(b"\x99\x01\x0d")
    return str(sources), str(trusted)


@pytest.fixture
def aptfile(tmp_path):
    return str(tmp_path / "apt.yml")


@pytest.fixture
def mock_command():
    command = MagicMock()
    command.output.return_value = ""
    return command


@pytest.fixture
def apt(mock_command, aptfile, cache_dir, install_dir, templates):
    sources, trusted = templates
    return Apt(
        mock_command,
        aptfile,
        cache_dir,
        install_dir,
        sources_template=sources,
        trusted_template=trusted,
    )
