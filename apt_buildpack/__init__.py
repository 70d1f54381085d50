"""APT package support for buildpacks.

Installs Debian packages listed in an apt.yml manifest without root:
- private apt tree (sources, keyring, cache, state) under the cache dir
- packages downloaded with apt-get or curl into a private archive cache
- archives unpacked with dpkg -x into the install dir
"""

from .apt import Apt

__all__ = ["Apt"]
