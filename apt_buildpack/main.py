from __future__ import annotations

import argparse
import logging
import os
from typing import Optional

from .apt import Apt
from .lib.command import CommandError, ShellCommand
from .lib.layout import DEFAULT_SOURCES_TEMPLATE, DEFAULT_TRUSTED_TEMPLATE
from .logging_utils import configure_logging
from .pipeline import PipelineResult, run_pipeline
from .steps import AddKeysStep, AddReposStep, DownloadStep, InstallStep, SetupStep, UpdateStep

logger = logging.getLogger(__name__)


DEFAULT_APT_FILE = "apt.yml"


def build_steps():
    return [
        SetupStep(),
        AddKeysStep(),
        AddReposStep(),
        UpdateStep(),
        DownloadStep(),
        InstallStep(),
    ]


def run(
    *,
    apt: Apt,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run the apt pipeline against an already constructed Apt."""

    steps = build_steps()
    if start_at is not None and start_at != steps[0].step_id:
        # Setup is skipped, but later steps still need the manifest.
        apt.load()
    return run_pipeline(apt=apt, steps=steps, start_at=start_at, stop_after=stop_after)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="apt-buildpack")
    p.add_argument("build_dir", help="Application directory containing apt.yml")
    p.add_argument("cache_dir", help="Buildpack cache directory (apt tree lives under <cache_dir>/apt)")
    p.add_argument("install_dir", help="Directory the packages are extracted into")
    p.add_argument("--apt-file", default=None, help="Manifest path (default: <build_dir>/apt.yml)")
    p.add_argument("--sources-list", default=DEFAULT_SOURCES_TEMPLATE, help="sources.list template")
    p.add_argument("--trusted-gpg", default=DEFAULT_TRUSTED_TEMPLATE, help="trusted.gpg template")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 40_update)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--dry-run", action="store_true", help="Log commands without running them")
    p.add_argument("--log", default=None, help="Also write the log to this file")
    p.add_argument("--verbose", action="store_true", help="Log command output")

    args = p.parse_args(argv)

    configure_logging(log_path=args.log, level=logging.DEBUG if args.verbose else logging.INFO)

    apt_file = os.path.abspath(args.apt_file or os.path.join(args.build_dir, DEFAULT_APT_FILE))
    if not os.path.exists(apt_file):
        logger.info("No %s found; nothing to install", apt_file)
        return 0

    apt = Apt(
        ShellCommand(dry_run=bool(args.dry_run)),
        apt_file,
        os.path.abspath(args.cache_dir),
        os.path.abspath(args.install_dir),
        sources_template=args.sources_list,
        trusted_template=args.trusted_gpg,
    )

    try:
        result = run(apt=apt, start_at=args.start_at, stop_after=args.stop_after)
    except (CommandError, OSError, ValueError):
        logger.exception("apt-buildpack failed")
        return 1

    logger.info("Ran steps: %s", ", ".join(result.ran_steps))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
