"""Command that writes the evolution manifest for CI."""

from __future__ import annotations

import argparse
from pathlib import Path

import yaml

from hexen.upgrade_store import default_bci_upgrade

DEFAULT_MANIFEST = "evolution_manifest.yaml"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Write the bioscale evolution manifest.")
    parser.add_argument("--ci-manifest", default=DEFAULT_MANIFEST, help="output YAML path")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Write a YAML manifest naming the default upgrade; return the exit status."""
    args = _parser().parse_args(argv)
    manifest = {"upgrade": default_bci_upgrade().id}
    Path(args.ci_manifest).write_text(
        yaml.safe_dump(manifest, sort_keys=False), encoding="utf-8"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())