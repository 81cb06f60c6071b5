"""Command line surface: ``mr-mirror [OPTIONS] branch=downstream ...``."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from mr_mirror.core.domain.mirroring import BranchMapping
from mr_mirror.infrastructure.configuration.main_settings import Settings

USAGE = """
Usage: mr-mirror [OPTIONS] branch=downstream ...

A bot to cherry pick gitlab merge requests onto downstream branches

Options:
	--listen		listen at, default :80
	--gitlab-url		gitlab base url for gitlab api, E.g. "https://gitlab.com"
	--gitlab-token		gitlab access token for gitlab api, create via GitLab > User Settings > Access Tokens
	--logging-file		logging file, default stdout only
	--insecure		do not verify the TLS certificate of the gitlab api
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mr-mirror", usage=USAGE, add_help=False)
    parser.add_argument("--listen", default=None)
    parser.add_argument("--gitlab-url", dest="gitlab_base_url", default=None)
    parser.add_argument("--gitlab-token", default=None)
    parser.add_argument("--logging-file", default=None)
    parser.add_argument("--insecure", action="store_true")
    parser.add_argument("--help", "-h", dest="show_help", action="store_true")
    parser.add_argument("mappings", nargs="*", metavar="branch=downstream")
    return parser


def load_settings(argv: Sequence[str] | None = None) -> Settings | None:
    """Merge command line options over the environment.

    Returns None when help was requested or the GitLab URL, token or
    branch mappings are missing; the caller prints USAGE and exits.
    """
    args = build_parser().parse_args(argv)
    if args.show_help:
        return None

    overrides: dict[str, Any] = {
        key: value
        for key, value in (
            ("listen", args.listen),
            ("gitlab_base_url", args.gitlab_base_url),
            ("gitlab_token", args.gitlab_token),
            ("logging_file", args.logging_file),
        )
        if value is not None
    }
    if args.insecure:
        overrides["gitlab_verify_ssl"] = False
    if args.mappings:
        overrides["branch_mappings"] = list(args.mappings)

    settings = Settings(**overrides)
    if not settings.gitlab_base_url or not settings.gitlab_token:
        return None
    if not BranchMapping.from_pairs(settings.branch_mapping_pairs()):
        return None
    return settings


def parse_listen(listen: str) -> tuple[str, int]:
    """Split ``host:port``, ``:port`` or ``port`` into a bindable (host, port)."""
    host, _, port = listen.strip().rpartition(":")
    if not port.isdigit():
        raise ValueError(f"Invalid listen address '{listen}'")
    return host.strip("[]") or "0.0.0.0", int(port)
