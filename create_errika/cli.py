"""Command-line entry point.

Usage::

    create-errika my-app          # direct mode, pnpm + react defaults
    create-errika .               # scaffold into the current directory
    create-errika                 # interactive mode
    python -m create_errika my-app --skip-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from create_errika.config import DEFAULT_TEMPLATE_ROOT, ScaffoldConfig
from create_errika.errors import ScaffoldError, SetupCancelled
from create_errika.installer import Installer
from create_errika.pipeline import CreatePipeline
from create_errika.reporter import Reporter
from create_errika.resolver import PromptProvider, build_strategy

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-errika",
        description="Create a new Errika monorepo (HTTP + WebSocket backends and a frontend app).",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project directory name, or '.' for the current directory. "
        "Omit to answer the questions interactively.",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Copy the template but do not run '<package manager> install'",
    )
    parser.add_argument(
        "--template-dir",
        default=None,
        help=f"Template root to copy from (default: {DEFAULT_TEMPLATE_ROOT})",
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    provider: PromptProvider | None = None,
    installer: Installer | None = None,
    reporter: Reporter | None = None,
) -> int:
    """Run the tool and return the process exit code.

    *provider*, *installer* and *reporter* exist so the whole flow can be
    driven without a terminal or a real package manager.
    """
    args = build_parser().parse_args(argv)
    reporter = reporter or Reporter()

    config_kwargs: dict = {"install": not args.skip_install}
    if args.template_dir:
        config_kwargs["template_root"] = Path(args.template_dir)
    config = ScaffoldConfig(**config_kwargs)

    try:
        options = build_strategy(args.name, config, provider=provider, reporter=reporter).resolve()
        pipeline = CreatePipeline(config, reporter=reporter, installer=installer)
        asyncio.run(pipeline.run(options))
    except SetupCancelled:
        reporter.cancelled()
        return EXIT_OK
    except ScaffoldError as exc:
        reporter.failure(exc)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
