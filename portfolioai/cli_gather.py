"""
CLI Phase 1: Gather user requirements.

Parses command-line arguments and returns UserConfig dataclass.
No side effects - just parsing and conversion.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import replace
from pathlib import Path
from typing import List, Mapping, Optional

from .cli_config import Command, ExtractStage, RenderStage, UserConfig
from .logging_utils import VERBOSITY_NORMAL, VERBOSITY_QUIET, VERBOSITY_VERBOSE
from .renderers import DEFAULT_TEMPLATE_ID
from .settings import ExtractionSettings


def _add_global_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--debug", action="store_true",
                        help="Verbose logs + stack traces on failure.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Show progress (-v) or per-field parser results (-vv).")
    parser.add_argument("--log-file",
                        help="Optional path to a log file. If set, all output is also written there.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolioai",
        description="Extract structured profiles from PDF/DOCX resumes and render them as portfolio sites.",
        epilog="""
Examples:
  Extract a resume to JSON (printed to stdout):
    portfolioai extract resume.pdf

  Extract several resumes into a folder:
    portfolioai extract cv1.pdf cv2.docx --target profiles/

  Render a portfolio site from a profile:
    portfolioai render profile.json --template creative \\
      --target-role "Backend Engineer" --output site/ --zip site.zip

  List the available templates:
    portfolioai templates
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_global_arguments(parser)
    sub = parser.add_subparsers(dest="command", required=True)

    p_extract = sub.add_parser("extract", help="Extract profile data from resumes to JSON.")
    p_extract.add_argument("sources", nargs="+", metavar="FILE", help="PDF or DOCX resume(s)")
    p_extract.add_argument("--output", help="Output JSON file (single input only)")
    p_extract.add_argument("--target", help="Output directory; one <name>.json per input")
    p_extract.add_argument("--max-pages", type=int, help="Maximum number of PDF pages to read")
    p_extract.add_argument("--min-text-length", type=int,
                           help="Minimum characters of text a document must yield")
    p_extract.add_argument("--strict", action="store_true",
                           help="Treat fields that were not found as failure (exit code 2).")

    p_render = sub.add_parser("render", help="Render a profile JSON as a portfolio site.")
    p_render.add_argument("profile", help="Profile JSON, as written by 'extract'")
    p_render.add_argument("--template", default=DEFAULT_TEMPLATE_ID,
                          help=f"Template id (default: {DEFAULT_TEMPLATE_ID})")
    p_render.add_argument("--target-role", help="Role to mention in the summary")
    p_render.add_argument("--output", help="Directory for index.html and styles.css")
    p_render.add_argument("--zip", help="Write a ZIP archive of the site")
    p_render.add_argument("--preview", help="Write a single HTML file with inline CSS")

    sub.add_parser("templates", help="List the available portfolio templates.")
    return parser


def _verbosity(args: argparse.Namespace) -> int:
    if args.verbose >= 2:
        return VERBOSITY_VERBOSE
    if args.verbose == 1:
        return VERBOSITY_NORMAL
    return VERBOSITY_QUIET


def _extraction_settings(args: argparse.Namespace, environ: Optional[Mapping[str, str]]) -> ExtractionSettings:
    settings = ExtractionSettings.from_env(environ if environ is not None else os.environ)
    overrides = {}
    if args.max_pages is not None:
        overrides["max_pages"] = args.max_pages
    if args.min_text_length is not None:
        overrides["min_text_length"] = args.min_text_length
    return replace(settings, **overrides) if overrides else settings


def gather_user_requirements(
    argv: Optional[List[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> UserConfig:
    """
    Phase 1: Parse command-line arguments and return user configuration.

    No side effects - just parsing and conversion to UserConfig.

    Raises:
        ValueError: If the arguments are inconsistent
    """
    args = _build_parser().parse_args(argv)
    command = Command(args.command)

    config = UserConfig(
        command=command,
        debug=args.debug,
        verbosity=_verbosity(args),
        log_file=args.log_file,
    )

    if command is Command.EXTRACT:
        if args.output and len(args.sources) > 1:
            raise ValueError("--output accepts a single input; use --target for several")
        if args.output and args.target:
            raise ValueError("Use either --output or --target, not both")
        config.strict = args.strict
        config.extract = ExtractStage(
            sources=[Path(s) for s in args.sources],
            output=Path(args.output) if args.output else None,
            target_dir=Path(args.target) if args.target else None,
            settings=_extraction_settings(args, environ),
        )
    elif command is Command.RENDER:
        config.render = RenderStage(
            profile=Path(args.profile),
            template=args.template,
            target_role=args.target_role,
            output_dir=Path(args.output) if args.output else None,
            archive=Path(args.zip) if args.zip else None,
            preview=Path(args.preview) if args.preview else None,
        )

    return config
