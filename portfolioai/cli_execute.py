"""
CLI Phase 2: Execute the requested command.

Runs extraction, rendering or template listing with the paths and settings
gathered into UserConfig, and returns the process exit code.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .cli_config import Command, ExtractStage, RenderStage, UserConfig
from .errors import ExtractionError
from .logging_utils import LOG, fmt_issues
from .pipeline import extract_profile_sync, placeholder_fields
from .renderers import list_templates, render_portfolio
from .shared import ProfileRecord
from .site_bundle import build_preview_document, build_site_archive, write_site


def get_status_icon(ok: bool, has_warns: bool) -> str:
    if not ok:
        return "❌"
    return "⚠️ " if has_warns else "🟢"


def _write_json(data: dict, out: Optional[Path]) -> None:
    payload = json.dumps(data, ensure_ascii=False, indent=2)
    if out is None:
        sys.stdout.write(payload + "\n")
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(payload + "\n", encoding="utf-8")


def _output_for(stage: ExtractStage, source: Path) -> Optional[Path]:
    if stage.output is not None:
        return stage.output
    if stage.target_dir is not None:
        return stage.target_dir / f"{source.stem}.json"
    return None


def extract_single(source: Path, stage: ExtractStage) -> Tuple[bool, List[str], List[str]]:
    """
    Extract one resume and write its profile JSON.

    Returns:
        (ok, errors, warnings); warnings name the fields left as placeholders
    """
    try:
        profile = extract_profile_sync(source.read_bytes(), source.name, stage.settings)
    except ExtractionError as e:
        return False, [f"{e.message} {e.advice}"], []
    except OSError as e:
        return False, [f"cannot read {source}: {e.strerror or e}"], []

    _write_json(profile.as_dict(), _output_for(stage, source))
    return True, [], placeholder_fields(profile)


def execute_extract(config: UserConfig) -> int:
    stage = config.extract
    fully_ok = partial_ok = failed = 0
    had_warning = False

    for source in stage.sources:
        ok, errors, warnings = extract_single(source, stage)
        had_warning = had_warning or bool(warnings)
        LOG.info("%s %s | %s", get_status_icon(ok, bool(warnings)), source.name, fmt_issues(errors, warnings))
        if not ok:
            failed += 1
            for err in errors:
                LOG.error("%s: %s", source.name, err)
        elif warnings:
            partial_ok += 1
        else:
            fully_ok += 1

    LOG.info(
        "📊 Extract summary: %d fully successful, %d partially successful, %d failed (total %d).",
        fully_ok, partial_ok, failed, len(stage.sources),
    )

    if failed:
        return 1
    if config.strict and had_warning:
        LOG.error("Strict mode enabled: fields not found treated as failure.")
        return 2
    return 0


def execute_render(stage: RenderStage) -> int:
    data = json.loads(stage.profile.read_text(encoding="utf-8"))
    profile = ProfileRecord.from_dict(data)
    site = render_portfolio(profile, stage.template, stage.target_role)

    wrote_any = False
    if stage.output_dir is not None:
        write_site(site, stage.output_dir)
        wrote_any = True
    if stage.archive is not None:
        stage.archive.parent.mkdir(parents=True, exist_ok=True)
        stage.archive.write_bytes(build_site_archive(site))
        LOG.info("Wrote portfolio archive to %s", stage.archive)
        wrote_any = True
    if stage.preview is not None:
        stage.preview.parent.mkdir(parents=True, exist_ok=True)
        stage.preview.write_text(build_preview_document(site), encoding="utf-8")
        LOG.info("Wrote portfolio preview to %s", stage.preview)
        wrote_any = True

    if not wrote_any:
        sys.stdout.write(build_preview_document(site))
    return 0


def execute_templates() -> int:
    for t in list_templates():
        sys.stdout.write(f"{t['id']:<10} {t['name']:<22} {t['description']}\n")
    return 0


def execute_command(config: UserConfig) -> int:
    """Dispatch to the command in `config`; returns the exit code."""
    if config.command is Command.EXTRACT:
        return execute_extract(config)
    if config.command is Command.RENDER:
        return execute_render(config.render)
    return execute_templates()
