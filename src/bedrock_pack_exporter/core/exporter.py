# bedrock_pack_exporter/core/exporter.py
"""
Sequences an export: load config.json, resolve the plan, write the archive.
"""

import os
import logging
from typing import Optional

from bedrock_pack_exporter.config.const import MAX_COMPRESSION_LEVEL
from bedrock_pack_exporter.config.project_config import (
    get_project_config_path,
    load_project_config,
)
from bedrock_pack_exporter.core import archive as core_archive
from bedrock_pack_exporter.core import resolver as core_resolver
from bedrock_pack_exporter.core.models import ExportPlan, ExportSettings, TargetKind

logger = logging.getLogger(__name__)


def plan_export(
    settings: ExportSettings,
    working_dir: Optional[str] = None,
    output_dir: Optional[str] = None,
) -> ExportPlan:
    """
    Loads the project config and resolves the export plan without writing
    anything.

    Raises:
        ConfigurationError: If the config or settings fail validation.
    """
    working_dir = os.path.abspath(working_dir or os.getcwd())
    config = load_project_config(get_project_config_path(working_dir))
    return core_resolver.resolve(settings, config, working_dir, output_dir)


def run_plan(plan: ExportPlan, compression_level: int = MAX_COMPRESSION_LEVEL) -> str:
    """Writes the archive for an already resolved plan.

    Returns:
        str: Path of the written archive.
    """
    if plan.target_kind is TargetKind.ADDON:
        return core_archive.assemble_addon(plan, compression_level)
    if plan.target_kind in (TargetKind.WORLD, TargetKind.WORLD_TEMPLATE):
        return core_archive.assemble_world(plan, compression_level)
    # Unreachable: the resolver rejects unknown targets.
    raise RuntimeError(f"Unhandled export target kind: {plan.target_kind!r}")


def export(
    settings: ExportSettings,
    working_dir: Optional[str] = None,
    output_dir: Optional[str] = None,
    compression_level: int = MAX_COMPRESSION_LEVEL,
) -> str:
    """
    Runs a complete export.

    Args:
        settings: The caller-supplied export settings.
        working_dir: Directory the export runs from; config.json is expected
            two levels above it. Defaults to the current directory.
        output_dir: Override for the build directory.
        compression_level: Deflate level, 0-9.

    Returns:
        str: Path of the written archive.

    Raises:
        ConfigurationError: Before anything is written, if validation fails.
        ManifestError: If an included pack's manifest is unusable.
        ArchiveError: On any I/O or compression failure.
    """
    plan = plan_export(settings, working_dir, output_dir)
    return run_plan(plan, compression_level)
