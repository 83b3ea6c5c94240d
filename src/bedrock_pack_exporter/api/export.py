# bedrock_pack_exporter/api/export.py
"""
Provides API-level functions for exporting packs and worlds.

These wrap the core pipeline and report the outcome as a dictionary with a
``status`` of ``"success"`` or ``"error"``, so front-ends never have to catch
pipeline exceptions themselves.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from bedrock_pack_exporter.core import exporter as core_exporter
from bedrock_pack_exporter.core.models import ExportSettings
from bedrock_pack_exporter.error import (
    ArchiveError,
    ConfigurationError,
    ExporterError,
    ManifestError,
)
from bedrock_pack_exporter.instances import get_settings_instance

logger = logging.getLogger(__name__)

SettingsInput = Union[ExportSettings, Mapping[str, Any], str]


def _coerce_settings(settings: SettingsInput) -> ExportSettings:
    if isinstance(settings, ExportSettings):
        return settings
    if isinstance(settings, str):
        return ExportSettings.from_json(settings)
    return ExportSettings.from_dict(settings)


def _error_response(e: ExporterError) -> Dict[str, Any]:
    response = {"status": "error", "message": str(e)}
    if isinstance(e, ConfigurationError):
        response["error_type"] = "configuration"
        response["code"] = e.code
    elif isinstance(e, ManifestError):
        response["error_type"] = "manifest"
        response["manifest"] = e.manifest_path
    elif isinstance(e, ArchiveError):
        response["error_type"] = "archive"
    return response


def plan_export_api(
    settings: SettingsInput,
    working_dir: Optional[str] = None,
    output_dir: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Resolves what an export would produce, without writing anything.

    Returns:
        A dictionary with ``status`` and, on success, a ``plan`` description
        (name, target, included/excluded packs, source paths, output file).
    """
    try:
        export_settings = _coerce_settings(settings)
        plan = core_exporter.plan_export(export_settings, working_dir, output_dir)
        return {
            "status": "success",
            "plan": {
                "name": plan.name,
                "target": plan.target_kind.extension,
                "included_packs": plan.ordered_packs(),
                "excluded_packs": sorted(plan.excluded_packs),
                "behavior_pack": plan.behavior_pack_path,
                "resource_pack": plan.resource_pack_path,
                "world_template": plan.world_template_path,
                "output_file": plan.output_path,
            },
        }
    except ExporterError as e:
        logger.warning(f"API: Export plan rejected: {e}")
        return _error_response(e)
    except Exception as e:
        logger.error(f"API: Unexpected error resolving export plan: {e}", exc_info=True)
        return {"status": "error", "message": f"Unexpected error resolving export: {e}"}


def export_api(
    settings: SettingsInput,
    working_dir: Optional[str] = None,
    output_dir: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Exports the project's packs (and world template) into a single archive.

    Args:
        settings: ExportSettings, or a dict / JSON string with ``name``,
            ``target`` and ``exclude``.
        working_dir: Directory to run the export from. Defaults to the
            current directory.
        output_dir: Override for the build directory.

    Returns:
        A dictionary with ``status``; on success also ``export_file`` and
        ``message``; on error ``message`` plus ``error_type`` (and ``code``
        for configuration errors).
    """
    logger.info("API: Initiating export.")
    try:
        export_settings = _coerce_settings(settings)
        compression_level = get_settings_instance().get("export.compression_level")
        export_file = core_exporter.export(
            export_settings,
            working_dir=working_dir,
            output_dir=output_dir,
            compression_level=compression_level,
        )
        logger.info(f"API: Export written to '{export_file}'.")
        return {
            "status": "success",
            "export_file": export_file,
            "message": f"Exported successfully to {export_file}.",
        }
    except ConfigurationError as e:
        logger.warning(f"API: Export configuration invalid: {e}")
        return _error_response(e)
    except (ManifestError, ArchiveError) as e:
        logger.error(f"API: Export failed: {e}", exc_info=True)
        return _error_response(e)
    except Exception as e:
        logger.error(f"API: Unexpected error during export: {e}", exc_info=True)
        return {"status": "error", "message": f"Unexpected error during export: {e}"}
