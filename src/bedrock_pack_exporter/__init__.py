# bedrock_pack_exporter/__init__.py
import logging

from bedrock_pack_exporter.config.const import get_installed_version
from bedrock_pack_exporter.core.exporter import export, plan_export
from bedrock_pack_exporter.core.models import ExportPlan, ExportSettings, TargetKind
from bedrock_pack_exporter.error import (
    ArchiveError,
    ConfigurationError,
    ExporterError,
    ManifestError,
)

logger = logging.getLogger(__name__)

__version__ = get_installed_version()

__all__ = [
    "export",
    "plan_export",
    "ExportPlan",
    "ExportSettings",
    "TargetKind",
    "ExporterError",
    "ConfigurationError",
    "ManifestError",
    "ArchiveError",
]
