# bedrock_pack_exporter/error.py
"""
Defines the exception hierarchy raised by the export pipeline.

Every error the pipeline raises derives from `ExporterError`, so callers (the
API layer, the CLI) can catch one type and decide how to present it. There is
no retry anywhere: each of these is terminal for the current export.
"""

from typing import Optional


class ExporterError(Exception):
    """Base class for all bedrock-pack-exporter errors."""

    pass


class ConfigurationError(ExporterError):
    """
    Raised when the run-time settings or the persisted project config are
    missing or invalid.

    Attributes:
        code: A stable short identifier for the failed check (e.g. ``no_name``).
        message: The human-readable description.
    """

    NO_CONFIG = "no_config"
    NO_NAME = "no_name"
    INVALID_TARGET = "invalid_target"
    INVALID_WORLD_TEMPLATE_PATH = "invalid_world_template_path"
    INVALID_PACK_PATH = "invalid_pack_path"
    NOTHING_TO_EXPORT = "nothing_to_export"
    INVALID_SETTINGS = "invalid_settings"

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class ManifestError(ExporterError):
    """Raised when a pack's manifest.json is absent or malformed."""

    def __init__(self, manifest_path: str, reason: str):
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"Invalid manifest '{manifest_path}': {reason}")


class ArchiveError(ExporterError):
    """Raised on any I/O or compression failure while assembling an archive."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
