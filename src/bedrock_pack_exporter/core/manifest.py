# bedrock_pack_exporter/core/manifest.py
"""
Reads pack identities from manifest.json and builds the pack header files a
world archive needs.

A world activates its packs through ``world_behavior_packs.json`` and
``world_resource_packs.json``, each a list of ``{"pack_id", "version"}``
entries. An exported world embeds exactly one pack of each kind, so each
header is a single-element list.
"""

import os
import json
import logging
from typing import Any, Dict, List

from bedrock_pack_exporter.config.const import MANIFEST_FILE
from bedrock_pack_exporter.core.models import PackIdentity
from bedrock_pack_exporter.error import ManifestError

logger = logging.getLogger(__name__)


def read_identity(pack_root: str) -> PackIdentity:
    """
    Extracts the UUID and version from ``<pack_root>/manifest.json``.

    Args:
        pack_root: The pack's source directory.

    Returns:
        PackIdentity: The pack's id and ``(major, minor, patch)`` version.

    Raises:
        ManifestError: If the manifest is missing, unreadable, not valid JSON,
            or lacks a string ``header.uuid`` or a three-integer
            ``header.version``.
    """
    manifest_file = os.path.join(pack_root, MANIFEST_FILE)
    logger.debug(f"Reading pack manifest: {manifest_file}")

    if not os.path.isfile(manifest_file):
        raise ManifestError(manifest_file, "file not found")

    try:
        with open(manifest_file, "r", encoding="utf-8") as f:
            manifest_data = json.load(f)
    except ValueError as e:
        raise ManifestError(manifest_file, f"invalid JSON ({e})") from e
    except OSError as e:
        raise ManifestError(manifest_file, f"cannot read file ({e})") from e

    if not isinstance(manifest_data, dict):
        raise ManifestError(manifest_file, "content is not a JSON object")

    header = manifest_data.get("header")
    if not isinstance(header, dict):
        raise ManifestError(manifest_file, "missing or invalid 'header' object")

    uuid_val = header.get("uuid")
    version_val = header.get("version")

    if not (uuid_val and isinstance(uuid_val, str)):
        raise ManifestError(manifest_file, f"missing or invalid header.uuid: {uuid_val!r}")
    if not (
        isinstance(version_val, list)
        and len(version_val) == 3
        # bool is an int subclass but never a valid version component
        and all(isinstance(v, int) and not isinstance(v, bool) for v in version_val)
    ):
        raise ManifestError(
            manifest_file, f"missing or invalid header.version: {version_val!r}"
        )

    identity = PackIdentity(pack_id=uuid_val, version=tuple(version_val))
    logger.debug(
        f"Extracted manifest identity: UUID='{identity.pack_id}', Version='{list(identity.version)}'"
    )
    return identity


def build_header(identity: PackIdentity) -> List[Dict[str, Any]]:
    """Builds the single-entry pack header list for a world archive."""
    return [{"pack_id": identity.pack_id, "version": list(identity.version)}]


def write_header_file(identity: PackIdentity, header_path: str) -> str:
    """
    Serializes a pack's header to ``header_path``.

    Raises:
        OSError: If the file cannot be written. The archive assembler turns
            this into an ArchiveError.
    """
    header = build_header(identity)
    with open(header_path, "w", encoding="utf-8") as f:
        json.dump(header, f)
    logger.debug(f"Wrote pack header '{os.path.basename(header_path)}': {header}")
    return header_path
