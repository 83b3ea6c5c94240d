# bedrock_pack_exporter/core/archive.py
"""
Builds the .mcaddon / .mcworld / .mctemplate archive for an ExportPlan.

The archive is written to a temporary file next to its destination and moved
into place only once the zip has been closed, so a failed export never leaves
a half-written archive behind. Directories are walked in sorted order, which
keeps the entry list identical between runs over the same sources.
"""

import os
import logging
import tempfile
import zipfile
import zlib
from contextlib import contextmanager
from typing import Dict, Iterator, List

from bedrock_pack_exporter.config.const import (
    BEHAVIOR_PACK,
    MANIFEST_FILE,
    MAX_COMPRESSION_LEVEL,
    RESOURCE_PACK,
    TEMPLATE_TEXTS_DIR,
    WORLD_BEHAVIOR_PACKS_JSON,
    WORLD_DB_DIR,
    WORLD_RESOURCE_PACKS_JSON,
    WORLD_ROOT_FILES,
)
from bedrock_pack_exporter.core import manifest as core_manifest
from bedrock_pack_exporter.core.models import ExportPlan
from bedrock_pack_exporter.error import ArchiveError, ConfigurationError

logger = logging.getLogger(__name__)

# Pack code -> (folder inside a world archive, header file name)
WORLD_PACK_LAYOUT = {
    BEHAVIOR_PACK: ("behavior_packs", WORLD_BEHAVIOR_PACKS_JSON),
    RESOURCE_PACK: ("resource_packs", WORLD_RESOURCE_PACKS_JSON),
}

_ARCHIVE_ERRORS = (OSError, zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error)


def check_compression_level(compression_level) -> int:
    """Returns `compression_level` if it is a deflate level from 0 to 9.

    Raises:
        ConfigurationError: (code ``invalid_settings``) for anything else.
    """
    if (
        isinstance(compression_level, bool)
        or not isinstance(compression_level, int)
        or not 0 <= compression_level <= MAX_COMPRESSION_LEVEL
    ):
        raise ConfigurationError(
            ConfigurationError.INVALID_SETTINGS,
            f"Invalid export.compression_level {compression_level!r}: "
            f"expected an integer from 0 to {MAX_COMPRESSION_LEVEL}.",
        )
    return compression_level


def _ensure_output_directory(output_dir: str) -> None:
    try:
        os.makedirs(output_dir, exist_ok=True)
        logger.debug(f"Ensured output directory exists: {output_dir}")
    except OSError as e:
        raise ArchiveError(
            f"Cannot create output directory '{output_dir}': {e}", output_dir
        ) from e


@contextmanager
def _open_archive(output_path: str, compression_level: int) -> Iterator[zipfile.ZipFile]:
    """Yields a ZipFile that lands on `output_path` only if the block succeeds."""
    output_dir = os.path.dirname(output_path) or "."
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=output_dir, prefix=".export-", suffix=".tmp"
        )
        os.close(fd)
    except OSError as e:
        raise ArchiveError(
            f"Cannot create archive file in '{output_dir}': {e}", output_path
        ) from e

    try:
        with zipfile.ZipFile(
            tmp_path,
            "w",
            compression=zipfile.ZIP_DEFLATED,
            compresslevel=compression_level,
        ) as zf:
            yield zf
        os.replace(tmp_path, output_path)
    except _ARCHIVE_ERRORS as e:
        _discard(tmp_path)
        raise ArchiveError(
            f"Failed to write archive '{output_path}': {e}", output_path
        ) from e
    except BaseException:
        _discard(tmp_path)
        raise


def _discard(path: str) -> None:
    try:
        os.remove(path)
        logger.debug(f"Removed incomplete archive file '{path}'.")
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove incomplete archive file '{path}': {e}")


def add_directory(zf: zipfile.ZipFile, source_dir: str, arc_prefix: str) -> int:
    """
    Copies a directory tree into the archive under `arc_prefix`.

    Directory entries are written explicitly, so empty directories survive.
    Symlinked directories are followed and copied like real ones.

    Returns:
        int: The number of file entries written.

    Raises:
        ArchiveError: If `source_dir` is not a directory, or a symlink inside
            it points back at one of its own parent directories.
    """
    if not os.path.isdir(source_dir):
        raise ArchiveError(f"Source directory not found: '{source_dir}'", source_dir)

    arc_prefix = arc_prefix.rstrip("/")
    zf.write(source_dir, arc_prefix + "/")
    file_count = 0

    for root, dirs, files in os.walk(source_dir, followlinks=True):
        dirs.sort()
        real_root = os.path.realpath(root)
        rel_root = os.path.relpath(root, source_dir)
        arc_root = arc_prefix if rel_root == "." else f"{arc_prefix}/{rel_root.replace(os.sep, '/')}"

        for d in dirs:
            dir_path = os.path.join(root, d)
            if os.path.islink(dir_path) and _is_within(real_root, os.path.realpath(dir_path)):
                raise ArchiveError(
                    f"Symlink loop at '{dir_path}': it points to a parent directory.",
                    dir_path,
                )
            zf.write(dir_path, f"{arc_root}/{d}/")
        for f in sorted(files):
            zf.write(os.path.join(root, f), f"{arc_root}/{f}")
            file_count += 1

    logger.debug(f"Added '{source_dir}' as '{arc_prefix}/' ({file_count} files).")
    return file_count


def _is_within(path: str, directory: str) -> bool:
    try:
        return os.path.commonpath([path, directory]) == directory
    except ValueError:
        # different drives
        return False


def add_file(zf: zipfile.ZipFile, source_file: str, arcname: str) -> None:
    """Copies a single file into the archive as `arcname`."""
    if not os.path.isfile(source_file):
        raise ArchiveError(f"Source file not found: '{source_file}'", source_file)
    zf.write(source_file, arcname)


def assemble_addon(plan: ExportPlan, compression_level: int = MAX_COMPRESSION_LEVEL) -> str:
    """
    Writes ``<name>.mcaddon``: each included pack under ``"<name> <code>/"``.

    Returns:
        str: Path of the written archive.
    """
    output_path = plan.output_path
    check_compression_level(compression_level)
    _ensure_output_directory(plan.output_directory)
    logger.info(f"Exporting addon '{plan.name}' to '{output_path}'...")

    with _open_archive(output_path, compression_level) as zf:
        for pack_code in plan.ordered_packs():
            add_directory(zf, plan.pack_path(pack_code), f"{plan.name} {pack_code}")

    logger.info(f"Addon exported successfully: {output_path}")
    return output_path


def _write_pack_headers(plan: ExportPlan) -> Dict[str, str]:
    """Writes a header file for every included pack.

    Returns:
        dict: pack code -> path of the header file written for it.
    """
    headers = {}
    try:
        for pack_code in plan.ordered_packs():
            identity = core_manifest.read_identity(plan.pack_path(pack_code))
            _, header_name = WORLD_PACK_LAYOUT[pack_code]
            header_path = os.path.join(plan.working_directory, header_name)
            try:
                core_manifest.write_header_file(identity, header_path)
            except OSError as e:
                raise ArchiveError(
                    f"Cannot write pack header '{header_path}': {e}", header_path
                ) from e
            headers[pack_code] = header_path
    except BaseException:
        _remove_header_files(headers.values())
        raise
    return headers


def _remove_header_files(paths) -> None:
    for path in paths:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove transient header file '{path}': {e}")


def _world_entries(plan: ExportPlan) -> List[str]:
    """World-template root files that every world archive carries."""
    return list(WORLD_ROOT_FILES) + ([MANIFEST_FILE] if plan.is_template else [])


def assemble_world(plan: ExportPlan, compression_level: int = MAX_COMPRESSION_LEVEL) -> str:
    """
    Writes ``<name>.mcworld`` or ``<name>.mctemplate``.

    Layout: each included pack under ``behavior_packs/<name> BP/`` or
    ``resource_packs/<name> RP/`` with its header JSON at the root; the world
    template's ``db/``, ``level.dat``, ``levelname.txt`` and
    ``world_icon.jpeg``; and for templates also ``texts/`` and
    ``manifest.json``.

    Returns:
        str: Path of the written archive.

    Raises:
        ConfigurationError: If `compression_level` is not 0-9.
        ManifestError: If an included pack's manifest cannot be read.
        ArchiveError: On any I/O or compression failure.
    """
    output_path = plan.output_path
    world_dir = plan.world_template_path
    check_compression_level(compression_level)
    logger.info(f"Exporting world '{plan.name}' to '{output_path}'...")

    headers = _write_pack_headers(plan)
    try:
        _ensure_output_directory(plan.output_directory)
        with _open_archive(output_path, compression_level) as zf:
            for pack_code in plan.ordered_packs():
                pack_folder, header_name = WORLD_PACK_LAYOUT[pack_code]
                add_directory(
                    zf,
                    plan.pack_path(pack_code),
                    f"{pack_folder}/{plan.name} {pack_code}",
                )
                add_file(zf, headers[pack_code], header_name)

            add_directory(zf, os.path.join(world_dir, WORLD_DB_DIR), WORLD_DB_DIR)
            if plan.is_template:
                add_directory(
                    zf, os.path.join(world_dir, TEMPLATE_TEXTS_DIR), TEMPLATE_TEXTS_DIR
                )
            for filename in _world_entries(plan):
                add_file(zf, os.path.join(world_dir, filename), filename)
    finally:
        _remove_header_files(headers.values())

    logger.info(f"World exported successfully: {output_path}")
    return output_path

