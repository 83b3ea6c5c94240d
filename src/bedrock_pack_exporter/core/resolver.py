# bedrock_pack_exporter/core/resolver.py
"""
Turns the caller's export settings and the project config into an ExportPlan.

Validation runs in a fixed order and stops at the first failure, so the same
broken input always reports the same error. Nothing here writes to disk: a
plan that fails to resolve leaves no artifacts behind.
"""

import os
import logging
from typing import Optional

from bedrock_pack_exporter.config.const import (
    BEHAVIOR_PACK,
    OUTPUT_DIR_RELPATH,
    RESOURCE_PACK,
    VALID_PACK_CODES,
)
from bedrock_pack_exporter.core.models import (
    ExportPlan,
    ExportSettings,
    ProjectConfig,
    TargetKind,
)
from bedrock_pack_exporter.core.paths import locate_config_path
from bedrock_pack_exporter.error import ConfigurationError
from bedrock_pack_exporter.utils.general import string_to_title

logger = logging.getLogger(__name__)

_PACK_CONFIG_KEYS = {
    BEHAVIOR_PACK: "behaviorPack",
    RESOURCE_PACK: "resourcePack",
}


def resolve_name(settings: ExportSettings, config: ProjectConfig) -> str:
    """Picks the export name: settings verbatim, else the config name titled."""
    if settings.name:
        return settings.name
    if config.name:
        return string_to_title(config.name)
    raise ConfigurationError(
        ConfigurationError.NO_NAME, "No name defined in settings or config.json."
    )


def resolve_target(settings: ExportSettings) -> TargetKind:
    target_kind = TargetKind.from_token((settings.target or "").lower())
    if target_kind is None:
        raise ConfigurationError(
            ConfigurationError.INVALID_TARGET,
            f"No valid export target defined (got '{settings.target}').",
        )
    return target_kind


def resolve(
    settings: ExportSettings,
    config: Optional[ProjectConfig],
    working_dir: str,
    output_dir: Optional[str] = None,
) -> ExportPlan:
    """
    Validates the inputs and builds the export plan.

    Checks, in order (first failure wins): project config present, a name,
    a recognised target, the world template path (world targets only), each
    pack path, and finally that an addon has at least one pack.

    Args:
        settings: The caller-supplied export settings.
        config: The loaded project config, or None if it could not be loaded.
        working_dir: Directory config paths are interpreted from.
        output_dir: Where the archive goes. Defaults to ``../../build``
            relative to ``working_dir``.

    Returns:
        ExportPlan: The validated, immutable plan.

    Raises:
        ConfigurationError: With the ``code`` of the first failed check.
    """
    if config is None:
        raise ConfigurationError(
            ConfigurationError.NO_CONFIG, "No valid config.json file detected."
        )

    name = resolve_name(settings, config)
    target_kind = resolve_target(settings)
    logger.debug(f"Resolving export '{name}' as {target_kind.extension}.")

    world_template_path = None
    if target_kind.is_world:
        world_template_path = locate_config_path(config.world_template, working_dir)
        if world_template_path is None:
            raise ConfigurationError(
                ConfigurationError.INVALID_WORLD_TEMPLATE_PATH,
                "No valid worldTemplate path defined.",
            )

    requested_exclusions = settings.normalized_exclusions()
    exclusions = set(requested_exclusions)
    pack_paths = {}

    for pack_code in VALID_PACK_CODES:
        config_key = _PACK_CONFIG_KEYS[pack_code]
        raw_path = config.packs.get(config_key)

        if not raw_path:
            if pack_code not in exclusions:
                logger.info(f"No {config_key} path configured; excluding {pack_code}.")
            exclusions.add(pack_code)
            continue

        location = locate_config_path(raw_path, working_dir)
        if location is None and pack_code not in requested_exclusions:
            raise ConfigurationError(
                ConfigurationError.INVALID_PACK_PATH,
                f"No valid {config_key} path defined.",
            )
        pack_paths[pack_code] = location

    if (
        BEHAVIOR_PACK in exclusions
        and RESOURCE_PACK in exclusions
        and target_kind is TargetKind.ADDON
    ):
        raise ConfigurationError(
            ConfigurationError.NOTHING_TO_EXPORT, "No packs to export."
        )

    included = frozenset(code for code in VALID_PACK_CODES if code not in exclusions)

    if output_dir is None:
        output_dir = os.path.join(working_dir, OUTPUT_DIR_RELPATH)

    plan = ExportPlan(
        name=name,
        target_kind=target_kind,
        included_packs=included,
        output_directory=os.path.normpath(output_dir),
        working_directory=working_dir,
        behavior_pack_path=(
            pack_paths.get(BEHAVIOR_PACK) if BEHAVIOR_PACK in included else None
        ),
        resource_pack_path=(
            pack_paths.get(RESOURCE_PACK) if RESOURCE_PACK in included else None
        ),
        world_template_path=world_template_path,
    )
    logger.info(
        f"Resolved export plan: name='{plan.name}', target={plan.target_kind.extension}, "
        f"packs={plan.ordered_packs()}"
    )
    return plan
