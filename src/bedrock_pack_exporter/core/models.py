# bedrock_pack_exporter/core/models.py
"""
Value types passed through the export pipeline.

``ExportSettings`` and ``ProjectConfig`` are the two inputs, ``ExportPlan`` is
what the resolver derives from them, and ``PackIdentity`` is what the
manifest reader extracts from a pack for world exports.
"""

from __future__ import annotations

import enum
import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from bedrock_pack_exporter.config.const import (
    ADDON_TARGETS,
    BEHAVIOR_PACK,
    RESOURCE_PACK,
    TEMPLATE_TARGETS,
    VALID_PACK_CODES,
    WORLD_TARGETS,
)
from bedrock_pack_exporter.error import ConfigurationError


class TargetKind(enum.Enum):
    ADDON = "mcaddon"
    WORLD = "mcworld"
    WORLD_TEMPLATE = "mctemplate"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def is_world(self) -> bool:
        return self is not TargetKind.ADDON

    @classmethod
    def from_token(cls, token: str) -> Optional["TargetKind"]:
        """Maps a target token (already lower-cased) to its kind, or None."""
        if token in ADDON_TARGETS:
            return cls.ADDON
        if token in WORLD_TARGETS:
            return cls.WORLD
        if token in TEMPLATE_TARGETS:
            return cls.WORLD_TEMPLATE
        return None


@dataclass(frozen=True)
class ExportSettings:
    target: str
    name: Optional[str] = None
    exclude: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExportSettings":
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                ConfigurationError.INVALID_SETTINGS,
                "Export settings must be a JSON object.",
            )
        exclude = data.get("exclude") or ()
        if isinstance(exclude, str):
            exclude = (exclude,)
        elif not isinstance(exclude, (list, tuple)):
            exclude = ()
        target = data.get("target")
        name = data.get("name")
        return cls(
            target=target if isinstance(target, str) else "",
            name=name if isinstance(name, str) else None,
            exclude=tuple(e for e in exclude if isinstance(e, str)),
        )

    @classmethod
    def from_json(cls, text: str) -> "ExportSettings":
        try:
            data = json.loads(text)
        except ValueError as e:
            raise ConfigurationError(
                ConfigurationError.INVALID_SETTINGS,
                f"Export settings are not valid JSON: {e}",
            ) from e
        return cls.from_dict(data)

    def normalized_exclusions(self) -> FrozenSet[str]:
        """Upper-cased exclusions, keeping only known pack codes."""
        return frozenset(
            code
            for code in (e.upper() for e in self.exclude)
            if code in VALID_PACK_CODES
        )


@dataclass(frozen=True)
class ProjectConfig:
    name: Optional[str] = None
    packs: Dict[str, Any] = field(default_factory=dict)

    @property
    def behavior_pack(self) -> Optional[str]:
        return self.packs.get("behaviorPack")

    @property
    def resource_pack(self) -> Optional[str]:
        return self.packs.get("resourcePack")

    @property
    def world_template(self) -> Optional[str]:
        return self.packs.get("worldTemplate")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectConfig":
        packs = data.get("packs")
        name = data.get("name")
        return cls(
            name=name if isinstance(name, str) else None,
            packs=dict(packs) if isinstance(packs, Mapping) else {},
        )


@dataclass(frozen=True)
class ExportPlan:
    name: str
    target_kind: TargetKind
    included_packs: FrozenSet[str]
    output_directory: str
    working_directory: str
    behavior_pack_path: Optional[str] = None
    resource_pack_path: Optional[str] = None
    world_template_path: Optional[str] = None

    @property
    def is_template(self) -> bool:
        return self.target_kind is TargetKind.WORLD_TEMPLATE

    @property
    def excluded_packs(self) -> FrozenSet[str]:
        return frozenset(VALID_PACK_CODES) - self.included_packs

    @property
    def output_path(self) -> str:
        return os.path.join(
            self.output_directory, f"{self.name}.{self.target_kind.extension}"
        )

    def pack_path(self, pack_code: str) -> Optional[str]:
        if pack_code == BEHAVIOR_PACK:
            return self.behavior_pack_path
        if pack_code == RESOURCE_PACK:
            return self.resource_pack_path
        raise ValueError(f"Unknown pack code: {pack_code}")

    def ordered_packs(self) -> List[str]:
        """Included pack codes in archive order (BP before RP)."""
        return [code for code in VALID_PACK_CODES if code in self.included_packs]


@dataclass(frozen=True)
class PackIdentity:
    pack_id: str
    version: Tuple[int, int, int]
