import os

import pytest

from bedrock_pack_exporter.core.models import (
    ExportPlan,
    ExportSettings,
    ProjectConfig,
    TargetKind,
)
from bedrock_pack_exporter.error import ConfigurationError


class TestTargetKind:
    @pytest.mark.parametrize(
        "token, kind",
        [
            ("mcaddon", TargetKind.ADDON),
            ("mcworld", TargetKind.WORLD),
            ("world", TargetKind.WORLD),
            ("mctemplate", TargetKind.WORLD_TEMPLATE),
            ("template", TargetKind.WORLD_TEMPLATE),
        ],
    )
    def test_from_token(self, token, kind):
        assert TargetKind.from_token(token) is kind

    def test_from_token_unknown(self):
        assert TargetKind.from_token("zip") is None

    def test_is_world(self):
        assert not TargetKind.ADDON.is_world
        assert TargetKind.WORLD.is_world
        assert TargetKind.WORLD_TEMPLATE.is_world


class TestExportSettings:
    def test_from_dict(self):
        settings = ExportSettings.from_dict(
            {"name": "Pack", "target": "mcaddon", "exclude": ["RP"]}
        )
        assert settings == ExportSettings(target="mcaddon", name="Pack", exclude=("RP",))

    def test_from_dict_single_string_exclusion(self):
        assert ExportSettings.from_dict({"target": "x", "exclude": "bp"}).exclude == ("bp",)

    def test_from_dict_drops_non_string_values(self):
        settings = ExportSettings.from_dict({"target": 3, "name": [], "exclude": ["BP", 1]})
        assert settings.target == ""
        assert settings.name is None
        assert settings.exclude == ("BP",)

    @pytest.mark.parametrize("exclude", [5, 1.5, True, {"BP": 1}, None, ""])
    def test_from_dict_ignores_unusable_exclude(self, exclude):
        settings = ExportSettings.from_dict({"target": "mcaddon", "exclude": exclude})
        assert settings.exclude == ()

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ExportSettings.from_dict(["mcaddon"])
        assert exc_info.value.code == ConfigurationError.INVALID_SETTINGS

    def test_from_json(self):
        settings = ExportSettings.from_json('{"target": "mcworld", "exclude": ["RP"]}')
        assert settings.target == "mcworld"
        assert settings.exclude == ("RP",)

    def test_from_json_invalid(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ExportSettings.from_json("{not json")
        assert exc_info.value.code == ConfigurationError.INVALID_SETTINGS

    def test_normalized_exclusions_upper_cases_and_filters(self):
        settings = ExportSettings(target="mcaddon", exclude=("bp", "Rp", "xx"))
        assert settings.normalized_exclusions() == frozenset({"BP", "RP"})


class TestProjectConfig:
    def test_from_dict(self):
        config = ProjectConfig.from_dict(
            {"name": "map", "packs": {"behaviorPack": "./BP", "worldTemplate": "./W"}}
        )
        assert config.name == "map"
        assert config.behavior_pack == "./BP"
        assert config.resource_pack is None
        assert config.world_template == "./W"

    def test_from_dict_without_packs(self):
        config = ProjectConfig.from_dict({"name": "map"})
        assert config.packs == {}
        assert config.behavior_pack is None


class TestExportPlan:
    def _plan(self, included, target_kind=TargetKind.ADDON):
        return ExportPlan(
            name="My Pack",
            target_kind=target_kind,
            included_packs=frozenset(included),
            output_directory=os.path.join("out", "build"),
            working_directory="work",
            behavior_pack_path="bp" if "BP" in included else None,
            resource_pack_path="rp" if "RP" in included else None,
        )

    def test_output_path(self):
        plan = self._plan({"BP"}, TargetKind.WORLD_TEMPLATE)
        assert plan.output_path == os.path.join("out", "build", "My Pack.mctemplate")
        assert plan.is_template

    def test_ordered_packs_puts_bp_first(self):
        assert self._plan({"RP", "BP"}).ordered_packs() == ["BP", "RP"]

    def test_excluded_packs(self):
        assert self._plan({"RP"}).excluded_packs == frozenset({"BP"})

    def test_pack_path(self):
        plan = self._plan({"BP", "RP"})
        assert plan.pack_path("BP") == "bp"
        assert plan.pack_path("RP") == "rp"
        with pytest.raises(ValueError):
            plan.pack_path("XX")
