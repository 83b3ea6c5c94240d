import json
import logging
from types import SimpleNamespace

import pytest

from bedrock_pack_exporter.instances import reset_settings_instance
from bedrock_pack_exporter.logging import LOGGER_NAME

BP_UUID = "6f1c2a8e-0b7d-4a53-9a4e-2f0e3c1d5b01"
RP_UUID = "c3a9d6f2-7e41-4b8a-8f13-5d2b9e0a7c44"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """
    Points the application settings at a temporary config directory, with
    logs going to a temporary directory too, so tests never touch the real
    per-user folders.
    """
    config_dir = tmp_path / "app_config"
    config_dir.mkdir()
    log_dir = tmp_path / "app_logs"

    settings_file = config_dir / "bedrock_pack_exporter.json"
    settings_file.write_text(
        json.dumps({"paths": {"logs": str(log_dir)}}), encoding="utf-8"
    )

    monkeypatch.setenv("BEDROCK_PACK_EXPORTER_CONFIG_DIR", str(config_dir))
    reset_settings_instance()

    yield config_dir

    reset_settings_instance()
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()


def _write_manifest(pack_dir, uuid, version=(1, 0, 0), module_type="data"):
    manifest = {
        "format_version": 2,
        "header": {
            "name": pack_dir.name,
            "description": "test pack",
            "uuid": uuid,
            "version": list(version),
            "min_engine_version": [1, 20, 0],
        },
        "modules": [
            {
                "type": module_type,
                "uuid": "00000000-0000-0000-0000-000000000000",
                "version": list(version),
            }
        ],
    }
    (pack_dir / "manifest.json").write_text(json.dumps(manifest), encoding="utf-8")


@pytest.fixture
def project(tmp_path):
    """
    Builds a project tree laid out the way the exporter expects::

        project/
            config.json
            packs/BP, packs/RP
            world/ (db/, level.dat, levelname.txt, world_icon.jpeg, texts/, manifest.json)
            scripts/exporter/   <- working directory
    """
    root = tmp_path / "project"
    working_dir = root / "scripts" / "exporter"
    working_dir.mkdir(parents=True)

    bp = root / "packs" / "BP"
    (bp / "scripts").mkdir(parents=True)
    (bp / "scripts" / "main.js").write_text("// main", encoding="utf-8")
    (bp / "empty").mkdir()
    _write_manifest(bp, BP_UUID, (1, 0, 0), "data")

    rp = root / "packs" / "RP"
    (rp / "textures" / "blocks").mkdir(parents=True)
    (rp / "textures" / "blocks" / "stone.png").write_bytes(b"\x89PNG fake")
    _write_manifest(rp, RP_UUID, (2, 1, 3), "resources")

    world = root / "world"
    (world / "db").mkdir(parents=True)
    (world / "db" / "CURRENT").write_text("MANIFEST-000001\n", encoding="utf-8")
    (world / "db" / "000003.log").write_bytes(b"\x00" * 64)
    (world / "level.dat").write_bytes(b"\x0a\x00\x00level")
    (world / "levelname.txt").write_text("Test World", encoding="utf-8")
    (world / "world_icon.jpeg").write_bytes(b"\xff\xd8\xff fake jpeg")
    (world / "texts").mkdir()
    (world / "texts" / "en_US.lang").write_text("pack.name=Test\n", encoding="utf-8")
    (world / "texts" / "languages.json").write_text('["en_US"]', encoding="utf-8")
    _write_manifest(world, "9b0d2c3e-1111-4f2a-8c3d-0a1b2c3d4e5f", (1, 0, 0), "world_template")

    config = {
        "name": "my-map_title",
        "packs": {
            "behaviorPack": "./packs/BP",
            "resourcePack": "./packs/RP",
            "worldTemplate": "./world",
        },
    }

    def write_config(data=None, raw=None):
        path = root / "config.json"
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    write_config(config)

    return SimpleNamespace(
        root=root,
        working_dir=working_dir,
        build_dir=root / "build",
        bp=bp,
        rp=rp,
        world=world,
        config=config,
        bp_uuid=BP_UUID,
        rp_uuid=RP_UUID,
        write_config=write_config,
    )
