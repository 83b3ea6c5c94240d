# bedrock_pack_exporter/config/const.py
from importlib.metadata import version, PackageNotFoundError

# --- Package Constants ---
package_name = "bedrock-pack-exporter"
app_name_title = package_name.replace("-", " ").title()
app_author = "bedrock-pack-exporter"
env_name = package_name.replace("-", "_").upper()

# --- Pack codes ---
BEHAVIOR_PACK = "BP"
RESOURCE_PACK = "RP"
VALID_PACK_CODES = (BEHAVIOR_PACK, RESOURCE_PACK)

# --- Export targets ---
ADDON_TARGETS = ("mcaddon", "addon")
WORLD_TARGETS = ("mcworld", "world")
TEMPLATE_TARGETS = ("mctemplate", "template")
WORLD_FAMILY_TARGETS = WORLD_TARGETS + TEMPLATE_TARGETS
VALID_TARGETS = ADDON_TARGETS + WORLD_FAMILY_TARGETS

# --- Project layout, relative to the working directory ---
PROJECT_CONFIG_RELPATH = "../../config.json"
OUTPUT_DIR_RELPATH = "../../build"

# --- World archive layout ---
WORLD_BEHAVIOR_PACKS_JSON = "world_behavior_packs.json"
WORLD_RESOURCE_PACKS_JSON = "world_resource_packs.json"
MANIFEST_FILE = "manifest.json"
WORLD_ROOT_FILES = ("level.dat", "levelname.txt", "world_icon.jpeg")
WORLD_DB_DIR = "db"
TEMPLATE_TEXTS_DIR = "texts"

MAX_COMPRESSION_LEVEL = 9


def get_installed_version() -> str:
    try:
        installed_version = version(package_name)
        return installed_version
    except PackageNotFoundError:
        installed_version = "0.0.0"
        return installed_version
