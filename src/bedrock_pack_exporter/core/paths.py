# bedrock_pack_exporter/core/paths.py
"""
Resolution of the pack paths written in a project's config.json.

Paths in config.json are written relative to the project root, usually as
``./packs/BP``. The exporter runs two directories below that root, so a
``./`` prefix has to be rewritten to climb out of the working directory
before anything can be checked on disk.
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def normalize_config_path(filepath: str, sep: str = os.sep) -> str:
    """Normalizes a config path into one usable from the working directory.

    * forward slashes become ``sep``,
    * a leading ``.<sep>`` becomes ``..<sep>..<sep>``,
    * one trailing ``sep`` is stripped.

    ``sep`` is a parameter so the rule can be exercised for any platform.

    >>> normalize_config_path("./packs/BP/", sep="/")
    '../../packs/BP'
    """
    filepath = filepath.replace("/", sep)

    if filepath.startswith("." + sep):
        filepath = ".." + sep + "." + filepath
    if filepath.endswith(sep):
        filepath = filepath[:-1]

    return filepath


def locate_config_path(filepath: Optional[str], working_dir: str) -> Optional[str]:
    """Returns the on-disk location of a config path, or None if it is unusable.

    None is returned for a missing, empty or non-string value and for a path
    that does not exist once normalized and joined to ``working_dir``.
    """
    if not filepath or not isinstance(filepath, str):
        return None

    normalized = normalize_config_path(filepath)
    location = os.path.normpath(os.path.join(working_dir, normalized))

    if not os.path.exists(location):
        logger.debug(f"Config path '{filepath}' not found at '{location}'.")
        return None

    return location
