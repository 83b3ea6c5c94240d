# bedrock_pack_exporter/utils/general.py
import re
import logging

from colorama import Fore, Style

logger = logging.getLogger(__name__)

_WORD_SEPARATORS_RE = re.compile(r"[-_ ]+")


def string_to_title(input_string: str) -> str:
    """Turns a project name like ``my-map_title`` into a display name.

    The input is split on runs of hyphens, underscores and spaces, and the
    words are joined with single spaces. Each word is kept exactly as written
    (``word[:1] + word[1:]``): nothing is capitalised. Exported file names
    depend on this output, so it must stay byte-for-byte stable.

    >>> string_to_title("my-map_title")
    'my map title'
    """
    words = _WORD_SEPARATORS_RE.split(input_string)
    # TODO: capitalise word[:1] once existing export names can be migrated.
    return " ".join(word[:1] + word[1:] for word in words)


# Constants for message display
_INFO_PREFIX = Fore.CYAN + "[INFO] " + Style.RESET_ALL
_OK_PREFIX = Fore.GREEN + "[OK] " + Style.RESET_ALL
_ERROR_PREFIX = Fore.RED + "[ERROR] " + Style.RESET_ALL
