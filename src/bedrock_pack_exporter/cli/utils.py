# bedrock_pack_exporter/cli/utils.py
"""
Helpers shared by the click commands.
"""

import logging
from typing import Any, Dict, Optional

import click

from bedrock_pack_exporter.utils.general import _ERROR_PREFIX, _OK_PREFIX

logger = logging.getLogger(__name__)


def handle_api_response(
    response: Dict[str, Any], success_message: Optional[str] = None
) -> Dict[str, Any]:
    """
    Prints an API response and aborts the command on error.

    Args:
        response: The dictionary returned by an API function.
        success_message: Printed on success when the response carries no
            ``message`` of its own.

    Returns:
        The response, when its status is not ``"error"``.

    Raises:
        click.Abort: If the response status is ``"error"``.
    """
    logger.debug(f"API response: {response}")
    if response.get("status") == "error":
        message = response.get("message", "Unknown error.")
        click.echo(f"{_ERROR_PREFIX}{message}", err=True)
        raise click.Abort()

    message = response.get("message", success_message)
    if message:
        click.echo(f"{_OK_PREFIX}{message}")
    return response
