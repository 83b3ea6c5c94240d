# bedrock_pack_exporter/cli/export.py
"""
Click commands for exporting a project.

Settings can be passed the way the project's build scripts pass them, as one
JSON argument (``'{"target": "mcworld", "exclude": ["RP"]}'``), as options,
or both; options win over the JSON.
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple

import click

from bedrock_pack_exporter.api import export as export_api
from bedrock_pack_exporter.cli.utils import handle_api_response as _handle_api_response
from bedrock_pack_exporter.config.const import VALID_TARGETS
from bedrock_pack_exporter.utils.general import _INFO_PREFIX

logger = logging.getLogger(__name__)


def build_settings(
    settings_json: Optional[str],
    name: Optional[str],
    target: Optional[str],
    exclude: Tuple[str, ...],
) -> Dict[str, Any]:
    """Merges the JSON argument and the command-line options into one dict."""
    data: Dict[str, Any] = {}
    if settings_json:
        try:
            loaded = json.loads(settings_json)
        except ValueError as e:
            raise click.BadParameter(
                f"not valid JSON: {e}", param_hint="SETTINGS"
            ) from e
        if not isinstance(loaded, dict):
            raise click.BadParameter("must be a JSON object", param_hint="SETTINGS")
        data.update(loaded)

    if name is not None:
        data["name"] = name
    if target is not None:
        data["target"] = target
    if exclude:
        data["exclude"] = list(exclude)
    return data


def _export_options(func):
    func = click.option(
        "-o",
        "--output-dir",
        type=click.Path(file_okay=False),
        default=None,
        help="Write the archive here instead of ../../build.",
    )(func)
    func = click.option(
        "-w",
        "--working-dir",
        type=click.Path(exists=True, file_okay=False),
        default=None,
        help="Directory to export from (config.json is two levels up). Defaults to the current directory.",
    )(func)
    func = click.option(
        "-x",
        "--exclude",
        multiple=True,
        help="Pack to leave out (BP or RP). Use this option multiple times to exclude both.",
    )(func)
    func = click.option(
        "-t",
        "--target",
        default=None,
        help=f"Archive type: {', '.join(VALID_TARGETS)}.",
    )(func)
    func = click.option(
        "-n", "--name", default=None, help="Archive name, used verbatim."
    )(func)
    func = click.argument("settings_json", metavar="[SETTINGS]", required=False)(func)
    return func


@click.command("export")
@_export_options
def export_command(
    settings_json: Optional[str],
    name: Optional[str],
    target: Optional[str],
    exclude: Tuple[str, ...],
    working_dir: Optional[str],
    output_dir: Optional[str],
):
    """Exports the project's packs as an .mcaddon, .mcworld or .mctemplate."""
    settings = build_settings(settings_json, name, target, exclude)
    logger.debug(f"CLI: Calling export_api.export_api with {settings}")

    response = export_api.export_api(
        settings, working_dir=working_dir, output_dir=output_dir
    )
    _handle_api_response(response, "Export complete.")


@click.command("plan")
@_export_options
def plan_command(
    settings_json: Optional[str],
    name: Optional[str],
    target: Optional[str],
    exclude: Tuple[str, ...],
    working_dir: Optional[str],
    output_dir: Optional[str],
):
    """Shows what an export would produce without writing anything."""
    settings = build_settings(settings_json, name, target, exclude)
    logger.debug(f"CLI: Calling export_api.plan_export_api with {settings}")

    response = export_api.plan_export_api(
        settings, working_dir=working_dir, output_dir=output_dir
    )
    _handle_api_response(response)

    plan = response["plan"]
    click.echo(f"{_INFO_PREFIX}Name:           {plan['name']}")
    click.echo(f"{_INFO_PREFIX}Target:         {plan['target']}")
    click.echo(
        f"{_INFO_PREFIX}Packs:          {', '.join(plan['included_packs']) or 'none'}"
    )
    if plan["excluded_packs"]:
        click.echo(f"{_INFO_PREFIX}Excluded:       {', '.join(plan['excluded_packs'])}")
    if plan["world_template"]:
        click.echo(f"{_INFO_PREFIX}World template: {plan['world_template']}")
    click.echo(f"{_INFO_PREFIX}Output:         {plan['output_file']}")
