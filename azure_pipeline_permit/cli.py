"""CLI entry point for running a template action."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from azure_pipeline_permit.actions.base import parse_input
from azure_pipeline_permit.actions.loading import load_action_manifest
from azure_pipeline_permit.errors import ActionError, InputConfigurationError
from azure_pipeline_permit.integrations.config import (
    IntegrationsConfig,
    load_integrations_config,
)
from azure_pipeline_permit.integrations.registry import ScmIntegrations

DEFAULT_ACTION_ID = "azure:pipeline:permit"


def load_integrations(path: Path | None) -> ScmIntegrations:
    """Build the integration registry from an optional config file."""
    if path is None:
        return ScmIntegrations.from_config(IntegrationsConfig())
    return ScmIntegrations.from_config(load_integrations_config(path))


async def run(
    action_id: str,
    input_json: str,
    integrations_config_path: Path | None = None,
    fail_on_error: bool = False,
) -> int:
    """Run a single action and return exit code."""
    log = logging.getLogger("azure_pipeline_permit")

    try:
        log.info("Loading action: %s", action_id)
        manifest = load_action_manifest(action_id)

        integrations = load_integrations(integrations_config_path)

        try:
            input_data = json.loads(input_json)
        except json.JSONDecodeError as e:
            raise InputConfigurationError(f"Action input is not valid JSON: {e}") from e
        if not isinstance(input_data, dict):
            raise InputConfigurationError("Action input must be a JSON object")

        action_input = parse_input(manifest.input_cls, input_data)

        async with manifest.create(
            integrations, fail_on_error=fail_on_error
        ) as action:
            await action.execute(action_input)
    except ActionError as e:
        log.error("Action %s failed: %s", action_id, e)
        return 1

    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Run an Azure DevOps template action")
    parser.add_argument(
        "--action",
        default=DEFAULT_ACTION_ID,
        help=f"Action id (default: {DEFAULT_ACTION_ID})",
    )
    parser.add_argument(
        "--input",
        required=True,
        help="JSON object with the action input",
    )
    parser.add_argument(
        "--integrations-config",
        type=Path,
        default=None,
        help="Path to a YAML file with the integrations config",
    )
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit non-zero when Azure DevOps rejects the change",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            action_id=args.action,
            input_json=args.input,
            integrations_config_path=args.integrations_config,
            fail_on_error=args.fail_on_error,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
