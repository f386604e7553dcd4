# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: disable=too-many-arguments,too-many-positional-arguments
import json
import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from password_provider._logging import LogLevel, get_log_level, get_logging_config
from password_provider._version import __version__
from password_provider.config import Settings, SettingsManager
from password_provider.diagnostics import Diagnostics, Severity
from password_provider.hashing import (
    CostParameters,
    HashError,
    compute_hash,
    verify_hash,
)
from password_provider.provider import PROVIDER_TYPE_NAME, PasswordProvider
from password_provider.resources import (
    LifecycleRequest,
    LifecycleVerb,
    dispatch,
)

APP_NAME = "password-provider"
APP_HELP = "Manage argon2 password hashes"

DEFAULT_SETTINGS = Settings.load()

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=False,
    invoke_without_command=True,
    add_help_option=True,
    pretty_exceptions_short=True,
)

LOG = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Shortcut for --log-level DEBUG",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Password provider command line interface."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    if debug:
        log_level = LogLevel.DEBUG
    logging.config.dictConfig(get_logging_config(log_level.value))
    LOG.debug("Log level: %s", log_level.value)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("hash")
def hash_command(
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to hash",
    ),
    salt: Optional[str] = typer.Option(
        None,
        help="The salt to use, a random one is generated if not given",
        show_default=False,
    ),
    key_len: Optional[int] = typer.Option(None, help="The key length"),
    thread: Optional[int] = typer.Option(None, help="The parallelism"),
    memory: Optional[int] = typer.Option(None, help="The memory cost in KiB"),
    iterations: Optional[int] = typer.Option(
        None, help="The number of iterations"
    ),
    algorithm: str = typer.Option(
        DEFAULT_SETTINGS.algorithm,
        help="The argon2 variant (argon2id, argon2i, argon2d)",
    ),
) -> None:
    """Hash a password and print the encoded hash."""
    settings = SettingsManager.get_settings()
    if salt is None:
        defaults = CostParameters.from_profile(settings.profile)
    else:
        defaults = CostParameters.explicit_salt_defaults()
    params = CostParameters(
        key_length=key_len if key_len is not None else defaults.key_length,
        parallelism=thread if thread is not None else defaults.parallelism,
        memory_kib=memory if memory is not None else defaults.memory_kib,
        iterations=(
            iterations if iterations is not None else defaults.iterations
        ),
    )
    try:
        encoded = compute_hash(password, salt, params, algorithm=algorithm)
    except HashError as error:
        typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error
    typer.echo(encoded)


@app.command("verify")
def verify_command(
    encoded: str = typer.Option(
        ..., "--hash", help="The encoded argon2 hash"
    ),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to check",
    ),
) -> None:
    """Check a password against an encoded hash."""
    if verify_hash(password, encoded):
        typer.echo("valid")
        return
    typer.echo("invalid")
    raise typer.Exit(code=1)


@app.command("schema")
def schema_command(
    resource_type: Optional[str] = typer.Argument(
        None, help="The resource type name, the provider schema if omitted"
    ),
) -> None:
    """Print the provider or a resource schema as json."""
    provider = PasswordProvider()
    if resource_type is None:
        name, _ = provider.metadata()
        data: Dict[str, Any] = {
            "provider": name,
            "schema": provider.schema().to_dict(),
            "resources": [
                factory().metadata(PROVIDER_TYPE_NAME)
                for factory in provider.resources()
            ],
        }
        typer.echo(json.dumps(data, indent=2))
        return
    resource, diagnostics = provider.get_resource(resource_type)
    if resource is None:
        _report(diagnostics)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(resource.schema().to_dict(), indent=2))


@app.command("apply")
def apply_command(
    resource_type: str = typer.Argument(
        ..., help="The resource type name (e.g. password_argon2)"
    ),
    verb: LifecycleVerb = typer.Argument(..., help="The lifecycle verb"),
    plan: Optional[Path] = typer.Option(
        None, help="Json file with the desired record", exists=True
    ),
    state: Optional[Path] = typer.Option(
        None, help="Json file with the prior record", exists=True
    ),
    import_id: Optional[str] = typer.Option(
        None, help="The identifier to import"
    ),
    output: Optional[Path] = typer.Option(
        None, help="Where to write the resulting state (stdout if omitted)"
    ),
    algorithm: Optional[str] = typer.Option(
        None, help="Override the configured argon2 variant"
    ),
) -> None:
    """Run one lifecycle verb over json plan/state files."""
    provider = PasswordProvider()
    config = {"algorithm": algorithm} if algorithm else {}
    configured = provider.configure(config)
    if configured.diagnostics.has_error():
        _report(configured.diagnostics)
        raise typer.Exit(code=1)
    resource, diagnostics = provider.get_resource(
        resource_type, configured.provider_data
    )
    if resource is None or diagnostics.has_error():
        _report(diagnostics)
        raise typer.Exit(code=1)
    request = LifecycleRequest(
        plan=_load_json(plan),
        state=_load_json(state),
        import_id=import_id,
    )
    response = dispatch(resource, verb, request)
    _report(response.diagnostics)
    rendered = json.dumps(response.state, indent=2)
    if output is not None:
        output.write_text(rendered + "\n", encoding="utf-8")
    else:
        typer.echo(rendered)
    if response.diagnostics.has_error():
        raise typer.Exit(code=1)


def _load_json(path: Optional[Path]) -> Optional[Dict[str, Any]]:
    """Load a json object from a file."""
    if path is None:
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        # the position only, the document may hold secrets
        raise typer.BadParameter(
            f"{path} is not valid json (line {error.lineno})"
        ) from error
    if data is not None and not isinstance(data, dict):
        raise typer.BadParameter(f"{path} must hold a json object")
    return data


def _report(diagnostics: Diagnostics) -> None:
    """Print diagnostics to stderr."""
    for item in diagnostics:
        color = (
            typer.colors.RED
            if item.severity is Severity.ERROR
            else typer.colors.YELLOW
        )
        message = f"{item.severity.value.capitalize()}: {item.summary}"
        if item.detail:
            message += f"\n  {item.detail}"
        typer.secho(message, fg=color, err=True)


if __name__ == "__main__":
    app()
