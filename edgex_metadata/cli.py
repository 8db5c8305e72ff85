"""Thin CLI wrapper for edgex_metadata.

This module provides the command-line interface using Typer.
All business logic is delegated to core modules.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console

from edgex_metadata import __version__
from edgex_metadata.client.metadata import MetadataClient
from edgex_metadata.config import get_settings, print_settings_json
from edgex_metadata.errors import ErrorSignal
from edgex_metadata.schema import EdgexModel

app = typer.Typer(
    name="edgex-metadata",
    help="EdgeX Metadata Client - query and manage core-metadata entities",
    no_args_is_help=True,
)
console = Console()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"edgex-metadata version {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _client() -> MetadataClient:
    return MetadataClient.from_settings(get_settings())


def _fail(error: ErrorSignal) -> NoReturn:
    console.print(f"[red]Error {error.code}: {error.reason}[/red]")
    raise typer.Exit(code=1)


def _print_model(model: EdgexModel, json_output: bool) -> None:
    data = model.model_dump(mode="json", by_alias=True, exclude_none=True)
    if json_output:
        console.print(json.dumps(data, indent=2))
    else:
        for key, value in data.items():
            console.print(f"  {key}: {value}")


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """EdgeX Metadata Client - query and manage core-metadata entities."""
    configure_logging(get_settings().log_level)


@app.command()
def config(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show effective configuration."""
    settings = get_settings()
    if json_output:
        console.print(print_settings_json(settings))
    else:
        profiles_dir_display = (
            str(settings.profiles_dir) if settings.profiles_dir else "(not set)"
        )
        console.print("[bold]Effective Configuration:[/bold]")
        console.print()
        console.print("[bold]core-metadata:[/bold]")
        console.print(f"  Host:                {settings.metadata_host}")
        console.print(f"  Port:                {settings.metadata_port}")
        console.print(f"  Request timeout:     {settings.request_timeout}")
        console.print()
        console.print("[bold]Operational:[/bold]")
        console.print(f"  Profiles directory:  {profiles_dir_display}")
        console.print(f"  Log level:           {settings.log_level}")


@app.command()
def ping() -> None:
    """Check that core-metadata is reachable."""
    with _client() as client:
        alive = client.ping()
    if alive:
        console.print("[green]core-metadata is alive[/green]")
    else:
        console.print("[red]core-metadata is not responding[/red]")
        raise typer.Exit(code=1)


profiles_app = typer.Typer(help="Manage device profiles")
app.add_typer(profiles_app, name="profiles")


@profiles_app.command("get")
def profiles_get(
    name: Annotated[str, typer.Argument(help="Profile name")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Fetch and validate a device profile."""
    from edgex_metadata.profiles.io import profile_to_yaml_string

    with _client() as client:
        result = client.get_deviceprofile(name)
    if not result.ok or result.value is None:
        _fail(result.error)

    if json_output:
        console.print(
            result.value.model_dump_json(indent=2, by_alias=True, exclude_none=True)
        )
    else:
        console.print(profile_to_yaml_string(result.value))


@profiles_app.command("validate")
def profiles_validate(
    path: Annotated[str, typer.Argument(help="Path to a profile file")],
) -> None:
    """Check the value types and transforms of a local profile file."""
    import yaml

    from edgex_metadata.profiles.io import load_profile
    from edgex_metadata.profiles.validator import validate_profile

    file_path = Path(path)
    if not file_path.exists():
        console.print(f"[red]Path not found: {path}[/red]")
        raise typer.Exit(code=1)

    try:
        profile = load_profile(file_path)
    except (OSError, yaml.YAMLError, ValueError) as e:
        console.print(f"[red]Unable to read profile {path}: {e}[/red]")
        raise typer.Exit(code=1) from None

    if validate_profile(profile):
        console.print(f"[green]Profile {profile.name} is valid[/green]")
    else:
        console.print(f"[red]Profile {profile.name} is invalid[/red]")
        raise typer.Exit(code=1)


@profiles_app.command("upload")
def profiles_upload(
    directory: Annotated[
        str | None,
        typer.Argument(help="Profiles directory (defaults to configured one)"),
    ] = None,
) -> None:
    """Upload profile files that core-metadata does not hold yet."""
    from edgex_metadata.profiles.upload import upload_profiles

    settings = get_settings()
    target = Path(directory) if directory else settings.profiles_dir
    if target is None:
        console.print("[red]No profiles directory given or configured[/red]")
        raise typer.Exit(code=1)

    with MetadataClient.from_settings(settings) as client:
        summary = upload_profiles(client, target)

    console.print("[bold]Upload results:[/bold]")
    console.print(f"  [green]Uploaded: {summary.uploaded}[/green]")
    console.print(f"  Skipped: {summary.skipped}")
    if summary.failed > 0:
        console.print(f"  [red]Failed: {summary.failed}[/red]")
        for r in summary.results:
            if r.error:
                console.print(f"    - {r.path.name}: {r.error}")
    if not summary.error.ok:
        _fail(summary.error)


devices_app = typer.Typer(help="Manage devices")
app.add_typer(devices_app, name="devices")


@devices_app.command("list")
def devices_list(
    service: Annotated[str, typer.Argument(help="Device service name")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """List the devices owned by a device service."""
    with _client() as client:
        result = client.get_devices(service)
    if not result.ok:
        _fail(result.error)

    devices = result.value or []
    if json_output:
        output = [
            d.model_dump(mode="json", by_alias=True, exclude_none=True) for d in devices
        ]
        console.print(json.dumps(output, indent=2))
        return

    if not devices:
        console.print("[yellow]No devices found[/yellow]")
        return
    console.print(f"[bold]Found {len(devices)} device(s):[/bold]")
    console.print()
    for d in devices:
        console.print(f"  [green]{d.name}[/green]")
        console.print(f"    Id: {d.id}")
        if d.profile is not None:
            console.print(f"    Profile: {d.profile.name}")
        if d.admin_state is not None and d.operating_state is not None:
            console.print(
                f"    State: {d.admin_state.value}/{d.operating_state.value}"
            )
        console.print()


@devices_app.command("show")
def devices_show(
    name: Annotated[str, typer.Argument(help="Device name")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show a device."""
    with _client() as client:
        result = client.get_device_byname(name)
    if not result.ok:
        _fail(result.error)
    if result.value is None:
        console.print(f"[red]Unable to decode device {name}[/red]")
        raise typer.Exit(code=1)
    _print_model(result.value, json_output)


@devices_app.command("delete")
def devices_delete(
    name: Annotated[str, typer.Argument(help="Device name")],
) -> None:
    """Delete a device by name."""
    with _client() as client:
        error = client.delete_device_byname(name)
    if not error.ok:
        _fail(error)
    console.print(f"[green]Deleted device {name}[/green]")


def _set_state(device_id: str, label: str, admin: bool, flag: bool) -> None:
    with _client() as client:
        if admin:
            error = client.set_device_adminstate(device_id, locked=flag)
        else:
            error = client.set_device_opstate(device_id, enabled=flag)
    if not error.ok:
        _fail(error)
    console.print(f"[green]Device {device_id} {label}[/green]")


@devices_app.command("lock")
def devices_lock(device_id: Annotated[str, typer.Argument(help="Device id")]) -> None:
    """Set a device's admin state to LOCKED."""
    _set_state(device_id, "locked", admin=True, flag=True)


@devices_app.command("unlock")
def devices_unlock(device_id: Annotated[str, typer.Argument(help="Device id")]) -> None:
    """Set a device's admin state to UNLOCKED."""
    _set_state(device_id, "unlocked", admin=True, flag=False)


@devices_app.command("enable")
def devices_enable(device_id: Annotated[str, typer.Argument(help="Device id")]) -> None:
    """Set a device's operating state to enabled."""
    _set_state(device_id, "enabled", admin=False, flag=True)


@devices_app.command("disable")
def devices_disable(
    device_id: Annotated[str, typer.Argument(help="Device id")],
) -> None:
    """Set a device's operating state to disabled."""
    _set_state(device_id, "disabled", admin=False, flag=False)


addressables_app = typer.Typer(help="Manage addressables")
app.add_typer(addressables_app, name="addressables")


@addressables_app.command("show")
def addressables_show(
    name: Annotated[str, typer.Argument(help="Addressable name")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show an addressable."""
    with _client() as client:
        result = client.get_addressable(name)
    if not result.ok:
        _fail(result.error)
    if result.value is None:
        console.print(f"[yellow]Addressable not found: {name}[/yellow]")
        raise typer.Exit(code=1)
    _print_model(result.value, json_output)


if __name__ == "__main__":
    app()
