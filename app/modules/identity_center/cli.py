"""iam-idc command line interface.

Lists IAM Identity Center groups and users:

    iam-idc list-groups [SEARCH_TERM]
    iam-idc list-users
    iam-idc list-users-in-group [GROUP]

Results go to stdout; progress, notices and errors go to stderr.
"""

from contextlib import nullcontext
from enum import Enum
from typing import Callable, ContextManager, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from infrastructure.configuration import Settings, get_settings
from infrastructure.logging import bind_command_context, configure_logging, get_module_logger
from modules.identity_center.domain.errors import IdentityCenterError
from modules.identity_center.domain.models import Cancelled, Listing
from modules.identity_center.formatters import render
from modules.identity_center.selector import InteractiveSelector
from modules.identity_center.service import IdentityCenterService

logger = get_module_logger()

app = typer.Typer(
    name="iam-idc",
    help="List IAM Identity Center groups and users",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"
    table = "table"


PROFILE_OPTION = typer.Option(None, "--profile", "-p", help="AWS profile to use")
REGION_OPTION = typer.Option(None, "--region", "-r", help="AWS region to use")
STORE_OPTION = typer.Option(
    None,
    "--identity-store-id",
    "-i",
    help="Identity store ID (default: first Identity Center instance)",
)
OUTPUT_OPTION = typer.Option(
    None, "--output", "-o", case_sensitive=False, help="Output format [default: text]"
)
ALIGN_OPTION = typer.Option(
    None, "--format/--no-format", help="Align text output into columns [default: format]"
)
CONCURRENCY_OPTION = typer.Option(
    None, "--max-concurrency", min=1, help="Maximum concurrent API calls [default: 30]"
)
DEBUG_OPTION = typer.Option(False, "--debug", "-d", help="Show debug logs")


def _load_settings(
    profile: Optional[str],
    region: Optional[str],
    identity_store_id: Optional[str],
    output: Optional[OutputFormat],
    column_align: Optional[bool],
    max_concurrency: Optional[int],
    debug: bool,
) -> Settings:
    try:
        base = get_settings()
    except ValidationError as exc:
        err_console.print(f"Error: invalid configuration\n{exc}", style="bold red", markup=False)
        raise typer.Exit(code=1) from exc

    return base.with_overrides(
        profile=profile,
        region=region,
        identity_store_id=identity_store_id,
        output_format=output.value if output else None,
        column_align=column_align,
        max_concurrency=max_concurrency,
        log_level="DEBUG" if debug else None,
    )


def _progress(message: str, debug: bool) -> ContextManager:
    # debug output shows log lines instead of a spinner
    if debug or not err_console.is_terminal:
        return nullcontext()
    return err_console.status(message, spinner="dots")


def _warn(message: str) -> None:
    err_console.print(f"Warning: {message}", style="yellow", markup=False, highlight=False)


def _run(
    command: str,
    settings: Settings,
    debug: bool,
    action: Callable[[IdentityCenterService], Optional[Listing]],
) -> None:
    configure_logging(log_level=settings.LOG_LEVEL, log_format=settings.LOG_FORMAT)

    with bind_command_context(command=command, region=settings.aws.AWS_REGION):
        logger.debug("command_started")
        try:
            service = IdentityCenterService(settings)
            listing = action(service)
        except IdentityCenterError as exc:
            logger.error("command_failed", error=str(exc), error_type=type(exc).__name__)
            err_console.print(f"Error: {exc}", style="bold red", markup=False, highlight=False)
            raise typer.Exit(code=1) from exc

        if listing is None:
            logger.info("command_cancelled")
            return

        for notice in listing.notices:
            _warn(notice)
        if listing.partial is not None and debug:
            _warn(str(listing.partial))

        render(
            listing,
            output_format=settings.directory.output_format,
            column_align=settings.directory.column_align,
            console=console,
        )
        logger.debug("command_completed", total=listing.total)


@app.command("list-groups")
def list_groups(
    search_term: Optional[str] = typer.Argument(
        None, help="Only groups whose name contains this text (case-insensitive)"
    ),
    profile: Optional[str] = PROFILE_OPTION,
    region: Optional[str] = REGION_OPTION,
    identity_store_id: Optional[str] = STORE_OPTION,
    output: Optional[OutputFormat] = OUTPUT_OPTION,
    column_align: Optional[bool] = ALIGN_OPTION,
    max_concurrency: Optional[int] = CONCURRENCY_OPTION,
    debug: bool = DEBUG_OPTION,
):
    """List groups with their member counts."""
    settings = _load_settings(
        profile, region, identity_store_id, output, column_align, max_concurrency, debug
    )

    def action(service: IdentityCenterService) -> Listing:
        with _progress("Fetching groups and member counts...", debug):
            return service.list_groups(search_term)

    _run("list-groups", settings, debug, action)


@app.command("list-users")
def list_users(
    profile: Optional[str] = PROFILE_OPTION,
    region: Optional[str] = REGION_OPTION,
    identity_store_id: Optional[str] = STORE_OPTION,
    output: Optional[OutputFormat] = OUTPUT_OPTION,
    column_align: Optional[bool] = ALIGN_OPTION,
    max_concurrency: Optional[int] = CONCURRENCY_OPTION,
    debug: bool = DEBUG_OPTION,
):
    """List every user of the identity store."""
    settings = _load_settings(
        profile, region, identity_store_id, output, column_align, max_concurrency, debug
    )

    def action(service: IdentityCenterService) -> Listing:
        with _progress("Fetching users...", debug):
            return service.list_users()

    _run("list-users", settings, debug, action)


@app.command("list-users-in-group")
def list_users_in_group(
    group: Optional[str] = typer.Argument(
        None, help="Group ID or name; choose interactively when omitted"
    ),
    profile: Optional[str] = PROFILE_OPTION,
    region: Optional[str] = REGION_OPTION,
    identity_store_id: Optional[str] = STORE_OPTION,
    output: Optional[OutputFormat] = OUTPUT_OPTION,
    column_align: Optional[bool] = ALIGN_OPTION,
    max_concurrency: Optional[int] = CONCURRENCY_OPTION,
    debug: bool = DEBUG_OPTION,
):
    """List the users of a group."""
    settings = _load_settings(
        profile, region, identity_store_id, output, column_align, max_concurrency, debug
    )

    def action(service: IdentityCenterService) -> Optional[Listing]:
        if group:
            with _progress("Fetching group members...", debug):
                return service.list_users_in_group(group)

        with _progress("Fetching groups...", debug):
            options = service.group_options()
        selected = service.select_group(InteractiveSelector(), options)
        if isinstance(selected, Cancelled):
            _warn("No group was selected.")
            return None

        with _progress("Fetching group members...", debug):
            return service.list_group_members(selected)

    _run("list-users-in-group", settings, debug, action)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
