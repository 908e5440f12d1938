"""Typer CLI for editing cabinet quotes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from cabinet_quotes.application import QuoteEditSession, ServiceFactory
from cabinet_quotes.application.factory import STORE_ENV_VAR
from cabinet_quotes.contracts import QuoteFileError, QuoteNotFoundError, QuoteSaveError
from cabinet_quotes.domain import AdjustmentType, ClientField, Quote
from cabinet_quotes.infrastructure import QuoteDetailFormatter, QuoteSummaryFormatter

app = typer.Typer(
    name="cabinet-quotes",
    help="Compose cabinet quotes from spaces and priced items.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    store: Annotated[
        Path | None,
        typer.Option(
            "--store",
            "-s",
            envvar=STORE_ENV_VAR,
            help="Directory holding quote JSON files (default: ./quotes)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Compose cabinet quotes from spaces and priced items."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    ctx.obj = ServiceFactory(store_directory=store)


def _factory(ctx: typer.Context) -> ServiceFactory:
    if not isinstance(ctx.obj, ServiceFactory):
        ctx.obj = ServiceFactory()
    return ctx.obj


def _open_session(ctx: typer.Context, quote_id: str) -> QuoteEditSession:
    try:
        return _factory(ctx).open_session(quote_id)
    except QuoteNotFoundError:
        typer.echo(f"Error: Quote not found: {quote_id}", err=True)
        raise typer.Exit(code=1)
    except QuoteFileError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _echo_summary(session: QuoteEditSession) -> None:
    typer.echo(QuoteSummaryFormatter().format(session.summary()))


def _run_edit(
    ctx: typer.Context,
    quote_id: str,
    edit: Callable[[QuoteEditSession], None],
) -> QuoteEditSession:
    """Open a session, apply one edit, save and print the summary."""
    session = _open_session(ctx, quote_id)
    try:
        edit(session)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    result = session.save()
    if not result.saved:
        typer.echo(f"Error: {result.message}", err=True)
        raise typer.Exit(code=1)

    _echo_summary(session)
    return session


@app.command()
def new(
    ctx: typer.Context,
    client_name: Annotated[str, typer.Option("--client-name", "-n", help="Client name")] = "",
    email: Annotated[str, typer.Option("--email", help="Client email")] = "",
    phone: Annotated[str, typer.Option("--phone", help="Client phone")] = "",
    project_name: Annotated[str, typer.Option("--project", "-p", help="Project name")] = "",
    address: Annotated[str, typer.Option("--address", help="Installation address")] = "",
) -> None:
    """Create an empty quote and print its id."""
    repository = _factory(ctx).get_repository()
    try:
        quote = repository.create(
            Quote(
                client_name=client_name,
                email=email,
                phone=phone,
                project_name=project_name,
                installation_address=address,
            )
        )
    except QuoteSaveError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Created quote: {quote.id}")


@app.command()
def show(
    ctx: typer.Context,
    quote_id: Annotated[str, typer.Argument(help="Quote id")],
) -> None:
    """Show client details, spaces and the price summary of a quote."""
    session = _open_session(ctx, quote_id)
    typer.echo(QuoteDetailFormatter().format(session.quote))
    typer.echo()
    _echo_summary(session)


@app.command(name="set-client")
def set_client(
    ctx: typer.Context,
    quote_id: Annotated[str, typer.Argument(help="Quote id")],
    field: Annotated[ClientField, typer.Argument(help="Client field to change")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Change one client detail."""
    _run_edit(ctx, quote_id, lambda s: s.update_client_field(field, value))


@app.command(name="add-space")
def add_space(
    ctx: typer.Context,
    quote_id: Annotated[str, typer.Argument(help="Quote id")],
    name: Annotated[
        str | None, typer.Option("--name", help="Name instead of 'Space #<n>'")
    ] = None,
) -> None:
    """Append an empty space to a quote."""

    def edit(session: QuoteEditSession) -> None:
        space = session.add_space().spaces[-1]
        if name:
            session.rename_space(space.id, name)
        typer.echo(f"Added space: {space.id}")

    _run_edit(ctx, quote_id, edit)


@app.command(name="rename-space")
def rename_space(
    ctx: typer.Context,
    quote_id: Annotated[str, typer.Argument(help="Quote id")],
    space_id: Annotated[str, typer.Argument(help="Space id")],
    name: Annotated[str, typer.Argument(help="New space name")],
) -> None:
    """Rename a space."""
    _run_edit(ctx, quote_id, lambda s: s.rename_space(space_id, name))


@app.command(name="delete-space")
def delete_space(
    ctx: typer.Context,
    quote_id: Annotated[str, typer.Argument(help="Quote id")],
    space_id: Annotated[str, typer.Argument(help="Space id")],
) -> None:
    """Delete a space and all of its items."""
    _run_edit(ctx, quote_id, lambda s: s.delete_space(space_id))


@app.command(name="add-item")
def add_item(
    ctx: typer.Context,
    quote_id: Annotated[str, typer.Argument(help="Quote id")],
    space_id: Annotated[str, typer.Argument(help="Space id")],
) -> None:
    """Append an item with default dimensions and price to a space."""

    def edit(session: QuoteEditSession) -> None:
        before = session.quote.find_space(space_id)
        space = session.add_item(space_id).find_space(space_id)
        if before is not None and space is not None:
            typer.echo(f"Added item: {space.items[-1].id}")

    _run_edit(ctx, quote_id, edit)


@app.command(name="update-item")
def update_item(
    ctx: typer.Context,
    quote_id: Annotated[str, typer.Argument(help="Quote id")],
    space_id: Annotated[str, typer.Argument(help="Space id")],
    item_id: Annotated[str, typer.Argument(help="Item id")],
    width: Annotated[float | None, typer.Option("--width", "-w", help="Item width")] = None,
    height: Annotated[float | None, typer.Option("--height", "-h", help="Item height")] = None,
    depth: Annotated[float | None, typer.Option("--depth", "-d", help="Item depth")] = None,
    price: Annotated[float | None, typer.Option("--price", help="Item price")] = None,
) -> None:
    """Change dimensions or price of an item."""
    changes = {
        name: value
        for name, value in (
            ("width", width),
            ("height", height),
            ("depth", depth),
            ("price", price),
        )
        if value is not None
    }
    if not changes:
        typer.echo("Error: Nothing to update. Use --width, --height, --depth or --price.", err=True)
        raise typer.Exit(code=1)
    _run_edit(ctx, quote_id, lambda s: s.update_item(space_id, item_id, changes))


@app.command(name="delete-item")
def delete_item(
    ctx: typer.Context,
    quote_id: Annotated[str, typer.Argument(help="Quote id")],
    space_id: Annotated[str, typer.Argument(help="Space id")],
    item_id: Annotated[str, typer.Argument(help="Item id")],
) -> None:
    """Delete an item from a space."""
    _run_edit(ctx, quote_id, lambda s: s.delete_item(space_id, item_id))


@app.command()
def adjust(
    ctx: typer.Context,
    quote_id: Annotated[str, typer.Argument(help="Quote id")],
    percentage: Annotated[
        float,
        typer.Option("--percentage", "-p", min=0, max=100, help="Adjustment percentage"),
    ],
    adjustment_type: Annotated[
        AdjustmentType,
        typer.Option("--type", "-t", help="Discount or surcharge"),
    ] = AdjustmentType.DISCOUNT,
) -> None:
    """Apply a discount or surcharge, freezing the adjusted subtotal and total."""

    def edit(session: QuoteEditSession) -> None:
        session.set_adjustment_type(adjustment_type)
        session.set_adjustment_percentage(percentage)
        session.apply_adjustment()

    _run_edit(ctx, quote_id, edit)


if __name__ == "__main__":
    app()
