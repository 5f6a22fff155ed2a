#!/usr/bin/env python3
"""CLI interface for storefront administration.

Manages the database schema, reference data and product stock levels.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.storefront.core.services.catalog.service import ProductCatalogService
from src.storefront.core.services.catalog.seed import seed_catalog
from src.storefront.core.services.database.db_manage import DbManageService
from src.storefront.core.services.database.db_session import DbSessionService
from src.storefront.entities.core._base import is_valid_object_id
from src.storefront.entities.service.product import ProductStatus

console = Console()

app = typer.Typer(
    name="storefront",
    help="Storefront administration: database, catalog and stock",
    rich_markup_mode="rich",
)


def _format_price(cents: int) -> str:
    return f"{cents / 100:,.2f}"


@app.command(name="init-db")
def init_db(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables first"),
) -> None:
    """Create all database tables."""
    manager = DbManageService(DbSessionService())
    if drop:
        typer.confirm("Drop every table and its data?", abort=True)
        manager.drop_all()
    manager.create_all()
    console.print("[green]Database tables created[/green]")


@app.command()
def seed(
    demo: bool = typer.Option(False, "--demo", help="Also insert demo products"),
) -> None:
    """Insert the default categories, and optionally demo products."""
    database = DbSessionService()
    DbManageService(database).create_all()
    with database.session_scope() as session:
        created = seed_catalog(session, with_demo_products=demo)
    console.print(
        Panel.fit(
            f"[bold green]{created['categories']} categories, "
            f"{created['products']} products created[/bold green]",
            border_style="green",
        )
    )


@app.command()
def products(
    status: Optional[ProductStatus] = typer.Option(None, help="Only show this status"),
    all_: bool = typer.Option(False, "--all", help="Include discontinued products"),
) -> None:
    """List catalog products."""
    database = DbSessionService()
    with database.session_scope() as session:
        rows = ProductCatalogService(session).list_products(
            status=status, include_discontinued=all_
        )

    if not rows:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Stock", justify="right")
    table.add_column("Status", style="yellow")
    for product in rows:
        table.add_row(
            product.id,
            product.name,
            _format_price(product.price_cents),
            str(product.stock),
            product.status.value,
        )
    console.print(table)


@app.command(name="set-stock")
def set_stock(
    product_id: str = typer.Argument(..., help="24 character product id"),
    stock: int = typer.Argument(..., min=0, help="New stock level"),
) -> None:
    """Set a product's stock; status follows (OUT_OF_STOCK at zero)."""
    if not is_valid_object_id(product_id):
        console.print("[red]Invalid product ID[/red]")
        raise typer.Exit(1)

    database = DbSessionService()
    with database.session_scope() as session:
        product = ProductCatalogService(session).set_stock(product_id, stock)

    if product is None:
        console.print(f"[red]Product {product_id} not found[/red]")
        raise typer.Exit(1)
    console.print(
        f"[green]{product.name}[/green]: stock {product.stock}, status {product.status.value}"
    )


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind the server to"),
    port: int = typer.Option(8000, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    uvicorn.run("src.storefront.api.http.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
