"""
Command-line interface for kg_dgi.

Commands:
- resolve: Resolve drug or gene names to DGIdb canonical names
- drug-genes: Gene interactions for a comma-separated drug list
- gene-drugs: Drug interactions for a comma-separated gene list
"""

import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from kg_dgi.config import settings
from kg_dgi.errors import AliasTableError
from kg_dgi.log import configure_logging
from kg_dgi.resolve import Domain, get_registry, resolve_name
from kg_dgi.tools.interactions import InteractionResult

app = typer.Typer(
    name="kg-dgi",
    help="Drug-Gene Interaction lookup CLI",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Drug-Gene Interaction lookups against DGIdb."""
    configure_logging(logging.DEBUG if verbose else settings.log_level)


def _emit(result: InteractionResult) -> None:
    if result.is_error:
        err_console.print(f"[bold red]{result.error}[/]")
        raise typer.Exit(code=1)
    console.print_json(json.dumps(result.to_dict()))


@app.command()
def resolve(
    names: Annotated[list[str], typer.Argument(help="Names to resolve")],
    domain: Domain = typer.Option(Domain.DRUG, "--domain", "-d", help="Alias table to use"),
    threshold: float | None = typer.Option(
        None, "--threshold", "-t", help="Minimum similarity (defaults to settings)"
    ),
):
    """Resolve free-text names to canonical names."""
    threshold = settings.similarity_threshold if threshold is None else threshold
    try:
        index = get_registry().get(domain)
    except AliasTableError as e:
        err_console.print(f"[bold red]{e}[/]")
        raise typer.Exit(code=1) from e

    table = Table(title=f"{domain.value} names")
    table.add_column("Input")
    table.add_column("Resolved")
    for name in names:
        canonical = resolve_name(name, index, threshold)
        table.add_row(name, canonical or f"[yellow]{name} (unresolved)[/]")
    console.print(table)


@app.command("drug-genes")
def drug_genes(
    drugs: Annotated[str, typer.Argument(help="Comma-separated drug names")],
):
    """Gene interactions for one or more drugs."""
    from kg_dgi.tools import get_gene_interactions_for_drugs

    try:
        result = get_gene_interactions_for_drugs(drugs)
    except AliasTableError as e:
        err_console.print(f"[bold red]{e}[/]")
        raise typer.Exit(code=1) from e
    _emit(result)


@app.command("gene-drugs")
def gene_drugs(
    genes: Annotated[str, typer.Argument(help="Comma-separated gene symbols")],
):
    """Drug interactions for one or more genes."""
    from kg_dgi.tools import get_drug_interactions_for_genes

    try:
        result = get_drug_interactions_for_genes(genes)
    except AliasTableError as e:
        err_console.print(f"[bold red]{e}[/]")
        raise typer.Exit(code=1) from e
    _emit(result)


if __name__ == "__main__":
    app()
