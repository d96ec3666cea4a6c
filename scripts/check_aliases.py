"""Report ambiguous aliases in the configured drug and gene alias tables.

Aliases claimed by several canonical names resolve to the last claimant.
Run with: uv run python scripts/check_aliases.py
"""

from rich.console import Console
from rich.table import Table

from kg_dgi.errors import AliasTableError
from kg_dgi.resolve import Domain, alias_collisions, build_index, load_alias_table

console = Console()

for domain in Domain:
    console.print(f"\n[bold blue]{domain.value} aliases[/]")
    try:
        table = load_alias_table(domain)
    except AliasTableError as e:
        console.print(f"  [yellow]{e}[/]")
        continue

    index = build_index(table)
    console.print(f"  canonical names: {len(table):,}")
    console.print(f"  alias keys:      {len(index):,}")

    collisions = alias_collisions(table)
    if not collisions:
        console.print("  [green]no ambiguous aliases[/]")
        continue

    report = Table(title=f"{len(collisions):,} ambiguous aliases")
    report.add_column("Alias")
    report.add_column("Claimed by")
    report.add_column("Resolves to")
    for key, owners in sorted(collisions.items()):
        report.add_row(key, ", ".join(owners), index.aliases[key])
    console.print(report)
