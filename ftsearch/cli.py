# ftsearch/cli.py
import asyncio
import json
import sys
from pathlib import Path
from typing import Annotated

import cyclopts
import httpx

from ftsearch import facets as facet_specs
from ftsearch.client import SearchClient
from ftsearch.errors import SearchError
from ftsearch.export import get_exporter
from ftsearch.facets import FacetSpec
from ftsearch.options import SearchOptions, build_request
from ftsearch.query.nodes import QueryString

app = cyclopts.App(
    name="ftsearch",
    help="Compose full-text search requests and run them against a search service.",
)


def _parse_facets(values: list[str]) -> dict[str, FacetSpec]:
    """Parse NAME=FIELD[:SIZE] term facet arguments."""
    parsed: dict[str, FacetSpec] = {}
    for value in values:
        name, sep, target = value.partition("=")
        if not sep or not name or not target:
            raise ValueError(f"Invalid facet '{value}', expected NAME=FIELD[:SIZE]")
        field, _, size = target.partition(":")
        parsed[name] = facet_specs.term(field, int(size) if size else None)
    return parsed


def _build_options(
    limit: int | None, skip: int | None, facet: list[str], sort: list[str], explain: bool
) -> SearchOptions:
    return SearchOptions(
        limit=limit,
        skip=skip,
        explain=explain,
        sort=sort or None,
        facets=_parse_facets(facet),
    )


LimitOpt = Annotated[
    int | None, cyclopts.Parameter(name=["--limit", "-n"], help="Maximum number of rows")
]
SkipOpt = Annotated[int | None, cyclopts.Parameter(name="--skip", help="Rows to skip")]
FacetOpt = Annotated[
    list[str],
    cyclopts.Parameter(name=["--facet"], help="Term facet as NAME=FIELD[:SIZE] (repeatable)"),
]
SortOpt = Annotated[
    list[str],
    cyclopts.Parameter(name=["--sort", "-s"], help="Sort field, '-' prefix for descending"),
]
ExplainOpt = Annotated[
    bool, cyclopts.Parameter(name="--explain", help="Ask for score explanations")
]


@app.command(name="request")
def request(
    query: Annotated[str, cyclopts.Parameter(help="Query string")],
    limit: LimitOpt = None,
    skip: SkipOpt = None,
    facet: FacetOpt = [],
    sort: SortOpt = [],
    explain: ExplainOpt = False,
) -> None:
    """Print the request body for a query-string search."""
    try:
        options = _build_options(limit, skip, facet, sort, explain)
        body = build_request(QueryString(query), options)
    except (ValueError, SearchError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(body, indent=2))


@app.command(name="query")
def query(
    index: Annotated[str, cyclopts.Parameter(help="Search index name")],
    query: Annotated[str, cyclopts.Parameter(help="Query string")],
    url: Annotated[
        str | None,
        cyclopts.Parameter(name=["--url", "-u"], help="Service URL (default: $FTSEARCH_URL)"),
    ] = None,
    limit: LimitOpt = 10,
    skip: SkipOpt = None,
    facet: FacetOpt = [],
    sort: SortOpt = [],
    explain: ExplainOpt = False,
    format: Annotated[
        str, cyclopts.Parameter(name=["--format", "-f"], help="Output format: tree, json")
    ] = "tree",
    output: Annotated[
        Path | None,
        cyclopts.Parameter(name=["--output", "-o"], help="Output file path"),
    ] = None,
) -> None:
    """Run a query-string search against an index."""
    try:
        exporter = get_exporter(format)
        options = _build_options(limit, skip, facet, sort, explain)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    async def run():
        async with SearchClient(url) as client:
            return await client.search(index, query, options)

    try:
        result = asyncio.run(run())
    except (httpx.HTTPError, SearchError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if output:
        exporter.export(result, output)
        print(f"Exported {len(result.rows)} rows to {output}")
    else:
        print(exporter.to_string(result))

    for partition, message in result.meta_data.errors.items():
        print(f"[WARN] {partition}: {message}", file=sys.stderr)
    metrics = result.meta_data.metrics
    print(
        f"\nTotal: {metrics.total_rows} rows ({metrics.took} ms, "
        f"{metrics.success_partition_count}/{metrics.total_partition_count} partitions)",
        file=sys.stderr,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
