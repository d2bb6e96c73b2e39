#!/usr/bin/env python3
"""End-to-end example for row-spreader.

This example walks through every stage of the conversion:
1. Discovering the paths of each document and combining them into a header
2. Compiling the header into a schema forest
3. Extracting value trees and flattening them into rows
"""

from row_spreader.extract.extractor import extract
from row_spreader.generator.render import project_row, render_columns
from row_spreader.generator.tuples import generate_tuples
from row_spreader.paths.base import render_path
from row_spreader.paths.combine import CombineMode, combine_path_sets
from row_spreader.paths.discovery import discover_paths
from row_spreader.schema_tree.builder import build_schema
from row_spreader.schema_tree.nodes import format_schema
from row_spreader.tabulator import tabulate_documents

DOCUMENTS = [
    {"user": "ann", "roles": ["admin", "dev"], "address": {"city": "Oslo"}},
    {"user": "bob", "roles": ["dev"], "logins": [{"ip": "10.0.0.1"}, {"ip": "10.0.0.2"}]},
]


def run_example() -> None:
    """Run the conversion stage by stage, then in one call."""
    print("=" * 80)
    print("Row-Spreader End-to-End Example")
    print("=" * 80)

    # Step 1: discover and combine paths
    path_sets = [discover_paths(document) for document in DOCUMENTS]
    for number, paths in enumerate(path_sets, start=1):
        print(f"\nDocument {number} paths: {[render_path(path) for path in paths]}")
    header = combine_path_sets(path_sets, CombineMode.UNION)

    # Step 2: compile the schema
    schema = build_schema(header)
    print("\nSchema:")
    for name, kind in format_schema(schema):
        print(f"  {name:30} {kind}")

    # Step 3: extract and flatten each document
    columns = render_columns(header)
    print("\n" + ";".join(columns))
    for document in DOCUMENTS:
        for fragment in generate_tuples(extract(schema, document)):
            print(";".join(project_row(fragment, columns)))

    # The same conversion in one call, intersecting headers this time
    table = tabulate_documents(DOCUMENTS, combine_mode=CombineMode.INTERSECT)
    print("\nIntersect mode:")
    print(";".join(table.columns))
    for row in table.rows:
        print(";".join(row))


def main() -> None:
    """Main entry point for the example."""
    run_example()


if __name__ == "__main__":
    main()
