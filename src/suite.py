"""
suite.py
- The fixed live suite run against the PokeAPI
- Runs it once, prints the results table and exits 0 when every test passed
"""

import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional

import click

from .poke_client import DEFAULT_BASE_URL, PokeClient
from .reporting import LABEL_WIDTH, generate_html_report, print_failures, print_results, write_json_report
from .runner import TestCase, create_test, exit_code, run_tests
from .utils import load_yaml_file, same_at


CONFIG_KEYS = ("base_url", "timeout", "label_width")


def _first_name(page: Dict[str, Any]) -> Optional[str]:
    results = page.get("results")
    if not isinstance(results, list) or not results:
        return None
    return results[0].get("name")


def build_suite(client: PokeClient) -> List[TestCase]:
    async def fetch_pikachu():
        pikachu = await client.get_pokemon(25)  # id 25 is Pikachu
        return pikachu["name"].lower() == "pikachu"

    async def pokemon_matches_raw_get():
        key = 25
        a, b = await asyncio.gather(
            client.get_pokemon(key),
            client.get(client.resource_url("pokemon", key)),
        )
        return a["name"] == b.get("name")

    async def first_pokemon_is_bulbasaur():
        page = await client.get_pokemons(offset=0, limit=10)
        return _first_name(page) == "bulbasaur"

    async def pokemon_list_matches_raw_get():
        offset, limit = 0, 10
        page, raw = await asyncio.gather(
            client.get_pokemons(offset=offset, limit=limit),
            client.get(client.list_url("pokemon", offset, limit)),
        )
        return same_at(page, raw, "$.results[0].name")

    async def first_generation_is_generation_i():
        page = await client.get_generations()
        return _first_name(page) == "generation-i"

    async def first_type_is_normal():
        page = await client.get_types()
        return _first_name(page) == "normal"

    async def type_first_move_matches():
        key = 3
        a, b = await asyncio.gather(
            client.get_type(key),
            client.get(client.resource_url("type", key)),
        )
        return len(a["moves"]) > 0 and same_at(a, b, "$.moves[0].name")

    async def species_base_happiness_matches():
        key = 3
        a, b = await asyncio.gather(
            client.get_species(key),
            client.get(client.resource_url("pokemon-species", key)),
        )
        return a["base_happiness"] == b["base_happiness"]

    async def first_ability_is_stench():
        page = await client.get_abilities(offset=0, limit=5)
        return _first_name(page) == "stench"

    return [
        create_test("should fetch Pikachu", fetch_pikachu),
        create_test("should match with API result", pokemon_matches_raw_get),
        create_test("first pokemon on the list is bulbasaur", first_pokemon_is_bulbasaur),
        create_test("should match Pokémon list with API response", pokemon_list_matches_raw_get),
        create_test("first generation on the list is generation-i", first_generation_is_generation_i),
        create_test("first type on the list is normal", first_type_is_normal),
        create_test("types first move should match", type_first_move_matches),
        create_test("fetch species should match base_happiness", species_base_happiness_matches),
        create_test("first ability on the list is stench", first_ability_is_stench),
    ]


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Load the optional key->value YAML config (base_url, timeout, label_width)."""
    if not path:
        return {}
    try:
        cfg = load_yaml_file(path)
        if not isinstance(cfg, dict):
            raise ValueError("config file must be a mapping of key -> value")
        unknown = sorted(set(cfg) - set(CONFIG_KEYS))
        if unknown:
            raise ValueError(f"unknown config key(s): {', '.join(unknown)}")
        return cfg
    except Exception as e:
        raise ValueError(f"Failed to load config '{path}': {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Live test suite for the PokeAPI client.")
    parser.add_argument("--config", "-c", help="Path to key->value config YAML", default=None)
    parser.add_argument("--base-url", help=f"API base URL (default {DEFAULT_BASE_URL})", default=None)
    parser.add_argument("--report-json", help="Write a JSON report to this file (optional)", default=None)
    parser.add_argument("--report-html", help="Write an HTML report to this file (optional)", default=None)
    parser.add_argument("--verbose", "-v", action="store_true", help="Print error details of failed tests")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config)
        base_url = args.base_url or cfg.get("base_url") or DEFAULT_BASE_URL
        label_width = int(cfg.get("label_width", LABEL_WIDTH))

        results = []

        def report(run_results):
            results.extend(run_results)
            print_results(run_results, label_width=label_width)

        with PokeClient(base_url=base_url, timeout=cfg.get("timeout")) as client:
            flags = asyncio.run(run_tests(build_suite(client), reporter=report))
    except Exception as exc:
        click.echo(f"Fatal error: {exc}")
        return 3

    if args.verbose:
        print_failures(results)
    code = exit_code(flags)
    click.echo("All tests passed" if code == 0 else "Some tests failed")

    # a failed report write does not change the exit status
    if args.report_json:
        try:
            write_json_report(results, args.report_json)
            click.echo(f"Wrote JSON report to {args.report_json}")
        except Exception as e:
            click.echo(f"Failed to write report to {args.report_json}: {e}")
    if args.report_html:
        try:
            generate_html_report(results, args.report_html)
            click.echo(f"Wrote HTML report to {args.report_html}")
        except Exception as e:
            click.echo(f"Failed to write report to {args.report_html}: {e}")
    return code


def main_cli():
    sys.exit(main())


if __name__ == "__main__":
    main_cli()
