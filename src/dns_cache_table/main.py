"""
DNS Cache Table Main Entry Point

This script provides the main entry point for the interactive DNS cache.
"""

import argparse
import sys
from typing import List, Optional, TextIO

import yaml

from dns_cache_table.cache import DNSCacheTable
from dns_cache_table.config.loader import ConfigLoader
from dns_cache_table.config.schema import DNSCacheConfig
from dns_cache_table.console import CacheMenu, format_statistics
from dns_cache_table.dns_logging import get_logger, log_exception, setup_logging
from dns_cache_table.records import EntryGenerator


class DNSCacheApp:
    """DNS Cache Application"""

    def __init__(
        self,
        config_path: Optional[str] = None,
        seed: Optional[int] = None,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ):
        self.config_path = config_path
        self.seed = seed
        self.input = input_stream or sys.stdin
        self.output = output_stream or sys.stdout
        self.config: Optional[DNSCacheConfig] = None
        self.table: Optional[DNSCacheTable] = None
        self.generator: Optional[EntryGenerator] = None
        self.logger = None

    def initialize(self) -> None:
        """Initialize the application"""
        try:
            self.config = ConfigLoader(self.config_path).load_config()

            setup_logging(self.config.logging)
            self.logger = get_logger("dns_cache_app")

            self.table = DNSCacheTable(table_size=self.config.cache.table_size)

            gen_config = self.config.generator
            seed = self.seed if self.seed is not None else gen_config.seed
            self.generator = EntryGenerator(
                seed=seed,
                domains=gen_config.domains,
                origin_servers=gen_config.origin_servers,
                ttl_choices=gen_config.ttl_choices,
            )

            self.logger.info(
                "DNS cache application initialized",
                table_size=self.table.table_size,
                seed=seed,
                config_file=self.config_path,
            )

        except Exception as e:
            if self.logger:
                log_exception(self.logger, "Failed to initialize DNS cache", e)
            raise

    def generate(self, count: int) -> int:
        """Pre-populate the table with synthetic entries"""
        generated = self.generator.populate(self.table, count)
        self.logger.info("Generated test entries", count=generated)
        return generated

    def print_statistics(self) -> None:
        self.output.write(format_statistics(self.table.statistics()) + "\n")

    def run_menu(self) -> None:
        """Run the interactive menu until the user exits"""
        menu = CacheMenu(
            self.table,
            generator=self.generator,
            input_stream=self.input,
            output_stream=self.output,
            default_generate_count=self.config.generator.default_count,
        )
        menu.run()
        dropped = self.table.clear()
        self.logger.info("DNS cache application shutdown complete", dropped=dropped)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DNS Cache Table")
    parser.add_argument(
        "--config", "-c", default=None, help="Configuration file path (YAML or JSON)"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for synthetic data generation"
    )
    parser.add_argument(
        "--generate",
        type=int,
        default=0,
        metavar="N",
        help="Pre-populate the cache with N synthetic entries",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print table statistics and exit instead of running the menu",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function"""
    args = build_parser().parse_args(argv)

    app = DNSCacheApp(args.config, seed=args.seed)
    try:
        app.initialize()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Failed to start DNS cache: {e}", file=sys.stderr)
        return 1

    if args.generate > 0:
        app.generate(args.generate)

    if args.stats:
        app.print_statistics()
    else:
        try:
            app.run_menu()
        except KeyboardInterrupt:
            print("\nInterrupted", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
