"""
Interactive Cache Menu

Numbered-option text menu over a DNSCacheTable. Input and output streams are
injectable so the menu can be driven from scripts and tests.
"""

import sys
from typing import Callable, Dict, Optional, TextIO

import structlog

from ..cache.engine import DNSCacheTable
from ..cache.entry import CacheEntry, RecordType, canonicalize_domain
from ..cache.exceptions import AllocationFailure
from ..records.builder import build_entry, parse_leading_int
from ..records.generator import EntryGenerator
from .report import format_all, format_bucket, format_entry, format_statistics

MENU_TEXT = """
=== DNS Cache System ===
1. Cache new entry (insert/update)
2. Look up domain
3. Update entry (re-enter data and overwrite)
4. Delete entry
5. Sweep entries expired by TTL
6. Show bucket
7. Show all domains
8. Show statistics
9. Generate random data
0. Exit
> """


class CacheMenu:
    """Text menu driving a cache table"""

    def __init__(
        self,
        table: DNSCacheTable,
        generator: Optional[EntryGenerator] = None,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        default_generate_count: int = 10,
    ):
        self.table = table
        self.generator = generator or EntryGenerator()
        self.input = input_stream or sys.stdin
        self.output = output_stream or sys.stdout
        self.default_generate_count = default_generate_count
        self.logger = structlog.get_logger(__name__)

        self._actions: Dict[int, Callable[[], None]] = {
            1: self.cache_entry,
            2: self.lookup_domain,
            3: self.update_entry,
            4: self.delete_entry,
            5: self.sweep_expired,
            6: self.show_bucket,
            7: self.show_all,
            8: self.show_statistics,
            9: self.generate_data,
        }

    def _write(self, text: str = "", end: str = "\n") -> None:
        self.output.write(text + end)
        self.output.flush()

    def _read_line(self) -> Optional[str]:
        """Read one line without its line ending; None at end of input"""
        line = self.input.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _ask(self, prompt: str) -> str:
        self._write(prompt, end="")
        line = self._read_line()
        return "" if line is None else line

    def _ask_domain(self, prompt: str) -> str:
        return canonicalize_domain(self._ask(prompt).strip())

    def prompt_entry(self, default_domain: str = "") -> Optional[CacheEntry]:
        """Ask for every field of an entry; None if the record type is invalid"""
        domain = self._ask("Domain: ").strip() or default_domain

        type_text = self._ask("Type (A/AAAA/CNAME/MX): ").strip() or RecordType.A.value
        try:
            rtype = RecordType.parse(type_text)
        except ValueError as e:
            self._write(str(e))
            return None

        fields = {}
        if rtype is RecordType.A:
            fields["address"] = self._ask("IPv4 (a.b.c.d): ")
        elif rtype is RecordType.AAAA:
            fields["address"] = self._ask("IPv6: ")
        elif rtype is RecordType.CNAME:
            fields["alias"] = self._ask("CNAME alias of: ")
        elif rtype is RecordType.MX:
            fields["priority"] = self._ask("MX priority (integer): ")

        fields["ttl_seconds"] = self._ask("TTL (seconds, 0 = never expires): ")
        fields["origin_server"] = self._ask("Origin server (e.g. 8.8.8.8): ")
        fields["resolution_time_ms"] = self._ask("Resolution time (ms): ")

        return build_entry(domain=domain, record_type=rtype, **fields)

    def _store(self, entry: CacheEntry) -> bool:
        try:
            self.table.upsert(entry)
        except AllocationFailure as e:
            self._write(str(e))
            return False
        return True

    def cache_entry(self) -> None:
        entry = self.prompt_entry()
        if entry is None or not self._store(entry):
            return
        self._write("Entry cached/updated.")

    def lookup_domain(self) -> None:
        domain = self._ask_domain("Domain to look up: ")
        entry = self.table.record_hit(domain)
        if entry is None:
            self._write("Not found.")
            return

        self._write(format_entry(entry))
        if self.table.is_expired(domain):
            self._write("WARNING: entry EXPIRED (TTL exceeded)")

    def update_entry(self) -> None:
        domain = self._ask_domain("Domain to update: ")
        if domain not in self.table:
            self._write("Not cached. Use option 1 to insert it.")
            return

        entry = self.prompt_entry(default_domain=domain)
        if entry is None or not self._store(entry):
            return
        self._write("Updated.")

    def delete_entry(self) -> None:
        domain = self._ask_domain("Domain to delete: ")
        if self.table.delete(domain):
            self._write("Deleted.")
        else:
            self._write("Not cached.")

    def sweep_expired(self) -> None:
        removed = self.table.sweep_expired()
        self._write(f"Removed {removed} expired entries.")

    def show_bucket(self) -> None:
        text = self._ask(f"Bucket index [0..{self.table.table_size - 1}]: ")
        index = parse_leading_int(text)
        self._write(format_bucket(self.table, index if index is not None else 0))

    def show_all(self) -> None:
        self._write(format_all(self.table))

    def show_statistics(self) -> None:
        self._write(format_statistics(self.table.statistics()))

    def generate_data(self) -> None:
        text = self._ask("How many to generate: ")
        count = parse_leading_int(text)
        if count is None or count <= 0:
            count = self.default_generate_count

        self.generator.populate(self.table, count)
        self._write(f"Generated {count} test entries.")

    def run(self) -> None:
        """Run the menu until option 0 or end of input"""
        while True:
            self._write(MENU_TEXT, end="")
            line = self._read_line()
            if line is None:
                break

            # lines without a leading number are invalid, not exit
            option = parse_leading_int(line)
            if option is None:
                option = -1

            if option == 0:
                break

            action = self._actions.get(option)
            if action is None:
                self._write("Invalid option.")
                continue

            self.logger.debug("Menu option selected", option=option)
            action()

        self._write("Goodbye.")
