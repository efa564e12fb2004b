"""
Cache Table Errors

Absent domains are not errors: lookups return None and deletes return False.
"""


class CacheError(Exception):
    """Base class for cache table errors"""


class AllocationFailure(CacheError):
    """Storing an entry failed; the table was left unchanged"""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"Out of memory while caching {domain!r}")


class BucketIndexOutOfRange(CacheError, IndexError):
    """Bucket index outside [0, table_size)"""

    def __init__(self, index: int, table_size: int):
        self.index = index
        self.table_size = table_size
        super().__init__(
            f"Bucket index {index} out of range [0, {table_size - 1}]"
        )
