from dataclasses import dataclass
import logging
from typing import Any, Callable, Iterator

from .binding import Binding, NotFound, check_key, new_binding, release_chain
from .hashing import hash_key

logger = logging.getLogger(__name__)


# Bucket counts the table steps through as it grows. Growth stops at the
# last one; chains just get longer after that.
BUCKET_COUNTS = (509, 1021, 2039, 4093, 8191, 16381, 32749, 65521)


Visitor = Callable[[str, Any, Any], None]


@dataclass(eq=False)
class SymTable:
    count: int
    tier: int
    buckets: list[Binding | None]
    bucket_counts: tuple[int, ...]
    freed: bool

    def __init__(self, bucket_counts: tuple[int, ...] = BUCKET_COUNTS) -> None:
        bucket_counts = tuple(bucket_counts)
        if not bucket_counts:
            raise ValueError("bucket_counts must not be empty")
        if any(n <= 0 for n in bucket_counts):
            raise ValueError("bucket counts must be positive", bucket_counts)
        if any(a >= b for a, b in zip(bucket_counts, bucket_counts[1:])):
            raise ValueError("bucket counts must be ascending", bucket_counts)

        self.bucket_counts = bucket_counts
        self.count = 0
        self.tier = 0
        self.buckets = [None] * bucket_counts[0]
        self.freed = False

    def __repr__(self) -> str:
        if self.freed:
            return "SymTable(freed)"
        return f"SymTable(count={self.count}, buckets={len(self.buckets)})"

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def free(self):
        """Unlink every binding, then drop the bucket array.

        The table can't be used afterwards.
        """
        self._check_live()
        for index in range(len(self.buckets)):
            release_chain(self.buckets[index])
            self.buckets[index] = None
        self.buckets = []
        self.count = 0
        self.freed = True

    def length(self) -> int:
        self._check_live()
        return self.count

    def capacity(self) -> int:
        self._check_live()
        return len(self.buckets)

    def put(self, key: str, value: Any) -> bool:
        """Add a new binding. Returns False if the key is already bound
        or the binding can't be allocated; the table is unchanged then."""
        self._check_live()
        check_key(key)

        if self._find(key) is not None:
            return False

        try:
            binding = new_binding(key, value, None)
        except MemoryError:
            logger.warning("put: no memory for binding %r", key)
            return False

        if self.count >= len(self.buckets):
            self._expand()

        index = hash_key(binding.key, len(self.buckets))
        binding.next = self.buckets[index]
        self.buckets[index] = binding
        self.count += 1
        return True

    def replace(self, key: str, value: Any) -> Any | NotFound:
        self._check_live()
        check_key(key)

        binding = self._find(key)
        if binding is None:
            return NotFound()

        old_value = binding.value
        binding.value = value
        return old_value

    def contains(self, key: str) -> bool:
        self._check_live()
        check_key(key)
        return self._find(key) is not None

    def get(self, key: str) -> Any | NotFound:
        self._check_live()
        check_key(key)

        binding = self._find(key)
        if binding is None:
            return NotFound()
        return binding.value

    def remove(self, key: str) -> Any | NotFound:
        self._check_live()
        check_key(key)

        index = hash_key(key, len(self.buckets))
        previous: Binding | None = None
        current = self.buckets[index]
        while current is not None:
            if current.key == key:
                break
            previous = current
            current = current.next

        if current is None:
            return NotFound()

        if previous is None:
            self.buckets[index] = current.next
        else:
            previous.next = current.next
        current.next = None
        self.count -= 1
        return current.value

    def map(self, visitor: Visitor, context: Any = None):
        """Call visitor(key, value, context) once for every binding.

        Bucket order, then chain order. The visitor must not modify the
        table.
        """
        self._check_live()
        if not callable(visitor):
            raise TypeError("visitor must be callable", visitor)

        for binding in self._bindings(self.buckets):
            visitor(binding.key, binding.value, context)

    def _find(self, key: str) -> Binding | None:
        binding = self.buckets[hash_key(key, len(self.buckets))]
        while binding is not None:
            if binding.key == key:
                return binding
            binding = binding.next
        return None

    def _expand(self):
        if self.tier + 1 >= len(self.bucket_counts):
            logger.debug(
                "expand: already at %d buckets, not growing", len(self.buckets)
            )
            return

        new_count = self.bucket_counts[self.tier + 1]
        try:
            new_buckets = self._rehash(new_count)
        except MemoryError:
            # the partial array is garbage now; keep using the old one
            logger.warning(
                "expand: no memory to grow from %d to %d buckets",
                len(self.buckets),
                new_count,
            )
            return

        old_count = len(self.buckets)
        for index in range(old_count):
            release_chain(self.buckets[index])
            self.buckets[index] = None

        self.buckets = new_buckets
        self.tier += 1
        logger.debug(
            "expand: %d -> %d buckets, %d bindings moved",
            old_count,
            new_count,
            self.count,
        )

    def _rehash(self, bucket_count: int) -> list[Binding | None]:
        new_buckets: list[Binding | None] = [None] * bucket_count
        for binding in self._bindings(self.buckets):
            index = hash_key(binding.key, bucket_count)
            new_buckets[index] = new_binding(
                binding.key, binding.value, new_buckets[index]
            )
        return new_buckets

    @staticmethod
    def _bindings(buckets: list[Binding | None]) -> Iterator[Binding]:
        for head in buckets:
            binding = head
            while binding is not None:
                yield binding
                binding = binding.next

    def _check_live(self):
        if self.freed:
            raise ValueError("symbol table has been freed")
