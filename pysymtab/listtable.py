from dataclasses import dataclass
import logging
from typing import Any

from .binding import Binding, NotFound, check_key, new_binding, release_chain
from .table import Visitor

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ListSymTable:
    """Same contract as SymTable, kept in one unsorted chain.

    Every operation except length is linear. Useful as a reference to
    check SymTable against.
    """

    count: int
    first: Binding | None
    freed: bool

    def __init__(self) -> None:
        self.count = 0
        self.first = None
        self.freed = False

    def __repr__(self) -> str:
        if self.freed:
            return "ListSymTable(freed)"
        return f"ListSymTable(count={self.count})"

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def free(self):
        self._check_live()
        release_chain(self.first)
        self.first = None
        self.count = 0
        self.freed = True

    def length(self) -> int:
        self._check_live()
        return self.count

    def put(self, key: str, value: Any) -> bool:
        self._check_live()
        check_key(key)

        if self._find(key) is not None:
            return False

        try:
            binding = new_binding(key, value, self.first)
        except MemoryError:
            logger.warning("put: no memory for binding %r", key)
            return False

        self.first = binding
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

        previous: Binding | None = None
        current = self.first
        while current is not None and current.key != key:
            previous = current
            current = current.next

        if current is None:
            return NotFound()

        if previous is None:
            self.first = current.next
        else:
            previous.next = current.next
        current.next = None
        self.count -= 1
        return current.value

    def map(self, visitor: Visitor, context: Any = None):
        self._check_live()
        if not callable(visitor):
            raise TypeError("visitor must be callable", visitor)

        binding = self.first
        while binding is not None:
            visitor(binding.key, binding.value, context)
            binding = binding.next

    def _find(self, key: str) -> Binding | None:
        binding = self.first
        while binding is not None:
            if binding.key == key:
                return binding
            binding = binding.next
        return None

    def _check_live(self):
        if self.freed:
            raise ValueError("symbol table has been freed")
