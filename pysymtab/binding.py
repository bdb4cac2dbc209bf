from dataclasses import dataclass
from typing import Any


@dataclass
class NotFound:
    pass


@dataclass
class Binding:
    key: str
    value: Any
    next: "Binding | None"


def new_binding(key: str, value: Any, next: "Binding | None") -> Binding:
    # str() gives a plain str even for subclasses, so the table never
    # holds on to caller-defined key objects
    return Binding(key=str(key), value=value, next=next)


def check_key(key: Any):
    if not isinstance(key, str):
        raise TypeError("key must be str", key)


def release_chain(binding: Binding | None) -> int:
    """Unlink a chain node by node and return how many nodes it held."""
    count = 0
    while binding is not None:
        next = binding.next
        binding.next = None
        binding = next
        count += 1
    return count
