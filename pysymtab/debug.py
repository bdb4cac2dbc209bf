from typing import Any

from .table import SymTable


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def chain_lengths(table: SymTable) -> list[int]:
    lengths = []
    for head in table.buckets:
        length = 0
        binding = head
        while binding is not None:
            length += 1
            binding = binding.next
        lengths.append(length)
    return lengths


def print_table(table: SymTable, name: str):
    printf("== {0:s} ==\n", name)

    for index, head in enumerate(table.buckets):
        if head is None:
            continue
        printf("{0:05d} ", index)
        binding = head
        while binding is not None:
            printf("{0!r}", binding.key)
            if binding.next is not None:
                printf(" -> ")
            binding = binding.next
        printf("\n")


def print_stats(table: SymTable):
    lengths = chain_lengths(table)
    bucket_count = len(lengths)
    load = table.count / bucket_count if bucket_count else 0.0
    longest = max(lengths, default=0)

    printf("{0:<16s} {1:d}\n", "buckets", bucket_count)
    printf("{0:<16s} {1:d}\n", "bindings", table.count)
    printf("{0:<16s} {1:.3f}\n", "load", load)
    printf("{0:<16s} {1:d}\n", "longest chain", longest)
