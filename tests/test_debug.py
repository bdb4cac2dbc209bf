from pysymtab.debug import chain_lengths, print_stats, print_table
from pysymtab.table import SymTable


def test_print_table(capsys):
    t = SymTable(bucket_counts=(1,))
    t.put("a", 1)
    t.put("b", 2)

    print_table(t, "one bucket")

    out = capsys.readouterr().out
    assert out == "== one bucket ==\n00000 'b' -> 'a'\n"


def test_print_table_skips_empty_buckets(capsys):
    t = SymTable(bucket_counts=(4,))
    t.put("a", 1)  # 97 % 4 == 1

    print_table(t, "t")

    assert capsys.readouterr().out == "== t ==\n00001 'a'\n"


def test_chain_lengths():
    t = SymTable(bucket_counts=(4,))
    for key in ("a", "b", "e"):  # 97, 98, 101 mod 4
        t.put(key, None)
    assert chain_lengths(t) == [0, 2, 1, 0]


def test_print_stats(capsys):
    t = SymTable(bucket_counts=(4,))
    t.put("a", 1)
    t.put("b", 2)

    print_stats(t)

    out = capsys.readouterr().out
    assert out == (
        f"{'buckets':<16s} 4\n"
        f"{'bindings':<16s} 2\n"
        f"{'load':<16s} 0.500\n"
        f"{'longest chain':<16s} 1\n"
    )
