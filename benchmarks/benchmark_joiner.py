"""Benchmark Joiner against str.join.

str.join is the floor: it sees every part up front. Joiner pays for
per-write step insertion and UTF-8 encoding.

Run with:
    pytest benchmarks/benchmark_joiner.py -v --benchmark-only
"""

try:
    import pytest

    from strjoiner import join, new_joiner, with_joiner

    @pytest.mark.benchmark(group="join-short")
    def test_benchmark_str_join_short(benchmark, short_parts):
        """Baseline: str.join over many small parts."""
        benchmark(lambda: "(" + ", ".join(short_parts) + ")")

    @pytest.mark.benchmark(group="join-short")
    def test_benchmark_joiner_short(benchmark, short_parts):
        """Joiner written one part at a time."""

        def build():
            j = new_joiner(with_joiner("(", ", ", ")"))
            for part in short_parts:
                j.write_string(part)
            return j.string()

        benchmark(build)

    @pytest.mark.benchmark(group="join-short")
    def test_benchmark_join_helper_short(benchmark, short_parts):
        """One-shot join() helper."""
        benchmark(join, short_parts, with_joiner("(", ", ", ")"))

    @pytest.mark.benchmark(group="join-long")
    def test_benchmark_joiner_long_with_grow(benchmark, long_parts):
        """Joiner with capacity reserved up front."""
        total = sum(len(p) for p in long_parts) + 2 * len(long_parts)

        def build():
            j = new_joiner(with_joiner("", "\n\n", ""))
            j.grow(total)
            for part in long_parts:
                j.write_string(part)
            return j.string()

        benchmark(build)

except ImportError:
    pass  # pytest not available
