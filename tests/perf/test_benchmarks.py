"""Performance smoke tests for spliddit.

Run with: pytest tests/perf/ -v -s
"""
import time
import tracemalloc

from spliddit import segment
from spliddit.segmenter import split_into_chars


def _make_large_text(n_lines: int = 2000) -> str:
    """Generate a long mixed-script string with flags and skin tones."""
    lines = []
    for i in range(n_lines):
        lines.append(f"Line {i}: hi santa 🎅🏾, flag 🇯🇲, 𝔅𝔎 and ځڂڃ – done ✓\n")
    return "".join(lines)


class TestSegmentPerformance:
    def test_large_text_under_two_seconds(self):
        text = _make_large_text()
        start = time.monotonic()
        parts = segment(text)
        elapsed = time.monotonic() - start
        print(f"\nsegment: {len(text)} code-points -> {len(parts)} parts in {elapsed:.3f}s")
        assert "".join(parts) == text
        assert elapsed < 2.0

    def test_linear_scaling(self):
        small = _make_large_text(500)
        large = _make_large_text(2000)

        t0 = time.monotonic()
        split_into_chars(small)
        small_time = time.monotonic() - t0

        t0 = time.monotonic()
        split_into_chars(large)
        large_time = time.monotonic() - t0

        print(f"\n500 lines: {small_time:.3f}s, 2000 lines: {large_time:.3f}s")
        # 4x the input should stay far from quadratic (16x).
        assert large_time < max(small_time, 0.01) * 10

    def test_memory_bounded(self):
        text = _make_large_text(1000)
        tracemalloc.start()
        try:
            segment(text)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        print(f"\npeak memory: {peak / 1024:.0f} KiB for {len(text)} code-points")
        assert peak < 50 * 1024 * 1024

    def test_delimiter_mode_is_fast(self):
        text = ",".join(["🇦🇸"] * 100_000)
        start = time.monotonic()
        parts = segment(text, ",")
        elapsed = time.monotonic() - start
        assert len(parts) == 100_000
        assert elapsed < 1.0
