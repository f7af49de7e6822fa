import io

from unixkit.core.offsets import End, Start
from unixkit.services.comm import CommOptions, merge
from unixkit.services.fortune import parse_fortunes, pick_fortune
from unixkit.services.tail import count_lines_bytes, rewindable, tail_lines
from unixkit.services.uniq import format_run, runs
from unixkit.services.wc import WcOptions, count, format_counts


def test_merge_handles_uneven_inputs() -> None:
    merged = list(merge(["a", "c"], ["b", "c", "d", "e"]))

    assert merged == [(1, "a"), (2, "b"), (3, "c"), (2, "d"), (2, "e")]


def test_merge_insensitive_prefers_first_file_text() -> None:
    assert list(merge(["Apple"], ["apple"], insensitive=True)) == [(3, "Apple")]
    assert list(merge(["Apple"], ["apple"])) == [(1, "Apple"), (2, "apple")]


def test_comm_prefix_counts_visible_columns() -> None:
    options = CommOptions(show_col1=False, delimiter="|")

    assert options.prefix(1) == ""
    assert options.prefix(2) == ""
    assert options.prefix(3) == "|"


def test_runs_group_on_trailing_whitespace() -> None:
    assert list(runs(["x\n", "x \n", "y\n", "x"])) == [(2, "x\n"), (1, "y\n"), (1, "x")]
    assert list(runs([])) == []


def test_format_run() -> None:
    assert format_run(12, "a\n", show_count=True) == "  12 a\n"
    assert format_run(12, "a\n", show_count=False) == "a\n"


def test_parse_fortunes_trims_and_skips_empty() -> None:
    fortunes = parse_fortunes("  one\n%\n%\ntwo\nlines\n", "src")

    assert [f.text for f in fortunes] == ["one", "two\nlines"]
    assert {f.source for f in fortunes} == {"src"}


def test_pick_fortune_is_reproducible() -> None:
    fortunes = parse_fortunes("a\n%\nb\n%\nc\n%\nd\n", "src")

    assert pick_fortune(fortunes, 3) == pick_fortune(fortunes, 3)
    assert pick_fortune([], 3) is None


def test_tail_reads_pipes_through_memory() -> None:
    class Pipe(io.BytesIO):
        def seekable(self) -> bool:
            return False

    handle = rewindable(Pipe(b"1\n2\n3"))

    assert count_lines_bytes(handle) == (3, 5)
    assert tail_lines(handle, End(2), 3) == "2\n3"


def test_tail_lines_from_start() -> None:
    handle = io.BytesIO(b"1\n2\n3\n")

    assert tail_lines(handle, Start(2), 3) == "2\n3\n"


def test_wc_counts_and_format() -> None:
    counts = count(io.BytesIO(b"hello world\n\n \xff\n"), "f")

    assert (counts.lines, counts.words, counts.bytes, counts.chars) == (3, 3, 16, 16)
    options = WcOptions(words=True)
    assert format_counts(counts, options) == "       3 f"
    assert format_counts(counts.model_copy(update={"name": "-"}), options) == "       3"


def test_wc_defaults_to_lines_words_bytes() -> None:
    options = WcOptions()

    assert (options.lines, options.words, options.bytes, options.chars) == (True, True, True, False)
