from pathlib import Path

from hypothesis import given, settings, strategies as st

from gitglance.status import (
    is_accessible_dir,
    is_working_copy,
    local_status,
    parse_numstat,
)

file_names = st.text(
    alphabet=st.characters(categories=["L", "Nd"], include_characters="._-/ "),
    min_size=1,
    max_size=30,
)
counts = st.one_of(st.none(), st.integers(min_value=0, max_value=10_000))
numstat_rows = st.lists(st.tuples(counts, counts, file_names), max_size=20)
segment_names = st.text(
    alphabet=st.characters(categories=["L", "Nd"], include_characters="._-"),
    min_size=1,
    max_size=20,
).filter(lambda name: name not in {".", ".."})


def render_row(added: int | None, removed: int | None, name: str) -> str:
    columns = ["-" if n is None else str(n) for n in (added, removed)]
    return "\t".join([*columns, name])


@given(rows=numstat_rows)
def test_totals_are_sums_of_numeric_columns(
    rows: list[tuple[int | None, int | None, str]],
) -> None:
    text = "\n".join(render_row(*row) for row in rows)

    stats = parse_numstat(text)

    assert stats.added == sum(a for a, _, _ in rows if a is not None)
    assert stats.removed == sum(r for _, r, _ in rows if r is not None)


@given(rows=numstat_rows, binary=st.lists(file_names, max_size=5))
def test_binary_rows_add_nothing(
    rows: list[tuple[int | None, int | None, str]], binary: list[str]
) -> None:
    text = "\n".join(render_row(*row) for row in rows)
    with_binary = "\n".join([text, *(f"-\t-\t{name}" for name in binary)])

    assert parse_numstat(with_binary) == parse_numstat(text)


@given(text=st.text())
def test_totals_never_negative(text: str) -> None:
    stats = parse_numstat(text)

    assert stats.added >= 0
    assert stats.removed >= 0


@settings(max_examples=50, deadline=None)
@given(parts=st.lists(segment_names, min_size=1, max_size=4))
def test_missing_paths_are_never_working_copies(
    missing_root: Path, parts: list[str]
) -> None:
    path = missing_root.joinpath(*parts)

    assert not is_accessible_dir(path)
    assert not is_working_copy(path)
    assert local_status(path) is None
