import io

import pytest

from unixkit.core.records import iter_records, parse_delimiter, write_record
from unixkit.errors import ConfigurationError, InvalidDelimiter


def test_single_byte_delimiters_are_accepted() -> None:
    assert parse_delimiter(",") == ","
    assert parse_delimiter("\t") == "\t"


@pytest.mark.parametrize("text", ["", ",,", "é", "ab"])
def test_other_delimiters_are_rejected(text: str) -> None:
    with pytest.raises(InvalidDelimiter) as info:
        parse_delimiter(text)

    assert isinstance(info.value, ConfigurationError)
    assert str(info.value) == f'--delim "{text}" must be a single byte'


def test_quoted_fields_keep_delimiters_and_newlines() -> None:
    stream = io.StringIO('name,quote\n"Smith, J","said ""hi""\nthen left"\n', newline="")

    records = list(iter_records(stream, ","))

    assert records == [["name", "quote"], ["Smith, J", 'said "hi"\nthen left']]


def test_plain_split_on_tab() -> None:
    records = list(iter_records(io.StringIO("a\tb\tc\n\n1\t2\n", newline=""), "\t"))

    assert records == [["a", "b", "c"], [], ["1", "2"]]


def test_write_record_quotes_when_needed() -> None:
    out = io.StringIO()

    write_record(out, ["a", "b,c"], ",")
    write_record(out, ["x", "y"], ",")
    write_record(out, [], ",")

    assert out.getvalue() == 'a,"b,c"\nx,y\n\n'
