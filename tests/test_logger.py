import io

import pytest

from polymesher.logger import Logger, setprecision, setw


def _lines(stream):
    return stream.getvalue().splitlines()


def test_single_row_layout():
    out = io.StringIO()
    log = Logger(out)
    log << "Vertices" << 8 << "pcs"
    log.flush()
    assert out.getvalue() == ">>  Vertices......>>  8 pcs\n"


def test_rows_are_aligned():
    out = io.StringIO()
    log = Logger(out)
    log << "a" << 1 << "x"
    log << "longer description" << 2.5 << "y"
    log.flush()
    lines = _lines(out)
    assert len(lines) == 2
    positions = {line.index(">>", 2) for line in lines}
    assert len(positions) == 1


def test_string_value_kept_verbatim():
    out = io.StringIO()
    log = Logger(out)
    log << "name" << "value" << "end"
    log.flush()
    assert _lines(out)[0].endswith(">>  value end")


def test_precision_applies_to_next_number_only():
    out = io.StringIO()
    log = Logger(out)
    log << "pi" << setprecision(3) << 3.14159 << ""
    log << "pi" << 3.14159 << ""
    log.flush()
    lines = _lines(out)
    assert lines[0].endswith(">>  3.14 ")
    assert lines[1].endswith(">>  3.14159 ")


def test_width_pads_value():
    out = io.StringIO()
    log = Logger(out)
    log << "n" << setw(5) << 42 << ""
    log.flush()
    assert _lines(out)[0].endswith(">>     42 ")


def test_bool_formats_as_digit():
    out = io.StringIO()
    log = Logger(out)
    log << "flag" << True << ""
    log.flush()
    assert _lines(out)[0].endswith(">>  1 ")


def test_number_as_description_raises():
    out = io.StringIO()
    log = Logger(out)
    with pytest.raises(ValueError):
        log << 5
    log << "d" << 1 << "e"
    log.flush()
    assert out.getvalue() == ">>  d......>>  1 e\n"


def test_number_as_ending_raises():
    out = io.StringIO()
    log = Logger(out)
    log << "d" << 1
    with pytest.raises(ValueError):
        log << 2
    log << "end"
    log.flush()
    assert out.getvalue() == ">>  d......>>  1 end\n"


def test_unfinished_row_is_completed_on_flush():
    out = io.StringIO()
    log = Logger(out)
    log << "only description"
    log.flush()
    assert _lines(out) == [">>  only description......>>   "]


def test_context_manager_flushes():
    out = io.StringIO()
    with Logger(out) as log:
        log << "k" << 1 << "v"
    assert _lines(out) == [">>  k......>>  1 v"]


def test_clear_drops_rows():
    out = io.StringIO()
    log = Logger(out)
    log << "k" << 1 << "v"
    log.clear()
    log.flush()
    assert out.getvalue() == ""


def test_open_sets_stream():
    out = io.StringIO()
    log = Logger()
    log << "k" << 1 << "v"
    log.open(out)
    log.flush()
    assert len(_lines(out)) == 1


def test_flush_without_stream_raises():
    log = Logger()
    with pytest.raises(ValueError):
        log.flush()