"""Tests for the exposition writer and reader."""

from i2pd_exporter.exposition import (
    PromWriter,
    format_value,
    get_value,
    parse_exposition,
    parse_labels,
)


def test_format_integral_values():
    assert format_value(0) == "0"
    assert format_value(1) == "1"
    assert format_value(42.0) == "42"
    assert format_value(1073741824.0) == "1073741824"
    assert format_value(-3.0) == "-3"
    assert format_value(-0.0) == "0"


def test_format_fractional_values():
    assert format_value(1.5) == "1.5"
    assert format_value(100.123) == "100.123"
    assert format_value(0.042) == "0.042"
    assert format_value(0.1 + 0.2) == "0.30000000000000004"


def test_format_never_uses_exponent():
    assert format_value(1e-05) == "0.00001"
    assert format_value(1e16) == "10000000000000000"
    assert format_value(2.5e15) == "2500000000000000"


def test_format_non_finite():
    assert format_value(float("nan")) == "NaN"
    assert format_value(float("inf")) == "+Inf"
    assert format_value(float("-inf")) == "-Inf"


def test_unlabeled_gauge():
    w = PromWriter()
    w.gauge("i2pd_routers", "Number of known routers", 10100)
    assert w.render() == (
        "# HELP i2pd_routers Number of known routers\n"
        "# TYPE i2pd_routers gauge\n"
        "i2pd_routers 10100\n"
    )


def test_header_written_once_per_name():
    w = PromWriter()
    w.gauge("i2pd_network_status", "Network status", 1, ("protocol", "v4"))
    w.gauge("i2pd_network_status", "", 0, ("protocol", "v6"))
    assert w.render() == (
        "# HELP i2pd_network_status Network status\n"
        "# TYPE i2pd_network_status gauge\n"
        'i2pd_network_status{protocol="v4"} 1\n'
        'i2pd_network_status{protocol="v6"} 0\n'
    )


def test_first_help_text_wins():
    w = PromWriter()
    w.gauge("x", "first", 1, ("k", "a"))
    w.gauge("x", "second", 2, ("k", "b"))
    out = w.render()
    assert "# HELP x first\n" in out
    assert "second" not in out
    assert out.count("# TYPE x gauge") == 1


def test_empty_help_skips_help_line():
    w = PromWriter()
    w.gauge("x", "", 1)
    assert w.render() == "# TYPE x gauge\nx 1\n"


def test_counter_type():
    w = PromWriter()
    w.counter("i2pd_traffic_bytes_total", "Total traffic in bytes", 1024, ("direction", "sent"))
    out = w.render()
    assert "# TYPE i2pd_traffic_bytes_total counter\n" in out
    assert 'i2pd_traffic_bytes_total{direction="sent"} 1024\n' in out


def test_label_values_are_escaped():
    w = PromWriter()
    w.gauge("x", "", 1, ("name", 'a "b"\\c\nd'))
    assert 'x{name="a \\"b\\"\\\\c\\nd"} 1\n' in w.render()


def test_parse_labels():
    assert parse_labels('direction="sent"') == {"direction": "sent"}
    assert parse_labels("") == {}
    assert parse_labels('name="a \\"b\\""') == {"name": 'a "b"'}


def test_parse_round_trip_of_writer_output():
    w = PromWriter()
    w.gauge("i2pd_up", "Whether the i2pd console is reachable", 1)
    w.counter("i2pd_traffic_bytes_total", "Total traffic in bytes", 2048, ("direction", "received"))
    w.counter("i2pd_traffic_bytes_total", "Total traffic in bytes", 4096, ("direction", "sent"))

    families = parse_exposition(w.render())

    assert list(families) == ["i2pd_up", "i2pd_traffic_bytes_total"]
    traffic = families["i2pd_traffic_bytes_total"]
    assert traffic.metric_type == "counter"
    assert traffic.help_text == "Total traffic in bytes"
    assert traffic.declarations == 1
    assert len(traffic.samples) == 2
    assert get_value(families, "i2pd_traffic_bytes_total", direction="sent") == 4096
    assert get_value(families, "i2pd_up") == 1


def test_parse_skips_garbage_lines():
    text = """
    # a comment
    # TYPE my_gauge gauge
    my_gauge 42.5
    broken_line
    bad_value abc
    """
    families = parse_exposition(text)
    assert get_value(families, "my_gauge") == 42.5
    assert "broken_line" not in families
    assert get_value(families, "bad_value") is None
    assert get_value(families, "missing") is None
