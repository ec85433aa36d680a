from __future__ import annotations

from pyuci.parser import parse
from pyuci.serializer import quote, serialize
from pyuci.tree import ConfigDocument, ListValues, Scalar, Section

CANONICAL = """\
config interface 'lan'
\toption type 'bridge'
\toption ifname 'eth0.1'
\toption proto 'static'

config timeserver 'ntp'
\tlist server '0.pool.ntp.org'
\tlist server '1.pool.ntp.org'
"""


def test_canonical_text_is_stable():
    assert serialize(parse(CANONICAL)) == CANONICAL


def test_empty_document():
    assert serialize(ConfigDocument()) == ""


def test_unquoted_input_is_normalised():
    text = "config defaults\n  option enabled 1\n  list dns 8.8.8.8\n"
    assert serialize(parse(text)) == (
        "config defaults\n\toption enabled '1'\n\tlist dns '8.8.8.8'\n"
    )


def test_options_keep_insertion_order():
    section = Section("s", "n")
    section.set_scalar("zeta", "1")
    section.set_scalar("alpha", "2")
    doc = ConfigDocument(sections=[section])
    assert serialize(doc) == "config s 'n'\n\toption zeta '1'\n\toption alpha '2'\n"


def test_empty_value_is_quoted():
    doc = ConfigDocument(sections=[Section("s", None, {"key": Scalar("")})])
    text = serialize(doc)
    assert text == "config s\n\toption key ''\n"
    assert parse(text).sections[0].options == {"key": Scalar("")}


def test_quote_escapes():
    assert quote("plain") == "'plain'"
    assert quote("it's") == r"'it\'s'"
    assert quote("back\\slash") == r"'back\\slash'"


def test_awkward_values_round_trip():
    values = ["it's", 'say "hi"', "a b\tc", "#not-a-comment", "trail\\", "two\nlines", ""]
    section = Section("s", "n o")
    section.set_list("v", values)
    section.set_scalar("odd key", "x")
    doc = ConfigDocument(sections=[section])
    again = parse(serialize(doc))
    assert again.sections == doc.sections


def test_round_trip_reaches_fixed_point():
    text = """
# comment
config 'zone'
    option name lan
    list network "lan" # trailing
    list network 'guest'
config rule
    option target ACCEPT
    option target "REJECT"
    list proto tcp
    option proto udp
"""
    first = parse(text)
    once = serialize(first)
    second = parse(once)
    assert second.sections == first.sections
    assert serialize(second) == once


def test_empty_list_is_skipped():
    doc = ConfigDocument(sections=[Section("s", None, {"x": ListValues([])})])
    assert serialize(doc) == "config s\n"
