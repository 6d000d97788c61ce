import json
from dataclasses import dataclass

import pytest

from gofp.jsoncodec import OptionEncoder, dumps, option_from_json
from gofp.option import Option, none, some


@dataclass
class Inner:
    a: str
    b: int


@dataclass
class Record:
    a: str
    b: Option
    c: Option
    d: Option
    e: Option
    f: Option
    g: Option


_FULL = '{"a":"a","b":"b","c":null,"d":1,"e":null,"f":{"a":"a","b":1},"g":null}'


def _inner(d):
    return Inner(**d)


def _load_record(text):
    raw = json.loads(text)
    decoders = {"b": str, "c": str, "d": int, "e": int, "f": _inner, "g": _inner}
    fields = {k: option_from_json(json.dumps(raw.get(k)), dec) for k, dec in decoders.items()}
    return Record(a=raw["a"], **fields)


def _expected(b):
    return Record(
        a="a",
        b=some(b),
        c=none(),
        d=some(1),
        e=none(),
        f=some(Inner(a="a", b=1)),
        g=none(),
    )


def test_marshal_json():
    out = dumps(_expected("b"))
    assert out == _FULL


def test_unmarshal_json_null():
    assert _load_record(_FULL) == _expected("b")


def test_unmarshal_json_undefined():
    text = '{"a":"a","b":"B","d":1,"f":{"a":"a","b":1}}'
    assert _load_record(text) == _expected("B")


def test_option_from_json_direct():
    assert option_from_json("null", int) == none()
    assert option_from_json(b"5", int) == some(5)
    assert option_from_json('"x"', str) == some("x")


def test_option_from_json_invalid_text():
    with pytest.raises(json.JSONDecodeError):
        option_from_json("{not json", str)


def test_encoder_with_stdlib_dumps():
    assert json.dumps([some(1), none()], cls=OptionEncoder) == "[1, null]"


def test_encoder_rejects_unknown():
    with pytest.raises(TypeError):
        dumps({"x": object()})


def test_round_trip():
    for opt in (some(3), none(), some("s"), some([1, 2])):
        assert option_from_json(dumps(opt), lambda v: v) == opt