# gofp

`gofp` provides an `Option` type: a value that is either present (Some) or
absent (None). It comes with helpers for writing options to and reading them
from JSON, and for passing them to and from SQL databases.

The package is a library only. It has no command-line program.

## Installation

```
pip install gofp
```

## Creating options

```python
from gofp.option import Option, some, none, from_optional, from_result
from gofp.option import from_try, from_predicate, from_cast, as_option

some(3)                               # Some(3)
Option(3)                             # Some(3), same as some(3)
none()                                # None
Option()                              # None, same as none()
some(None)                            # Some(None): holds the value None
from_optional(None)                   # None
from_optional(5)                      # Some(5)
from_result("value", False)           # None
from_try(int, "42")                   # Some(42)
from_try(int, "not a number")         # None (the exception is swallowed)
from_predicate(5, lambda n: n > 0)    # Some(5)
from_cast("foo", int)                 # None
from_cast("foo", str)                 # Some('foo')
as_option(some("foo"), str)           # Some('foo')
as_option(None, str)                  # None
```

`as_option` works on a best-effort basis: a plain value of the given type
becomes Some, an Option whose content fits the type (or an empty one) is
returned as it is, and anything else gives an empty Option.

Options are immutable, hashable and compare equal when both are empty or both
hold equal values. `str(some(1))` is `"Some(1)"` and `str(none())` is
`"None"`.

## Working with options

```python
opt = some(2)

opt.is_some()                      # True
opt.is_none()                      # False
opt.get()                          # (2, True)
none().get()                       # (None, False)
opt.unwrap()                       # 2
none().unwrap_or(0)                # 0
none().unwrap_or_else(lambda: 7)   # 7
none().unwrap_or_zero(int)         # 0
opt.to_optional()                  # 2
none().to_optional()               # None

opt.map(lambda n: n * 10)                    # Some(20)
none().map(lambda n: n * 10)                 # None
none().map_or(1, lambda n: n * 10)           # Some(1)
none().map_or_else(lambda: 1, lambda n: n)   # Some(1)
opt.flat_map(lambda n: some(n + 1))          # Some(3)
```

Calling `unwrap()` on an empty option raises `UnwrapNoneError`, a subclass of
`ValueError`.

## JSON

```python
import json
from gofp.jsoncodec import OptionEncoder, dumps, option_from_json

dumps({"a": some("x"), "b": none()})    # '{"a":"x","b":null}'
json.dumps(some(1), cls=OptionEncoder)  # '1'
option_from_json("null", str)           # None
option_from_json('"x"', str)            # Some('x')
```

`dumps` writes compact JSON using `OptionEncoder` unless you pass other
`cls` or `separators` arguments. `OptionEncoder` writes a Some as its value,
an empty Option as `null`, and dataclass instances as objects of their fields.

`option_from_json` parses the text; `null` gives an empty Option, and any other
value is passed through the `decode` callable and wrapped in Some.

## SQL

```python
import sqlite3
from gofp.sqladapt import register_sqlite_adapter, to_sql_value, from_sql_value

register_sqlite_adapter()
conn = sqlite3.connect(":memory:")
conn.execute("create table t (v text)")
conn.execute("insert into t values (?)", (some("hello"),))

to_sql_value(some("hello"))         # 'hello'
to_sql_value(none())                # None
from_sql_value(None, str)           # None
from_sql_value(b"42", int)          # Some(42)
```

`to_sql_value` accepts held values of `None`, `bool`, `int` (within the signed
64-bit range), `float`, `str`, `bytes`, `bytearray`, `memoryview` (both given
back as `bytes`), `datetime.datetime` and nested options; anything else raises
`UnsupportedTypeError`.

`from_sql_value` turns a NULL (`None`) into an empty Option and passes any other
value through `convert`. It raises `UnsupportedTypeError` if `convert` is not
callable; errors raised by `convert` itself propagate unchanged.