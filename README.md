# dywoqlib

A small collection of general-purpose building blocks. It has no
third-party dependencies.

## Modules

- `dywoqlib.optional` holds `Maybe`, a value that is present or absent. Build one with
  `some(value)`, `none(zero)` or `none_with_context(error, zero)`, or use the shorthands
  `maybe_int`, `maybe_float`, `maybe_complex`, `maybe_str`, `maybe_bool`, `maybe_bytes`
  and `maybe_error`. Each shorthand returns its first argument as a present value. With
  no arguments it returns an absent value that carries that type's zero value. `Maybe`
  has `get()`, which returns `(value, present)`, and `or_else`, `or_else_get`, `filter`,
  and `unwrap`. `unwrap` raises `NotPresentError` when the value is absent. `map_maybe`
  applies a function to a present value.
- `dywoqlib.errcontext` holds `ErrorContext`, an exception (or `None`) together with a
  line of extra text. It has `is_nil()` and `str()`, and `marshal()` returns compact JSON
  bytes.
- `dywoqlib.iterator` provides the cursor iterators `Forward`, `Reverse`,
  `ReadonlyForward` and `ReadonlyReverse`, and `Combined`, which creates all four from one
  sequence. Move a cursor with `next()` and read the current element with `value()`.
  Reading out of range raises `OutOfBoundsError`. After that the iterator is spent:
  `reset()` does nothing and its length is 0. The read-only kinds iterate over a copy of
  the sequence. Each cursor also supports plain `for` iteration.
- `dywoqlib.sliceutil` provides `format_slice` (`[1, 2, 3]`), `find`, `at`, `set_at`,
  `delete` and `insert`. A bad index raises `WrongIndexError`. An element that `find` does
  not meet raises `ElementNotFoundError`.
- `dywoqlib.container` holds two `list` subclasses:
  - `IterableSlice`, whose `iterating()` returns a `Combined`;
  - `FormattableSlice`, whose `str()` is the bracketed form.
- `dywoqlib.sequence` holds `Dynamic`, a list wrapper with index-checked `at`, `set`,
  `delete`, `insert`, `front` and `back`. It also has `find`, `append`, `pop` and
  `iterating()`.
- `dywoqlib.fixedseq` holds `Fixed`, which is like `Dynamic` but never holds more than
  `fixed_len` elements. It raises `NegativeFixedLengthError`,
  `FixedLengthOutOfBoundsError` or `OutOfBoundsError`. The module also provides
  `merge_dynamic`, `merge_fixed` and `merge` for plain sequences.
- `dywoqlib.queues` holds `Fifo` and `Lifo`. Both append at the back, and `pop` removes
  the most recently appended element. `Fifo` reads either end with `front` and `back`;
  `Lifo` has `top`.
- `dywoqlib.mapping` holds `DynamicMap` and `FixedMap`:
  - `add` refuses an existing key with `KeyAlreadyExistError`.
  - `set`, `get` and `delete` need an existing key and raise `KeyNotFoundError` otherwise.
  - `FixedMap` caps the number of entries.
- `dywoqlib.stringn` holds `StringN`, a mutable string stored as UTF-8 bytes.
  - Character operations: `at`, `front`, `back`, `insert`, `set`, `remove`, `substring`,
    `reverse`, `replace`, `prepend`, `append`, `split`, `compare`, `lower` and `upper`.
  - Byte operations: `write` appends bytes, and `read` removes bytes from the front and
    returns them.
- `dywoqlib.ansi` provides `Color` and the escape helpers `fg_from`, `bg_from`,
  `apply_fg`, `apply_bg` and `apply_both`. It also holds `Message`. Its setters
  `set_fg_color` and `set_bg_color` wrap the current text again in both colours and can
  be chained.
- `dywoqlib.console` provides two functions:
  - `run(command, *args)` returns combined stdout and stderr as bytes. It raises
    `subprocess.CalledProcessError` on a non-zero exit.
  - `clear()` runs `cls` on Windows and `clear` on macOS, and does nothing elsewhere.
- `dywoqlib.attribute` provides `deprecated(event)` and `todo(event)`. Each prints a
  warning that names the calling function and its caller, or runs `event` instead when
  one is given.
- `dywoqlib.recovering` holds `Recover`, a context manager. It logs any `Exception`
  raised in its block, swallows it, and keeps it in `.caught`.
- `dywoqlib.numeric` holds the `Compare` and `Sign` enums. `numeric_limits(name)`
  returns `(min, max)` for names such as `"int8"`, `"uint64"` or `"float32"`, and raises
  `UnsupportedNumericTypeError` for anything else.
- `dywoqlib.algorithms` provides `gcd(a, b)` on floats, and `parts(n, k)`, which returns
  `k` evenly spaced points between 0 and `n`.

## Installation

```
pip install dywoqlib
```

## Examples

```python
from dywoqlib.optional import some, maybe_str

name = maybe_str().or_else("guest")          # "guest"
adult = some(19).filter(lambda age: age >= 18)
print(adult.unwrap())                         # 19
```

```python
from dywoqlib.queues import Fifo, Lifo

queue = Fifo()
queue.append(2)
queue.append(4)
print(queue)          # [2, 4]

stack = Lifo()
stack.append(2)
stack.append(4)
print(stack.top())    # 4
```

```python
from dywoqlib.ansi import Color, Message, apply_fg

print(Message("hi").set_fg_color(Color.RED).set_bg_color(Color.GREEN))
print(apply_fg("thanks", Color.RED))
```

```python
from dywoqlib.recovering import Recover

with Recover() as recovery:
    raise RuntimeError("something went wrong")
print(recovery.caught)   # something went wrong
```

## What it does not do

This is a library only. It installs no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```