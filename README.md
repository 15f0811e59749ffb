# nodeish

A small toolkit in an event-emitter style: events, a lightweight pattern
matcher, UTF-8/16/32 conversions, zlib and gzip streams, non-blocking file
streams with pipes, date helpers and ANSI console output.

It has no dependencies outside the standard library.

## Installation

```
pip install nodeish
```

To run the test suite:

```
pip install "nodeish[test]"
pytest
```

## Modules

| Module                | What it offers                                                          |
|-----------------------|-------------------------------------------------------------------------|
| `nodeish.event`       | `Event`: subscribe with `on` / `once`, unsubscribe with `off`, `emit`   |
| `nodeish.iterator`    | `apply`, `count`, `reduce`, `every`, `some`, `none`, `join` over arguments |
| `nodeish.conio`       | ANSI colours (`Color`), cursor placement, `log`, `err`, `error`, `info`, `done`, `warn` |
| `nodeish.utf`         | Conversions between UTF-8, UTF-16 and UTF-32 (`UTFError`)               |
| `nodeish.regex`       | `Regex` and module-level `test`, `match`, `search`, `replace`, `split`, `format` ... (`RegexError`) |
| `nodeish.date`        | Current-time fields and the mutable `Date`                              |
| `nodeish.compression` | `ZStream`, `inflate`, `deflate`, `gzip`, `gunzip` (`ZlibError`)         |
| `nodeish.file`        | `File`, a non-blocking file stream with line and delimiter reads        |
| `nodeish.stream`      | `pipe`, `pipe_lines`, `duplex`, `inflate_pipe`, `deflate_pipe`          |

## Examples

### Events

```python
from nodeish.event import Event

on_data = Event()
handle = on_data.on(lambda chunk: print("got", chunk))
on_data.once(lambda chunk: print("first chunk only:", chunk))

on_data.emit("hello")   # both listeners run
on_data.emit("world")   # only the persistent listener runs
on_data.off(handle)
```

`on` and `once` return `None` once the event holds its maximum number of
listeners (1024 by default).

### Pattern matching

`nodeish.regex` has its own compact syntax: literals, `.`, `^`, `$`, classes
`[...]` / `[^...]`, groups `(...)`, top-level `|`, the quantifiers `?`, `*`,
`+`, `{n}` and `{n,m}`, and the escapes `\b \B \w \W \d \D \s \S \n \N`.
Empty matches are never reported; spans are `(start, end)` tuples.

```python
from nodeish import regex

regex.test("order 1234", "\\d+")              # True
regex.match("order 1234", "\\d+")             # "1234"
regex.replace_all("a-b-c", "-", "+")          # "a+b+c"
regex.format("${0} and ${1}", "cats", "dogs") # "cats and dogs"

words = regex.Regex("[a-z]+", True)           # icase: the text is folded to lower case
words.match_all("One two THREE")
```

### UTF conversions

```python
from nodeish import utf

codepoints = utf.utf8_to_utf32("héllo".encode("utf-8"))
units = utf.utf32_to_utf16(codepoints)
raw = utf.utf16_to_utf8(units)
```

Malformed input raises `utf.UTFError`.

### Compression

```python
from nodeish import compression

packed = compression.gzip(b"some text " * 100)
original = compression.gunzip(packed)
```

Compression uses a partial flush: the output can be decompressed
incrementally (as `gunzip`, `inflate` and `ZStream.update_inflate` do), but
the stream is not finished, so one-shot decoders that expect a complete
stream will reject it. A `ZStream` hands its output to `on_data` listeners
instead of returning it when any are registered.

### Files and streams

```python
from nodeish.file import File
from nodeish import stream

with File("notes.txt", "r") as source:
    first_line = source.read_line()   # bytes, newline included
    rest = source.read()

with File("notes.txt", "r") as source, File("copy.txt", "w") as target:
    copied = stream.pipe(source, target)
```

`inflate_pipe` and `deflate_pipe` decompress or compress raw deflate data on
the way; `duplex` relays data both ways between two descriptors.

### Dates

```python
from nodeish.date import Date

d = Date(2024, 0, 15)     # year, month counted from 0, day; other fields from now
d.set_day(40)             # rolls over into the next month
d.month(), d.day(), d.weekday()   # week days count from Sunday = 0
```

### Console

```python
from nodeish import conio

conio.info("INFO: ")
conio.log("server ready")
conio.foreground(conio.Color.RED | conio.Color.BOLD)
conio.log("could not open file")
```

## What it does not do

nodeish has no networking: no sockets, servers or name lookups. It has no
timers or scheduler; pipes and reads run synchronously until they finish,
waiting on the descriptor when it is not ready. It offers no helpers for
starting or controlling processes.