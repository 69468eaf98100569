# wiringcore

wiringcore provides Wiring-style building blocks for writing board programs
("sketches") in Python. It needs only the standard library.

## Modules

- `wiringcore.common`: the `PinStatus`, `PinMode` and `BitOrder` enums, and the
  helpers `constrain`, `map_range`, `radians`, `degrees`, `sq` and `make_word`.
  It also has the bit helpers `bit`, `bit_read`, `bit_set`, `bit_clear`,
  `bit_write`, `low_byte` and `high_byte`. The bit helpers return a new value
  and leave their argument alone. Random numbers come from `random_seed` and
  `random_number`.
- `wiringcore.itoa`: `itoa` and `utoa` format integers in bases 2 to 16 with
  lower-case digits. Any other base gives an empty string.
- `wiringcore.timing`: `init_time`, `millis`, `micros`, `delay`,
  `delay_microseconds`, `yield_control`, and `run_sketch(setup, loop, cycles)`.
  `run_sketch` resets the clock, calls `setup` once and then calls `loop`.
  It runs `loop` `cycles` times, or forever when `cycles` is `None`.
- `wiringcore.pulse`: `pulse_in` and `pulse_in_long` measure how long a pulse
  lasts, in microseconds. You pass them a `read` callable that samples the
  level. They return 0 if `timeout` runs out first.
- `wiringcore.wstring_base` and `wiringcore.wstring`: `ArduinoString` is a
  mutable string that compares the way C strings do. It has `concat`, `+`/`+=`,
  `compare_to`, `equals`, `equals_ignore_case`, `starts_with`, `ends_with`,
  `char_at`, `set_char_at` and `get_bytes`. It also has `index_of`,
  `last_index_of`, `substring`, `replace`, `remove`, `to_lower_case`,
  `to_upper_case`, `trim`, `to_int`, `to_float` and `to_double`. A string built
  from `None` is invalid, which makes it false in a boolean context.
  `format_fixed` formats a float to a fixed number of decimals in a given width.
- `wiringcore.printer`: the abstract `Print` base class. A subclass only
  supplies `write_byte`. In return it gets `write`, `print`, `println` (which
  ends lines with CR LF) and `clear_write_error`. The module also has
  `format_number`, which uses upper-case digits, and `format_float`, which
  gives `nan`, `inf` or `ovf` when a value cannot be shown. The constants
  `DEC`, `HEX`, `OCT` and `BIN` name the bases.
- `wiringcore.stream`: the abstract `Stream` class adds timed reading to
  `Print`. Its methods are `set_timeout`, `find`, `find_until`, `find_multi`,
  `parse_int`, `parse_float`, `read_bytes`, `read_bytes_until`, `read_string`
  and `read_string_until`. `LookaheadMode` controls what is skipped before a
  number. `BytesStream` is an in-memory stream that reads back, first in
  first out, what was given to it or written to it.
- `wiringcore.ip_address`: `IPAddress` is an IPv4 address. You can build it
  from four octets, from a 32-bit integer whose lowest byte is the first octet,
  or from four bytes. `IPAddress.from_string` parses dotted text and raises
  `ValueError` when the text is malformed. `INADDR_NONE` is `0.0.0.0`.

## Install

```
pip install .
```

## Examples

Running a sketch:

```python
from wiringcore.timing import run_sketch, millis

def setup():
    print("started")

def loop():
    print(millis())

run_sketch(setup, loop, cycles=3)
```

Parsing numbers from a stream:

```python
from wiringcore.stream import BytesStream

stream = BytesStream(b"temp=21.5;humidity=40")
stream.set_timeout(0)            # don't wait for more input once the buffer is empty
stream.find(b"temp=")
print(stream.parse_float())      # about 21.5
stream.find(b"humidity=")
print(stream.parse_int())        # 40
```

Printing into your own sink:

```python
from wiringcore.printer import Print, HEX

class Collector(Print):
    def __init__(self):
        super().__init__()
        self.data = bytearray()

    def write_byte(self, value):
        self.data.append(value)
        return 1

out = Collector()
out.print(255, HEX)      # "FF"
out.print(" ")
out.println(3.14159, 3)  # "3.142\r\n"
print(out.data)
```

Working with strings and addresses:

```python
from wiringcore.wstring import ArduinoString
from wiringcore.ip_address import IPAddress

s = ArduinoString("  Hello World  ")
s.trim()
s.replace("World", "Board")
print(s)                      # Hello Board

addr = IPAddress.from_string("192.168.1.10")
print(addr, int(addr))
```

## What it does not do

wiringcore does not talk to hardware. It has no GPIO, analog or interrupt
access, and it has no serial-port driver. To read a pin, pass your own callable
to `pulse_in`. To use a device, build it on `Print` or `Stream`.

## Tests

```
pip install .[test]
pytest
```