# castkit

This package holds three small utilities, each in its own module:

- `castkit.converter` reads a C-style scalar literal and shows it as a char, an int, a float and a double.
- `castkit.serialization` turns a live object into an integer handle and turns the handle back into the same object.
- `castkit.identify` creates a random `A`, `B` or `C` object and reports the concrete type of an object.

It needs nothing outside the standard library.

## Installation

```
pip install .
```

To install the test tools as well, use `pip install .[test]` and then run `pytest`.

## Scalar conversion

`classify(text)` returns a `ScalarType`. It checks the rules below in this order:

| `ScalarType` | input |
|---|---|
| `SPECIAL` | exactly one of `-inff`, `+inff`, `nanf`, `-inf`, `+inf`, `nan` |
| `CHARACTER` | a single character that is not a digit |
| `INTEGER` | a decimal integer in the 32-bit signed range |
| `FLOAT` | a floating literal followed by a single `f`, such as `4.2f` |
| `DOUBLE` | a floating literal with nothing after it, such as `4.2` or `1e300` |
| `OTHER` | anything else |

`convert(text)` returns the four output lines as a list of strings, in the order `char`, `int`, `float`, `double`. A few details:

- A char is shown only when the value lies between 32 and 126. Otherwise the line reads `Non displayable`.
- An int is shown only when the value fits a 32-bit signed int. Otherwise the line reads `Non displayable`.
- A double too large for a float shows `Non displayable` on its float line.
- A `FLOAT` or `DOUBLE` input is shown with as many decimals as it was written with, capped at 6. `precision_of(text)` returns that number, and returns 1 when the input has no `.`.
- Float values are rounded to 32-bit precision.
- For a `SPECIAL` input, the char and int lines read `Impossible`. `nanf`, `+inff` and `-inff` map to `nan`, `+inf` and `-inf` on the double line. `nan`, `+inf` and `-inf` appear unchanged on the double line, and the float line reads `Impossible`.
- For an `OTHER` input, all four lines read `Non displayable`.

### Command line

```
$ castkit-convert 42
char: '*'
int: 42
float: 42.0f
double: 42.0

$ castkit-convert 4.25f
char: Non displayable
int: 4
float: 4.25f
double: 4.25

$ castkit-convert nan
char: Impossible
int: Impossible
float: Impossible
double: nan
```

`castkit-convert` needs exactly one argument. With any other number of arguments it prints `Error` and exits with status 1.

## Serialization

`serialize(obj)` returns an integer handle for `obj`. The handle is valid only while the object is alive. `deserialize(raw)` returns that very object:

- An unknown handle, or the handle of an object that no longer exists, raises `ValueError`.
- An object that cannot be weakly referenced, such as an `int`, raises `TypeError` from `serialize`.

`Data` is a small dataclass with `id` and `name` fields.

```
$ castkit-serialize
```

This command round-trips `Data(42, "Pierre")`. It prints the original and the restored object identities, both in hex, followed by the record's fields.

## Identification

`Base` is the common base class of `A`, `B` and `C`.

- `generate(rng=None)` picks one of the three types, prints `<Name> got instantiated` and returns a new instance. It takes any object that has `randrange`, such as a `random.Random`, and uses the `random` module when none is given.
- `identify_pointer(p)` accepts `None`. It prints `Identifying from pointer`, then `p -> A`, `p -> B`, `p -> C` or `p -> WTF`.
- `identify_reference(p)` prints `Identifying from reference`, then `p = A`, `p = B`, `p = C` or `p = WTF`.
- Both functions return the matching class, or `None` when there is no match.

```
$ castkit-identify
```

This command generates a random instance and identifies a known `A` both ways. It ends with one `Base default Destructor called` line for each of the two objects.

## Library use

```python
import random

from castkit.converter import ScalarType, classify, convert
from castkit.serialization import Data, serialize, deserialize
from castkit.identify import A, generate, identify_pointer, identify_reference

assert classify("42") is ScalarType.INTEGER
assert convert("a")[1] == "int: 97"

record = Data(id=42, name="Pierre")
assert deserialize(serialize(record)) is record

obj = generate(random.Random(0))
assert identify_reference(A()) is A
```

## Limits

Handles from `serialize` are not persistent. They identify objects only within the running process, and they cannot be written out or read back in another session.