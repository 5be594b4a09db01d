# errtext

`errtext` turns an operating-system error number into the message the
platform gives for it. The message is cut to fit a length limit in the
same way that a fixed-size character buffer would cut it.

## Installing

```
pip install errtext
```

## Using it

```python
import errno

from errtext.strerror import strerror

print(strerror(errno.ENOENT))        # "No such file or directory"
print(strerror(errno.ENOENT, 8))     # "No such"
```

The exact wording of a message comes from the platform. The examples above
show the text given on Linux and macOS.

### `errtext.strerror.strerror(errnum, buffer_length=1024)`

- `errnum` is the error number, for example one of the constants in the
  standard `errno` module.
- `buffer_length` is the size of the buffer that the message must fit in.
  One place is counted for the terminator, so the returned text is at most
  `buffer_length - 1` characters long. `buffer_length=1` gives an empty
  string.

If `buffer_length` is less than 1, a `ValueError` is raised.

The message is looked up with `os.strerror`. If that lookup fails, for
example because the number is too large for the platform, the function
returns the text in `errtext.strerror.FALLBACK_MESSAGE`
(`"Failed to get error"`), shortened by the same rule. Some platforms
describe numbers they do not know with a message of their own, such as
`"Unknown error 12345"`. That message is returned as it is.

## What it does not do

`errtext` is a library with a single function. It has no command-line tool,
and it does not read or change `errno` itself. You pass in the number you
want described.

## Running the tests

```
pip install errtext[test]
pytest
```