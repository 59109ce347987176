# splitcrypt

A library for cutting large files into numbered parts, optionally encrypting
each part, and joining the parts back into one file. It is meant for
preparing backups for storage that limits the size of a single object.

## Encryption (`splitcrypt.crypto`)

`build_crypto_processor(key)` returns a `CryptoProcessor`:

- with `None`, a `NoEncryption` processor whose `encrypt` and `decrypt`
  return the data unchanged;
- with a standard base64 string decoding to 32 bytes, a `ChachaEncryption`
  processor.

`ChachaEncryption` encrypts each piece of data independently with ChaCha20.
The stored form is:

```
12-byte random nonce | ciphertext | SHA-256 of the plaintext (32 bytes)
```

`decrypt` recomputes the hash and raises `CryptoError` (a `ValueError`) on a
mismatch, and also when the data is shorter than 44 bytes. Invalid base64 or
a key that is not 32 bytes long also raises `CryptoError`.
`ChachaEncryption(key_bytes)` and `ChachaEncryption.from_base64(text)` build a
processor directly.

```python
import base64
import os

from splitcrypt.crypto import build_crypto_processor

key_base64 = base64.b64encode(os.urandom(32)).decode()
processor = build_crypto_processor(key_base64)

sealed = processor.encrypt(b"hello")
assert processor.decrypt(sealed) == b"hello"

plain = build_crypto_processor(None)
assert plain.encrypt(b"hello") == b"hello"
```

## Options and parameters (`splitcrypt.options`)

- `parse_size(text)` reads a byte count, optionally followed by `K`, `M` or
  `G` (powers of 1024). The text must be at least two characters long, so
  `"5"` is rejected while `"512"` and `"64K"` are accepted. Errors raise
  `ValueError`.
- `split_arguments(argv)` returns `(arguments, options)`: positional
  arguments in order, and a dict built from `--name=value` items (a bare
  `--name` maps to `""`).
- `parse_file_name(name, config)` splits `remote:path`, returning the value
  that `config` holds for `remote` together with `path`; a name without `:`
  gives `(None, name)`. An unknown remote raises `ValueError`.
- `build_command_parameters(config, parameters, options)` produces a
  `CommandParameters` dataclass with `crypto_processor`, `max_file_size`,
  `dry_run`, `decrypt` and `from_part`. `encryption_key` and `max_file_size`
  are looked up in `options`, then `parameters`, then `config`;
  `max_file_size` defaults to 2**64 - 1. `dry_run` and `decrypt` are set when
  those keys are present in `options`, and `from_part` is read from `options`
  only (default 0). It prints the chosen maximum size and, when set,
  `Dry run` and `Decrypt`.

```python
from splitcrypt.options import parse_size, split_arguments

assert parse_size("10M") == 10 * 1024 * 1024
assert split_arguments(["cp", "a", "--dry_run", "--max_file_size=1G"]) == (
    ["cp", "a"],
    {"dry_run": "", "max_file_size": "1G"},
)
```

## Splitting and joining local files (`splitcrypt.localfile`)

`run_local_copy(source, dest, parameters)`:

- without `decrypt`, cuts `source` into parts of at most
  `max_file_size` bytes, encrypts each one and writes it as `dest.0`,
  `dest.1`, …; the suffix is zero-padded to two digits when there are more
  than 10 parts and to three when there are more than 100. A file that fits
  in one part is written as `dest` itself, and an empty file produces no
  parts.
- with `decrypt`, takes every file in the source's directory whose name
  starts with the source's name, in name order, decrypts each one and
  appends it to `dest`.

With `dry_run` the parts are still read and processed but nothing is written
for them (in decrypt mode `dest` is still created, empty). Each part prints a
`File part N size S file name NAME` line.

`LocalFile` gives part-by-part access. `LocalFile.open(name, parameters)`
opens the source, `num_parts` tells how many parts there are, and
`get_part(n, dest_name)` returns the processed bytes and the part's file
name; a part number out of range raises `IndexError`, and a short read
raises `ValueError("Corrupted file")`. Close it with `close()` or use it as a
context manager.

## Bucket listings (`splitcrypt.listing`)

`parse_list_bucket_result(xml_text)` reads a `ListBucketResult` XML document
(namespaced or not) into a `ListBucketResult` holding `BucketContents`
entries with `key` and `size`. Malformed XML, a missing `Key` or `Size`, or a
size that is not a non-negative integer raises `ValueError`.
`ListBucketResult.lines()` returns `"key size"` strings and `show()` prints
them.

## What it does not do

splitcrypt has no command-line program and does not talk to any storage
service: it does not upload, download, or list remote objects, sign requests
or produce pre-signed URLs, and it does not read configuration files itself.
Configuration is passed in as mappings, and listing XML must be obtained by
the caller. `from_part` is carried in `CommandParameters`, but
`run_local_copy` always processes every part.