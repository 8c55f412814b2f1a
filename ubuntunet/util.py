# This file is part of ubuntunet. See LICENSE file for license information.

import contextlib
import glob
import logging
import os

LOG = logging.getLogger(__name__)


def decode_binary(blob, encoding="utf-8"):
    # Converts a binary type into a text type using given encoding.
    if isinstance(blob, str):
        return blob
    return blob.decode(encoding)


def encode_text(text, encoding="utf-8"):
    # Converts a text string into a binary type using given encoding.
    if isinstance(text, bytes):
        return text
    return text.encode(encoding)


def load_text_file(fname) -> str:
    LOG.debug("Reading from %s", fname)
    with open(fname, "rb") as fh:
        contents = fh.read()
    LOG.debug("Read %s bytes from %s", len(contents), fname)
    return decode_binary(contents)


def ensure_dir(path):
    if not os.path.isdir(path):
        os.makedirs(path)


@contextlib.contextmanager
def umask(n_msk):
    old = os.umask(n_msk)
    try:
        yield old
    finally:
        os.umask(old)


def target_path(target=None, path=None):
    # return 'path' inside target, accepting target as None
    if target in (None, ""):
        target = "/"
    elif not isinstance(target, str):
        raise ValueError(f"Unexpected input for target: {target}")
    else:
        target = os.path.abspath(target)
        # abspath("//") returns "//" specifically for 2 slashes.
        if target.startswith("//"):
            target = target[1:]

    if not path:
        return target

    # os.path.join("/etc", "/foo") returns "/foo". Chomp all leading /.
    while len(path) and path[0] == "/":
        path = path[1:]
    return os.path.join(target, path)


def find_files(pattern, target=None):
    """Return the sorted list of files matching pattern inside target."""
    return sorted(glob.glob(target_path(target, pattern)))
