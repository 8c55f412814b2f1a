# This file is part of ubuntunet. See LICENSE file for license information.

import logging
import os
import tempfile

from ubuntunet import util

_DEF_PERMS = 0o644
LOG = logging.getLogger(__name__)


def write_file(filename, content, mode=_DEF_PERMS):
    """write content to filename in binary mode, set permissions to mode"""

    content = util.encode_text(content)

    tf = None
    try:
        dirname = os.path.dirname(filename)
        util.ensure_dir(dirname)
        tf = tempfile.NamedTemporaryFile(dir=dirname, delete=False, mode="wb")
        LOG.debug(
            "Atomically writing to file %s (via temporary file %s) - [%o]"
            " %d bytes",
            filename,
            tf.name,
            mode,
            len(content),
        )
        tf.write(content)
        tf.close()
        os.chmod(tf.name, mode)
        os.rename(tf.name, filename)
    except Exception as e:
        if tf is not None:
            tf.close()
            os.unlink(tf.name)
        raise e


def write_target_file(content, target, path, mode=_DEF_PERMS, secret=False):
    """Write content to path inside target (or / when target is None).

    With secret=True the process umask is narrowed to 077 for the duration
    of the write so that no intermediate file is ever readable by others.
    """
    filename = util.target_path(target, path)
    if not secret:
        write_file(filename, content, mode)
        return filename
    with util.umask(0o077):
        write_file(filename, content, mode)
    return filename
