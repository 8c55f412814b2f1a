# This file is part of ubuntunet. See LICENSE file for license information.

__VERSION__ = "0.3"
_PACKAGED_VERSION = "@@PACKAGED_VERSION@@"


def version_string():
    """Extract a version string from ubuntunet."""
    if not _PACKAGED_VERSION.startswith("@@"):
        return _PACKAGED_VERSION
    return __VERSION__
