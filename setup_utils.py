import os
import re
from typing import List

TOPDIR = os.path.dirname(os.path.realpath(__file__))


def is_f(p: str) -> bool:
    return os.path.isfile(p)


def version_to_pep440(version: str) -> str:
    # git describe can spit out something like 0.3-15-g7f97aee24
    # which is invalid under PEP 440. If we replace the first - with a +
    # that should give us a valid version.
    return version.replace("-", "+", 1)


def get_version() -> str:
    path = os.path.join(TOPDIR, "ubuntunet", "version.py")
    with open(path) as fh:
        match = re.search(r'^__VERSION__ = "([^"]+)"', fh.read(), re.M)
    if not match:
        raise RuntimeError("Unable to find __VERSION__ in %s" % path)
    return version_to_pep440(match.group(1))


def read_requires(fname: str = "requirements.txt") -> List[str]:
    path = os.path.join(TOPDIR, fname)
    if not is_f(path):
        return []
    deps = []
    with open(path) as fh:
        for line in fh:
            line = line.split("#", 1)[0].strip()
            if line:
                deps.append(line)
    return deps
