# This file is part of ubuntunet. See LICENSE file for license information.

import os

from ubuntunet.net.definitions import (
    AccessPoint,
    Backend,
    DefType,
    Match,
    NetDefinition,
    WifiMode,
)


def ethernet(def_id, backend=Backend.NM, **kwargs):
    return NetDefinition(def_id, DefType.ETHERNET, backend, **kwargs)


def wifi(def_id, access_points=(), backend=Backend.NM, **kwargs):
    aps = {ap.ssid: ap for ap in access_points}
    return NetDefinition(
        def_id, DefType.WIFI, backend, access_points=aps, **kwargs
    )


def bridge(def_id, backend=Backend.NM, **kwargs):
    return NetDefinition(def_id, DefType.BRIDGE, backend, **kwargs)


def access_point(ssid, mode=WifiMode.INFRASTRUCTURE, password=None):
    return AccessPoint(ssid=ssid, mode=mode, password=password)


def match(mac=None, driver=None, name=None):
    return Match(mac=mac, driver=driver, original_name=name)


def registry(*netdefs):
    return {netdef.id: netdef for netdef in netdefs}


def list_files(root):
    """Return all files below root, relative to root."""
    found = []
    for dirpath, _dirnames, filenames in os.walk(root):
        for fname in filenames:
            found.append(os.path.relpath(os.path.join(dirpath, fname), root))
    return sorted(found)


def read_file(root, path):
    with open(os.path.join(root, path)) as fh:
        return fh.read()
