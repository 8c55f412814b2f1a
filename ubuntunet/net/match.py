# This file is part of ubuntunet. See LICENSE file for license information.
"""NetworkManager device specifiers for network definitions.

NetworkManager can refer to devices by MAC address, by interface name or by
device type, but neither by driver nor by name globs. The rules below are
tried in order and the first applicable one produces the specifier.
"""

from typing import Callable, List, Tuple

from ubuntunet.net.definitions import DefType, NetDefinition

# Device type specifiers for definitions without any identity information.
# Wifi is left out: such definitions only ever get here for other backends,
# and networkd does not support wifi.
_TYPE_SPECIFIERS = {
    DefType.ETHERNET: "type:ethernet",
}


def _has_mac(netdef: NetDefinition) -> bool:
    return bool(netdef.match.mac)


def _mac_specifier(netdef: NetDefinition) -> str:
    return "mac:%s" % netdef.match.mac


def _has_name(netdef: NetDefinition) -> bool:
    return bool(
        netdef.match.original_name or netdef.set_name or netdef.is_virtual
    )


def _name_specifier(netdef: NetDefinition) -> str:
    # we always have the renamed name here
    if netdef.is_virtual:
        name = netdef.id
    else:
        name = netdef.set_name or netdef.match.original_name
    return "interface-name:%s" % name


def _any(netdef: NetDefinition) -> bool:
    return True


def _type_specifier(netdef: NetDefinition) -> str:
    specifier = _TYPE_SPECIFIERS.get(netdef.type)
    assert specifier, "no device type specifier for %s" % netdef.type
    return specifier


MATCH_RULES: List[
    Tuple[Callable[[NetDefinition], bool], Callable[[NetDefinition], str]]
] = [
    (_has_mac, _mac_specifier),
    (_has_name, _name_specifier),
    (_any, _type_specifier),
]


def device_specifier(netdef: NetDefinition) -> str:
    """Return the NetworkManager device specifier matching netdef."""
    assert not netdef.match.driver or netdef.set_name
    for applies, specifier in MATCH_RULES:
        if applies(netdef):
            return specifier(netdef)
    raise AssertionError("no match rule for %r" % netdef)
