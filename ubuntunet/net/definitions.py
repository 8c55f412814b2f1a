# This file is part of ubuntunet. See LICENSE file for license information.
"""Backend-agnostic network device definitions."""

from enum import Enum
from typing import Dict, NamedTuple, Optional


class DefType(Enum):
    """Device kinds; kinds in VIRTUAL_TYPES are created, never matched."""

    ETHERNET = "ethernet"
    WIFI = "wifi"
    BRIDGE = "bridge"

    @property
    def is_virtual(self) -> bool:
        return self in VIRTUAL_TYPES

    def __str__(self):  # pylint: disable=invalid-str-returned
        return self.value


VIRTUAL_TYPES = frozenset([DefType.BRIDGE])


class Backend(Enum):
    NETWORKD = "networkd"
    NM = "NetworkManager"

    def __str__(self):  # pylint: disable=invalid-str-returned
        return self.value


class WifiMode(Enum):
    INFRASTRUCTURE = "infrastructure"
    ADHOC = "adhoc"
    AP = "ap"

    def __str__(self):  # pylint: disable=invalid-str-returned
        return self.value


class Match(NamedTuple):
    mac: Optional[str] = None
    driver: Optional[str] = None
    original_name: Optional[str] = None


class AccessPoint(NamedTuple):
    ssid: str
    mode: WifiMode = WifiMode.INFRASTRUCTURE
    password: Optional[str] = None


class NetDefinition:
    """A single network device definition as produced by the parser.

    Renderers only read definitions. access_points is a dict keyed by SSID
    for wifi definitions and None for every other type.
    """

    def __init__(
        self,
        def_id: str,
        def_type: DefType,
        backend: Backend,
        match: Optional[Match] = None,
        set_name: Optional[str] = None,
        bridge: Optional[str] = None,
        dhcp4: bool = False,
        wake_on_lan: bool = False,
        access_points: Optional[Dict[str, AccessPoint]] = None,
    ):
        self.id = def_id
        self.type = def_type
        self.backend = backend
        self.has_match = match is not None
        self.match = match if match is not None else Match()
        self.set_name = set_name
        self.bridge = bridge
        self.dhcp4 = dhcp4
        self.wake_on_lan = wake_on_lan
        self.access_points = access_points

    @property
    def is_virtual(self) -> bool:
        return self.type.is_virtual

    def __repr__(self):
        return "%s(id=%r, type=%s, backend=%s)" % (
            self.__class__.__name__,
            self.id,
            self.type,
            self.backend,
        )


# Registry of definitions, keyed by definition id
Registry = Dict[str, NetDefinition]
