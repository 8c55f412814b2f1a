# This file is part of ubuntunet. See LICENSE file for license information.

from tests.unittests.helpers import bridge, ethernet, match, wifi
from ubuntunet.net.definitions import (
    VIRTUAL_TYPES,
    Backend,
    DefType,
    NetDefinition,
)


class TestNetDefinition:
    def test_defaults(self):
        netdef = ethernet("eth0")
        assert "eth0" == netdef.id
        assert DefType.ETHERNET == netdef.type
        assert Backend.NM == netdef.backend
        assert not netdef.has_match
        assert netdef.match.mac is None
        assert netdef.match.driver is None
        assert netdef.match.original_name is None
        assert netdef.set_name is None
        assert netdef.bridge is None
        assert not netdef.dhcp4
        assert not netdef.wake_on_lan
        assert netdef.access_points is None

    def test_has_match(self):
        assert ethernet("eth0", match=match()).has_match
        assert ethernet("eth0", match=match(name="en*")).has_match

    def test_access_points_are_passed_through(self):
        assert {} == wifi("wl0").access_points
        netdef = NetDefinition("wl0", DefType.WIFI, Backend.NM)
        assert netdef.access_points is None

    def test_virtual(self):
        assert bridge("br0").is_virtual
        assert not ethernet("eth0").is_virtual
        assert not wifi("wl0").is_virtual
        assert {DefType.BRIDGE} == set(VIRTUAL_TYPES)

    def test_str_is_value(self):
        assert "NetworkManager" == str(Backend.NM)
        assert "bridge" == str(DefType.BRIDGE)

    def test_repr(self):
        assert "NetDefinition(id='eth0', type=ethernet, backend=networkd)" == (
            repr(ethernet("eth0", backend=Backend.NETWORKD))
        )
