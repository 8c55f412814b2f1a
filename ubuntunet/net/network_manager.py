# This file is part of ubuntunet. See LICENSE file for license information.

import configparser
import io
import logging
from typing import List, Optional, Tuple
from urllib.parse import quote

from ubuntunet import atomic_helper, settings
from ubuntunet.net import RenderError, UnsupportedMatchError, renderer
from ubuntunet.net.definitions import (
    AccessPoint,
    Backend,
    DefType,
    NetDefinition,
    Registry,
    WifiMode,
)
from ubuntunet.net.match import device_specifier
from ubuntunet.net.udev import generate_nm_unmanaged_rule

LOG = logging.getLogger(__name__)

# NetworkManager does not support interface name globbing
NAME_GLOB_CHARS = "*[]?"

KEYFILE_LINE_BREAKS = "\r\n"

# Connection files might contain secrets, NM insists on tight permissions
CONNECTION_MODE = 0o600

TYPE_MAP = {
    DefType.ETHERNET: "ethernet",
    DefType.WIFI: "wifi",
    DefType.BRIDGE: "bridge",
}

# Sections holding the MAC address of physical devices
MAC_SECTION_MAP = {
    DefType.ETHERNET: "802-3-ethernet",
    DefType.WIFI: "802-11-wireless",
}

WIFI_MODE_MAP = {
    WifiMode.INFRASTRUCTURE: "infrastructure",
    WifiMode.ADHOC: "adhoc",
    WifiMode.AP: "ap",
}


class NMConnection:
    """Represents a NetworkManager connection profile.

    Wifi definitions get one connection per access point, as NM requires a
    separate connection for every SSID; all other definitions get exactly
    one connection without access point.
    """

    def __init__(
        self,
        netdef: NetDefinition,
        access_point: Optional[AccessPoint] = None,
    ):
        if netdef.type == DefType.WIFI:
            assert access_point is not None
        else:
            assert access_point is None

        self.netdef = netdef
        self.access_point = access_point

        con_id = settings.PROFILE_PREFIX + netdef.id
        if access_point:
            con_id += "-" + access_point.ssid

        self.config = configparser.ConfigParser(interpolation=None)
        # Identity option name mapping, to achieve case sensitivity
        self.config.optionxform = str  # type: ignore

        self.config["connection"] = {
            "id": con_id,
            "type": TYPE_MAP[netdef.type],
        }

    def _set(self, section, option, value):
        """Sets a property, ensuring the section exists."""
        if not self.config.has_section(section):
            self.config[section] = {}
        self.config[section][option] = value

    def interface_name(self) -> Optional[str]:
        """
        Return the interface name the connection is bound to, or None when
        the device is matched by something other than its name.

        @raises UnsupportedMatchError: if the name is a glob.
        """
        netdef = self.netdef
        if netdef.is_virtual:
            # virtual (created) devices set a name
            return netdef.id
        # physical (existing) devices use matching; MAC matching happens in
        # a separate section, so only names are matched here
        if netdef.set_name:
            return netdef.set_name
        if not netdef.has_match:
            return netdef.id
        name = netdef.match.original_name
        if name:
            if any(c in name for c in NAME_GLOB_CHARS):
                raise UnsupportedMatchError(
                    netdef.id,
                    "NetworkManager definitions do not support name globbing",
                )
            return name
        return None

    def render(self):
        """
        Integrate the definition (and access point) into the connection.
        """
        netdef = self.netdef
        iface_name = self.interface_name()
        if iface_name is not None:
            self.config["connection"]["interface-name"] = iface_name
        if netdef.bridge:
            self.config["connection"]["slave-type"] = "bridge"
            self.config["connection"]["master"] = netdef.bridge

        if not netdef.is_virtual:
            wol = "1" if netdef.wake_on_lan else "0"
            self._set("ethernet", "wake-on-lan", wol)
            if not netdef.set_name and netdef.match.mac:
                self._set(
                    MAC_SECTION_MAP[netdef.type],
                    "mac-address",
                    netdef.match.mac,
                )

        if netdef.dhcp4:
            self._set("ipv4", "method", "auto")

        ap = self.access_point
        if ap:
            # keyfiles hold one value per line
            for value in (ap.ssid, ap.password or ""):
                if any(c in value for c in KEYFILE_LINE_BREAKS):
                    raise RenderError(
                        netdef.id,
                        "access point %r contains a line break" % ap.ssid,
                    )
            if ap.mode == WifiMode.AP:
                # hosting an access point takes precedence over DHCP
                self._set("ipv4", "method", "shared")
            self._set("wifi", "ssid", ap.ssid)
            self._set("wifi", "mode", WIFI_MODE_MAP[ap.mode])
            if ap.password:
                self._set("wifi-security", "key-mgmt", "wpa-psk")
                self._set("wifi-security", "psk", ap.password)
        return self

    def filename(self, connections_dir=settings.NM_CONNECTIONS_DIR) -> str:
        return conn_filename(
            self.netdef.id,
            self.access_point.ssid if self.access_point else None,
            connections_dir,
        )

    def dump(self):
        """
        Stringify.
        """

        buf = io.StringIO()
        self.config.write(buf, space_around_delimiters=False)
        header = "# Generated by ubuntunet. Changes will be lost.\n\n"
        return header + buf.getvalue()


def conn_filename(
    def_id, ssid=None, connections_dir=settings.NM_CONNECTIONS_DIR
):
    con_file = settings.PROFILE_PREFIX + def_id
    if ssid is not None:
        con_file += "-" + escape_ssid(ssid)
    return f"{connections_dir}/{con_file}"


def escape_ssid(ssid):
    """Percent-escape the reserved ASCII characters of ssid.

    Non-ASCII characters are kept as they are.
    """
    return "".join(c if ord(c) > 0x7F else quote(c, safe="") for c in ssid)


def collect_unmanaged(registry: Registry) -> Tuple[List[str], str]:
    """
    Walk all definitions not handled by NetworkManager.

    @return: a tuple of the device specifiers NetworkManager must leave
        alone, and the udev rules text for the devices NetworkManager cannot
        match itself (driver matches).
    """
    specifiers: List[str] = []
    drivers: List[str] = []
    rules = ""
    for netdef in registry.values():
        if netdef.backend == Backend.NM:
            continue
        driver = netdef.match.driver
        if driver:
            # NM cannot match on drivers, so ignore these via udev rules
            if driver not in drivers:
                drivers.append(driver)
                rules += generate_nm_unmanaged_rule(driver)
            continue
        specifier = device_specifier(netdef)
        if specifier not in specifiers:
            specifiers.append(specifier)
    return specifiers, rules


def unmanaged_conf(specifiers: List[str]) -> str:
    """Return NetworkManager.conf content leaving specifiers unmanaged."""
    content = "[keyfile]\n# devices managed by networkd\nunmanaged-devices+="
    content += "".join("%s," % spec for spec in specifiers)
    return content + "\n"


class Renderer(renderer.Renderer):
    """Renders network definitions as NetworkManager keyfile connections."""

    def __init__(self, config=None):
        if not config:
            config = {}
        builtin = settings.NM_RENDERER_BUILTIN
        self.connections_dir = config.get(
            "connections_dir", builtin["connections_dir"]
        )
        self.conf_file = config.get("conf_file", builtin["conf_file"])
        self.udev_rules_file = config.get(
            "udev_rules_file", builtin["udev_rules_file"]
        )

    def connections(self, netdef: NetDefinition) -> List[NMConnection]:
        """Build the rendered connections of a definition for NM."""
        if netdef.match.driver and not netdef.set_name:
            raise UnsupportedMatchError(
                netdef.id,
                "NetworkManager definitions do not support matching by driver",
            )
        # for wifi we need to create a separate connection for every SSID
        if netdef.type == DefType.WIFI:
            assert netdef.access_points is not None
            return [
                NMConnection(netdef, ap).render()
                for ap in netdef.access_points.values()
            ]
        assert netdef.access_points is None
        return [NMConnection(netdef).render()]

    def render_definition(self, netdef, target=None):
        if netdef.backend != Backend.NM:
            LOG.debug(
                "NetworkManager: definition %s is not for us (backend %s)",
                netdef.id,
                netdef.backend,
            )
            return []

        # everything is rendered before anything is written, so a definition
        # which cannot be expressed does not leave any files behind
        written = []
        for conn in self.connections(netdef):
            written.append(
                atomic_helper.write_target_file(
                    conn.dump(),
                    target,
                    conn.filename(self.connections_dir),
                    mode=CONNECTION_MODE,
                    secret=True,
                )
            )
        return written

    def finish(self, registry, target=None):
        if not registry:
            return []

        written = []
        # Set all devices not managed by us to unmanaged, so that NM does
        # not auto-connect and interfere
        specifiers, rules = collect_unmanaged(registry)
        if specifiers:
            written.append(
                atomic_helper.write_target_file(
                    unmanaged_conf(specifiers), target, self.conf_file
                )
            )
        if rules:
            written.append(
                atomic_helper.write_target_file(
                    rules, target, self.udev_rules_file
                )
            )
        return written
