# This file is part of ubuntunet. See LICENSE file for license information.
"""Load netplan-style YAML into a registry of network definitions.

Only structural validation happens here; the renderers trust the resulting
definitions.
"""

import logging
from typing import Iterable, List, NamedTuple, Optional

from jsonschema import Draft4Validator

from ubuntunet import safeyaml, settings, util
from ubuntunet.exceptions import DefinitionsError
from ubuntunet.net.definitions import (
    AccessPoint,
    Backend,
    DefType,
    Match,
    NetDefinition,
    Registry,
    WifiMode,
)

LOG = logging.getLogger(__name__)

_RENDERER = {"enum": [b.value for b in Backend]}

_COMMON_PROPERTIES = {
    "renderer": _RENDERER,
    "dhcp4": {"type": "boolean"},
}

_PHYSICAL_PROPERTIES = dict(
    _COMMON_PROPERTIES,
    **{
        "match": {
            "type": "object",
            "properties": {
                "macaddress": {"type": "string"},
                "driver": {"type": "string"},
                "name": {"type": "string"},
            },
            "additionalProperties": False,
        },
        "set-name": {"type": "string", "minLength": 1},
        "wakeonlan": {"type": "boolean"},
    }
)

_ACCESS_POINT = {
    "type": ["object", "null"],
    "properties": {
        "password": {"type": "string"},
        "mode": {"enum": ["infrastructure", "adhoc", "ap"]},
    },
    "additionalProperties": False,
}

NETWORK_SCHEMA = {
    "type": "object",
    "required": ["network"],
    "properties": {
        "network": {
            "type": "object",
            "properties": {
                "version": {"enum": [2]},
                "renderer": _RENDERER,
                "ethernets": {
                    "type": "object",
                    "additionalProperties": {
                        "type": "object",
                        "properties": _PHYSICAL_PROPERTIES,
                        "additionalProperties": False,
                    },
                },
                "wifis": {
                    "type": "object",
                    "additionalProperties": {
                        "type": "object",
                        "properties": dict(
                            _PHYSICAL_PROPERTIES,
                            **{
                                "access-points": {
                                    "type": "object",
                                    "additionalProperties": _ACCESS_POINT,
                                },
                            }
                        ),
                        "additionalProperties": False,
                    },
                },
                "bridges": {
                    "type": "object",
                    "additionalProperties": {
                        "type": "object",
                        "properties": dict(
                            _COMMON_PROPERTIES,
                            **{
                                "interfaces": {
                                    "type": "array",
                                    "items": {"type": "string"},
                                },
                            }
                        ),
                        "additionalProperties": False,
                    },
                },
            },
            "additionalProperties": False,
        },
    },
}

# definition type of each section, in the order definitions are created
SECTION_TYPES = [
    ("ethernets", DefType.ETHERNET),
    ("wifis", DefType.WIFI),
    ("bridges", DefType.BRIDGE),
]


class SchemaProblem(NamedTuple):
    path: str
    message: str

    def format(self) -> str:
        return f"{self.path}: {self.message}"


class SchemaValidationError(ValueError):
    """Raised when network definitions do not match NETWORK_SCHEMA."""

    def __init__(self, schema_errors: List[SchemaProblem], source="<data>"):
        self.schema_errors = sorted(set(schema_errors))
        self.source = source
        message = "%s: invalid network definitions: %s" % (
            source,
            ", ".join(p.format() for p in self.schema_errors),
        )
        super().__init__(message)


def validate_network_schema(config, source="<data>"):
    """Validate config against NETWORK_SCHEMA.

    @raises: SchemaValidationError listing every problem found.
    """
    validator = Draft4Validator(NETWORK_SCHEMA)
    errors = []
    for schema_error in validator.iter_errors(config):
        path = ".".join([str(p) for p in schema_error.path])
        errors.append(SchemaProblem(path, schema_error.message))
    if errors:
        raise SchemaValidationError(errors, source)


def _parse_match(cfg) -> Optional[Match]:
    if "match" not in cfg:
        return None
    match = cfg["match"] or {}
    return Match(
        mac=match.get("macaddress"),
        driver=match.get("driver"),
        original_name=match.get("name"),
    )


def _parse_access_points(def_id, cfg):
    access_points = {}
    for ssid, ap_cfg in (cfg.get("access-points") or {}).items():
        ssid = str(ssid)
        if not ssid:
            raise DefinitionsError("%s: empty SSID" % def_id)
        ap_cfg = ap_cfg or {}
        access_points[ssid] = AccessPoint(
            ssid=ssid,
            mode=WifiMode(ap_cfg.get("mode", WifiMode.INFRASTRUCTURE.value)),
            password=ap_cfg.get("password"),
        )
    return access_points


def _parse_definition(def_id, def_type, cfg, default_backend):
    backend = Backend(cfg.get("renderer", default_backend.value))
    if def_type == DefType.WIFI and backend == Backend.NETWORKD:
        raise DefinitionsError(
            "%s: networkd backend does not support wifi" % def_id
        )
    kwargs = {
        "backend": backend,
        "dhcp4": cfg.get("dhcp4", False),
    }
    if not def_type.is_virtual:
        kwargs.update(
            match=_parse_match(cfg),
            set_name=cfg.get("set-name"),
            wake_on_lan=cfg.get("wakeonlan", False),
        )
    if def_type == DefType.WIFI:
        kwargs["access_points"] = _parse_access_points(def_id, cfg)
    return NetDefinition(def_id, def_type, **kwargs)


def _assign_bridge_members(registry: Registry, bridges):
    for bridge_id, cfg in bridges.items():
        for member in cfg.get("interfaces") or []:
            if member not in registry:
                raise DefinitionsError(
                    "%s: interface %s is not defined" % (bridge_id, member)
                )
            netdef = registry[member]
            if netdef.bridge and netdef.bridge != bridge_id:
                raise DefinitionsError(
                    "%s: interface %s is already assigned to bridge %s"
                    % (bridge_id, member, netdef.bridge)
                )
            netdef.bridge = bridge_id


def parse_network_config(
    config, registry: Optional[Registry] = None, source="<data>"
) -> Registry:
    """Add the definitions of a loaded network config to registry.

    A definition replaces an earlier one with the same id.
    """
    if registry is None:
        registry = {}
    if not config:
        LOG.debug("%s: no network definitions", source)
        return registry
    validate_network_schema(config, source)
    network = config["network"] or {}
    default_backend = Backend(
        network.get("renderer", settings.DEFAULT_BACKEND)
    )
    for section, def_type in SECTION_TYPES:
        for def_id, cfg in (network.get(section) or {}).items():
            def_id = str(def_id)
            if def_id in registry:
                LOG.debug("%s: redefining %s", source, def_id)
            registry[def_id] = _parse_definition(
                def_id, def_type, cfg or {}, default_backend
            )
    _assign_bridge_members(registry, network.get("bridges") or {})
    return registry


def load_definitions(paths: Iterable[str]) -> Registry:
    """Load and merge network definitions from the YAML files in paths."""
    registry: Registry = {}
    for path in paths:
        try:
            config = safeyaml.load(util.load_text_file(path))
        except safeyaml.YAMLError as e:
            raise DefinitionsError("%s: invalid YAML: %s" % (path, e)) from e
        parse_network_config(config, registry, source=path)
    return registry
