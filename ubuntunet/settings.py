# This file is part of ubuntunet. See LICENSE file for license information.

# Definitions are read from here when no files are given on the command line
DEFINITIONS_GLOB = "/etc/netplan/*.yaml"

# Backend used for definitions which do not pick one
DEFAULT_BACKEND = "networkd"

# All generated connections and files carry this name
PROFILE_PREFIX = "ubuntu-network-"

NM_RUN_DIR = "/run/NetworkManager"
NM_CONNECTIONS_DIR = NM_RUN_DIR + "/system-connections"
NM_CONF_FILE = NM_RUN_DIR + "/conf.d/ubuntu-network.conf"
UDEV_RULES_FILE = "/run/udev/rules.d/90-ubuntu-network.rules"

# What u get if no renderer config is provided
NM_RENDERER_BUILTIN = {
    "connections_dir": NM_CONNECTIONS_DIR,
    "conf_file": NM_CONF_FILE,
    "udev_rules_file": UDEV_RULES_FILE,
}
