#!/usr/bin/env python3
# This file is part of ubuntunet. See LICENSE file for license information.

"""Generate NetworkManager configuration from network definitions."""
import argparse
import logging
import sys

from ubuntunet import log, settings, util
from ubuntunet.exceptions import DefinitionsError
from ubuntunet.net import RenderError, network_manager
from ubuntunet.net.parse import SchemaValidationError, load_definitions
from ubuntunet.version import version_string

NAME = "ubuntu-network-generate"
LOG = logging.getLogger(__name__)


def get_parser(parser=None):
    """Build or extend an arg parser for the generator.

    @param parser: Optional existing ArgumentParser instance representing the
        subcommand which will be extended to support the args of this utility.

    @returns: ArgumentParser with proper argument configuration.
    """
    if not parser:
        parser = argparse.ArgumentParser(prog=NAME, description=__doc__)
    parser.add_argument(
        "-r",
        "--root-dir",
        metavar="PATH",
        help="generate configuration below this root directory",
    )
    parser.add_argument(
        "--debug", action="store_true", help="enable debug logging to stderr."
    )
    parser.add_argument(
        "--version", action="version", version=version_string()
    )
    parser.add_argument(
        "files",
        metavar="CONFIG",
        nargs="*",
        help=(
            "network definition files to read (default: %s below the root"
            " directory)" % settings.DEFINITIONS_GLOB
        ),
    )
    return parser


def error(msg, rc=1):
    """Print msg to stderr and return rc, the process exit status."""
    sys.stderr.write("ERROR: %s\n" % msg)
    return rc


def handle_args(name, args):
    if args.debug:
        log.configure_root_logger(level=logging.DEBUG)
    else:
        log.configure_root_logger(level=logging.WARNING)

    files = args.files or util.find_files(
        settings.DEFINITIONS_GLOB, args.root_dir
    )
    LOG.debug("%s: reading definitions from %s", name, files)
    try:
        registry = load_definitions(files)
    except (DefinitionsError, SchemaValidationError) as e:
        return error(e)
    except OSError as e:
        return error("cannot read definitions: %s" % e)

    renderer = network_manager.Renderer()
    try:
        written = renderer.render_definitions(registry, target=args.root_dir)
    except RenderError as e:
        return error(e)
    except OSError as e:
        return error("cannot write configuration: %s" % e)
    LOG.debug("%s: wrote %s", name, written)
    return 0


def main(sysv_args=None):
    args = get_parser().parse_args(sysv_args)
    return handle_args(NAME, args)


if __name__ == "__main__":
    sys.exit(main())
