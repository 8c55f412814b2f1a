# This file is part of ubuntunet. See LICENSE file for license information.

import abc
import logging
from typing import List, Optional

from ubuntunet.net.definitions import NetDefinition, Registry

LOG = logging.getLogger(__name__)


class Renderer(abc.ABC):
    def __init__(self, config=None):
        pass

    @abc.abstractmethod
    def render_definition(
        self, netdef: NetDefinition, target: Optional[str] = None
    ) -> List[str]:
        """Write the configuration of a single definition.

        @return: the list of files written.
        """

    @abc.abstractmethod
    def finish(
        self, registry: Registry, target: Optional[str] = None
    ) -> List[str]:
        """Write configuration depending on the complete registry.

        Called once, after render_definition was called for every
        definition in registry.
        """

    def render_definitions(
        self, registry: Registry, target: Optional[str] = None
    ) -> List[str]:
        """Render all definitions in registry, then finish."""
        written = []
        for netdef in registry.values():
            written.extend(self.render_definition(netdef, target=target))
        written.extend(self.finish(registry, target=target))
        LOG.debug("%s wrote %d files", self.__class__.__name__, len(written))
        return written
