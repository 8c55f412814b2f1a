# This file is part of ubuntunet. See LICENSE file for license information.

from ubuntunet.exceptions import UbuntuNetError


class RenderError(UbuntuNetError):
    """A definition cannot be expressed by the renderer's target format."""

    def __init__(self, def_id, reason):
        self.def_id = def_id
        self.reason = reason
        super().__init__(f"{def_id}: {reason}")


class UnsupportedMatchError(RenderError):
    pass
