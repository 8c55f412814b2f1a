# This file is part of ubuntunet. See LICENSE file for license information.


class UbuntuNetError(Exception):
    pass


class DefinitionsError(UbuntuNetError):
    """Raised when network definitions cannot be loaded."""
