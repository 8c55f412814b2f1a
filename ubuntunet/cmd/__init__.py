# This file is part of ubuntunet. See LICENSE file for license information.
