# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

from .schema import ConfigSchema, ConfigResolutionFailed
from .layout import ConfigLayout
from .types import ConfigString


__all__ = ("ConfigSchema", "ConfigLayout", 'ConfigResolutionFailed', 'ConfigString')
