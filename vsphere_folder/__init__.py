# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import vsphere_folder.folder
import vsphere_folder.inventory

__all__ = []

from .utils import memoproperty, wait_for_task
__all__ += ['memoproperty', 'wait_for_task']

from .config import ConfigLayout, ConfigSchema
from .credentials import VmwareConfig
__all__ += ['ConfigLayout', 'ConfigSchema', 'VmwareConfig']

from .inventory import *
__all__ += vsphere_folder.inventory.__all__

from .connection import VmwareConnection
from .datacenter import VmwareDatacenter, resolve_datacenter
__all__ += ['VmwareConnection', 'VmwareDatacenter', 'resolve_datacenter']

from .folder import *
__all__ += vsphere_folder.folder.__all__

from .resource import FolderState, VsphereFolderResource
__all__ += ['FolderState', 'VsphereFolderResource']
