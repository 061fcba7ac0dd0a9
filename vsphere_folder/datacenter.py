# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

from .inventory import InventoryLookupError, canonicalize_path, join_inventory_path
from .utils import memoproperty

__all__ = ['VmwareDatacenter', 'resolve_datacenter']


class VmwareDatacenter:

    def __init__(self, reference):
        self.reference = reference

    @property
    def name(self):
        return self.reference.name

    @property
    def inventory_path(self):
        return self.reference.path

    @memoproperty
    def vm_path(self):
        "Inventory path of the root of this datacenter's VM folder tree"
        return join_inventory_path(self.inventory_path, 'vm')

    def __repr__(self):
        return f"<{self.__class__.__name__}: {self.inventory_path}>"


def resolve_datacenter(inventory, name, config_layout=None):
    '''
    Find the datacenter *name* refers to.  *name* may be the datacenter's name or its full inventory path.

    If *name* is empty, the default datacenter is used: ``vmware.datacenter`` from *config_layout* if that is set, otherwise the only datacenter in the inventory.

    :raises InventoryLookupError: if no datacenter matches, if a bare name matches datacenters in more than one folder, or if there is no single default.
    '''
    if not name and config_layout is not None:
        name = config_layout.vmware.datacenter or ""
    datacenters = inventory.datacenters()
    if name:
        # An exact inventory path wins over a bare name
        path = canonicalize_path(name)
        matches = [dc for dc in datacenters if dc.path == path]
        if not matches:
            matches = [dc for dc in datacenters if dc.name == name]
        if not matches:
            raise InventoryLookupError(f"datacenter '{name}' not found")
        if len(matches) > 1:
            raise InventoryLookupError(f"datacenter '{name}' resolves to multiple instances, please specify")
        return VmwareDatacenter(matches[0])
    if not datacenters:
        raise InventoryLookupError('no default datacenter found')
    if len(datacenters) > 1:
        raise InventoryLookupError('default datacenter resolves to multiple instances, please specify')
    return VmwareDatacenter(datacenters[0])
