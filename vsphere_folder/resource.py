# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import dataclasses
import logging

from .datacenter import resolve_datacenter
from .folder import FolderSpec, FolderResolver, FolderCreator, FolderPruner
from .inventory import join_inventory_path, relative_inventory_path

logger = logging.getLogger('vsphere_folder')

__all__ = ['FolderState', 'VsphereFolderResource']


@dataclasses.dataclass
class FolderState:

    '''The persisted record of a folder resource.  *id* is ``datacenter/path`` while the folder is managed and empty once it has been deleted or has disappeared.
    '''

    path: str
    datacenter: str = ""
    existing_path: str = ""
    id: str = ""

    def as_dict(self):
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, d):
        fields = {f.name for f in dataclasses.fields(cls)}
        unknown = set(d) - fields
        if unknown:
            raise ValueError(f'unknown folder state fields: {", ".join(sorted(unknown))}')
        if not d.get("path"):
            raise ValueError("folder state must include a path")
        return cls(**{k: "" if v is None else str(v) for k, v in d.items()})


class VsphereFolderResource:

    '''
    Create, read and delete a :class:`FolderState` against an inventory.

    :param inventory: A :class:`~vsphere_folder.inventory.VmwareInventory` or anything with the same operations.

    :param config_layout: If supplied, ``vmware.datacenter`` names the default datacenter.
    '''

    def __init__(self, inventory, config_layout=None):
        self.inventory = inventory
        self.config_layout = config_layout

    def _spec(self, state):
        return FolderSpec(datacenter=state.datacenter, path=state.path,
                          existing_path=state.existing_path)

    def _datacenter(self, spec):
        return resolve_datacenter(self.inventory, spec.datacenter, config_layout=self.config_layout)

    async def create(self, state):
        spec = self._spec(state)
        datacenter = self._datacenter(spec)
        ancestor, missing = FolderResolver(self.inventory).resolve(datacenter.vm_path, spec.path)
        spec.existing_path = relative_inventory_path(datacenter.vm_path, ancestor.path)
        await FolderCreator(self.inventory).create(ancestor, missing)
        state.path = spec.path
        state.existing_path = spec.existing_path
        state.id = f'{datacenter.name}/{spec.path}'
        logger.info(f'Created folder: {spec.path}')
        return await self.read(state)

    async def read(self, state):
        spec = self._spec(state)
        datacenter = self._datacenter(spec)
        logger.debug(f'reading folder: {state}')
        folder = self.inventory.find_by_inventory_path(
            join_inventory_path(datacenter.vm_path, spec.path))
        if folder is None:
            logger.info(f'folder {spec.path} no longer exists in {datacenter.name}')
            state.id = ""
        return state

    async def delete(self, state):
        spec = self._spec(state)
        datacenter = self._datacenter(spec)
        await FolderPruner(self.inventory).prune(datacenter, spec.path, spec.existing_path)
        state.id = ""
        return state
