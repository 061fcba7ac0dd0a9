# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import contextlib
import logging

from pyVmomi import vim, vmodl

from .utils import memoproperty, wait_for_task

logger = logging.getLogger('vsphere_folder.inventory')

__all__ = "InventoryError InventoryLookupError NotAFolder InventoryReference VmwareInventory canonicalize_path join_inventory_path relative_inventory_path".split()


class InventoryError(Exception):

    "A failure reported by the vSphere inventory service."


class InventoryLookupError(InventoryError, LookupError):

    "A lookup failed outright or an object that must exist, such as a datacenter, is absent."


class NotAFolder(InventoryLookupError):
    pass


def canonicalize_path(path):
    parts = [x for x in path.split('/') if x != '']
    return '/' + '/'.join(parts)


def join_inventory_path(base, *parts):
    return canonicalize_path('/'.join((base,) + parts))


def relative_inventory_path(base, path):
    '''Return *path* relative to *base*; ``""`` if they are the same object.
    '''
    base = canonicalize_path(base)
    path = canonicalize_path(path)
    if path == base:
        return ""
    if not path.startswith(base + '/'):
        raise ValueError(f'{path} is not within {base}')
    return path[len(base) + 1:]


@contextlib.contextmanager
def inventory_faults(error_class, message):
    try:
        yield
    except vmodl.MethodFault as e:
        raise error_class(f'{message}: {e.msg or type(e).__name__}') from e


class InventoryReference:

    '''A reference to an object in the inventory tree.  *kind* tags what sort of object *mob* is: ``folder``, ``datacenter``, ``vm`` or ``other``.  If not given it is taken from the type of *mob*.

    Either *path* or *parent_path* must be given.  With *parent_path* the path is only built, from the name of *mob*, the first time it is needed.
    '''

    def __init__(self, mob, path=None, kind=None, *, parent_path=None):
        self.mob = mob
        if path is not None:
            self.path = canonicalize_path(path)
        elif parent_path is None:
            raise TypeError('either path or parent_path is required')
        self._parent_path = parent_path
        if kind is not None:
            self.kind = kind

    @memoproperty
    def path(self):
        with inventory_faults(InventoryError, f'unable to read the name of a child of {self._parent_path}'):
            return join_inventory_path(self._parent_path, self.mob.name)

    @memoproperty
    def kind(self):
        if isinstance(self.mob, vim.Folder):
            return 'folder'
        if isinstance(self.mob, vim.Datacenter):
            return 'datacenter'
        if isinstance(self.mob, vim.VirtualMachine):
            return 'vm'
        return 'other'

    @property
    def name(self):
        return self.path.rpartition('/')[2]

    def as_folder(self):
        if self.kind != 'folder':
            raise NotAFolder(f'{self.path} is a {self.kind}, not a folder')
        return self

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.kind}: {self.path}>"


class VmwareInventory:

    '''The inventory operations folder management needs, built on a :class:`~vsphere_folder.connection.VmwareConnection`.

    Lookups that find nothing return ``None``.  Every fault raised by vSphere is translated into an :class:`InventoryError`.
    '''

    def __init__(self, connection):
        self.connection = connection

    @property
    def content(self):
        return self.connection.content

    def find_by_inventory_path(self, path):
        path = canonicalize_path(path)
        with inventory_faults(InventoryLookupError, f'error looking up {path}'):
            mob = self.content.searchIndex.FindByInventoryPath(path.lstrip('/'))
        if mob is None:
            return None
        return InventoryReference(mob, path)

    def create_child_folder(self, parent, name):
        with inventory_faults(InventoryError, f'unable to create {name} in {parent.path}'):
            mob = parent.mob.CreateFolder(name)
        return InventoryReference(mob, join_inventory_path(parent.path, name), kind='folder')

    def list_children(self, folder):
        with inventory_faults(InventoryError, f'unable to list children of {folder.path}'):
            return [InventoryReference(child, parent_path=folder.path)
                    for child in folder.mob.childEntity]

    async def destroy_folder(self, folder):
        with inventory_faults(InventoryError, f'unable to destroy {folder.path}'):
            task = folder.mob.Destroy_Task()
            await wait_for_task(task)

    def datacenters(self):
        content = self.content
        with inventory_faults(InventoryLookupError, 'unable to list datacenters'):
            container = content.viewManager.CreateContainerView(
                content.rootFolder, [vim.Datacenter], True)
            try:
                return [InventoryReference(dc, self._path_from_mob(dc), kind='datacenter')
                        for dc in container.view]
            finally:
                container.Destroy()

    @staticmethod
    def _path_from_mob(mob):
        # The root folder has no parent and is not part of inventory paths
        parts = []
        while mob is not None and mob.parent is not None:
            parts.append(mob.name)
            mob = mob.parent
        return "/" + "/".join(reversed(parts))
