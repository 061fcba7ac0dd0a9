# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

'''
Reconcile a folder path below a datacenter's VM folder with the inventory.

Creation walks up from the desired path to the deepest folder that already exists and creates what is missing below it, parent before child.  That deepest existing folder is recorded as the *existing path*.  Deletion walks back up from the leaf removing empty folders, child before parent, and never touches the existing path or anything above it.

Folder paths handled here are relative to the datacenter's VM folder; ``""`` is the VM folder itself.
'''

import dataclasses
import logging
import posixpath

from .inventory import InventoryError, InventoryLookupError, join_inventory_path

logger = logging.getLogger('vsphere_folder.folder')

__all__ = ['FolderSpec', 'FolderResolver', 'FolderCreator', 'FolderPruner',
           'FolderCreateError', 'FolderNotEmpty']


class FolderCreateError(InventoryError):

    def __init__(self, path, name, cause=None):
        #: Inventory path of the folder the new folder was to be created in
        self.path = path
        self.name = name
        message = f'Failed to create folder {name} at {path}'
        if cause is not None:
            message += f'; {cause}'
        super().__init__(message)


class FolderNotEmpty(InventoryError):

    def __init__(self, path, children):
        #: Inventory path of the folder that still has children
        self.path = path
        self.children = children
        super().__init__(f'Folder {path} is non-empty and will not be deleted')


def path_segments(path):
    return [x for x in path.split('/') if x != '']


@dataclasses.dataclass
class FolderSpec:

    #: Datacenter name or path; empty for the default datacenter
    datacenter: str
    #: Folder path relative to the datacenter's VM folder
    path: str
    #: The part of *path* that existed before the folder was created
    existing_path: str = ""

    def __post_init__(self):
        self.datacenter = self.datacenter or ""
        self.path = '/'.join(path_segments(self.path))
        if not self.path:
            raise ValueError('folder path must not be empty')
        self.existing_path = '/'.join(path_segments(self.existing_path or ""))


class FolderResolver:

    def __init__(self, inventory):
        self.inventory = inventory

    def resolve(self, base_path, relative_path):
        '''
        Find the deepest folder along *relative_path* (below *base_path*) that exists.

        :returns: A tuple of the existing folder and the names of the folders missing below it, leaf-most first.

        :raises InventoryLookupError: if *base_path* itself does not exist.
        '''
        base_path = join_inventory_path(base_path)
        current = join_inventory_path(base_path, relative_path)
        depth = len(path_segments(relative_path))
        missing = []
        for _ in range(depth + 1):
            reference = self.inventory.find_by_inventory_path(current)
            if reference is not None:
                return reference.as_folder(), missing
            if current == base_path:
                break
            parent, sep, name = current.rpartition('/')
            assert len(path_segments(parent)) == len(path_segments(current)) - 1
            missing.append(name)
            current = parent
        raise InventoryLookupError(f'vSphere base path {base_path} not found')


class FolderCreator:

    def __init__(self, inventory):
        self.inventory = inventory

    async def create(self, ancestor, missing):
        '''Create *missing* (leaf-most first, as returned by :meth:`FolderResolver.resolve`) below *ancestor*.

        Folders are created root first.  If a creation fails, the folders already created are left in place.

        :returns: the leaf folder
        '''
        folder = ancestor
        for name in reversed(missing):
            logger.debug(f'folder not found; creating: {name} in {folder.path}')
            try:
                folder = self.inventory.create_child_folder(folder, name)
            except InventoryError as e:
                raise FolderCreateError(folder.path, name, e) from e
        return folder


class FolderPruner:

    def __init__(self, inventory):
        self.inventory = inventory

    def _find_folder(self, datacenter, path):
        reference = self.inventory.find_by_inventory_path(
            join_inventory_path(datacenter.vm_path, path))
        if reference is None:
            return None
        return reference.as_folder()

    async def prune(self, datacenter, path, existing_path):
        '''
        Delete empty folders from *path* up to but not including *existing_path*.

        :raises FolderNotEmpty: when a folder on the way has children; folders below it have already been deleted.
        '''
        segments = path_segments(path)
        boundary = path_segments(existing_path)
        if segments[:len(boundary)] != boundary:
            raise ValueError(f'{existing_path} is not a parent of {path}')
        current = '/'.join(segments)
        existing_path = '/'.join(boundary)
        if current == existing_path:
            logger.debug(f'{current} existed before it was created; nothing to delete')
            return
        logger.info(f'Deleting empty sub-folders of existing path: {existing_path}')
        folder = self._find_folder(datacenter, current)
        for _ in range(len(segments) - len(boundary)):
            if folder is None:
                logger.warning(f'folder {current} is already absent')
            else:
                children = self.inventory.list_children(folder)
                if children:
                    raise FolderNotEmpty(folder.path, children)
                logger.info(f'Deleting folder: {current}')
                await self.inventory.destroy_folder(folder)
            parent = posixpath.dirname(current)
            assert len(path_segments(parent)) == len(path_segments(current)) - 1
            logger.debug(f'parent path of {current} is calculated as {parent}')
            current = parent
            if current == existing_path:
                break
            folder = self._find_folder(datacenter, current)
