# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import pytest
from vsphere_folder.pytest import *
from vsphere_folder import *

from inventory_mock import MockInventory


@pytest.fixture()
def datacenter(inventory):
    return resolve_datacenter(inventory, "")


def test_folder_spec_strips_slashes():
    spec = FolderSpec(datacenter=None, path="dev/team-a/", existing_path="dev/")
    assert spec.path == "dev/team-a"
    assert spec.existing_path == "dev"
    assert spec.datacenter == ""
    with pytest.raises(ValueError):
        FolderSpec(datacenter="", path="/")


def test_resolve_existing_path(inventory):
    inventory.add('/dc1/vm/a')
    inventory.add('/dc1/vm/a/b')
    folder, missing = FolderResolver(inventory).resolve('/dc1/vm', 'a/b')
    assert folder.path == '/dc1/vm/a/b'
    assert missing == []
    assert inventory.calls == [('find', '/dc1/vm/a/b')]


def test_resolve_missing_leaf_first(inventory):
    inventory.add('/dc1/vm/a')
    folder, missing = FolderResolver(inventory).resolve('/dc1/vm', 'a/b/c')
    assert folder.path == '/dc1/vm/a'
    assert missing == ['c', 'b']


def test_resolve_to_vm_root(inventory):
    folder, missing = FolderResolver(inventory).resolve('/dc1/vm', 'dev/team-a')
    assert folder.path == '/dc1/vm'
    assert missing == ['team-a', 'dev']


def test_resolve_missing_root():
    inventory = MockInventory('/dc1', vm_folder=False)
    with pytest.raises(InventoryLookupError, match='/dc1/vm'):
        FolderResolver(inventory).resolve('/dc1/vm', 'a/b')
    assert [c[1] for c in inventory.calls] == ['/dc1/vm/a/b', '/dc1/vm/a', '/dc1/vm']
    assert inventory.mutations == []


def test_resolve_not_a_folder(inventory):
    inventory.add('/dc1/vm/a', 'vm')
    with pytest.raises(NotAFolder):
        FolderResolver(inventory).resolve('/dc1/vm', 'a/b')


@async_test
async def test_create_root_to_leaf(inventory):
    inventory.add('/dc1/vm/a')
    folder, missing = FolderResolver(inventory).resolve('/dc1/vm', 'a/b/c')
    leaf = await FolderCreator(inventory).create(folder, missing)
    assert leaf.path == '/dc1/vm/a/b/c'
    assert inventory.mutations == [
        ('create', '/dc1/vm/a', 'b'),
        ('create', '/dc1/vm/a/b', 'c'),
    ]


@async_test
async def test_create_nothing_missing(inventory):
    inventory.add('/dc1/vm/a')
    folder, missing = FolderResolver(inventory).resolve('/dc1/vm', 'a')
    leaf = await FolderCreator(inventory).create(folder, missing)
    assert leaf.path == '/dc1/vm/a'
    assert inventory.mutations == []


@async_test
async def test_create_failure_keeps_partial(inventory):
    inventory.fail_create.add('c')
    folder, missing = FolderResolver(inventory).resolve('/dc1/vm', 'a/b/c/d')
    with pytest.raises(FolderCreateError) as excinfo:
        await FolderCreator(inventory).create(folder, missing)
    assert excinfo.value.path == '/dc1/vm/a/b'
    assert excinfo.value.name == 'c'
    assert isinstance(excinfo.value.__cause__, InventoryError)
    assert inventory.exists('/dc1/vm/a/b')
    assert not inventory.exists('/dc1/vm/a/b/c')
    assert ('create', '/dc1/vm/a/b/c', 'd') not in inventory.calls


@async_test
async def test_prune_to_boundary(inventory, datacenter):
    for p in ('a', 'a/b', 'a/b/c'):
        inventory.add('/dc1/vm/' + p)
    inventory.calls.clear()
    await FolderPruner(inventory).prune(datacenter, 'a/b/c', 'a')
    assert inventory.mutations == [
        ('destroy', '/dc1/vm/a/b/c'),
        ('destroy', '/dc1/vm/a/b'),
    ]
    assert inventory.exists('/dc1/vm/a')
    # The boundary is neither inspected nor looked up
    assert ('children', '/dc1/vm/a') not in inventory.calls
    assert ('find', '/dc1/vm/a') not in inventory.calls


@async_test
async def test_prune_stops_at_nonempty(inventory, datacenter):
    for p in ('a', 'a/b', 'a/b/c', 'a/b/vm1'):
        inventory.add('/dc1/vm/' + p)
    inventory.objects['/dc1/vm/a/b/vm1'].kind = 'vm'
    with pytest.raises(FolderNotEmpty) as excinfo:
        await FolderPruner(inventory).prune(datacenter, 'a/b/c', 'a')
    assert excinfo.value.path == '/dc1/vm/a/b'
    assert [c.name for c in excinfo.value.children] == ['vm1']
    assert not inventory.exists('/dc1/vm/a/b/c')
    assert inventory.exists('/dc1/vm/a/b/vm1')
    assert inventory.mutations == [('destroy', '/dc1/vm/a/b/c')]


@async_test
async def test_prune_nothing_created(inventory, datacenter):
    inventory.add('/dc1/vm/a')
    inventory.calls.clear()
    await FolderPruner(inventory).prune(datacenter, 'a', 'a/')
    assert inventory.calls == []


@async_test
async def test_prune_to_vm_root(inventory, datacenter):
    inventory.add('/dc1/vm/dev')
    inventory.add('/dc1/vm/dev/team-a')
    await FolderPruner(inventory).prune(datacenter, 'dev/team-a', '')
    assert inventory.mutations == [
        ('destroy', '/dc1/vm/dev/team-a'),
        ('destroy', '/dc1/vm/dev'),
    ]
    assert inventory.exists('/dc1/vm')


@async_test
async def test_prune_skips_absent_folders(inventory, datacenter):
    inventory.add('/dc1/vm/a')
    inventory.add('/dc1/vm/a/b')
    await FolderPruner(inventory).prune(datacenter, 'a/b/c', '')
    assert inventory.mutations == [
        ('destroy', '/dc1/vm/a/b'),
        ('destroy', '/dc1/vm/a'),
    ]


@async_test
async def test_prune_rejects_foreign_boundary(inventory, datacenter):
    with pytest.raises(ValueError):
        await FolderPruner(inventory).prune(datacenter, 'a/b', 'x')
    assert inventory.mutations == []
