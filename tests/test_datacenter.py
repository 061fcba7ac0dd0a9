# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import pytest
import yaml
from vsphere_folder import *

from inventory_mock import MockInventory


def test_default_datacenter(inventory):
    dc = resolve_datacenter(inventory, "")
    assert dc.name == "dc1"
    assert dc.inventory_path == "/dc1"
    assert dc.vm_path == "/dc1/vm"


def test_named_datacenter():
    inventory = MockInventory('/dc1', '/site/dc2')
    assert resolve_datacenter(inventory, "dc2").inventory_path == "/site/dc2"
    assert resolve_datacenter(inventory, "/site/dc2").name == "dc2"
    with pytest.raises(InventoryLookupError, match="dc3"):
        resolve_datacenter(inventory, "dc3")


def test_no_single_default():
    with pytest.raises(InventoryLookupError, match="multiple"):
        resolve_datacenter(MockInventory('/dc1', '/dc2'), "")
    with pytest.raises(InventoryLookupError):
        resolve_datacenter(MockInventory(), "")


def test_configured_default():
    inventory = MockInventory('/dc1', '/dc2')
    config = ConfigLayout()
    config.load_yaml(yaml.dump(dict(vmware=dict(datacenter="dc2"))), path=".")
    assert resolve_datacenter(inventory, "", config_layout=config).name == "dc2"
    assert resolve_datacenter(inventory, "dc1", config_layout=config).name == "dc1"


def test_ambiguous_name():
    inventory = MockInventory('/east/dc', '/west/dc')
    with pytest.raises(InventoryLookupError, match="multiple"):
        resolve_datacenter(inventory, "dc")
    assert resolve_datacenter(inventory, "/east/dc").inventory_path == "/east/dc"
    assert resolve_datacenter(inventory, "west/dc").inventory_path == "/west/dc"
