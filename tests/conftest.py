# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import asyncio

import pytest

from inventory_mock import MockInventory


@pytest.fixture(scope='session')
def loop():
    ''':returns: Asyncio event loop
'''
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture()
def inventory():
    return MockInventory('/dc1')
