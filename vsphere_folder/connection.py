# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

from pyVim.connect import SmartConnect, Disconnect
from ssl import create_default_context, CERT_NONE

import logging
from urllib.parse import urlparse

from .inventory import InventoryError, inventory_faults

logger = logging.getLogger('vsphere_folder')

__all__ = ['VmwareConnection']


class VmwareConnection:

    '''An authenticated session with a vSphere endpoint.

    :param config: the ``vmware`` section of a :class:`~vsphere_folder.config.ConfigLayout`.
    '''

    def __init__(self, config):
        self.config = config
        self.connection = None
        ssl_context = create_default_context()
        if self.config.validate_certs is False:
            ssl_context.check_hostname = False
            ssl_context.verify_mode = CERT_NONE
        kwargs = dict(host=self.config.hostname,
                      user=self.config.username,
                      pwd=self.config.password,
                      sslContext=ssl_context)
        if self.config.proxy:
            r = urlparse(self.config.proxy)
            if r.scheme != 'http':
                raise RuntimeError(f"unsupported proxy scheme '{r.scheme}' in proxy string '{self.config.proxy}'; current support is only for 'http'")
            kwargs['httpProxyHost'] = r.hostname
            kwargs['httpProxyPort'] = r.port
        logger.debug(f'connecting to {self.config.hostname} as {self.config.username}')
        with inventory_faults(InventoryError, f'unable to connect to {self.config.hostname}'):
            self.connection = SmartConnect(**kwargs)
        self.content = self.connection.content
        logger.debug(f'connected to {self.config.hostname}')

    def close(self):
        if self.connection:
            Disconnect(self.connection)
            self.connection = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def __del__(self):
        self.close()
