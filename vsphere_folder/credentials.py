# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

from .config import ConfigSchema


class VmwareConfig(ConfigSchema, prefix="vmware"):
    hostname: str
    username: str = "${VSPHERE_USER}"
    password: str = "${VSPHERE_PASSWORD}"
    proxy: str = None
    validate_certs: bool = False

    #: Datacenter used when a folder does not name one.  If unset, the
    # inventory must contain exactly one datacenter.
    datacenter: str = None


__all__ = ['VmwareConfig']
