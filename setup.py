#!/usr/bin/python3
# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.


from setuptools import setup

setup(
    name = "vsphere-folder",
    license = "LGPL-3",
    description = "Create and prune folder paths in a vSphere inventory",
    packages = ["vsphere_folder",
                'vsphere_folder.config'],
    python_requires = ">=3.10",
    install_requires = ['pytest',
                        'pyvmomi',
                        'PyYAML',
                        ],
    scripts = ['bin/vsphere-folder'],
    version = "0.1",
)
