# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import argparse
import logging
import sys

import yaml

from .connection import VmwareConnection
from .inventory import InventoryError, VmwareInventory
from .resource import FolderState, VsphereFolderResource
from .utils import main_argparser, main_setup, main_run

logger = logging.getLogger('vsphere_folder')


def build_parser():
    parser = main_argparser(
        prog='vsphere-folder',
        description='Create, check or delete a folder path below a vSphere datacenter VM folder')
    subparsers = parser.add_subparsers(dest='command', required=True)
    for command, help_text in (
            ('create', 'Create any missing folders along the path'),
            ('read', 'Check whether the folder still exists'),
            ('delete', 'Delete folders created for the path that are now empty')):
        subparser = subparsers.add_parser(command, help=help_text)
        subparser.add_argument('--state',
                               type=argparse.FileType('rt'),
                               metavar='file',
                               help='YAML folder state printed by an earlier command')
        subparser.add_argument('--datacenter', help='Datacenter name or path; defaults to vmware.datacenter or the only datacenter')
        subparser.add_argument('--path', help='Folder path relative to the datacenter VM folder')
        if command == 'delete':
            subparser.add_argument('--existing-path',
                                   help='Part of the path that existed before create; it is not deleted')
    return parser


def state_from_args(args):
    if args.state:
        try:
            d = yaml.safe_load(args.state) or {}
        finally:
            args.state.close()
        if args.path:
            d['path'] = args.path
        state = FolderState.from_dict(d)
    else:
        if not args.path:
            raise ValueError('either --path or --state is required')
        state = FolderState(path=args.path)
    if args.datacenter is not None:
        state.datacenter = args.datacenter
    if getattr(args, 'existing_path', None) is not None:
        state.existing_path = args.existing_path
    return state


async def run_command(args, config_layout):
    state = state_from_args(args)
    with VmwareConnection(config_layout.vmware) as connection:
        resource = VsphereFolderResource(VmwareInventory(connection), config_layout=config_layout)
        operation = getattr(resource, args.command)
        await operation(state)
    return state


def main():
    args, config_layout = main_setup(build_parser())
    try:
        state = main_run(run_command, args, config_layout)
    except (InventoryError, ValueError) as e:
        logger.error(str(e))
        return 1
    yaml.safe_dump(state.as_dict(), sys.stdout, default_flow_style=False, sort_keys=False)
    return 0


if __name__ == '__main__':
    sys.exit(main())
