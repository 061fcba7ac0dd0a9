# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import argparse
import asyncio
import functools
import logging

import pyVim.task


class memoproperty:
    "A property that only supports getting and that stores the result the first time on the instance to avoid recomputation"

    def __init__(self, fun):
        functools.update_wrapper(self, fun)
        self.fun = fun
        self.name = fun.__name__

    def __get__(self, instance, owner):
        if instance is None:
            return self
        # Because we don't define set or del, we should not be called
        # if name is already set on instance.  So if we set name we
        # will be bypassed in the future
        res = self.fun(instance)
        setattr(instance, self.name, res)
        return res


def wait_for_task(task):
    ''' Returns a future that when done indicates the task is complete.  Note that while this is not async, it should be treated as if it is because it returns a future.
    Example usage::

        await wait_for_task(task)

    If the task fails, the future raises the task's own fault type.
    '''
    loop = asyncio.get_event_loop()

    # We use a separate thread to avoid blocking the async loop on http round trips to look up task state
    def callback():
        pyVim.task.WaitForTask(task, raiseOnError=False)
        if task.info.state == 'error':
            class TaskError(type(task.info.error)):
                def __str__(self):
                    return f'Error: {self.msg}; info: {self.info_str}'

                def __init__(self, task):
                    self.__dict__.update(task.info.error.__dict__)
                    self.__dict__['info_str'] = str(task.info)
                    self.__dict__['task'] = task
            raise TaskError(task)
    return loop.run_in_executor(None, callback)


def main_argparser(*args, **kwargs):
    parser = argparse.ArgumentParser(*args, **kwargs)
    parser.add_argument('--config',
                        type=argparse.FileType('rt'),
                        default=[],
                        action='append',
                        metavar="file",
                        help="YAML configuration naming the vSphere endpoint and credentials; may be repeated")
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help="Log debugging output")
    return parser


def main_setup(parser):
    '''Parse arguments, set up logging and load configuration.

    :returns: a tuple of the parsed arguments and the :class:`~vsphere_folder.config.ConfigLayout`.
    '''
    from .config import ConfigLayout
    args = parser.parse_args()
    root_logger = logging.getLogger()
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.DEBUG if args.verbose else logging.INFO)
    logging.getLogger('urllib3.connectionpool').setLevel(logging.ERROR)
    logging.getLogger('urllib3.connectionpool').propagate = False

    config = ConfigLayout()
    for f in args.config:
        try:
            config.load_yaml(f)
        finally:
            f.close()
    return args, config


def main_run(func, *args, **kwargs):
    return asyncio.run(func(*args, **kwargs))
