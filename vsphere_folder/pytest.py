# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import asyncio
import functools
import inspect

'''
Helpers for testing code built on vsphere_folder with pytest.

Tests using :func:`async_test` need a ``loop`` fixture returning an asyncio event loop.
'''


def async_test(t):
    '''A decorator for wrapping a test. *t* is expected to be a coroutine
    and will be run inside the event loop provided by the ``loop``
    fixture.  The test may take other Pytest fixtures as function
    arguments, and may take *loop* itself.

    '''
    sig = inspect.signature(t)
    orig_loop = 'loop' in sig.parameters

    @functools.wraps(t)
    def wrapper(*args, loop, **kwargs):
        if orig_loop:
            kwargs['loop'] = loop
        task = asyncio.ensure_future(t(*args, **kwargs), loop=loop)
        return loop.run_until_complete(task)
    params = list(sig.parameters.values())
    if not orig_loop:
        params.append(inspect.Parameter(name="loop", kind=inspect.Parameter.KEYWORD_ONLY))
    wrapper.__signature__ = sig.replace(parameters=params)
    # Pytest must see the new signature rather than that of t
    del wrapper.__dict__['__wrapped__']
    return wrapper


__all__ = ['async_test']
