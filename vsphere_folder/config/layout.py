# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import logging
import yaml
from pathlib import Path

from .schema import ConfigAccessor, ConfigSchema
from .types import ConfigPath


class ConfigLayout(ConfigAccessor):

    '''The root of the configuration.  Values loaded from YAML are stored unconverted and are only run through their schema type (and therefore through substitution) when accessed, so a value may refer to a key loaded later.
    '''

    def __init__(self):
        self._values = {}
        super().__init__(self, "")

    def _load(self, d, into, prefix):
        for k, v in d.items():
            full_key = prefix + k
            if full_key in ConfigSchema._schemas:
                if not isinstance(v, dict):
                    raise ValueError("{} should be a dictionary".format(full_key))
                self._load(v, ConfigSchema._schemas[full_key], full_key + ".")
            elif k in into:
                self._values[full_key] = v
            else:
                raise AttributeError("{} is not a config attribute".format(full_key))

    def load_yaml(self, y, *, path=None):
        '''Load configuration from *y*, either an open file or a string containing YAML.

        :param path: Where *y* came from; relative ``include`` entries are resolved against its directory.  Defaults to the name of *y* when *y* is a file.
        '''
        if path:
            base_path = Path(path).parent
        else:
            base_path = Path(getattr(y, 'name', '.')).parent
        d = yaml.safe_load(y)
        if d is None:
            return
        if not isinstance(d, dict):
            raise ValueError('configuration must be a YAML mapping')
        if 'debug_categories' in d:
            for category in d.pop('debug_categories'):
                logging.getLogger(category).setLevel(logging.DEBUG)
        if 'include' in d:
            for include in d.pop('include'):
                include = base_path.joinpath(ConfigPath(include, config=self))
                with include.open("rt") as include_file:
                    self.load_yaml(include_file)
        self._load(d, self._schema, "")


__all__ = ('ConfigLayout',)
