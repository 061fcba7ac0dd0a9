# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import inspect


class ConfigResolutionFailed(ValueError):

    def __init__(self, k, val):
        self.config_key = k
        self.config_val = val
        super().__init__(f'Resolution of {k} with value `{val}` failed')


class ConfigSchemaMeta(type):

    #: Maps a section prefix (``""`` for the top level, ``"vmware"``) to the items declared in it
    _schemas = {}

    def __new__(mcls, name, bases, namespace, *, prefix, **kwargs):
        cls = type.__new__(mcls, name, bases, namespace, **kwargs)
        prefix = prefix.rstrip('.')
        cls._schema = schema = mcls._schemas.setdefault(prefix, {})
        for k, type_ in inspect.get_annotations(cls).items():
            if k.startswith('_'):
                continue
            full_name = f'{prefix}.{k}' if prefix else k
            if k in schema:
                raise TypeError(f'{full_name} is already defined')
            schema[k] = cls.Item(full_name, type_=type_, default=getattr(cls, k, None))
        return cls

    def subsections(cls, prefix):
        "Yield the names of the sections directly below *prefix*"
        prefix = prefix.rstrip('.')
        found = set()
        for k in cls._schemas:
            if prefix:
                if not k.startswith(prefix + '.'):
                    continue
                k = k[len(prefix) + 1:]
            section = k.partition('.')[0]
            if section and section not in found:
                found.add(section)
                yield section


class ConfigSchema(metaclass=ConfigSchemaMeta, prefix=""):
    '''
    Class representing the valid options in a configuration schema

    Typical usage::

        class VmwareConfig(ConfigSchema, prefix="vmware"):

            #: Which vMware datacenter should be used?
            datacenter: str

    '''

    class Item:

        "An item in a configuration schema; *type* converts the stored value when it is read"

        __slots__ = ('name', 'type', 'default')

        def __init__(self, name, type_, default):
            from .types import ConfigBool, ConfigString
            if not isinstance(type_, type):
                raise TypeError(f'{name} config key must be declared with a type not {type_}')
            self.name = name
            self.type = {bool: ConfigBool, str: ConfigString}.get(type_, type_)
            self.default = default

        def resolve(self, layout):
            "Return the value of this item resolved against *layout*"
            from .types import ConfigString
            val = layout._values.get(self.name, self.default)
            if val is None:
                return None
            try:
                if issubclass(self.type, ConfigString):
                    return self.type(val, config=layout)
                return self.type(val)
            except (ValueError, TypeError, KeyError, AttributeError):
                raise ConfigResolutionFailed(self.name, val) from None


class ConfigAccessor:

    "Attribute access to one section of a :class:`~vsphere_folder.config.ConfigLayout`"

    def __init__(self, layout, prefix):
        prefix = prefix.rstrip('.')
        if prefix not in ConfigSchema._schemas:
            raise KeyError(f'{prefix} is not a valid configuration prefix')
        self._layout = layout
        self._prefix = prefix
        self._schema = ConfigSchema._schemas[prefix]

    def _full_name(self, k):
        return f'{self._prefix}.{k}' if self._prefix else k

    def __getattr__(self, k):
        if k.startswith('_'):
            raise AttributeError(k)
        if k in self._schema:
            return self._schema[k].resolve(self._layout)
        if self._full_name(k) in ConfigSchema._schemas:
            return ConfigAccessor(self._layout, self._full_name(k))
        raise AttributeError(f'{self._full_name(k)} is not a valid configuration key')

    def __setattr__(self, k, v):
        if k.startswith('_'):
            return super().__setattr__(k, v)
        if k not in self._schema:
            raise AttributeError(f"{self._full_name(k)} is not a configuration key")
        if isinstance(v, dict):
            raise ValueError("You cannot set a configuration key to a dictionary")
        self._layout._values[self._full_name(k)] = v

    def _dictify(self):
        "Return the values that have been set, nested by section"
        d = {}
        for k in self._schema:
            if self._full_name(k) not in self._layout._values:
                continue
            try:
                v = getattr(self, k)
            except ConfigResolutionFailed:
                v = "<resolution failed>"
            d[k] = list(v) if isinstance(v, tuple) else v
        for section in ConfigSchema.subsections(self._prefix):
            sub = getattr(self, section)._dictify()
            if sub:
                d[section] = sub
        return d

    def __repr__(self):
        return f'<{self.__class__.__name__} overrides: {self._dictify()}>'
