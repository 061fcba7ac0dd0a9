# Copyright (C) 2026, Hadron Industries, Inc.
# vsphere_folder is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import os.path


def getattr_path(o, attrs):
    "Follow a dotted path such as ``vmware.hostname`` from *o*"
    try:
        for attr in attrs.split('.'):
            o = getattr(o, attr)
    except AttributeError:
        raise AttributeError(f'Unable to find {attrs}') from None
    return o


class ConfigString(str):

    '''A string that substitutes

    * ``{key}`` with the result of that config key

    * ``${var}`` the environment variable *var*

    * ``${var-default}`` The environment variable *var* else *default*

    Backslash escapes the next character always.

    '''

    @classmethod
    def parse(cls, s, config):
        result, pos = cls._expand(s, 0, config, inside_brace=False)
        return result

    @classmethod
    def _expand(cls, s, pos, config, inside_brace):
        # Returns the expansion and the position just past the closing brace
        out = []
        while pos < len(s):
            c = s[pos]
            pos += 1
            if c == '\\':
                out.append(s[pos:pos + 1])
                pos += 1
            elif c == '$' and s.startswith('{', pos):
                inner, pos = cls._expand(s, pos + 1, config, True)
                out.append(cls.subst_var(inner))
            elif c == '{':
                inner, pos = cls._expand(s, pos, config, True)
                out.append(cls.subst(inner, config=config))
            elif c == '}':
                if not inside_brace:
                    raise ValueError(f"Unbalanced closing brace in `{s}'")
                return "".join(out), pos
            else:
                out.append(c)
        if inside_brace:
            raise ValueError(f"Missing right brace in `{s}'")
        return "".join(out), pos

    @staticmethod
    def subst_var(s):
        "``foo`` is looked up in the environment; ``foo-bar`` falls back to ``bar``"
        var, sep, default = s.partition('-')
        return os.environ.get(var, default)

    @staticmethod
    def subst(s, *, config):
        return str(getattr_path(config, s))

    def __new__(cls, s, *, config):
        return str.__new__(str, cls.parse(str(s), config))


class ConfigPath(ConfigString):

    "A :class:`ConfigString` with ``~`` expanded"

    def __new__(cls, s, *, config):
        return os.path.expanduser(super().__new__(cls, s, config=config))


class ConfigBool:

    "A type used instead of bool so that YAML strings like ``no`` behave"

    def __new__(cls, val):
        if isinstance(val, str):
            return val.strip().lower() not in ('', '0', 'false', 'no', 'off')
        return bool(val)
