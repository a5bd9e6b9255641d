""" Option trees for the engine and the command line.

An OptionDescription is the static schema: a named tree of option groups
and typed options.  A Config is one set of values for such a tree; it
validates every assignment and remembers who made it ('default', 'user',
'cmdline' or 'required').  to_optparse() turns (part of) a Config into an
optparse parser whose callbacks write straight back into the Config.
"""

import optparse

DEFAULT_OPTION_NAME = object()


class Config(object):
    _frozen = False

    def __init__(self, descr, parent=None, **overrides):
        self._descr = descr
        self._parent = parent
        self._value_owners = {}
        for child in descr._children:
            if isinstance(child, OptionDescription):
                self.__dict__[child._name] = Config(child, parent=self)
            else:
                self.__dict__[child._name] = child.getdefault()
                self._value_owners[child._name] = 'default'
        self.set(**overrides)

    def __setattr__(self, name, value):
        if self._frozen:
            raise TypeError("trying to change a frozen option object")
        if name.startswith('_'):
            self.__dict__[name] = value
        else:
            self.setoption(name, value, 'user')

    def setoption(self, name, value, who):
        if name not in self._value_owners:
            if isinstance(getattr(self._descr, name, None), OptionDescription):
                raise ValueError('%s is an option group, not an option' % (
                    name,))
            raise ValueError('unknown option %s' % (name,))
        if self._value_owners[name] == 'required':
            if getattr(self, name) != value:
                raise ValueError('can not override value %s for option %s' %
                                 (value, name))
            return
        getattr(self._descr, name).setoption(self, value)
        self._value_owners[name] = who

    def require(self, name, value):
        self.setoption(name, value, 'required')

    def set(self, **kwargs):
        """Set options by dotted path: config.set(**{'bigint.log': True})"""
        for path, value in kwargs.items():
            subconfig, name = self._get_by_path(path)
            subconfig.setoption(name, value, 'user')

    def _get_by_path(self, path):
        """returns tuple (config, name)"""
        steps = path.split('.')
        config = self
        for step in steps[:-1]:
            config = getattr(config, step)
        return config, steps[-1]

    def _get_toplevel(self):
        config = self
        while config._parent is not None:
            config = config._parent
        return config

    def _freeze_(self):
        for child in self._descr._children:
            if isinstance(child, OptionDescription):
                getattr(self, child._name)._freeze_()
        self.__dict__['_frozen'] = True
        return True

    def getkey(self):
        return self._descr.getkey(self)

    def __hash__(self):
        return hash(self.getkey())

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return self.getkey() == other.getkey()

    def __ne__(self, other):
        return not self == other

    def __iter__(self):
        for child in self._descr._children:
            if not isinstance(child, OptionDescription):
                yield child._name, getattr(self, child._name)

    def _str_lines(self):
        yield "[%s]" % (self._descr._name,)
        for child in self._descr._children:
            if isinstance(child, OptionDescription):
                for line in getattr(self, child._name)._str_lines():
                    yield "    " + line
            elif self._value_owners[child._name] != 'default':
                yield "    %s = %s" % (child._name,
                                       getattr(self, child._name))

    def __str__(self):
        # only values that differ from the defaults are listed
        return "".join([line + "\n" for line in self._str_lines()])

    def getpaths(self, include_groups=False, prefix=""):
        """returns a list of all option paths in self, recursively;
        with include_groups the path of every group comes before its
        options"""
        paths = []
        for child in self._descr._children:
            path = prefix + child._name
            if isinstance(child, OptionDescription):
                if include_groups:
                    paths.append(path)
                paths += getattr(self, child._name).getpaths(
                    include_groups, path + ".")
            else:
                paths.append(path)
        return paths


class Option(object):
    def __init__(self, name, doc, default=None,
                 cmdline=DEFAULT_OPTION_NAME):
        self._name = name
        self.doc = doc
        self.default = default
        self.cmdline = cmdline

    def validate(self, value):
        raise NotImplementedError('abstract base class')

    def convert(self, value):
        return value

    def getdefault(self):
        return self.default

    def setoption(self, config, value):
        if not self.validate(value):
            raise ValueError('invalid value %s for option %s' % (
                value, self._name))
        config.__dict__[self._name] = self.convert(value)

    def getkey(self, value):
        return value

    def add_optparse_option(self, argnames, parser, config):
        raise NotImplementedError('abstract base class')

    def _cmdline_setter(self, config):
        # optparse only understands OptionValueError
        def _callback(option, opt_str, value, parser):
            try:
                config.setoption(self._name, self.cmdline_value(value),
                                 who='cmdline')
            except ValueError as e:
                raise optparse.OptionValueError(e.args[0])
        return _callback

    def cmdline_value(self, value):
        return value


class ChoiceOption(Option):
    def __init__(self, name, doc, values, default, requires=None,
                 cmdline=DEFAULT_OPTION_NAME):
        Option.__init__(self, name, doc, default, cmdline)
        self.values = values
        # value -> list of (path, required value)
        self._requires = requires or {}

    def validate(self, value):
        return value in self.values

    def setoption(self, config, value):
        toplevel = config._get_toplevel()
        for path, reqvalue in self._requires.get(value, []):
            subconfig, name = toplevel._get_by_path(path)
            subconfig.require(name, reqvalue)
        Option.setoption(self, config, value)

    def cmdline_value(self, value):
        return value.strip()

    def add_optparse_option(self, argnames, parser, config):
        parser.add_option(help="%s (one of %s)" % (
                              self.doc, ", ".join(self.values)),
                          action='callback', type='string',
                          callback=self._cmdline_setter(config), *argnames)


class BoolOption(ChoiceOption):
    def __init__(self, name, doc, default=True, requires=None,
                 cmdline=DEFAULT_OPTION_NAME):
        if requires is not None:
            requires = {True: requires}
        ChoiceOption.__init__(self, name, doc, [True, False], default,
                              requires=requires, cmdline=cmdline)

    def validate(self, value):
        # 1 == True, but an int is not a valid bool option value
        return type(value) is bool

    def cmdline_value(self, value):
        return True

    def add_optparse_option(self, argnames, parser, config):
        parser.add_option(help=self.doc, action='callback',
                          callback=self._cmdline_setter(config), *argnames)


class IntOption(Option):
    def __init__(self, name, doc, default=0, cmdline=DEFAULT_OPTION_NAME):
        Option.__init__(self, name, doc, default, cmdline)

    def validate(self, value):
        try:
            int(value)
        except (TypeError, ValueError):
            return False
        return True

    def convert(self, value):
        return int(value)

    def add_optparse_option(self, argnames, parser, config):
        parser.add_option(help=self.doc, action='callback', type='int',
                          callback=self._cmdline_setter(config), *argnames)


class OptionDescription(object):
    def __init__(self, name, doc, children, cmdline=DEFAULT_OPTION_NAME):
        self._name = name
        self.doc = doc
        self._children = children
        self.cmdline = cmdline
        for child in children:
            setattr(self, child._name, child)

    def getkey(self, config):
        return tuple([child.getkey(getattr(config, child._name))
                      for child in self._children])

    def add_optparse_option(self, argnames, parser, config):
        # a group of flags becomes one option taking a comma separated list
        for child in self._children:
            if not isinstance(child, BoolOption):
                raise ValueError(
                    "cannot make OptionDescription %s a cmdline option" % (
                        self._name, ))
        subconfig = getattr(config, self._name)
        def _callback(option, opt_str, value, parser):
            for flag in value.split(","):
                flag = flag.strip()
                if not isinstance(getattr(self, flag, None), BoolOption):
                    raise optparse.OptionValueError(
                        "did not find option %s" % (flag, ))
                try:
                    subconfig.setoption(flag, True, who='cmdline')
                except ValueError as e:
                    raise optparse.OptionValueError(e.args[0])
        parser.add_option(help=self.doc, action='callback', type='string',
                          callback=_callback, *argnames)


def _expand_paths(config, useoptions):
    """Expand 'group.*' into the paths of the group's children."""
    for path in useoptions:
        if path.endswith(".*"):
            subconfig, name = config._get_by_path(path[:-2])
            for child in getattr(subconfig, name)._descr._children:
                yield path[:-1] + child._name
        else:
            yield path

def to_optparse(config, useoptions=None, parser=None, parserkwargs=None):
    if parser is None:
        parser = optparse.OptionParser(**(parserkwargs or {}))
    if useoptions is None:
        useoptions = config.getpaths(include_groups=True)
    groups = {}
    for path in _expand_paths(config, useoptions):
        subconfig, name = config._get_by_path(path)
        option = getattr(subconfig._descr, name)
        if option.cmdline is None:
            continue
        if option.cmdline is DEFAULT_OPTION_NAME:
            argnames = ('--%s' % (path.replace('.', '-').replace('_', '-'),),)
        else:
            argnames = option.cmdline.split(' ')
        if '.' in path:
            # options of a group share one optparse group
            grpname = path.split('.')[-2]
            if grpname not in groups:
                groups[grpname] = parser.add_option_group(
                    subconfig._descr.doc)
            target = groups[grpname]
        else:
            target = parser
        try:
            option.add_optparse_option(argnames, target, subconfig)
        except ValueError:
            # an option group that does not only contain bool values
            pass
    return parser
