from nullperf._command import Command, CompileStep


class UnknownLanguageError(LookupError):
    def __init__(self, names):
        if isinstance(names, str):
            names = [names]
        self.names = list(names)
        LookupError.__init__(self, ', '.join(self.names))

    def __str__(self):
        return "unknown language: %s" % ', '.join(self.names)


class LanguageDescriptor:
    """How to get the version of a language runtime, optionally compile
    a no-op program, and run the no-op program.

    version is a shell command. compile is a CompileStep or None.
    run is a Command.
    """

    __slots__ = ('_name', '_version', '_compile', '_run')

    def __init__(self, name, version, run, compile=None):
        if not isinstance(run, Command):
            raise TypeError("run must be a Command, got %s"
                            % type(run).__name__)
        if compile is not None and not isinstance(compile, CompileStep):
            raise TypeError("compile must be a CompileStep, got %s"
                            % type(compile).__name__)
        self._name = name
        self._version = version
        self._run = run
        self._compile = compile

    @property
    def name(self):
        return self._name

    @property
    def version(self):
        return self._version

    @property
    def compile(self):
        return self._compile

    @property
    def run(self):
        return self._run

    def get_program(self):
        """Program which must be installed to benchmark the language."""
        if self._compile is not None:
            return self._compile.command.program
        return self._run.program

    def __repr__(self):
        return '<LanguageDescriptor name=%r>' % self._name


class Registry:
    def __init__(self):
        # dict keeps the registration order
        self._descriptors = {}
        self._frozen = False

    def register(self, name, version, run, compile=None):
        if self._frozen:
            raise RuntimeError("cannot register %r: the registry is frozen"
                               % name)
        if not isinstance(name, str):
            raise TypeError("language name must be a str, got %s"
                            % type(name).__name__)
        name = name.strip()
        if not name:
            raise ValueError("language name must be a non-empty string")
        if name in self._descriptors:
            raise ValueError("duplicated language name: %r" % name)

        descriptor = LanguageDescriptor(name, version, run, compile)
        self._descriptors[name] = descriptor
        return descriptor

    def freeze(self):
        self._frozen = True
        return self

    def is_frozen(self):
        return self._frozen

    def lookup(self, name):
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownLanguageError(name) from None

    def names(self):
        return list(self._descriptors)

    def select(self, names):
        """Get the descriptors of names.

        Raise UnknownLanguageError listing all unknown names
        if at least one name is not registered.
        """
        unknown = [name for name in names if name not in self._descriptors]
        if unknown:
            raise UnknownLanguageError(unknown)
        return [self._descriptors[name] for name in names]

    def __contains__(self, name):
        return name in self._descriptors

    def __iter__(self):
        return iter(self._descriptors.values())

    def __len__(self):
        return len(self._descriptors)

    def __repr__(self):
        return '<Registry languages=%s>' % len(self._descriptors)
