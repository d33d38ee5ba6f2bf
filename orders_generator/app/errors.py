class GeneratorError(Exception):
    """Base class for errors raised by the orders generator."""


class FatalError(GeneratorError):
    """An error that ends the run. Only the entry point decides to exit on it."""


class SettingsError(FatalError):
    pass


class ConnectionOpenError(FatalError):
    pass


class LivenessCheckError(FatalError):
    pass


class TableCreateError(FatalError):
    pass


class TableDropError(FatalError):
    pass
