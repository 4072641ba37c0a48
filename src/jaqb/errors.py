class JaqbError(Exception):
    pass


class ArgumentError(JaqbError, TypeError):
    pass


class MissingArgumentError(ArgumentError):
    pass


class UnsupportedOperationError(JaqbError, NotImplementedError):
    pass


class IncompleteConditionError(JaqbError):
    pass


class TooManyOperandsError(JaqbError):
    pass


class InjectionRiskWarning(UserWarning):
    """A literal was embedded in SQL text without escaping."""
