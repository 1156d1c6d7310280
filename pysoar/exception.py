"""
Exceptions raised by the atmosphere and thermodynamic functions.
"""


# ======================================================================

class AtmosphereError(Exception):
    """
    Base class for errors raised by :mod:`pysoar`.  Additional
    information (optional) is included to allow the reason for the
    failure to be determined.
    """

    def __init__(self, *args, value=None, details: str = None, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `Exception`.
        value : default = None
            The offending argument or result, if any.
        details : str, default = None
            Additional text relating to the specific type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.value, self.details = value, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


class DomainError(AtmosphereError, ValueError):
    """
    An input is outside the physically valid range, e.g. a non-positive
    pressure or temperature, or an altitude where the standard layer
    would be below absolute zero.
    """
    pass


class NumericError(AtmosphereError, ArithmeticError):
    """
    The result of a computation is not finite although the inputs were
    accepted.
    """
    pass
