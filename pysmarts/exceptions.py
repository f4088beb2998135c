"""Handle custom pysmarts exceptions."""


class SMARTSError(Exception):
    """Base class for all non-trivial errors raised by pysmarts."""


class SMARTSWarning(Warning):
    """Base class for all non-trivial warnings raised by pysmarts."""


class SMARTSSyntaxError(SMARTSError):
    """Raised when a SMARTS string does not follow the grammar.

    Parameters
    ----------
    message : str
        Description of what went wrong.
    smarts : str, optional
        The SMARTS string being parsed.
    position : int, optional
        Character offset of the failure in `smarts`. Offsets inside a
        recursive ``$(...)`` pattern are relative to the whole string.
    expected : iterable of str, optional
        Names of the terminals the parser would have accepted.
    """

    def __init__(self, message, smarts=None, position=None, expected=()):
        self.message = message
        self.smarts = smarts
        self.position = position
        self.expected = tuple(sorted(expected))

        parts = [message]
        if smarts is not None and position is not None:
            parts.append("\n  {}".format(smarts))
            parts.append("\n  {}^".format(" " * position))
        super(SMARTSSyntaxError, self).__init__("".join(parts))


class UnexpectedCharacter(SMARTSSyntaxError):
    """Raised when no grammar alternative matches at the current position."""


class UnexpectedEndOfInput(SMARTSSyntaxError):
    """Raised when the input ends inside a construct, e.g. an open ``[``."""


class UnknownSymbol(SMARTSSyntaxError):
    """Raised when no element or chirality-class entry matches."""


class MalformedRingClosure(SMARTSSyntaxError):
    """Raised when ``%`` is not followed by exactly two digits."""


class InvalidChiralitySyntax(SMARTSSyntaxError):
    """Raised for ``@@`` combined with a chirality class, or ``@@?``."""


class RingClosureWarning(SMARTSWarning):
    """Raised when a ring-closure label cannot be paired in a pattern graph."""
