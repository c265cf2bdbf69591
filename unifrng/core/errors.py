"""Exceptions and warnings raised by the generator engine."""


class RNGError(Exception):
    """Base class for all generator errors."""


class InvalidParameter(RNGError, ValueError):
    """A seed, seed word or size argument is out of its domain."""


class UnknownGeneratorKind(RNGError, LookupError):
    """No uniform generator matches the requested kind or name."""


class UnknownNormalKind(RNGError, LookupError):
    """No normal transform matches the requested kind or name."""


class IncompatibleKindPair(RNGError, LookupError):
    """Both kinds are valid but no descriptor pairs them."""


class UnimplementedGeneratorKind(RNGError, NotImplementedError):
    """The requested operation has no recurrence for this kind."""


class RNGWarning(UserWarning):
    """Base class for recoverable generator conditions."""


class SeedLengthMismatch(RNGWarning):
    """Supplied state is longer than the descriptor holds; re-seeded from time."""
