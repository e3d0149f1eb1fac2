"""Errors raised by the codec adapters."""


class CodecError(RuntimeError):
    pass
