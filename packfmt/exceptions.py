class PackfmtException(Exception):
    '''Base class to extend in order to throw exception in packfmt.

    It takes a message and, when available, the directive that was being
    processed so that the caller can tell which part of the format failed.
    '''

    def __init__(self, message, directive=None):
        self.message = message
        self.directive = directive
        super().__init__(message)

    def __str__(self):
        if self.directive is None:
            return self.message

        return f'{self.message} (directive {self.directive!r})'


class InvalidFormat(PackfmtException):
    pass


class InvalidAlignment(PackfmtException):
    '''The numeric argument of '!', 'i' or 'I' is not a power of 2.'''
    pass


class ArgumentError(PackfmtException):
    '''A value to pack is missing or it has the wrong type.'''
    pass


class LengthMismatch(PackfmtException):
    pass


class UnboundLength(PackfmtException):
    '''A 'c0' directive was unpacked without a previous number to use as length.'''
    pass


class UnterminatedString(PackfmtException):
    pass


class BufferTooShort(PackfmtException):
    pass
