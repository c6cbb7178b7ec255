import io
import logging

from .exceptions import ArgumentError, BufferTooShort


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around a BytesIO object that grows while
    the fields are packed into it.'''
    def __init__(self):
        self.obj = io.BytesIO()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def write(self, data: bytes) -> int:
        return self.obj.write(data)

    def pad(self, n: int) -> None:
        '''Write n zero bytes'''
        if n:
            logger.debug('padding %d byte(s) at offset %d', n, self.obj.tell())
            self.obj.write(b'\x00' * n)

    def getvalue(self) -> bytes:
        return self.obj.getvalue()


class View(object):
    '''Read-only, bounded access to the data to unpack.

    Here we normalize the object in order to be accessed as bytes
    with a cursor that can only move forward.'''
    def __init__(self, obj, position=0):
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ArgumentError(f"'{self.obj.__class__.__name__}' is the wrong kind of data to unpack")

        init_method()

        self.position = position

    def __len__(self):
        return len(self.obj)

    def init_bytes(self):
        pass

    def init_bytearray(self):
        self.obj = bytes(self.obj)

    def init_memoryview(self):
        self.obj = self.obj.tobytes()

    def init_str(self):
        '''We think these are bytes stored in a string'''
        try:
            self.obj = self.obj.encode('latin1')
        except UnicodeEncodeError as e:
            raise ArgumentError(f'data string contains non byte values: {e}')

    def tell(self) -> int:
        return self.position

    def skip(self, n: int) -> None:
        self.position += n

    def check(self, size: int, directive=None) -> None:
        '''Raise if reading 'size' bytes from the cursor would pass the end of data.'''
        if self.position + size > len(self.obj):
            raise BufferTooShort(
                f'data string too short: need {size} byte(s) at offset {self.position}'
                f' but only {len(self.obj)} available', directive)

    def read(self, size: int, directive=None) -> bytes:
        self.check(size, directive=directive)
        data = self.obj[self.position:self.position + size]
        self.position += size

        return data

    def find(self, value: int = 0) -> int:
        '''Return the offset of the next byte equal to 'value' from the cursor, or -1.'''
        return self.obj.find(bytes([value]), self.position)
