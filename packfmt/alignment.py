from typing import Optional

from .enum import Kind
from .directives import Directive


def padding(position: int, context, directive: Directive, size: Optional[int] = None) -> int:
    '''Return the number of bytes to skip at 'position' so that a field of
    'size' bytes (the directive's size if not indicated) is aligned.

    A field is aligned to its own size, but never more than the alignment
    ceiling of the context; both are powers of 2 so the modulo is a mask.
    Blocks of bytes are never aligned.'''
    size = directive.size if size is None else size

    if size == 0 or directive.kind == Kind.BLOCK:
        return 0

    if size > context.align:
        size = context.align  # respect max. alignment

    return (size - (position & (size - 1))) & (size - 1)
