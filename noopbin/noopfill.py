import struct
from enum import Enum
from dataclasses import dataclass


NOOP = 0xDEADBEEF
WORD_SIZE = 4


class ByteOrder(Enum):
    LITTLE = '<'
    BIG = '>'

    @classmethod
    def from_name(cls, name):
        for member in cls:
            if member.name.lower() == name:
                return member
        raise ValueError(f"invalid byte order: {name!r} (expected 'little' or 'big')")


@dataclass(frozen=True)
class FillRequest:
    size: int
    byte_order: ByteOrder


def effective_length(size):
    # Rounds up to the *next* multiple of 4, even when already aligned (4 -> 8).
    return (size | 0x03) + 1


def fill(size, byte_order):
    """
    Builds a buffer of effective_length(size) bytes holding NOOP in every 4-byte group.
    :type int size: requested size in bytes, must be > 0
    :type ByteOrder byte_order:
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")

    word = struct.pack(f'{byte_order.value}I', NOOP)
    count = effective_length(size) // WORD_SIZE

    return word * count


def fill_request(request):
    return fill(request.size, request.byte_order)
