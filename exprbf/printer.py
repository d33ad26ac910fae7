from __future__ import annotations

from .arith import emit_add
from .emitter import TapeEmitter

DIGIT_OFFSET = ord("0")


def emit_label(emitter: TapeEmitter, text: str, cell: int) -> None:
    """Print ``text`` byte by byte, rebuilding each byte from zero in ``cell``."""
    for byte in text.encode("utf-8"):
        emitter.move_to(cell)
        emitter.zero()
        emitter.inc(byte)
        emitter.write()


def emit_divmod10(emitter: TapeEmitter, value: int = 0) -> None:
    """Split the byte in ``value`` into quotient and remainder by ten.

    Afterwards ``value`` holds the remainder and ``value + 1`` the quotient.
    ``value + 2`` .. ``value + 5`` are scratch and end at zero.
    """
    quotient = value + 1
    remainder = value + 2
    countdown = value + 3
    flag = value + 4
    spare = value + 5

    for cell in (quotient, remainder, flag, spare):
        emitter.move_to(cell)
        emitter.zero()
    emitter.move_to(countdown)
    emitter.zero()
    emitter.inc(10)

    with emitter.loop(value):
        emitter.dec()
        emitter.move_to(remainder)
        emitter.inc()
        emitter.move_to(countdown)
        emitter.dec()

        # flag = (countdown == 0), countdown preserved through spare
        emitter.move_to(flag)
        emitter.inc()
        with emitter.loop(countdown):
            emitter.dec()
            emitter.move_to(spare)
            emitter.inc()
            emitter.move_to(flag)
            emitter.zero()
        with emitter.loop(spare):
            emitter.dec()
            emitter.move_to(countdown)
            emitter.inc()

        with emitter.loop(flag):
            emitter.dec()
            emitter.move_to(quotient)
            emitter.inc()
            emitter.move_to(remainder)
            emitter.zero()
            emitter.move_to(countdown)
            emitter.inc(10)

    emitter.move_to(countdown)
    emitter.zero()
    emit_add(emitter, remainder, value)


def emit_print_decimal(emitter: TapeEmitter, value: int = 0, digit_offset: int = DIGIT_OFFSET) -> None:
    """Print the byte in ``value`` as decimal and leave it at zero.

    Values 0-99 print one or two digits without a leading zero. From 100 on
    the quotient (10-25) is still printed as one character, so the first
    character is not a digit: 100 prints ``:0``.
    """
    quotient = value + 1
    emit_divmod10(emitter, value)

    # runs at most once: the body clears the quotient
    with emitter.loop(quotient):
        emitter.inc(digit_offset)
        emitter.write()
        emitter.zero()

    emitter.move_to(value)
    emitter.inc(digit_offset)
    emitter.write()
    emitter.zero()


__all__ = [
    "DIGIT_OFFSET",
    "emit_divmod10",
    "emit_label",
    "emit_print_decimal",
]
