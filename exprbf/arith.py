from __future__ import annotations

from .emitter import TapeEmitter


def emit_add(emitter: TapeEmitter, src: int, dst: int) -> None:
    """dst += src, leaving src at zero and the pointer on dst."""
    with emitter.loop(src):
        emitter.dec()
        emitter.move_to(dst)
        emitter.inc()
        emitter.move_to(src)
    emitter.move_to(dst)


def emit_sub(emitter: TapeEmitter, src: int, dst: int) -> None:
    """dst -= src modulo the cell size, leaving src at zero and the pointer on dst."""
    with emitter.loop(src):
        emitter.dec()
        emitter.move_to(dst)
        emitter.dec()
        emitter.move_to(src)
    emitter.move_to(dst)


def emit_mul(emitter: TapeEmitter, a: int, b: int, res: int, tmp: int) -> None:
    """a *= b.

    ``a`` is consumed as the iteration count and refilled from ``res`` at the
    end. ``b`` is copied into ``res`` and ``tmp`` on every pass and restored
    from ``tmp``, so it keeps its value. ``res`` and ``tmp`` end at zero.
    """
    emitter.move_to(res)
    emitter.zero()
    emitter.move_to(tmp)
    emitter.zero()

    with emitter.loop(a):
        emitter.move_to(a)
        emitter.dec()

        with emitter.loop(b):
            emitter.dec()
            emitter.move_to(res)
            emitter.inc()
            emitter.move_to(tmp)
            emitter.inc()
            emitter.move_to(b)

        with emitter.loop(tmp):
            emitter.dec()
            emitter.move_to(b)
            emitter.inc()
            emitter.move_to(tmp)

    with emitter.loop(res):
        emitter.dec()
        emitter.move_to(a)
        emitter.inc()
        emitter.move_to(res)
    emitter.move_to(a)


__all__ = ["emit_add", "emit_mul", "emit_sub"]
