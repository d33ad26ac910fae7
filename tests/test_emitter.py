import unittest

from exprbf import TapeEmitter


class TapeEmitterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.emitter = TapeEmitter()

    def test_move_right_then_left(self) -> None:
        self.emitter.move_to(3)
        self.assertEqual(self.emitter.pointer, 3)
        self.emitter.move_to(1)
        self.assertEqual(self.emitter.pointer, 1)
        self.assertEqual(self.emitter.text(), ">>><<")

    def test_move_to_current_cell_emits_nothing(self) -> None:
        self.emitter.move_to(0)
        self.assertEqual(self.emitter.text(), "")

    def test_move_to_negative_cell_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.emitter.move_to(-1)
        self.assertEqual(self.emitter.pointer, 0)

    def test_zero_increment_decrement_write(self) -> None:
        self.emitter.zero()
        self.emitter.inc(3)
        self.emitter.dec(1)
        self.emitter.inc(0)
        self.emitter.write()
        self.assertEqual(self.emitter.text(), "[-]+++-.")

    def test_negative_counts_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.emitter.inc(-2)
        with self.assertRaises(ValueError):
            self.emitter.dec(-2)

    def test_raw_emit_accepts_cell_local_instructions(self) -> None:
        self.emitter.emit("++.-")
        self.assertEqual(self.emitter.text(), "++.-")

    def test_raw_emit_rejects_pointer_and_loop_instructions(self) -> None:
        for raw in (">", "<", "[-]", "+]"):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    self.emitter.emit(raw)
        self.assertEqual(self.emitter.text(), "")

    def test_loop_returns_to_its_cell_before_closing(self) -> None:
        with self.emitter.loop(2):
            self.emitter.dec()
            self.emitter.move_to(4)
            self.emitter.inc()
        self.assertEqual(self.emitter.text(), ">>[->>+<<]")
        self.assertEqual(self.emitter.pointer, 2)

    def test_nested_loops(self) -> None:
        with self.emitter.loop(0):
            with self.emitter.loop(1):
                self.emitter.dec()
            self.assertEqual(self.emitter.depth, 1)
        self.assertEqual(self.emitter.depth, 0)
        self.assertEqual(self.emitter.text(), "[>[-]<]")

    def test_close_without_open_rejected(self) -> None:
        with self.assertRaises(RuntimeError):
            self.emitter.close_loop()

    def test_text_with_open_loop_rejected(self) -> None:
        self.emitter.open_loop(1)
        with self.assertRaises(RuntimeError):
            self.emitter.text()
        self.emitter.close_loop()
        self.assertEqual(self.emitter.text(), ">[]")

    def test_len_counts_instructions(self) -> None:
        self.emitter.move_to(2)
        self.emitter.inc(5)
        self.assertEqual(len(self.emitter), 7)


if __name__ == "__main__":
    unittest.main()
