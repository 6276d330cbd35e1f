import unittest

from grid_config import GridConfig
from grid_events import BACKSPACE, DOWN, LEFT, REDRAW, RIGHT, SUBMIT, UP, GridEvent
from grid_prompt import GridPrompt, PromptAborted, ValidationRejected


class DummySink:
    def __init__(self):
        self.frames = []
        self.started = 0
        self.finished = 0

    def start(self):
        self.started += 1

    def render(self, frame):
        self.frames.append(frame)

    def done(self):
        self.finished += 1


def _config(rows=("R1", "R2", "R3"), columns=("C1", "C2"), page_size=5):
    return GridConfig.from_dict(
        {"message": "Fill", "rows": list(rows), "columns": list(columns), "page_size": page_size}
    )


def _chars(text):
    return [GridEvent.character(ch) for ch in text]


class NavigationTests(unittest.TestCase):
    def _prompt(self, **kw):
        sink = DummySink()
        return GridPrompt(_config(**kw), sink), sink

    def test_starts_at_origin(self):
        prompt, _ = self._prompt()
        self.assertEqual(prompt.cursor, (0, 0))

    def test_rows_clamp_at_both_ends(self):
        prompt, _ = self._prompt()
        prompt.move_up()
        self.assertEqual(prompt.row, 0)
        for _ in range(5):
            prompt.move_down()
        self.assertEqual(prompt.row, 2)

    def test_columns_wrap_around(self):
        prompt, _ = self._prompt(columns=("a", "b", "c"))
        prompt.move_left()
        self.assertEqual(prompt.column, 2)
        prompt.move_right()
        self.assertEqual(prompt.column, 0)
        prompt.move_right()
        prompt.move_right()
        prompt.move_right()
        self.assertEqual(prompt.column, 0)

    def test_column_index_stays_in_bounds(self):
        prompt, _ = self._prompt(columns=("a", "b", "c", "d"))
        moves = [prompt.move_left, prompt.move_right]
        pattern = [0, 0, 1, 0, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0]
        expected = 0
        for step in pattern:
            moves[step]()
            expected = (expected + (1 if step else -1)) % 4
            self.assertEqual(prompt.column, expected)

    def test_every_transition_renders(self):
        prompt, sink = self._prompt()
        prompt.move_down()
        prompt.input_char("x")
        prompt.backspace()
        prompt.backspace()
        self.assertEqual(len(sink.frames), 4)

    def test_pagination_follows_cursor(self):
        prompt, _ = self._prompt(rows=[f"r{i}" for i in range(12)])
        for _ in range(11):
            prompt.move_down()
        self.assertEqual(prompt.paginator.window, (7, 11))
        for _ in range(5):
            prompt.move_up()
        self.assertEqual(prompt.paginator.window, (4, 8))


class EditingTests(unittest.TestCase):
    def test_input_appends_at_cursor(self):
        prompt = GridPrompt(_config(), DummySink())
        for ev in _chars("42"):
            prompt.handle(ev)
        self.assertEqual(prompt.values.get(0, 0), "42")

    def test_backspace_on_empty_cell_is_noop(self):
        prompt = GridPrompt(_config(), DummySink())
        prompt.handle(BACKSPACE)
        self.assertEqual(prompt.values.get(0, 0), "")
        self.assertEqual(prompt.cursor, (0, 0))

    def test_scenario_trace(self):
        sink = DummySink()
        prompt = GridPrompt(_config(), sink)
        events = [RIGHT, *_chars("9"), DOWN, *_chars("x"), SUBMIT]
        result = prompt.run(iter(events))
        self.assertEqual(
            result,
            {"R1_C1": "", "R1_C2": "9", "R2_C1": "", "R2_C2": "x", "R3_C1": "", "R3_C2": ""},
        )
        self.assertTrue(prompt.done)
        self.assertEqual(sink.started, 1)
        self.assertEqual(sink.finished, 1)


class SubmitTests(unittest.TestCase):
    def test_rejection_keeps_grid_and_cursor(self):
        sink = DummySink()
        calls = []

        def validate(value):
            calls.append(value)
            return True if value["R2_C2"] else "R2/C2 is required"

        prompt = GridPrompt(_config(), sink, validate=validate)
        for ev in [RIGHT, *_chars("9"), DOWN]:
            prompt.handle(ev)

        self.assertFalse(prompt.submit())
        self.assertFalse(prompt.done)
        self.assertEqual(prompt.cursor, (1, 1))
        self.assertEqual(prompt.values.get(0, 1), "9")
        self.assertEqual(sink.frames[-1].error_text, ">> R2/C2 is required")

        prompt.handle(GridEvent.character("x"))
        self.assertIsNone(sink.frames[-1].error)
        self.assertTrue(prompt.submit())
        self.assertEqual(prompt.result["R2_C2"], "x")
        self.assertEqual(len(calls), 2)

    def test_false_verdict_uses_default_message(self):
        sink = DummySink()
        prompt = GridPrompt(_config(), sink, validate=lambda _: False)
        prompt.submit()
        self.assertEqual(prompt.error, "Invalid input")

    def test_validator_may_raise(self):
        def validate(_):
            raise ValidationRejected("nope")

        sink = DummySink()
        prompt = GridPrompt(_config(), sink, validate=validate)
        self.assertFalse(prompt.submit())
        self.assertEqual(sink.frames[-1].error_text, ">> nope")

    def test_redraw_keeps_error_line(self):
        sink = DummySink()
        prompt = GridPrompt(_config(), sink, validate=lambda _: "bad")
        prompt.submit()
        prompt.handle(REDRAW)
        self.assertEqual(sink.frames[-1].error_text, ">> bad")
        prompt.handle(UP)
        self.assertEqual(sink.frames[-1].error_text, "")

    def test_filter_runs_before_validation(self):
        seen = []

        def keep_filled(value):
            return {k: v for k, v in value.items() if v}

        def validate(value):
            seen.append(value)
            return True

        prompt = GridPrompt(_config(), DummySink(), validate=validate, filter=keep_filled)
        result = prompt.run(iter([*_chars("ok"), LEFT, SUBMIT]))
        self.assertEqual(result, {"R1_C1": "ok"})
        self.assertEqual(seen, [{"R1_C1": "ok"}])

    def test_events_after_submit_are_ignored(self):
        prompt = GridPrompt(_config(), DummySink())
        prompt.handle(SUBMIT)
        prompt.handle(GridEvent.character("z"))
        self.assertEqual(prompt.values.get(0, 0), "")

    def test_frame_result(self):
        prompt = GridPrompt(_config(), DummySink())
        prompt.handle(GridEvent.character("5"))
        df = prompt.frame_result()
        self.assertEqual(df.loc["R1", "C1"], "5")
        self.assertEqual(df.shape, (3, 2))


class RunTests(unittest.TestCase):
    def test_exhausted_events_abort_and_restore_cursor(self):
        sink = DummySink()
        prompt = GridPrompt(_config(), sink)
        with self.assertRaises(PromptAborted):
            prompt.run(iter(_chars("abc")))
        self.assertEqual(sink.finished, 1)

    def test_interrupt_restores_cursor(self):
        sink = DummySink()
        prompt = GridPrompt(_config(), sink)

        def events():
            yield GridEvent.character("a")
            raise KeyboardInterrupt

        with self.assertRaises(KeyboardInterrupt):
            prompt.run(events())
        self.assertEqual(sink.finished, 1)

    def test_run_renders_initial_and_final_frames(self):
        sink = DummySink()
        prompt = GridPrompt(_config(), sink)
        prompt.run(iter([SUBMIT]))
        self.assertEqual(len(sink.frames), 2)


if __name__ == "__main__":
    unittest.main()
