"""
Tests for frame rendering and the render loop.
"""

import io
import threading

from termsnake.domain import RIGHT, Food, GameStatus, Position, Snake, WorldSnapshot
from termsnake.domain.constants import (
    BODY_GLYPH,
    CLEAR_VIEWPORT,
    EMPTY_GLYPH,
    FOOD_GLYPH,
    GAME_OVER_MESSAGE,
    HEAD_GLYPH,
    LINE_END,
    WALL_GLYPH,
)
from termsnake.services.render_loop import RenderLoop, cell_glyph, render_frame
from termsnake.world_state import WorldState


def snapshot(head=(1, 1), body=((0, 1),), food=(3, 2), status=GameStatus.STARTED):
    return WorldSnapshot(
        head=Position(*head),
        body=tuple(Position(*p) for p in body),
        food=Position(*food),
        direction=RIGHT,
        status=status,
    )


def frame_rows(frame):
    assert frame.endswith(LINE_END)
    return frame[:-len(LINE_END)].split(LINE_END)


class TestRenderFrame:
    def test_frame_shape(self):
        """A frame is height+2 rows of width+2 glyphs."""
        rows = frame_rows(render_frame(snapshot(), 5, 4))
        assert len(rows) == 6
        assert all(len(row) == 7 for row in rows)

    def test_borders(self):
        """Top and bottom rows are walls; every row starts and ends with a wall."""
        rows = frame_rows(render_frame(snapshot(), 5, 4))
        assert rows[0] == WALL_GLYPH * 7
        assert rows[-1] == WALL_GLYPH * 7
        for row in rows[1:-1]:
            assert row[0] == WALL_GLYPH
            assert row[-1] == WALL_GLYPH

    def test_exact_frame(self):
        """Head, body and food glyphs land on their cells."""
        frame = render_frame(snapshot(head=(1, 1), body=((0, 1),), food=(3, 2)), 4, 3)
        expected = [
            WALL_GLYPH * 6,
            WALL_GLYPH + EMPTY_GLYPH * 4 + WALL_GLYPH,
            WALL_GLYPH + BODY_GLYPH + HEAD_GLYPH + EMPTY_GLYPH * 2 + WALL_GLYPH,
            WALL_GLYPH + EMPTY_GLYPH * 3 + FOOD_GLYPH + WALL_GLYPH,
            WALL_GLYPH * 6,
        ]
        assert frame_rows(frame) == expected

    def test_head_outside_board_not_drawn(self):
        """A head past the wall is simply not painted."""
        frame = render_frame(snapshot(head=(4, 1), body=((3, 1),)), 4, 3)
        assert HEAD_GLYPH not in frame
        assert BODY_GLYPH in frame


class TestCellGlyph:
    def test_head_wins_over_body_and_food(self):
        """The head glyph has the highest priority."""
        snap = snapshot(head=(2, 2), body=((2, 2),), food=(2, 2))
        assert cell_glyph(snap, Position(2, 2)) == HEAD_GLYPH

    def test_body_wins_over_food(self):
        """Food under the body is hidden by the body glyph."""
        snap = snapshot(head=(1, 1), body=((2, 2),), food=(2, 2))
        assert cell_glyph(snap, Position(2, 2)) == BODY_GLYPH

    def test_blank_cell(self):
        assert cell_glyph(snapshot(), Position(0, 0)) == EMPTY_GLYPH


class TestRenderLoop:
    def make_world(self):
        return WorldState(Snake.spawn(2, 1), Food(Position(3, 2)))

    def test_draw_clears_then_paints(self):
        """Each frame starts with the clear-viewport sequence."""
        out = io.StringIO()
        world = self.make_world()
        loop = RenderLoop(world, 5, 4, 0.001, threading.Event(), out=out)
        loop.draw()
        text = out.getvalue()
        assert text.startswith(CLEAR_VIEWPORT)
        assert text[len(CLEAR_VIEWPORT):] == render_frame(world.snapshot(), 5, 4)
        assert loop.frames == 1

    def test_loop_prints_game_over_and_stops(self):
        """After an ended game the loop draws once, reports the loss and stops."""
        out = io.StringIO()
        world = self.make_world()
        world.end()
        loop = RenderLoop(world, 5, 4, 0.001, threading.Event(), out=out)
        loop.loop()
        assert loop.frames == 1
        assert out.getvalue().endswith(GAME_OVER_MESSAGE + LINE_END)

    def test_stop_signal_skips_game_over_message(self):
        """Quitting does not print the loss message."""
        out = io.StringIO()
        stop = threading.Event()
        world = self.make_world()
        loop = RenderLoop(world, 5, 4, 30, stop, out=out)
        loop.start()
        stop.set()
        loop.join(timeout=5)
        assert not loop.is_alive()
        assert GAME_OVER_MESSAGE not in out.getvalue()

    def test_render_does_not_mutate_world(self):
        """Drawing frames leaves the world unchanged."""
        world = self.make_world()
        before = world.snapshot()
        loop = RenderLoop(world, 5, 4, 0.001, threading.Event(), out=io.StringIO())
        loop.draw()
        loop.draw()
        assert world.snapshot() == before
