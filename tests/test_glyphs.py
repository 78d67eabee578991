"""Tests for veilcode.core.glyphs – deterministic rune generation."""

from __future__ import annotations

import math

import pytest

from veilcode.core.glyph_tables import MONOLITH, ORBIT
from veilcode.core.glyphs import (
    LETTERS,
    Family,
    constellation_points,
    generate,
    generate_alphabet,
    normalize_letter,
)
from veilcode.core.strokes import Circle, Line, Path, PathCommand, Polyline


def _cos(deg: float) -> float:
    return math.cos(math.radians(deg))


def _sin(deg: float) -> float:
    return math.sin(math.radians(deg))


# ---------------------------------------------------------------------------
# Family
# ---------------------------------------------------------------------------

class TestFamily:
    def test_six_members(self):
        assert [f.value for f in Family] == ["F1", "F2", "F3", "F4", "F5", "F6"]

    def test_labels(self):
        assert Family.F1.label == "Monolith"
        assert Family.F6.label == "Constellation"

    @pytest.mark.parametrize("value", ["F3", "f3", " F3 ", Family.F3])
    def test_parse_accepts_ids(self, value):
        assert Family.parse(value) is Family.F3

    @pytest.mark.parametrize("value", ["F7", "", "Orbit", None, 3])
    def test_parse_rejects_unknown(self, value):
        assert Family.parse(value) is None


class TestNormalizeLetter:
    def test_lowercase_upgraded(self):
        assert normalize_letter("q") == "Q"

    @pytest.mark.parametrize("value", ["", "AB", "1", "é", " ", None, 65])
    def test_invalid(self, value):
        assert normalize_letter(value) is None


# ---------------------------------------------------------------------------
# generate – general contract
# ---------------------------------------------------------------------------

class TestGenerateContract:
    @pytest.mark.parametrize("family", list(Family))
    def test_deterministic_for_every_letter(self, family: Family):
        for letter in LETTERS:
            assert generate(letter, family) == generate(letter, family)

    @pytest.mark.parametrize("family", list(Family))
    def test_every_letter_has_strokes(self, family: Family):
        for letter in LETTERS:
            assert len(generate(letter, family)) > 0

    def test_case_insensitive(self):
        assert generate("k", "F2") == generate("K", Family.F2)

    def test_family_as_string(self):
        assert generate("A", "F5") == generate("A", Family.F5)

    @pytest.mark.parametrize("letter", ["", "1", "AB", "?", None])
    def test_invalid_letter_gives_empty_glyph(self, letter):
        assert generate(letter, Family.F1) == ()

    @pytest.mark.parametrize("family", ["F0", "F7", "", None, "Monolith"])
    def test_unknown_family_gives_empty_glyph(self, family):
        assert generate("A", family) == ()

    def test_glyph_is_immutable_tuple(self):
        assert isinstance(generate("A", Family.F4), tuple)

    @pytest.mark.parametrize("family", list(Family))
    def test_letters_are_distinct_within_family(self, family: Family):
        glyphs = [generate(letter, family) for letter in LETTERS]
        assert len(set(glyphs)) == 26

    def test_generate_alphabet(self):
        alphabet = generate_alphabet(Family.F3)
        assert list(alphabet) == list(LETTERS)
        assert alphabet["Q"] == generate("Q", Family.F3)

    def test_generate_alphabet_unknown_family(self):
        assert all(glyph == () for glyph in generate_alphabet("F9").values())


# ---------------------------------------------------------------------------
# F1 / F3 – hand-drawn tables
# ---------------------------------------------------------------------------

class TestTables:
    def test_tables_cover_alphabet(self):
        assert set(MONOLITH) == set(LETTERS)
        assert set(ORBIT) == set(LETTERS)

    def test_monolith_stroke_counts(self):
        for letter, glyph in MONOLITH.items():
            assert 2 <= len(glyph) <= 4, letter

    def test_monolith_a(self):
        assert generate("A", Family.F1) == (
            Circle(50, 50, 26),
            Polyline(((50, 26), (30, 70), (70, 70), (50, 26))),
        )

    def test_monolith_o_closed_path(self):
        path = generate("O", Family.F1)[0]
        assert isinstance(path, Path)
        assert path.closed
        assert path.commands[0] == PathCommand("M", (20, 50))

    def test_orbit_q(self):
        assert generate("Q", Family.F3) == (
            Circle(50, 50, 20),
            Circle(50, 50, 8),
            Circle(64, 44, 4),
            Path((PathCommand("M", (40, 60)), PathCommand("L", (60, 76)))),
        )

    def test_orbit_starts_with_circle(self):
        for letter, glyph in ORBIT.items():
            assert isinstance(glyph[0], Circle), letter


# ---------------------------------------------------------------------------
# F2 – Veil
# ---------------------------------------------------------------------------

class TestVeil:
    def test_segment_and_hook_counts(self):
        for i, letter in enumerate(LETTERS):
            glyph = generate(letter, Family.F2)
            path, hooks = glyph[0], glyph[1:]
            assert isinstance(path, Path)
            assert len(path.commands) == 1 + 3 + i % 3
            assert len(hooks) == 1 + i % 3
            assert all(isinstance(h, Line) for h in hooks)

    def test_letter_a_path(self):
        path = generate("A", Family.F2)[0]
        ops = [c.op for c in path.commands]
        assert ops == ["M", "Q", "Q", "Q"]
        expected = [
            (28, 24),
            (34, 28.8, 40, 32),
            (46.5, 38, 53, 22),
            (60, 26.8, 67, 30),
        ]
        for command, args in zip(path.commands, expected):
            assert command.args == pytest.approx(args)

    def test_letter_a_hook(self):
        hook = generate("A", Family.F2)[1]
        assert (hook.x1, hook.y1) == pytest.approx((58, 50))
        assert (hook.x2, hook.y2) == pytest.approx((58, 56))

    def test_end_points_clamped(self):
        for letter in LETTERS:
            path = generate(letter, Family.F2)[0]
            for command in path.commands[1:]:
                x, y = command.args[2], command.args[3]
                assert 20 <= x <= 80
                assert 20 <= y <= 80

    def test_starting_point(self):
        for i, letter in enumerate(LETTERS):
            start = generate(letter, Family.F2)[0].commands[0]
            assert start.args == (28 + i % 6, 24 + i % 5)


# ---------------------------------------------------------------------------
# F4 – Labyrinth
# ---------------------------------------------------------------------------

class TestLabyrinth:
    def test_single_path(self):
        for letter in LETTERS:
            glyph = generate(letter, Family.F4)
            assert len(glyph) == 1
            assert isinstance(glyph[0], Path)

    def test_letter_a(self):
        path = generate("A", Family.F4)[0]
        assert path.d == "M30 30 L50 25 L70 70 L30 70 L25 50 Z"

    def test_letter_b(self):
        path = generate("B", Family.F4)[0]
        assert path.d == "M50 25 L75 50 L70 70 L25 50 L30 30 L50 25"

    def test_step_count_and_closing(self):
        for i, letter in enumerate(LETTERS):
            path = generate(letter, Family.F4)[0]
            line_ops = [c for c in path.commands if c.op == "L"]
            assert len(line_ops) == 4 + i % 4
            assert path.closed is (i % 2 == 0)


# ---------------------------------------------------------------------------
# F5 – Starburst
# ---------------------------------------------------------------------------

class TestStarburst:
    @pytest.mark.parametrize(
        "letter, rays",
        [("A", 4), ("B", 5), ("C", 6), ("D", 7), ("E", 8), ("F", 4), ("Z", 4)],
    )
    def test_ray_count(self, letter: str, rays: int):
        glyph = generate(letter, Family.F5)
        assert sum(isinstance(s, Line) for s in glyph) == rays

    def test_even_letter_has_no_outline(self):
        glyph = generate("A", Family.F5)
        assert not any(isinstance(s, Polyline) for s in glyph)
        assert len(glyph) == 5

    def test_odd_letter_has_closed_outline(self):
        glyph = generate("B", Family.F5)
        outlines = [s for s in glyph if isinstance(s, Polyline)]
        assert len(outlines) == 1
        assert outlines[0].closed
        assert len(outlines[0].points) == 5

    def test_center_dot_last(self):
        for letter in LETTERS:
            assert generate(letter, Family.F5)[-1] == Circle(50, 50, 3)

    def test_letter_a_first_ray(self):
        ray = generate("A", Family.F5)[0]
        assert ray.x1 == pytest.approx(50 + _cos(-7) * 8)
        assert ray.y1 == pytest.approx(50 + _sin(-7) * 8)
        assert ray.x2 == pytest.approx(50 + _cos(-7) * 22)
        assert ray.y2 == pytest.approx(50 + _sin(-7) * 22)

    def test_letter_b_second_ray(self):
        # i=1, r=1: base 19deg, spread 72deg, offset (1+7)%15-7 = 1deg
        ray = generate("B", Family.F5)[1]
        angle = 19 + 72 + 1
        assert ray.x1 == pytest.approx(50 + _cos(angle) * (8 + 2))
        assert ray.x2 == pytest.approx(50 + _cos(angle) * (22 + 3))


# ---------------------------------------------------------------------------
# F6 – Constellation
# ---------------------------------------------------------------------------

class TestConstellation:
    def test_star_and_link_counts(self):
        for i, letter in enumerate(LETTERS):
            glyph = generate(letter, Family.F6)
            count = 3 + i % 4
            circles = [s for s in glyph if isinstance(s, Circle)]
            lines = [s for s in glyph if isinstance(s, Line)]
            assert len(circles) == count
            assert len(lines) == count - 1

    def test_circles_before_lines(self):
        glyph = generate("D", Family.F6)
        kinds = [type(s).__name__ for s in glyph]
        assert kinds == ["Circle"] * 6 + ["Line"] * 5

    def test_letter_a_first_star(self):
        points = constellation_points(0)
        assert points[0] == pytest.approx((60, 50))

    def test_lines_follow_generation_order(self):
        glyph = generate("G", Family.F6)
        circles = [s for s in glyph if isinstance(s, Circle)]
        lines = [s for s in glyph if isinstance(s, Line)]
        for n, line in enumerate(lines):
            assert (line.x1, line.y1) == (circles[n].cx, circles[n].cy)
            assert (line.x2, line.y2) == (circles[n + 1].cx, circles[n + 1].cy)

    def test_chain_is_open(self):
        glyph = generate("D", Family.F6)
        circles = [s for s in glyph if isinstance(s, Circle)]
        last_line = [s for s in glyph if isinstance(s, Line)][-1]
        assert (last_line.x2, last_line.y2) != (circles[0].cx, circles[0].cy)

    def test_star_radius(self):
        assert all(s.r == 2.4 for s in generate("M", Family.F6) if isinstance(s, Circle))
