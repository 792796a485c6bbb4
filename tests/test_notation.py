# CubingB, copyright 2021 Zach Wegner
#
# This file is part of CubingB.
#
# CubingB is free software: you can redistribute it and/or modify it under the
# terms of the GNU Affero General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# CubingB is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Affero General Public License for more
# details.
#
# You should have received a copy of the GNU Affero General Public License
# along with CubingB.  If not, see <https://www.gnu.org/licenses/>.

import random
import unittest

from cube import Cube
from notation import parse_alg, invert_alg, ParseError
from transform import Combine, Repeat, TURNS, WIDE_MOVES, get_moves

R = TURNS['R'][1]
U = TURNS['U'][1]

class TestParser(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(parse_alg("R U R' U'"), Combine(get_moves("R U R' U'")))
        self.assertEqual(parse_alg("RUR'U'"), parse_alg("R U R' U'"))
        self.assertEqual(parse_alg(''), Combine([]))
        self.assertEqual(parse_alg(['R', "U'"]), parse_alg("R U'"))

    def test_modifiers(self):
        self.assertEqual(parse_alg('R2'), Combine([Repeat(R, 2)]))
        self.assertEqual(parse_alg("F'2"), Combine([Repeat(TURNS['F'][3], 2)]))
        self.assertEqual(parse_alg("R2'"), Combine([Repeat(R, 2).inverse()]))
        self.assertEqual(parse_alg('U12'), Combine([Repeat(U, 12)]))

    def test_groups(self):
        self.assertEqual(parse_alg('(R U)2'),
                Combine([Repeat(Combine([R, U]), 2)]))
        self.assertEqual(parse_alg(" ( R ( U )' ) "),
                Combine([Combine([R, Combine([U]).inverse()])]))
        cube = Cube().run_alg("BLE2(RR'F'R2F2'F'2)3'RRB")
        self.assertFalse(cube.is_solved())

    def test_wide_and_rotations(self):
        self.assertIs(parse_alg('r').transforms[0], WIDE_MOVES['r'])
        self.assertEqual(Cube().run_alg('r'), Cube().run_alg("R M'"))
        self.assertEqual(Cube().run_alg('l'), Cube().run_alg('L M'))
        self.assertEqual(Cube().run_alg('d'), Cube().run_alg('D E'))
        self.assertEqual(Cube().run_alg('x'), Cube().run_alg("r L'"))
        self.assertEqual(Cube().run_alg('y'), Cube().run_alg("u D'"))
        self.assertEqual(Cube().run_alg('z'), Cube().run_alg("f B'"))
        self.assertTrue(Cube().run_alg('x y2 z').is_solved())

    def test_errors(self):
        for [alg, rest] in [
            ('R Q', 'Q'),
            ('(R U', '(R U'),
            ('R U)', ')'),
            ('R 2', '2'),
            ("R '", "'"),
            ('R U (F (B)', '(F (B)'),
        ]:
            with self.assertRaises(ParseError) as ctx:
                parse_alg(alg)
            self.assertEqual(ctx.exception.rest, rest)
            self.assertEqual(str(ctx.exception), 'parse error near: %s' % rest)

    def test_deep_nesting(self):
        alg = '(' * 5000 + 'R' + ')' * 5000
        with self.assertRaises(ParseError) as ctx:
            parse_alg(alg)
        self.assertEqual(ctx.exception.rest, alg)

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Cube().run_alg('R W')

    def test_invert_alg(self):
        self.assertEqual(invert_alg("R U F'"), "F U' R'")
        cube = Cube().run_alg("R U2 (F M')3 x")
        cube.run_alg(invert_alg("R U2 (F M')3 x"))
        self.assertEqual(cube, Cube())

    def test_round_trip(self):
        cube = Cube()
        moves = cube.shuffle(25, random.Random(3))
        moves += [m.square() for m in moves[:5]] + [m.inverse() for m in moves[:5]]
        text = ' '.join(str(m) for m in moves)
        a = Cube()
        for m in moves:
            a.execute(m)
        self.assertEqual(Cube().run_alg(text), a)

if __name__ == '__main__':
    unittest.main()
