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

from transform import BASE_MOVES, Combine

# Extended Singmaster notation:
#
#   alg      := item*
#   item     := (base | '(' alg ')') modifier*
#   base     := F B L R U D M E S | f b l r u d | x y z
#   modifier := "'" | digits
#
# Modifiers are part of their item (no space before them) and apply left to
# right, so F'2 is (F')2 and (R U)3' is ((R U)3)'.

class ParseError(ValueError):
    def __init__(self, rest):
        super().__init__('parse error near: %s' % rest)
        self.rest = rest

def skip_space(alg, pos):
    while pos < len(alg) and alg[pos].isspace():
        pos += 1
    return pos

def parse_modifiers(alg, pos, move):
    while pos < len(alg):
        c = alg[pos]
        if c == "'":
            move = move.inverse()
            pos += 1
        elif c.isdigit():
            end = pos
            while end < len(alg) and alg[end].isdigit():
                end += 1
            move = move.repeat(int(alg[pos:end]))
            pos = end
        else:
            break
    return (move, pos)

# Parse one item at pos, returning (None, pos) if there isn't one there
def parse_item(alg, pos):
    if pos >= len(alg):
        return (None, pos)
    c = alg[pos]
    if c == '(':
        [moves, end] = parse_sequence(alg, pos + 1)
        end = skip_space(alg, end)
        if end >= len(alg) or alg[end] != ')':
            raise ParseError(alg[pos:])
        move = Combine(moves)
        pos = end + 1
    elif c in BASE_MOVES:
        move = BASE_MOVES[c]
        pos += 1
    else:
        return (None, pos)
    return parse_modifiers(alg, pos, move)

def parse_sequence(alg, pos):
    moves = []
    while True:
        pos = skip_space(alg, pos)
        [move, pos] = parse_item(alg, pos)
        if move is None:
            return (moves, pos)
        moves.append(move)

def parse_alg(alg):
    if isinstance(alg, list):
        alg = ' '.join(alg)
    # Groups nest through recursion, so very deep nesting runs out of stack
    try:
        [moves, pos] = parse_sequence(alg, 0)
    except RecursionError as e:
        raise ParseError(alg) from e
    if pos < len(alg):
        raise ParseError(alg[pos:])
    return Combine(moves)

def invert_alg(alg):
    return str(parse_alg(alg).inverse())
