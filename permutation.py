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

# Permutations of four symbols, packed into a byte. The four symbols are the
# four body diagonals of a cube: every rotation of the cube permutes the
# diagonals, and the 24 rotations map one-to-one onto S4. Field i lives in
# bits 2i..2i+1.
#
# Diagonal labels, as seen on the front/up/right corners:
#
#   01-----10
#  /   U   /|
# 11-----00 |
# |       |R|
# |   F   | 11
# |       |/
# 10-----01

class InvalidPermutation(ValueError):
    pass

def check(value):
    fields = [(value >> (2 * i)) & 3 for i in range(4)]
    return 0 <= value < 256 and len(set(fields)) == 4

def from_fields(fields):
    value = 0
    for [i, f] in enumerate(fields):
        value |= f << (2 * i)
    return Permutation(value)

class Permutation:
    __slots__ = ['value']

    def __init__(self, value):
        if not check(value):
            raise InvalidPermutation('not a permutation: %s' % bin(value))
        self.value = value

    # Skip validation. Only for values derived from known-good constants
    @classmethod
    def unchecked(cls, value):
        p = cls.__new__(cls)
        p.value = value
        return p

    def get(self, index):
        if not 0 <= index < 4:
            raise IndexError('permutation index out of range: %s' % index)
        return (self.value >> (2 * index)) & 3

    def fields(self):
        v = self.value
        return [v & 3, v >> 2 & 3, v >> 4 & 3, v >> 6 & 3]

    # Field i of the result is self[p[i]], so (self o p)(i) = self(p(i))
    def compose(self, p):
        v = self.value
        pv = p.value
        return Permutation.unchecked(
                (v >> 2 * (pv & 3) & 3) |
                (v >> 2 * (pv >> 2 & 3) & 3) << 2 |
                (v >> 2 * (pv >> 4 & 3) & 3) << 4 |
                (v >> 2 * (pv >> 6 & 3) & 3) << 6)

    def inverse(self):
        value = 0
        for [k, f] in enumerate(self.fields()):
            value |= k << (2 * f)
        return Permutation.unchecked(value)

    # Rotate the byte left by 2n bits: field i moves to field i+n
    def rotated(self, n=1):
        v = self.value
        for i in range(n % 4):
            v = (v << 2 | v >> 6) & 0xFF
        return Permutation.unchecked(v)

    # Rotate until field 0 holds symbol 0. Every permutation has exactly one
    # field holding 0, so this takes at most three steps
    def align(self):
        p = self
        while p.value & 3:
            p = p.rotated()
        return p

    # Split into v o s, with v from the Klein four-group (the double turns)
    # and s a coset representative with s[0] == 0. Since v[0] differs for each
    # element of the Klein group, v is picked out by self[0].
    def factor(self):
        v = KLEIN_BY_FIRST[self.value & 3]
        return (v, v.inverse().compose(self))

    def __add__(self, other):
        return self.compose(other)

    def __eq__(self, other):
        return isinstance(other, Permutation) and self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return 'Permutation(%s)' % self.fields()

UNIT = Permutation(0b11100100)

X_1 = Permutation(0b10010011)
X_2 = X_1.compose(X_1)
X_3 = X_1.inverse()
Y_1 = Permutation(0b10001101)
Y_2 = Y_1.compose(Y_1)
Y_3 = Y_1.inverse()
Z_1 = Permutation(0b00011110)
Z_2 = Z_1.compose(Z_1)
Z_3 = Z_1.inverse()

# Quarter turns of each face, clockwise when looking at that face
FRONT = X_1
BACK = X_3
RIGHT = Y_1
LEFT = Y_3
UP = Z_1
DOWN = Z_3

# Identity plus the three half turns: a normal subgroup with quotient S3
KLEIN = (UNIT, X_2, Y_2, Z_2)
KLEIN_BY_FIRST = {v.get(0): v for v in KLEIN}
assert len(KLEIN_BY_FIRST) == 4

# One aligned pattern per coset of rotations. Order matches cube.Face
REPRESENTATIVES = tuple(p.align() for p in [UNIT, Y_2, Z_1, Z_3, Y_3, Y_1])

def all_permutations():
    return [rep.rotated(n) for rep in REPRESENTATIVES for n in range(4)]
