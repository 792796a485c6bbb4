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

import enum

import layer as layer_mod
import permutation
from util import rotate

################################################################################
## Transform algebra ###########################################################
################################################################################

# How the eight outer slots of a layer move: the value is the number of steps
# each of the corner and edge cycles advances
RotationKind = enum.IntEnum('RotationKind', 'ROTATE_0 ROTATE_1 ROTATE_2 '
        'ROTATE_3', start=0)

INVERSE_KIND = {k: RotationKind((4 - k) % 4) for k in RotationKind}
SQUARE_KIND = {k: RotationKind((2 * k) % 4) for k in RotationKind}

TURN_STR = {0: '0', 1: '', 2: '2', 3: "'"}
INV_TURN_STR = {v: k for [k, v] in TURN_STR.items()}
assert INV_TURN_STR["'"] == 3

class Transform:
    def apply(self, cube):
        raise NotImplementedError

    def inverse(self):
        raise NotImplementedError

    def layer_moves(self):
        raise NotImplementedError

    def repeat(self, times):
        return Repeat(self, times)

class LayerTransform(Transform):
    def __init__(self, layer, rotation, kind=RotationKind.ROTATE_1):
        self.layer = layer
        self.rotation = rotation
        self.kind = RotationKind(kind)
        # Slot numbers of each cycle, resolved once
        self.cycles = [tuple(layer.indices[i] for i in cycle)
                for cycle in [layer_mod.CORNER_CYCLE, layer_mod.EDGE_CYCLE]]

    def apply(self, cube):
        cubies = cube.cubies
        for i in self.layer.indices:
            cubies[i].rotate(self.rotation)
        if self.kind:
            for slots in self.cycles:
                moved = rotate([cubies[i] for i in slots], self.kind)
                for [i, cubie] in zip(slots, moved):
                    cubies[i] = cubie

    def inverse(self):
        return LayerTransform(self.layer, self.rotation.inverse(),
                INVERSE_KIND[self.kind])

    def square(self):
        return LayerTransform(self.layer, self.rotation.compose(self.rotation),
                SQUARE_KIND[self.kind])

    def layer_moves(self):
        yield self

    def __eq__(self, other):
        return (isinstance(other, LayerTransform) and
                self.layer.name == other.layer.name and
                self.rotation == other.rotation and self.kind == other.kind)

    def __hash__(self):
        return hash((self.layer.name, self.rotation, self.kind))

    def __str__(self):
        return self.layer.name + TURN_STR[self.kind]

    def __repr__(self):
        return 'LayerTransform(%s)' % self

class Repeat(Transform):
    def __init__(self, transform, times):
        if not isinstance(times, int) or times < 0:
            raise ValueError('repeat count must be a non-negative int: %r' %
                    (times,))
        self.transform = transform
        self.times = times

    def apply(self, cube):
        for i in range(self.times):
            self.transform.apply(cube)

    def inverse(self):
        return Repeat(self.transform.inverse(), self.times)

    def layer_moves(self):
        for i in range(self.times):
            yield from self.transform.layer_moves()

    def __eq__(self, other):
        return (isinstance(other, Repeat) and self.times == other.times and
                self.transform == other.transform)

    def __hash__(self):
        return hash(('repeat', self.transform, self.times))

    # Quarter turns can take the count directly (R3, R'2); anything else needs
    # parentheses so the count isn't read as part of the inner token
    def __str__(self):
        t = self.transform
        if isinstance(t, LayerTransform) and t.kind in {1, 3}:
            return '%s%s' % (t, self.times)
        return '(%s)%s' % (t, self.times)

    def __repr__(self):
        return 'Repeat(%r, %s)' % (self.transform, self.times)

class Combine(Transform):
    def __init__(self, transforms):
        self.transforms = tuple(transforms)

    def apply(self, cube):
        for t in self.transforms:
            t.apply(cube)

    def inverse(self):
        return Combine(t.inverse() for t in reversed(self.transforms))

    def layer_moves(self):
        for t in self.transforms:
            yield from t.layer_moves()

    def __eq__(self, other):
        return (isinstance(other, Combine) and
                self.transforms == other.transforms)

    def __hash__(self):
        return hash(('combine', self.transforms))

    def __str__(self):
        return ' '.join(str(t) for t in self.transforms)

    def __repr__(self):
        return 'Combine(%r)' % (list(self.transforms),)

################################################################################
## Named moves #################################################################
################################################################################

# Slices turn with the face they follow: M like L, E like D, S like F
LAYER_ROTATIONS = {
    'F': permutation.FRONT,
    'B': permutation.BACK,
    'L': permutation.LEFT,
    'R': permutation.RIGHT,
    'U': permutation.UP,
    'D': permutation.DOWN,
    'M': permutation.LEFT,
    'E': permutation.DOWN,
    'S': permutation.FRONT,
}

# TURNS[name][n] turns the layer n quarter turns clockwise
TURNS = {}
LAYER_MOVES = {}
def gen_turns():
    for [name, rotation] in LAYER_ROTATIONS.items():
        quarter = LayerTransform(layer_mod.LAYERS[name], rotation)
        TURNS[name] = {1: quarter, 2: quarter.square(), 3: quarter.inverse()}
        for t in TURNS[name].values():
            LAYER_MOVES[str(t)] = t

gen_turns()

# Move names (or already-built LayerTransforms) to LayerTransforms
def get_moves(names):
    if isinstance(names, str):
        names = names.split()
    return [LAYER_MOVES[n] if isinstance(n, str) else n for n in names]

def sequence_to_string(moves):
    return ' '.join(str(m) for m in moves)

FACE_TURNS = get_moves('R F B D U L')

# Wide turns take the neighbouring slice along, and whole cube rotations turn
# all three layers on an axis. x follows R, y follows U, z follows F
WIDE_MOVES = {n: Combine(get_moves(m)) for [n, m] in [
    ('r', "R M'"),
    ('l', 'L M'),
    ('u', "U E'"),
    ('d', 'D E'),
    ('f', 'F S'),
    ('b', "B S'"),
]}
ROTATIONS = {n: Combine(get_moves(m)) for [n, m] in [
    ('x', "R M' L'"),
    ('y', "U E' D'"),
    ('z', "F S B'"),
]}

# Every single-letter token the notation accepts
BASE_MOVES = {name: TURNS[name][1] for name in LAYER_ROTATIONS}
BASE_MOVES.update(WIDE_MOVES)
BASE_MOVES.update(ROTATIONS)
