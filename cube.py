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

import collections
import enum
import logging
import math
import random

import config
import layer as layer_mod
import notation
import permutation
import transform

logger = logging.getLogger('cube')

################################################################################
## Faces and cubies ############################################################
################################################################################

Face = enum.IntEnum('Face', 'F B R L U D', start=0)
FACE_STR = 'FBRLUD'

# Each face is one aligned permutation pattern; the four rotations of that
# pattern all read as the same face
FACE_PERM = list(permutation.REPRESENTATIVES)
PERM_FACE = {p.value: face for [face, p] in zip(Face, FACE_PERM)}
assert len(PERM_FACE) == 6

FACE_LAYER = dict(zip(Face, layer_mod.FACE_LAYERS))
assert all(FACE_STR[f] == FACE_LAYER[f].name for f in Face)

class Cubie:
    __slots__ = ['rotation']

    def __init__(self, rotation=permutation.UNIT):
        self.rotation = rotation

    # Which of the cubie's own faces now shows in the given face's slot
    def get(self, face):
        p = self.rotation.compose(FACE_PERM[face]).align()
        return PERM_FACE[p.value]

    def rotate(self, rotation):
        self.rotation = self.rotation.compose(rotation)
        return self

    # Orientation modulo half turns: which face the coset representative of
    # the rotation stands for
    def orientation_class(self):
        [_, rep] = self.rotation.factor()
        return PERM_FACE[rep.value]

    def copy(self):
        return Cubie(self.rotation)

    def __eq__(self, other):
        return isinstance(other, Cubie) and self.rotation == other.rotation

    def __hash__(self):
        return hash(self.rotation)

    def __repr__(self):
        return 'Cubie(%s, U=%s, F=%s)' % (self.rotation,
                FACE_STR[self.get(Face.U)], FACE_STR[self.get(Face.F)])

# Sum of log2(n/count) over the distinct rotations in a set of cubies: zero
# when they all agree, growing as they spread out
def entropy(cubies):
    counts = collections.Counter(c.rotation.value for c in cubies)
    n = sum(counts.values())
    return sum(math.log2(n / c) for c in counts.values())

################################################################################
## Puzzle state ################################################################
################################################################################

def make_rng(rng=None):
    if rng is None:
        rng = random.Random(config.RANDOM_SEED)
    return rng

class Cube:
    def __init__(self, cubies=None):
        if cubies is None:
            cubies = [Cubie() for i in range(27)]
        assert len(cubies) == 27
        self.cubies = cubies

    @property
    def core(self):
        return self.cubies[layer_mod.CORE]

    def active_cubies(self):
        return (self.cubies[i] for i in layer_mod.ACTIVE_CUBIES)

    def iter_layer(self, layer):
        layer = layer_mod.get_layer(layer)
        return (self.cubies[i] for i in layer.indices)

    def execute(self, transform):
        transform.apply(self)
        return self

    def run_alg(self, alg):
        if isinstance(alg, (str, list)):
            alg = notation.parse_alg(alg)
        return self.execute(alg)

    def reset(self):
        for cubie in self.cubies:
            cubie.rotation = permutation.UNIT
        return self

    # Every face layer has to read the same as its center. This doesn't care
    # about the overall orientation, or the spin of the face centers
    def is_solved(self):
        for face in Face:
            cubies = list(self.iter_layer(FACE_LAYER[face]))
            ref = cubies[layer_mod.CENTER].get(face)
            if any(c.get(face) != ref for c in cubies):
                return False
        return True

    def entropy(self):
        return entropy(self.active_cubies())

    def shuffle(self, steps=config.SHUFFLE_STEPS, rng=None, moves=None):
        rng = make_rng(rng)
        if moves is None:
            moves = transform.FACE_TURNS
        applied = []
        for i in range(steps):
            move = rng.choice(moves)
            move.apply(self)
            applied.append(move)
        logger.debug('shuffle: %s', transform.sequence_to_string(applied))
        return applied

    def key(self):
        return tuple(c.rotation.value for c in self.cubies)

    def copy(self):
        return Cube([c.copy() for c in self.cubies])

    def __eq__(self, other):
        return isinstance(other, Cube) and self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return 'Cube(%s)' % ' '.join('%02x' % v for v in self.key())
