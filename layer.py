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

# Cubie slots are numbered 9*depth + 3*row + col, with depth 0 at the front,
# row 0 at the top, and col 0 at the left. Flattened, with each face seen from
# outside:
#
#             18 19 20
#             09 10 11
#             00 01 02
#
# 18 09 00    00 01 02    02 11 20    20 19 18
# 21 12 03    03 04 05    05 14 23    23 22 21
# 24 15 06    06 07 08    08 17 26    26 25 24
#
#             06 07 08
#             15 16 17
#             24 25 26
#
# Each layer table lists its nine slots row by row, as seen looking into that
# layer from the direction it turns clockwise. That makes table positions
# 0 2 8 6 the corner cycle and 1 5 7 3 the edge cycle for every layer.

Layer = collections.namedtuple('Layer', 'name indices')

CORNER_CYCLE = (0, 2, 8, 6)
EDGE_CYCLE = (1, 5, 7, 3)
CENTER = 4

# Walk a 3x3 grid from the slot at the top left corner, stepping col_step
# per column and row_step per row
def grid(origin, col_step, row_step):
    return tuple(origin + row * row_step + col * col_step
            for row in range(3) for col in range(3))

def bias(indices, offset):
    return tuple(i + offset for i in indices)

F = Layer('F', grid(0, 1, 3))
B = Layer('B', grid(20, -1, 3))
R = Layer('R', grid(2, 9, 3))
L = Layer('L', grid(18, -9, 3))
U = Layer('U', grid(18, 1, -9))
D = Layer('D', grid(6, 1, 9))

# Slices share the orientation of the face they follow, shifted one slot
# towards the middle
M = Layer('M', bias(L.indices, 1))
E = Layer('E', bias(D.indices, -3))
S = Layer('S', bias(F.indices, 9))

LAYERS = {layer.name: layer for layer in [F, B, L, R, U, D, M, E, S]}
FACE_LAYERS = [F, B, R, L, U, D]

for layer in LAYERS.values():
    assert sorted(set(layer.indices)) == sorted(layer.indices), layer
    assert all(0 <= i < 27 for i in layer.indices), layer

FACE_CENTERS = tuple(sorted(layer.indices[CENTER] for layer in FACE_LAYERS))
CORE = M.indices[CENTER]
assert FACE_CENTERS == (4, 10, 12, 14, 16, 22)
assert CORE == 13

# The 8 corners, 12 edges and the core. Face centers only ever spin in place,
# so their orientation carries no information
ACTIVE_CUBIES = tuple(i for i in range(27) if i not in FACE_CENTERS)
assert len(ACTIVE_CUBIES) == 21

def get_layer(layer):
    if isinstance(layer, Layer):
        return layer
    return LAYERS[layer]
