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
import logging
import math

import config
import layer
from cube import Cube, Face, make_rng
from permutation import UNIT
from transform import get_moves, sequence_to_string
from util import INF, time_execution

logger = logging.getLogger('cube.solver')

class SearchExhausted(RuntimeError):
    pass

################################################################################
## Search nodes ################################################################
################################################################################

# A node in the search tree. Children keep a reference to their parent and the
# move that led to them, so the move list only gets built once at the end
class SolveState:
    def __init__(self, cube, moves, parent=None, move=None):
        self.cube = cube
        self.moves = moves
        self.parent = parent
        self.move = move
        self.depth = parent.depth + 1 if parent is not None else 0

    def transfer(self, move):
        cube = self.cube.copy()
        move.apply(cube)
        return SolveState(cube, self.moves, parent=self, move=move)

    def neighbors(self):
        return [self.transfer(m) for m in self.moves]

    def random_transfer(self, rng):
        return self.transfer(rng.choice(self.moves))

    def collect(self):
        moves = []
        state = self
        while state.parent is not None:
            moves.append(state.move)
            state = state.parent
        return (self.cube, moves[::-1])

class Solver:
    name = 'solver'

    def search(self, cube):
        raise NotImplementedError

    def solve(self, cube):
        return self.search(cube).collect()

    def __add__(self, other):
        return Chain(self, other)

# Run solvers one after the other, each starting where the last left off
class Chain(Solver):
    name = 'chain'

    def __init__(self, *solvers):
        self.solvers = []
        for s in solvers:
            if isinstance(s, Chain):
                self.solvers.extend(s.solvers)
            else:
                self.solvers.append(s)

    # Each stage starts from the cube the last one returned, so there is no
    # single search tree to hand back
    def search(self, cube):
        raise TypeError('%s: chained solvers only support solve()' % self.name)

    def solve(self, cube):
        moves = []
        for solver in self.solvers:
            with time_execution(solver.name):
                [cube, stage_moves] = solver.solve(cube)
            logger.info('%s solved in %s moves: %s', solver.name,
                    len(stage_moves), sequence_to_string(stage_moves))
            moves.extend(stage_moves)
        return (cube, moves)

################################################################################
## Goals, heuristics and digests ###############################################
################################################################################

def core_aligned(cube):
    return cube.core.rotation == UNIT

def ud_aligned(cubie):
    return cubie.get(Face.U) in {Face.U, Face.D}

def lr_aligned(cubie):
    return cubie.get(Face.L) in {Face.L, Face.R}

def ud_oriented(cube):
    return all(ud_aligned(c) for c in cube.active_cubies())

# Like ud_oriented, but the face centers count too
def ud_oriented_strict(cube):
    return all(ud_aligned(c) for c in cube.cubies)

def lr_oriented(cube):
    return all(lr_aligned(c) for c in cube.active_cubies())

def is_solved(cube):
    return cube.is_solved()

# A face turn moves at most 8 active cubies (the layer's center is a face
# center), so it can fix at most 8 of them at a time
def ud_distance(cube):
    bad = sum(not ud_aligned(c) for c in cube.active_cubies())
    return -(-bad // 8)

def lr_distance(cube):
    bad = sum(not lr_aligned(c) for c in cube.active_cubies())
    return -(-bad // 8)

# Pack the orientation class (rotation modulo half turns, 6 values) of each
# active cubie into 3 bits: 21 cubies fit in 63 bits. Whether a cubie shows
# U/D on top or L/R on the left only depends on this class, and the class
# after a move only depends on the class before it.
def orientation_digest(cube):
    digest = 0
    for [i, slot] in enumerate(layer.ACTIVE_CUBIES):
        digest |= cube.cubies[slot].orientation_class() << (3 * i)
    return digest

# The same, plus the six face centers the strict goal also looks at
def strict_digest(cube):
    digest = orientation_digest(cube)
    for [i, slot] in enumerate(layer.FACE_CENTERS):
        digest |= cube.cubies[slot].orientation_class() << (63 + 3 * i)
    return digest

################################################################################
## Breadth-first stages ########################################################
################################################################################

# States are deduplicated by key(cube). A digest works as a key as long as the
# goal only looks at what the digest keeps
class BfsSolver(Solver):
    def __init__(self, moves, goal, name='bfs', max_depth=None, key=Cube.key):
        self.moves = tuple(get_moves(moves))
        self.goal = goal
        self.name = name
        self.key = key
        self.max_depth = config.BFS_MAX_DEPTH if max_depth is None else max_depth

    def search(self, cube):
        root = SolveState(cube.copy(), self.moves)
        if self.goal(root.cube):
            return root

        seen = {self.key(root.cube)}
        current = collections.deque([root])
        while current:
            state = current.popleft()
            if self.max_depth is not None and state.depth >= self.max_depth:
                break
            for child in state.neighbors():
                key = self.key(child.cube)
                if key in seen:
                    continue
                if self.goal(child.cube):
                    logger.debug('%s: found at depth %s, %s states seen',
                            self.name, child.depth, len(seen))
                    return child
                seen.add(key)
                current.append(child)

        raise SearchExhausted('%s: no solution found (%s states seen)' %
                (self.name, len(seen)))

# Reduce the cube through a chain of subgroups. Each stage only uses moves that
# keep what the previous stages fixed:
#   0. <M,E,S>: pin the core, which puts the centers back in place
#   1. <U,D,F,B,R,L>: orient everything to U/D
#   2. <U,D,F2,B2,R,L>: ...including the face centers
#   3. <U,D,F2,B2,R2,L2>: orient everything to L/R
#   4. <U2,D2,F2,B2,R2,L2>: solve
STAGES = [
    ('core', 'M E S', core_aligned, Cube.key),
    ('g0', "R F B D U L R' F' B' D' U' L'", ud_oriented, orientation_digest),
    ('g1', "F2 B2 R L D U R' L' D' U'", ud_oriented_strict, strict_digest),
    ('g2', "F2 B2 R2 L2 D U D' U'", lr_oriented, orientation_digest),
    ('g3', 'F2 B2 R2 L2 D2 U2', is_solved, Cube.key),
]

class Thistlethwaite(Chain):
    name = 'thistlethwaite'

    def __init__(self, max_depth=None):
        super().__init__(*[BfsSolver(moves, goal, name=name,
                max_depth=max_depth, key=key)
                for [name, moves, goal, key] in STAGES])

################################################################################
## Iterative deepening A* ######################################################
################################################################################

class IdaStarSolver(Solver):
    def __init__(self, moves, distance, digest=orientation_digest,
            max_depth=None, name='ida*'):
        self.moves = tuple(get_moves(moves))
        self.distance = distance
        self.digest = digest
        self.max_depth = config.IDA_MAX_DEPTH if max_depth is None else max_depth
        self.name = name

    # Orient all the active cubies to U/D
    @classmethod
    def g0(cls, **kwargs):
        return cls("R F B D U L R' F' B' D' U' L'", ud_distance, name='ida* g0',
                **kwargs)

    # From there, orient them to L/R without breaking U/D
    @classmethod
    def g1(cls, **kwargs):
        return cls("R2 F2 B2 L2 D U D' U'", lr_distance, name='ida* g1',
                **kwargs)

    def search(self, cube):
        root = SolveState(cube.copy(), self.moves)
        bound = self.distance(root.cube)
        while bound <= self.max_depth:
            # Digest -> shallowest depth it was reached at in this iteration
            seen = {self.digest(root.cube): 0}
            result = self.probe(root, bound, seen)
            logger.debug('%s: bound %s, %s digests', self.name, bound,
                    len(seen))
            if result is not None:
                return result
            bound += 1
        raise SearchExhausted('%s: no solution within %s moves' % (self.name,
                self.max_depth))

    def probe(self, state, bound, seen):
        dist = self.distance(state.cube)
        if dist == 0:
            return state
        if state.depth + dist > bound:
            return None

        for child in state.neighbors():
            key = self.digest(child.cube)
            if seen.get(key, INF) <= child.depth:
                continue
            seen[key] = child.depth
            result = self.probe(child, bound, seen)
            if result is not None:
                return result
        return None

################################################################################
## Simulated annealing #########################################################
################################################################################

# Every quarter, inverse and half turn of all nine layers
ANNEALING_MOVES = ' '.join('%s %s\' %s2' % (n, n, n) for n in 'RLFUDBESM')

class SimulatedAnnealing(Solver):
    name = 'annealing'

    def __init__(self, rng=None, rounds=None, tries=None, temperatures=None,
            target=0.0, moves=ANNEALING_MOVES, random_start=False):
        self.rng = make_rng(rng)
        self.rounds = config.SA_ROUNDS if rounds is None else rounds
        self.tries = config.SA_TRIES if tries is None else tries
        if temperatures is None:
            temperatures = config.SA_TEMPERATURES
        self.temperatures = list(temperatures)
        self.target = target
        self.moves = tuple(get_moves(moves))
        self.random_start = random_start

    # Metropolis rule, measured against the energy the run started from
    def accept(self, start_energy, energy, temperature):
        if temperature <= 0:
            return False
        return self.rng.random() < math.exp((start_energy - energy) / temperature)

    def anneal(self, state):
        start_energy = energy = state.cube.entropy()
        for temperature in self.temperatures:
            if energy <= self.target:
                break
            new_state = state.random_transfer(self.rng)
            new_energy = new_state.cube.entropy()
            if new_energy < energy or self.accept(start_energy, new_energy,
                    temperature):
                [state, energy] = [new_state, new_energy]
        return state

    # With random_start, one random move is made before the first round, even
    # on a solved cube. Off by default, so a solved input comes back untouched
    def search(self, cube):
        state = SolveState(cube.copy(), self.moves)
        if self.random_start:
            state = state.random_transfer(self.rng)
        for r in range(self.rounds):
            best = state
            best_energy = best.cube.entropy()
            for t in range(self.tries):
                if best_energy <= self.target:
                    break
                candidate = self.anneal(best)
                energy = candidate.cube.entropy()
                if energy < best_energy:
                    [best, best_energy] = [candidate, energy]
            state = best
            logger.debug('%s: round %s, entropy %.3f, %s moves', self.name, r,
                    best_energy, state.depth)
        return state

################################################################################
## Shuffle #####################################################################
################################################################################

# Random face turns. Not much of a solver, but it fits the same interface so
# it can scramble the start of a chain
class Shuffle(Solver):
    name = 'shuffle'

    def __init__(self, steps=None, rng=None, moves='R F B D U L'):
        self.steps = config.SHUFFLE_STEPS if steps is None else steps
        self.rng = make_rng(rng)
        self.moves = tuple(get_moves(moves))

    def search(self, cube):
        state = SolveState(cube.copy(), self.moves)
        for i in range(self.steps):
            state = state.random_transfer(self.rng)
        return state
