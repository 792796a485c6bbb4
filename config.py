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

# Tunable constants for the solvers. Each solver takes these as defaults, so
# they can also be overridden per instance.

# Iterative deepening gives up once the bound passes this
IDA_MAX_DEPTH = 40

# Breadth-first stages search until the frontier runs dry unless this is set
BFS_MAX_DEPTH = None

# Simulated annealing: temperature curve for a single run, and the number of
# rounds/tries per round of the best-of-N restart loop
SA_TEMPERATURES = range(99, -1, -1)
SA_ROUNDS = 50
SA_TRIES = 50

SHUFFLE_STEPS = 32

# Seed for the random sources created when the caller doesn't pass one. None
# means seed from system entropy
RANDOM_SEED = None
