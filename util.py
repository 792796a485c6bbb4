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

import contextlib
import logging
import time

logger = logging.getLogger('cube.util')

# Global constants

INF = float('+inf')

# Rotate a sequence right by n, so the item at i ends up at i+n. n=0 works
# too, since l[-0:] is the whole sequence
def rotate(l, n):
    return (*l[-n:], *l[:-n])

@contextlib.contextmanager
def time_execution(label):
    start = time.time()
    yield
    logger.info('%s: %.3fs', label, time.time() - start)
