# Copyright: Peter Williams (2012) - All rights reserved
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; version 2 of the License only.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA

"""Mathematical odds and ends
"""

import functools
import math

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"

PI_60 = math.pi / 3
PI_90 = math.pi / 2
PI_120 = PI_60 * 2

SIN_60 = math.sin(PI_60)
SIN_120 = math.sin(PI_120)


def gcd(*args):
    """Return the greatest common divisor of all the arguments.
    The result is zero if all the arguments are zero.
    """
    return functools.reduce(math.gcd, args, 0)


class Angle(float):
    """A floating point angle (in radians) normalised to the range
    -pi < angle <= pi
    """
    def __new__(cls, value):
        if math.isnan(value):
            raise ValueError(_("Angle cannot be NaN"))
        if not (-math.pi < value <= math.pi):
            value = math.atan2(math.sin(value), math.cos(value))
            if value == -math.pi:
                value = math.pi
        return float.__new__(cls, value)
    @property
    def degrees(self):
        return math.degrees(self)
    def __neg__(self):
        return self.__class__(-float(self))
    def __abs__(self):
        return float.__abs__(self)
    def rotated_by(self, delta):
        return self.__class__(float(self) + delta)
    def __repr__(self):
        return "{0}({1})".format(self.__class__.__name__, float.__repr__(self))
