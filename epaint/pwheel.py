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

"""Locate paints on a hue wheel

Each paint is placed at (hue angle, attribute value) in polar
coordinates on a wheel of unit radius.  Greys have no hue so they are
placed on a ray outside the wheel in order of value.
"""

import bisect
import collections
import math

from .bab import mathx
from .bab import options

from . import perrors
from . import pmix
from . import vpaint

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"

options.define("colour_wheel", "red_to_yellow_clockwise", options.Defn(bool, False, _("Direction around colour wheel from red to yellow.")))

SHAPE_RADIUS = 0.03
GREY_AXIS_ANGLE = mathx.PI_90
GREY_AXIS_OFFSET = 1.1

XY = collections.namedtuple("XY", ["x", "y"])


def polar_to_cartesian(radius, angle):
    if options.get("colour_wheel", "red_to_yellow_clockwise"):
        x = -radius * math.cos(angle)
    else:
        x = radius * math.cos(angle)
    y = radius * math.sin(angle)
    return XY(x, y)


def paint_xy(paint, attribute):
    if paint.hue is None:
        return polar_to_cartesian(GREY_AXIS_OFFSET + paint.value, GREY_AXIS_ANGLE)
    return polar_to_cartesian(paint.scalar_attribute(attribute), paint.hue)


def paint_sort_key(paint):
    """Series paints (by collection then name) before mixed paints (by name)
    """
    if isinstance(paint, pmix.MixedPaint):
        return (1, (), paint.name)
    elif isinstance(paint, vpaint.SeriesPaint):
        return (0, tuple(paint.colln_id), paint.name)
    return (0, (), paint.name)


class PaintShape:
    def __init__(self, paint, xy, seqno):
        self.paint = paint
        self.xy = xy
        self.seqno = seqno
    def distance_to(self, xy):
        return math.hypot(xy[0] - self.xy.x, xy[1] - self.xy.y)
    def encloses(self, xy):
        raise NotImplementedError


class PaintSquare(PaintShape):
    def encloses(self, xy):
        return abs(xy[0] - self.xy.x) < SHAPE_RADIUS and abs(xy[1] - self.xy.y) < SHAPE_RADIUS


class PaintCircle(PaintShape):
    def encloses(self, xy):
        return self.distance_to(xy) < SHAPE_RADIUS


def shape_for_paint(paint, attribute, seqno):
    shape_class = PaintCircle if isinstance(paint, pmix.MixedPaint) else PaintSquare
    return shape_class(paint, paint_xy(paint, attribute), seqno)


class SpatialPaintIndex:
    """Paints with their positions on a hue wheel for a given attribute
    """
    def __init__(self, attribute="chroma"):
        if attribute not in vpaint.SCALAR_ATTRIBUTES:
            raise ValueError(_("{0}: unknown scalar attribute").format(attribute))
        self.__attribute = attribute
        self.__keys = []
        self.__shapes = []
        self.__next_seqno = 0
    @property
    def attribute(self):
        return self.__attribute
    def set_attribute(self, attribute):
        if attribute not in vpaint.SCALAR_ATTRIBUTES:
            raise ValueError(_("{0}: unknown scalar attribute").format(attribute))
        self.__attribute = attribute
        self.__shapes = [shape_for_paint(shape.paint, attribute, shape.seqno) for shape in self.__shapes]
    def _index_of(self, paint):
        key = paint_sort_key(paint)
        index = bisect.bisect_left(self.__keys, key)
        return index, index < len(self.__keys) and self.__keys[index] == key
    def __len__(self):
        return len(self.__shapes)
    def __iter__(self):
        return (shape.paint for shape in self.__shapes)
    def __contains__(self, paint):
        return self._index_of(paint)[1]
    def add(self, paint):
        index, found = self._index_of(paint)
        if found:
            return False
        self.__keys.insert(index, paint_sort_key(paint))
        self.__shapes.insert(index, shape_for_paint(paint, self.__attribute, self.__next_seqno))
        self.__next_seqno += 1
        return True
    def remove(self, paint):
        index, found = self._index_of(paint)
        if not found:
            raise perrors.NotFound(paint.name)
        del self.__keys[index]
        del self.__shapes[index]
    def get_xy(self, paint):
        index, found = self._index_of(paint)
        if not found:
            raise perrors.NotFound(paint.name)
        return self.__shapes[index].xy
    def query_near(self, xy):
        """Return (paint, distance) for the enclosing shape whose centre
        is closest to xy or None if no shape encloses xy
        """
        nearest = None
        for shape in self.__shapes:
            if not shape.encloses(xy):
                continue
            rank = (shape.distance_to(xy), shape.seqno)
            if nearest is None or rank < nearest[0]:
                nearest = (rank, shape.paint)
        if nearest is None:
            return None
        return (nearest[1], nearest[0][0])
