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

"""Mix paint colours
"""

import bisect
import collections
import fractions
import logging

from .bab import mathx

from . import perrors
from . import vpaint

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"

logger = logging.getLogger(__name__)


class PaintComponent(collections.namedtuple("PaintComponent", ["paint", "parts"])):
    __slots__ = ()
    def __new__(cls, paint, parts):
        if not isinstance(parts, int) or isinstance(parts, bool) or parts < 0:
            raise ValueError(_("Parts must be a non negative integer: {0!r}").format(parts))
        return super().__new__(cls, paint, parts)


def simplify_parts(components):
    """Return the components with their parts divided by the greatest
    common divisor of all the parts
    """
    components = [PaintComponent(*component) for component in components]
    divisor = mathx.gcd(*[component.parts for component in components])
    if divisor <= 1:
        return components
    return [PaintComponent(component.paint, component.parts // divisor) for component in components]


class ColourMixer:
    """Accumulate parts weighted colours.
    Sums are kept exactly so the order of addition does not matter.
    """
    def __init__(self):
        self.reset()
    @classmethod
    def from_components(cls, components):
        mixer = cls()
        for paint, parts in components:
            mixer.add(paint, parts)
        return mixer
    def reset(self):
        self.__rgb_sum = (fractions.Fraction(0),) * 3
        self.__total_parts = 0
    @property
    def total_parts(self):
        return self.__total_parts
    def add(self, colour, parts):
        """Add parts of colour (a Colour or anything with an "rgb")
        """
        if not isinstance(parts, int) or isinstance(parts, bool) or parts < 0:
            raise ValueError(_("Parts must be a non negative integer: {0!r}").format(parts))
        if parts == 0:
            return
        self.__rgb_sum = tuple(total + fractions.Fraction(chnl) * parts for total, chnl in zip(self.__rgb_sum, colour.rgb))
        self.__total_parts += parts
    def get_colour(self):
        """Return the mixed colour or None if there are no parts
        """
        if self.__total_parts == 0:
            return None
        return vpaint.Colour(tuple(float(total / self.__total_parts) for total in self.__rgb_sum))


class MixedPaint:
    __slots__ = ("__name", "__colour", "__notes", "__characteristics", "__target_colour", "__components")
    def __init__(self, name, colour, characteristics, components, notes="", target_colour=None):
        self.__name = name
        self.__colour = colour
        self.__characteristics = characteristics
        self.__components = tuple(sorted(components, key=lambda x: x.parts, reverse=True))
        self.__notes = notes
        self.__target_colour = target_colour
    @property
    def name(self):
        return self.__name
    @property
    def colour(self):
        return self.__colour
    @property
    def notes(self):
        return self.__notes
    @property
    def characteristics(self):
        return self.__characteristics
    @property
    def target_colour(self):
        return self.__target_colour
    @property
    def components(self):
        return self.__components
    def __getattr__(self, attr_name):
        if attr_name.startswith("_"):
            raise AttributeError(attr_name)
        try:
            return getattr(self.__colour, attr_name)
        except AttributeError:
            try:
                return getattr(self.__characteristics, attr_name)
            except AttributeError:
                raise AttributeError(_("{}: unknown attribute for {}").format(attr_name, self.__class__.__name__)) from None
    def uses_paint(self, paint):
        for component in self.__components:
            if component.paint == paint:
                return True
            if isinstance(component.paint, MixedPaint) and component.paint.uses_paint(paint):
                return True
        return False
    def series_paints_used(self):
        paints = set()
        for component in self.__components:
            if isinstance(component.paint, MixedPaint):
                paints |= component.paint.series_paints_used()
            else:
                paints.add(component.paint)
        return paints
    def __eq__(self, other):
        if not isinstance(other, MixedPaint):
            return NotImplemented
        return self.__name == other.__name
    def __ne__(self, other):
        if not isinstance(other, MixedPaint):
            return NotImplemented
        return self.__name != other.__name
    def __hash__(self):
        return hash(self.__name)
    def __lt__(self, other):
        return self.__name < other.__name
    def _components_str(self):
        string = _("\nComponents:\n")
        for component in self.__components:
            string += _("\t{0} Part(s): {1}\n").format(component.parts, component.paint.name)
        return string
    def __str__(self):
        return ("Name: \"{0}\" Notes: \"{1}\"").format(self.__name, self.__notes) + str(self.__colour) + self._components_str()
    def __repr__(self):
        return "MixedPaint(name={0!r}, colour={1!r})".format(self.__name, self.__colour)


class MixedPaintCollection:
    """The paints mixed during a session ordered by name
    """
    MIXED_PAINT = MixedPaint
    # NB: mixture names identify paints so no i18n
    NAME_TEMPLATE = "Mix #{:03d}"
    def __init__(self):
        self.__last_mixture_id = 0
        self.__paints = []
        self.__names = []
    def __len__(self):
        return len(self.__paints)
    def __iter__(self):
        return iter(self.__paints)
    def next_mixture_id(self):
        return self.__last_mixture_id + 1
    def has_paint_named(self, name):
        index = bisect.bisect_left(self.__names, name)
        return index < len(self.__names) and self.__names[index] == name
    def get_paint(self, name):
        index = bisect.bisect_left(self.__names, name)
        if index < len(self.__names) and self.__names[index] == name:
            return self.__paints[index]
        raise perrors.NotFound(name)
    def _mixed_characteristics(self, components):
        # model and art paints cannot be mixed together
        characteristics_class = type(components[0].paint.characteristics)
        for component in components[1:]:
            if type(component.paint.characteristics) is not characteristics_class:
                raise ValueError(_("{0}: cannot be mixed with {1}").format(component.paint.name, components[0].paint.name))
        total_parts = sum(component.parts for component in components)
        sums = [fractions.Fraction(0)] * len(characteristics_class.NAMES)
        for component in components:
            ordinals = component.paint.characteristics.to_ordinals()
            sums = [total + fractions.Fraction(ordinal) * component.parts for total, ordinal in zip(sums, ordinals)]
        return characteristics_class.from_ordinals([total / total_parts for total in sums])
    def add_paint(self, notes, components, target_colour=None):
        """Mix the components into a new paint and add it to the collection
        """
        components = [component for component in simplify_parts(components) if component.parts > 0]
        if not components:
            raise perrors.NoSubstantiveComponents()
        characteristics = self._mixed_characteristics(components)
        colour = ColourMixer.from_components(components).get_colour()
        self.__last_mixture_id += 1
        name = self.NAME_TEMPLATE.format(self.__last_mixture_id)
        paint = self.MIXED_PAINT(name, colour, characteristics, components, notes=notes, target_colour=target_colour)
        index = bisect.bisect_left(self.__names, name)
        self.__names.insert(index, name)
        self.__paints.insert(index, paint)
        logger.debug("%s: mixed from %d components", name, len(components))
        return paint
    def remove_paint(self, name):
        index = bisect.bisect_left(self.__names, name)
        if index == len(self.__names) or self.__names[index] != name:
            raise perrors.NotFound(name)
        del self.__names[index]
        return self.__paints.pop(index)
    def paint_users(self, paint):
        return [mixed for mixed in self.__paints if mixed.uses_paint(paint)]
    def series_paints_used(self):
        paints = set()
        for mixed in self.__paints:
            paints |= mixed.series_paints_used()
        return sorted(paints)
