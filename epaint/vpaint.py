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

"""
Virtual paint library
"""

import collections
import math
import re

from . import pchar
from . import perrors
from . import rgbh

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"

SCALAR_ATTRIBUTES = ("chroma", "greyness", "value", "warmth")


class Colour:
    """An immutable colour with painterly attributes derived from its RGB
    """
    RGB = rgbh.RGBPN
    HUE = rgbh.HueAngle
    __slots__ = ("__rgb", "__hue", "__chroma", "__value", "__warmth")
    def __init__(self, rgb):
        if isinstance(rgb, rgbh.RGBNG):
            rgb = rgb.rgbpn
        components = tuple(float(c) for c in rgb)
        if len(components) != 3:
            raise ValueError(_("RGB requires exactly three components: {0}").format(components))
        for component in components:
            if not 0.0 <= component <= 1.0:
                raise ValueError(_("RGB component out of range: {0}").format(component))
        self.__rgb = self.RGB(*components)
        self.__value = self.__rgb.get_value()
        xy = rgbh.rgb_to_xy(self.__rgb)
        if xy.x == 0 and xy.y == 0:
            self.__hue = None
            self.__chroma = 0.0
        else:
            self.__hue = self.HUE.from_xy(*xy)
            self.__chroma = min(math.hypot(*xy) * self.__hue.chroma_correction, 1.0)
        self.__warmth = xy.x
    @classmethod
    def from_rgb(cls, red, green, blue):
        return cls((red, green, blue))
    @property
    def rgb(self):
        return self.__rgb
    @property
    def hue(self):
        """The hue angle or None if this colour is a grey
        """
        return self.__hue
    @property
    def is_grey(self):
        return self.__hue is None
    @property
    def chroma(self):
        return self.__chroma
    @property
    def greyness(self):
        return 1.0 - self.__chroma
    @property
    def value(self):
        return self.__value
    @property
    def warmth(self):
        return self.__warmth
    @property
    def max_chroma_rgb(self):
        return self.RGB.WHITE if self.__hue is None else self.__hue.max_chroma_rgb
    @property
    def monochrome_rgb(self):
        return self.RGB.WHITE * self.__value
    @property
    def warmth_rgb(self):
        return (self.RGB.CYAN * (1 - self.__warmth) + self.RGB.RED * (1 + self.__warmth)) / 2
    @property
    def best_foreground_rgb(self):
        return self.__rgb.best_foreground()
    def scalar_attribute(self, attr):
        if attr not in SCALAR_ATTRIBUTES:
            raise ValueError(_("{0}: unknown scalar attribute").format(attr))
        return getattr(self, attr)
    def sort_key(self):
        # greys (ordered by value) come before all hues
        if self.__hue is None:
            return (0, self.__value, tuple(self.__rgb))
        return (1, float(self.__hue), self.__value, tuple(self.__rgb))
    def __eq__(self, other):
        if not isinstance(other, Colour):
            return NotImplemented
        return self.__rgb == other.__rgb
    def __ne__(self, other):
        if not isinstance(other, Colour):
            return NotImplemented
        return self.__rgb != other.__rgb
    def __hash__(self):
        return hash(self.__rgb)
    def __lt__(self, other):
        return self.sort_key() < other.sort_key()
    def __le__(self, other):
        return self.sort_key() <= other.sort_key()
    def __gt__(self, other):
        return self.sort_key() > other.sort_key()
    def __ge__(self, other):
        return self.sort_key() >= other.sort_key()
    def __str__(self):
        string = "(HUE = {0}, ".format(None if self.__hue is None else round(self.__hue.degrees, 1))
        string += "VALUE = {0}, ".format(round(self.__value, 2))
        string += "CHROMA = {0}, ".format(round(self.__chroma, 2))
        string += "WARMTH = {0})".format(round(self.__warmth, 2))
        return string
    def __repr__(self):
        return self.__class__.__name__ + "(rgb={})".format(repr(self.__rgb))


def is_single_line(text):
    """Return True if text contains no character that splitlines() breaks on
    """
    return text.splitlines() in ([], [text])


def _escape_quotes(text):
    return text.replace('"', r'\"')

def _unescape_quotes(text):
    return text.replace(r'\"', '"')


class BasicPaintSpec(collections.namedtuple("BasicPaintSpec", ["rgb", "name", "notes", "characteristics"])):
    """The definition of a paint as read from (or written to) one line
    of a paint collection file
    """
    __slots__ = ()
    TYPE_TAG = None
    CHARACTERISTICS = None
    # NB: the leading type tag is ignored so that older files can be read
    RE = re.compile(r'^(?P<ptype>\w+)\((?:name=)?"(?P<name>.+?)", rgb=(?P<rgb>RGB(?:16)?\([^)]+\))(?P<characteristics>(?:, (?!notes=)\w+="[^"]*")*)(?:, notes="(?P<notes>.*)")?\)$')
    def __new__(cls, rgb, name, notes, characteristics):
        if not name or not is_single_line(name) or not is_single_line(notes):
            raise ValueError(_("Invalid paint name or notes: {0!r}").format(name))
        if not isinstance(characteristics, cls.CHARACTERISTICS):
            characteristics = cls.CHARACTERISTICS(**characteristics)
        return super().__new__(cls, Colour(rgb).rgb, name, notes, characteristics)
    @classmethod
    def fm_spec_text(cls, text):
        match = cls.RE.match(text.strip())
        if not match:
            raise perrors.MalformedText(text, _("Unrecognized paint specification"))
        rgb = rgbh.parse_rgb_spec_text(match.group("rgb"))
        characteristics = cls.CHARACTERISTICS.parse(match.group("characteristics"))
        notes = match.group("notes")
        return cls(
            rgb=rgb,
            name=_unescape_quotes(match.group("name")),
            notes="" if notes is None else _unescape_quotes(notes),
            characteristics=characteristics
        )
    def spec_text(self):
        return '{0}(name="{1}", rgb={2}, {3}, notes="{4}")'.format(
            self.TYPE_TAG,
            _escape_quotes(self.name),
            rgbh.rgb_spec_text(self.rgb),
            self.characteristics.spec_text(),
            _escape_quotes(self.notes)
        )


class ModelPaintSpec(BasicPaintSpec):
    __slots__ = ()
    TYPE_TAG = "ModelPaint"
    CHARACTERISTICS = pchar.ModelPaintCharacteristics


class ArtPaintSpec(BasicPaintSpec):
    __slots__ = ()
    TYPE_TAG = "ArtPaint"
    CHARACTERISTICS = pchar.ArtPaintCharacteristics


class BasicPaint:
    """A named colour with notes and characteristics.
    Attributes of the colour and characteristics are available directly
    e.g. paint.value or paint.finish
    """
    __slots__ = ("__name", "__colour", "__notes", "__characteristics")
    def __init__(self, name, colour, notes, characteristics):
        self.__name = name
        self.__colour = colour if isinstance(colour, Colour) else Colour(colour)
        self.__notes = notes
        self.__characteristics = characteristics
    @classmethod
    def from_spec(cls, spec):
        return cls(spec.name, Colour(spec.rgb), spec.notes, spec.characteristics)
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
    def _key(self):
        return (self.__name, self.__colour.rgb, self.__notes, self.__characteristics)
    def __eq__(self, other):
        if not isinstance(other, BasicPaint):
            return NotImplemented
        return self._key() == other._key()
    def __ne__(self, other):
        if not isinstance(other, BasicPaint):
            return NotImplemented
        return self._key() != other._key()
    def __hash__(self):
        return hash(self._key())
    def __lt__(self, other):
        return self.__name < other.__name
    def __repr__(self):
        return "{0}(name={1!r}, colour={2!r})".format(self.__class__.__name__, self.__name, self.__colour)


class SeriesPaint(collections.namedtuple("SeriesPaint", ["colln_id", "paint"])):
    """A paint belonging to an identified collection
    """
    __slots__ = ()
    @property
    def id(self):
        return (self.colln_id, self.paint.name)
    def __getattr__(self, attr_name):
        if attr_name.startswith("_"):
            raise AttributeError(attr_name)
        return getattr(self.paint, attr_name)
    def __eq__(self, other):
        if not isinstance(other, SeriesPaint):
            return NotImplemented
        return self.id == other.id
    def __ne__(self, other):
        if not isinstance(other, SeriesPaint):
            return NotImplemented
        return self.id != other.id
    def __hash__(self):
        return hash(self.id)
    def __lt__(self, other):
        return self.id < other.id
    def __le__(self, other):
        return self.id <= other.id
    def __gt__(self, other):
        return self.id > other.id
    def __ge__(self, other):
        return self.id >= other.id
    def __str__(self):
        return self.name + " ({0}: {1})".format(*self.colln_id)
    def __repr__(self):
        return "SeriesPaint(colln_id={0!r}, paint={1!r})".format(self.colln_id, self.paint)


class TargetColour:
    """A colour that a mixture is intended to match
    """
    __slots__ = ("__name", "__colour", "__notes")
    def __init__(self, name, colour, notes=""):
        self.__name = name.strip()
        self.__colour = colour if isinstance(colour, Colour) else Colour(colour)
        self.__notes = notes.strip()
    @property
    def name(self):
        return self.__name
    @property
    def colour(self):
        return self.__colour
    @property
    def notes(self):
        return self.__notes
    def __getattr__(self, attr_name):
        if attr_name.startswith("_"):
            raise AttributeError(attr_name)
        try:
            return getattr(self.__colour, attr_name)
        except AttributeError:
            raise AttributeError(_("{}: unknown attribute for {}").format(attr_name, self.__class__.__name__)) from None
    def __eq__(self, other):
        if not isinstance(other, TargetColour):
            return NotImplemented
        return (self.__name, self.__colour, self.__notes) == (other.__name, other.__colour, other.__notes)
    def __hash__(self):
        return hash((self.__name, self.__colour))
    def __lt__(self, other):
        return self.__name < other.__name
    def __repr__(self):
        return "TargetColour(name={0!r}, colour={1!r}, notes={2!r})".format(self.__name, self.__colour, self.__notes)
