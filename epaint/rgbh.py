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

"""Implement types to represent red/green/blue data as a tuple and
map to painterly attributes such as value (lightness/darkness),
chroma (opposite of greyness) and hue (as an angle with red = 0).
"""

import collections
import math
import re

from .bab.decorators import classproperty
from .bab import mathx

from . import perrors

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"


# 16 bits per channel specific constants
class BPC16:
    ZERO = 0
    BITS_PER_CHANNEL = 16
    ONE = (1 << BITS_PER_CHANNEL) - 1
    THREE = ONE * 3
    @classmethod
    def ROUND(cls, x):
        return int(x + 0.5)

# Proportion (i.e. real numbers in the range 0 to 1.0) channel constants
class PROPN_CHANNELS:
    ZERO = 0.0
    BITS_PER_CHANNEL = None
    ONE = 1.0
    THREE = ONE * 3
    @classmethod
    def ROUND(cls, x):
        return float(x)

class RGBNG: # NB: We don't want most of list/tuple operations so use a wrapper
    __slots__ = ("__components",)
    def __init__(self, red, green, blue):
        self.__components = (red, green, blue)
    @classmethod
    def from_prgb(cls, prgb):
        return cls(*(cls.ROUND(c * cls.ONE) for c in prgb))
    @property
    def red(self):
        return self.__components[0]
    @property
    def green(self):
        return self.__components[1]
    @property
    def blue(self):
        return self.__components[2]
    @property
    def rgb16(self):
        return self.converted_to(RGB16)
    @property
    def rgbpn(self):
        return self.converted_to(RGBPN)
    def __eq__(self, other):
        if not isinstance(other, RGBNG):
            return NotImplemented
        return self.__components == other.__components
    def __ne__(self, other):
        if not isinstance(other, RGBNG):
            return NotImplemented
        return self.__components != other.__components
    def __hash__(self):
        return hash(self.__components)
    def __getitem__(self, index):
        return self.__components[index]
    def __iter__(self):
        return (component for component in self.__components)
    def __len__(self):
        return len(self.__components)
    def __add__(self, other):
        return self.__class__(*(mine + others for mine, others in zip(self.__components, other)))
    def __mul__(self, mul):
        return self.__class__(*(self.ROUND(component * mul) for component in self.__components))
    def __truediv__(self, div):
        return self.__class__(*(self.ROUND(component / div) for component in self.__components))
    def __str__(self):
        return self._format_str.format(self)
    def __repr__(self):
        return str(self)
    def get_value(self):
        return sum(self) / self.THREE
    def converted_to(self, rgbt):
        if rgbt.ONE == self.ONE:
            return rgbt(*self.__components)
        else:
            return rgbt(*[rgbt.ROUND((component * rgbt.ONE) / self.ONE) for component in self.__components])
    def best_foreground_is_black(self, threshold=0.5):
        return self.get_value() > threshold
    def best_foreground(self, threshold=0.5):
        return self.BLACK if self.best_foreground_is_black(threshold) else self.WHITE
    @property
    def non_zero_components(self):
        """Return the number of non zero components
        """
        return 3 - self.__components.count(0)


class ColourConstantsMixin:
    """Constants for the three primary colours, three secondary
    colours, black and white for the derived RGB type
    """
    @classproperty
    def BLACK(cls):
        return cls(cls.ZERO, cls.ZERO, cls.ZERO)
    @classproperty
    def RED(cls):
        return cls(cls.ONE, cls.ZERO, cls.ZERO)
    @classproperty
    def GREEN(cls):
        return cls(cls.ZERO, cls.ONE, cls.ZERO)
    @classproperty
    def BLUE(cls):
        return cls(cls.ZERO, cls.ZERO, cls.ONE)
    @classproperty
    def YELLOW(cls):
        return cls(cls.ONE, cls.ONE, cls.ZERO)
    @classproperty
    def CYAN(cls):
        return cls(cls.ZERO, cls.ONE, cls.ONE)
    @classproperty
    def MAGENTA(cls):
        return cls(cls.ONE, cls.ZERO, cls.ONE)
    @classproperty
    def WHITE(cls):
        return cls(cls.ONE, cls.ONE, cls.ONE)
    @classproperty
    def _format_str(cls):
        s = cls.__name__ + "("
        if cls.BITS_PER_CHANNEL is None:
            s += "red={0.red!r}, green={0.green!r}, blue={0.blue!r})"
        else:
            s += "red=0x{0.red:X}, green=0x{0.green:X}, blue=0x{0.blue:X})"
        return s

class RGB16(RGBNG, BPC16, ColourConstantsMixin):
    __slots__ = ()
    @property
    def rgb16(self):
        return self

class RGBPN(RGBNG, PROPN_CHANNELS, ColourConstantsMixin):
    __slots__ = ()
    @property
    def rgbpn(self):
        return self


XY = collections.namedtuple("XY", ["x", "y"])

def rgb_to_xy(rgb):
    """Project an RGB onto the plane perpendicular to the grey axis
    with red on the positive x axis
    """
    red, green, blue = rgb
    return XY(x=red - (green + blue) / 2, y=mathx.SIN_120 * (green - blue))


class HueAngle(mathx.Angle):
    """A hue angle with an associated RGB type which will be the return
    type for RGB related functions
    """
    RGB = RGBPN
    @classmethod
    def from_xy(cls, x, y):
        if x == 0 and y == 0:
            raise ValueError(_("Greys do not have a hue"))
        return cls(math.atan2(y, x))
    @property
    def max_chroma_prgb(self):
        """The (red, green, blue) proportions of the most saturated
        colour with this hue
        """
        def calc_other(oa):
            return math.sin(oa) / math.sin(mathx.PI_120 - oa)
        aha = abs(self)
        if aha <= mathx.PI_60:
            other = calc_other(aha)
            return (1.0, other, 0.0) if self >= 0 else (1.0, 0.0, other)
        elif aha <= mathx.PI_120:
            other = calc_other(mathx.PI_120 - aha)
            return (other, 1.0, 0.0) if self >= 0 else (other, 0.0, 1.0)
        else:
            other = calc_other(aha - mathx.PI_120)
            return (0.0, 1.0, other) if self >= 0 else (0.0, other, 1.0)
    @property
    def max_chroma_rgb(self):
        return self.RGB.from_prgb(self.max_chroma_prgb)
    @property
    def chroma_correction(self):
        """Factor that scales the distance from the grey axis to a chroma
        in the range 0 to 1 for this hue
        """
        big, middle = sorted(self.max_chroma_prgb, reverse=True)[:2]
        if big == middle or middle == 0:
            return 1.0
        return big / math.sqrt(big * big + middle * middle - big * middle)


# Text representation of RGB values in paint specification files
_HEX_CHNL = r"0x[0-9a-fA-F]+"
_RGB16_RE = re.compile(r"^RGB16\(\s*(?:red\s*=\s*)?(?P<red>{0})\s*,\s*(?:green\s*=\s*)?(?P<green>{0})\s*,\s*(?:blue\s*=\s*)?(?P<blue>{0})\s*\)$".format(_HEX_CHNL))
_RGB_RE = re.compile(r"^RGB\(\s*(?:red\s*=\s*)?(?P<red>[^,()=\s]+)\s*,\s*(?:green\s*=\s*)?(?P<green>[^,()=\s]+)\s*,\s*(?:blue\s*=\s*)?(?P<blue>[^,()=\s]+)\s*\)$")
_HEX_CHNL_RE = re.compile("^{0}$".format(_HEX_CHNL))


def _chnl_fm_hex(text, chnl_text):
    chnl = int(chnl_text, 16)
    if chnl > BPC16.ONE:
        raise perrors.MalformedText(text, _("Channel value out of range"))
    return chnl / BPC16.ONE


def parse_rgb_spec_text(text):
    """Parse "RGB16(red=0xHHHH, ...)" or "RGB(r, g, b)" returning an RGBPN.
    Hexadecimal values in "RGB(...)" are treated as 16 bit channels.
    """
    text = text.strip()
    match = _RGB16_RE.match(text)
    if match:
        return RGBPN(*(_chnl_fm_hex(text, match.group(c)) for c in ("red", "green", "blue")))
    match = _RGB_RE.match(text)
    if not match:
        raise perrors.MalformedText(text, _("Unrecognized RGB"))
    components = []
    for chnl_text in match.group("red", "green", "blue"):
        if _HEX_CHNL_RE.match(chnl_text):
            components.append(_chnl_fm_hex(text, chnl_text))
            continue
        try:
            chnl = float(chnl_text)
        except ValueError:
            raise perrors.MalformedText(text, _("Bad channel value")) from None
        if not (0.0 <= chnl <= 1.0):
            raise perrors.MalformedText(text, _("Channel value out of range"))
        components.append(chnl)
    return RGBPN(*components)


def rgb_spec_text(rgb):
    """Return the text for rgb as used in paint specification files.
    The exact 16 bit form is used where it loses nothing.
    """
    rgbpn = rgb.rgbpn
    rgb16 = rgbpn.rgb16
    if rgb16.rgbpn == rgbpn:
        return "RGB16(red=0x{0.red:X}, green=0x{0.green:X}, blue=0x{0.blue:X})".format(rgb16)
    return "RGB({0!r}, {1!r}, {2!r})".format(*(float(c) for c in rgbpn))
