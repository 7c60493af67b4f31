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

"""Paint characteristics not related to colour
"""

import collections
import math
import re

from . import perrors

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"


class BadMappedFloatValue(perrors.PaintError):
    pass


# NB: abbreviations and descriptions appear in data files so no i18n
CHARACTERISTIC = collections.namedtuple("CHARACTERISTIC", ["ident", "abbrev", "descr", "rval"])


def find_marker(text, key):
    """Return the value of the first 'key="value"' marker in text or None
    """
    match = re.search(r'\b{0}\s*=\s*"(?P<value>[^"]*)"'.format(re.escape(key)), text)
    return match.group("value") if match else None


def extract_marker_or_raw(text, key):
    """Return the value of a 'key="value"' marker found anywhere in
    text or, if there is no such marker, the whole of text stripped
    of surrounding white space.
    """
    value = find_marker(text, key)
    return text.strip() if value is None else value


class MappedFloat:
    """A closed set of values each with an abbreviation, a description
    and a (1 based) ordinal used for weighted averaging
    """
    KEY = None
    MAP = None
    __slots__ = ("__rval",)
    def __init__(self, rval):
        if not any(rval == mapi.rval for mapi in self.MAP):
            raise BadMappedFloatValue(_("Invalid {0} value: {1}").format(self.KEY, rval))
        self.__rval = float(rval)
    @classmethod
    def define_variants(cls):
        for mapi in cls.MAP:
            setattr(cls, mapi.ident, cls(mapi.rval))
        return cls
    @classmethod
    def parse(cls, text):
        value = extract_marker_or_raw(text, cls.KEY)
        for mapi in cls.MAP:
            if value == mapi.abbrev or value == mapi.descr:
                return cls(mapi.rval)
        raise perrors.MalformedText(text, _("Unrecognized {0}").format(cls.KEY))
    @classmethod
    def from_ordinal(cls, ordinal):
        rounded = int(ordinal + 0.5) if math.isfinite(ordinal) and ordinal >= 0 else -1
        if not 1 <= rounded <= len(cls.MAP):
            raise BadMappedFloatValue(_("{0}: {1} ordinal out of range").format(ordinal, cls.KEY))
        return cls(rounded)
    @classmethod
    def values(cls):
        return [cls(mapi.rval) for mapi in cls.MAP]
    def to_ordinal(self):
        return self.__rval
    @property
    def _mapi(self):
        for mapi in self.MAP:
            if mapi.rval == self.__rval:
                return mapi
    @property
    def abbrev(self):
        return self._mapi.abbrev
    @property
    def description(self):
        return self._mapi.descr
    def spec_text(self):
        return '{0}="{1}"'.format(self.KEY, self.abbrev)
    def __str__(self):
        return self.abbrev
    def __repr__(self):
        return "{0}.{1}".format(self.__class__.__name__, self._mapi.ident)
    def __hash__(self):
        return hash((self.KEY, self.__rval))
    # And sorting
    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.__rval == other.__rval
    def __ne__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.__rval != other.__rval
    def __lt__(self, other):
        return self.__rval < other.__rval
    def __le__(self, other):
        return self.__rval <= other.__rval
    def __gt__(self, other):
        return self.__rval > other.__rval
    def __ge__(self, other):
        return self.__rval >= other.__rval


class Permanence(MappedFloat):
    KEY = "permanence"
    MAP = (
            CHARACTERISTIC("EXTREMELY_PERMANENT", "AA", "Extremely Permanent", 4),
            CHARACTERISTIC("PERMANENT", "A", "Permanent", 3),
            CHARACTERISTIC("MODERATELY_DURABLE", "B", "Moderately Durable", 2),
            CHARACTERISTIC("FUGITIVE", "C", "Fugitive", 1),
        )


class Finish(MappedFloat):
    KEY = "finish"
    MAP = (
            CHARACTERISTIC("GLOSS", "G", "Gloss", 4),
            CHARACTERISTIC("SEMI_GLOSS", "SG", "Semi-gloss", 3),
            CHARACTERISTIC("SEMI_FLAT", "SF", "Semi-flat", 2),
            CHARACTERISTIC("FLAT", "F", "Flat", 1),
        )


class Transparency(MappedFloat):
    KEY = "transparency"
    MAP = (
            CHARACTERISTIC("OPAQUE", "O", "Opaque", 5),
            CHARACTERISTIC("SEMI_OPAQUE", "SO", "Semi-opaque", 4),
            CHARACTERISTIC("SEMI_TRANSPARENT", "ST", "Semi-transparent", 3),
            CHARACTERISTIC("TRANSPARENT", "T", "Transparent", 2),
            CHARACTERISTIC("CLEAR", "Cl", "Clear", 1),
        )


class Fluorescence(MappedFloat):
    KEY = "fluorescence"
    MAP = (
            CHARACTERISTIC("FLUORESCENT", "Fl", "Fluorescent", 4),
            CHARACTERISTIC("SEMI_FLUORESCENT", "SF", "Semi-fluorescent", 3),
            CHARACTERISTIC("SEMI_NONFLUORESCENT", "SN", "Semi-nonfluorescent", 2),
            CHARACTERISTIC("NONFLUORESCENT", "NF", "Nonfluorescent", 1),
        )


class Metallic(MappedFloat):
    KEY = "metallic"
    MAP = (
            CHARACTERISTIC("METAL", "Ml", "Metal", 4),
            CHARACTERISTIC("METALLIC", "Mc", "Semi-metallic", 3),
            CHARACTERISTIC("SEMI_METALLIC", "SM", "Semi-nonmetallic", 2),
            CHARACTERISTIC("NONMETALLIC", "NM", "Nonmetallic", 1),
        )


for _mfc in (Permanence, Finish, Transparency, Fluorescence, Metallic):
    _mfc.define_variants()
del _mfc

CHARACTERISTIC_TYPES = {mfc.KEY: mfc for mfc in (Permanence, Finish, Transparency, Fluorescence, Metallic)}


class Characteristics:
    """An immutable set of named characteristics in a fixed order
    """
    NAMES = ()
    # values to use when older definitions omit a characteristic
    DEFAULTS = {}
    __slots__ = ("__values",)
    def __init__(self, **kwargs):
        if set(kwargs) != set(self.NAMES):
            raise TypeError(_("{0}: requires exactly: {1}").format(self.__class__.__name__, ", ".join(self.NAMES)))
        values = []
        for name in self.NAMES:
            mfc = CHARACTERISTIC_TYPES[name]
            value = kwargs[name]
            values.append(value if isinstance(value, mfc) else mfc.parse(value))
        self.__values = tuple(values)
    @classmethod
    def parse(cls, text):
        """Extract each characteristic from a paint specification line
        """
        kwargs = {}
        for name in cls.NAMES:
            if name in cls.DEFAULTS and find_marker(text, name) is None:
                kwargs[name] = cls.DEFAULTS[name]
            else:
                kwargs[name] = CHARACTERISTIC_TYPES[name].parse(text)
        return cls(**kwargs)
    @classmethod
    def from_ordinals(cls, ordinals):
        return cls(**{name: CHARACTERISTIC_TYPES[name].from_ordinal(ordinal) for name, ordinal in zip(cls.NAMES, ordinals)})
    def to_ordinals(self):
        return tuple(value.to_ordinal() for value in self.__values)
    def __getattr__(self, attr_name):
        if attr_name not in self.NAMES:
            raise AttributeError(_("{}: unknown attribute for {}").format(attr_name, self.__class__.__name__))
        return self.__values[self.NAMES.index(attr_name)]
    def __iter__(self):
        return iter(self.__values)
    def __eq__(self, other):
        if not isinstance(other, Characteristics):
            return NotImplemented
        return self.NAMES == other.NAMES and self.__values == other.__values
    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result
    def __hash__(self):
        return hash((self.NAMES, self.__values))
    def spec_text(self):
        return ", ".join(value.spec_text() for value in self.__values)
    def get_kwargs(self):
        return {name: str(value) for name, value in zip(self.NAMES, self.__values)}
    def __repr__(self):
        return "{0}({1})".format(self.__class__.__name__, self.spec_text())


class ModelPaintCharacteristics(Characteristics):
    NAMES = ("transparency", "finish", "metallic", "fluorescence")
    DEFAULTS = {"metallic": Metallic.NONMETALLIC, "fluorescence": Fluorescence.NONFLUORESCENT}
    __slots__ = ()


class ArtPaintCharacteristics(Characteristics):
    NAMES = ("transparency", "permanence")
    __slots__ = ()
