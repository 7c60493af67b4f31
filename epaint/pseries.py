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

"""Manage Paint Series Data
"""

import bisect
import collections
import logging
import os
import re

from . import perrors
from . import vpaint

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"

logger = logging.getLogger(__name__)


def read_collection_file_names(file_list_path):
    """Return the paint collection file paths listed (one per line)
    in file_list_path.  A missing list file is an empty list.
    """
    if not os.path.isfile(file_list_path):
        return []
    try:
        with open(file_list_path, "r", encoding="utf-8") as fobj:
            lines = fobj.read().splitlines()
    except OSError as edata:
        raise perrors.PaintIOError.from_os_error(edata, file_list_path) from edata
    return [line.strip() for line in lines if line.strip()]

def write_collection_file_names(file_list_path, file_names):
    text = "".join(file_name + "\n" for file_name in file_names)
    try:
        with open(file_list_path, "w", encoding="utf-8") as fobj:
            fobj.write(text)
    except OSError as edata:
        raise perrors.PaintIOError.from_os_error(edata, file_list_path) from edata


class PaintCollectionId(collections.namedtuple("PaintCollectionId", ["owner", "name"])):
    """The (owner, name) pair that identifies a paint collection
    """
    __slots__ = ()
    # No i18n for these strings
    OWNER_LABEL = None
    NAME_LABEL = None
    def __new__(cls, owner, name):
        owner = owner.strip()
        name = name.strip()
        if not owner or not name or not vpaint.is_single_line(owner) or not vpaint.is_single_line(name):
            raise ValueError(_("Invalid {0}/{1}: {2!r}/{3!r}").format(cls.OWNER_LABEL, cls.NAME_LABEL, owner, name))
        return super().__new__(cls, owner, name)
    @classmethod
    def fm_header_lines(cls, lines):
        """Extract the owner and name from the two header lines which
        may be in either order
        """
        if len(lines) < 2:
            raise perrors.MalformedText("\n".join(lines), _("Too few lines: {0}.").format(len(lines)))
        values = {}
        for line in lines[:2]:
            for label in (cls.OWNER_LABEL, cls.NAME_LABEL):
                match = re.match(r"^{0}:(?P<value>.*)$".format(re.escape(label)), line)
                if match:
                    if label in values:
                        raise perrors.MalformedText(line, _("Duplicate header"))
                    value = match.group("value").strip()
                    if not value:
                        raise perrors.MalformedText(line, _("Missing {0}").format(label))
                    values[label] = value
                    break
            else:
                raise perrors.MalformedText(line, _("Expected \"{0}:\" or \"{1}:\"").format(cls.OWNER_LABEL, cls.NAME_LABEL))
        return cls(owner=values[cls.OWNER_LABEL], name=values[cls.NAME_LABEL])
    def header_text(self):
        string = "{0}: {1}\n".format(self.OWNER_LABEL, self.owner)
        string += "{0}: {1}\n".format(self.NAME_LABEL, self.name)
        return string
    def __str__(self):
        return "{0}: {1}".format(self.owner, self.name)


class PaintSeriesId(PaintCollectionId):
    __slots__ = ()
    OWNER_LABEL = "Manufacturer"
    NAME_LABEL = "Series"


class PaintCollectionSpec:
    """A named and owned set of paint specifications ordered by name
    """
    COLLECTION_ID = None
    PAINT_SPEC = None
    def __init__(self, colln_id, paint_specs=()):
        self.__colln_id = colln_id
        self.__names = []
        self.__paint_specs = []
        for paint_spec in paint_specs:
            index = bisect.bisect_left(self.__names, paint_spec.name)
            if index < len(self.__names) and self.__names[index] == paint_spec.name:
                raise perrors.AlreadyExists(paint_spec.name)
            self.__names.insert(index, paint_spec.name)
            self.__paint_specs.insert(index, paint_spec)
    @property
    def colln_id(self):
        return self.__colln_id
    @property
    def paint_specs(self):
        return tuple(self.__paint_specs)
    def __len__(self):
        return len(self.__paint_specs)
    def __iter__(self):
        return iter(self.__paint_specs)
    def has_paint_named(self, name):
        index = bisect.bisect_left(self.__names, name)
        return index < len(self.__names) and self.__names[index] == name
    def get_paint_spec(self, name):
        index = bisect.bisect_left(self.__names, name)
        if index < len(self.__names) and self.__names[index] == name:
            return self.__paint_specs[index]
        raise perrors.NotFound(name)
    def __eq__(self, other):
        if not isinstance(other, PaintCollectionSpec):
            return NotImplemented
        return self.__colln_id == other.__colln_id and self.__paint_specs == other.__paint_specs
    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result
    def __repr__(self):
        return "{0}(colln_id={1!r}, paint_specs=[{2} specs])".format(self.__class__.__name__, self.__colln_id, len(self.__paint_specs))
    def definition_text(self):
        string = self.__colln_id.header_text()
        for paint_spec in self.__paint_specs:
            string += "{0}\n".format(paint_spec.spec_text())
        return string
    @classmethod
    def fm_definition(cls, definition_text):
        lines = definition_text.splitlines()
        colln_id = cls.COLLECTION_ID.fm_header_lines(lines)
        paint_specs = [cls.PAINT_SPEC.fm_spec_text(line) for line in lines[2:] if line.strip()]
        return cls(colln_id, paint_specs)
    @classmethod
    def from_file(cls, file_path):
        try:
            with open(file_path, "r", encoding="utf-8") as fobj:
                text = fobj.read()
        except OSError as edata:
            raise perrors.PaintIOError.from_os_error(edata, file_path) from edata
        colln_spec = cls.fm_definition(text)
        logger.debug("%s: read %d paint specifications", file_path, len(colln_spec))
        return colln_spec
    def write_to_file(self, file_path):
        text = self.definition_text()
        try:
            with open(file_path, "w", encoding="utf-8") as fobj:
                fobj.write(text)
        except OSError as edata:
            raise perrors.PaintIOError.from_os_error(edata, file_path) from edata
        logger.debug("%s: wrote %d paint specifications", file_path, len(self))


class ModelPaintSeriesSpec(PaintCollectionSpec):
    COLLECTION_ID = PaintSeriesId
    PAINT_SPEC = vpaint.ModelPaintSpec


class ArtPaintSeriesSpec(PaintCollectionSpec):
    COLLECTION_ID = PaintSeriesId
    PAINT_SPEC = vpaint.ArtPaintSpec


class PaintCollection:
    """The paints defined by a paint collection specification
    """
    PAINT = vpaint.SeriesPaint
    def __init__(self, colln_id, paints=()):
        self.__colln_id = colln_id
        self.__paints = sorted(self.PAINT(colln_id, paint) for paint in paints)
        self.__names = [paint.name for paint in self.__paints]
        for index in range(1, len(self.__names)):
            if self.__names[index] == self.__names[index - 1]:
                raise perrors.AlreadyExists(self.__names[index])
    @classmethod
    def from_spec(cls, colln_spec):
        return cls(colln_spec.colln_id, (vpaint.BasicPaint.from_spec(paint_spec) for paint_spec in colln_spec))
    @property
    def colln_id(self):
        return self.__colln_id
    def __lt__(self, other):
        return self.__colln_id < other.__colln_id
    def __len__(self):
        return len(self.__paints)
    def __iter__(self):
        return iter(self.__paints)
    def iter_paints(self):
        return iter(self.__paints)
    def iter_names(self):
        return iter(self.__names)
    def has_paint_named(self, name):
        index = bisect.bisect_left(self.__names, name)
        return index < len(self.__names) and self.__names[index] == name
    def get_paint(self, name):
        index = bisect.bisect_left(self.__names, name)
        if index < len(self.__names) and self.__names[index] == name:
            return self.__paints[index]
        raise perrors.NotFound(name)


class PaintSeries(PaintCollection):
    pass


FILE_ENTRY = collections.namedtuple("FILE_ENTRY", ["collection", "file_path"])

class PaintCollectionManager:
    """Keep track of the paint collections loaded from files
    """
    PAINT_COLLECTION_SPEC = None
    PAINT_COLLECTION = PaintCollection
    def __init__(self):
        self.__entries = {}
    def __len__(self):
        return len(self.__entries)
    def __contains__(self, colln_id):
        return colln_id in self.__entries
    def add_collection(self, collection, file_path=None):
        if collection.colln_id in self.__entries:
            raise perrors.AlreadyExists(collection.colln_id)
        self.__entries[collection.colln_id] = FILE_ENTRY(collection, file_path)
        logger.info("added paint collection \"%s\"", collection.colln_id)
        return collection
    def add_collection_from_file(self, file_path):
        colln_spec = self.PAINT_COLLECTION_SPEC.from_file(file_path)
        if colln_spec.colln_id in self.__entries:
            raise perrors.AlreadyExists(colln_spec.colln_id)
        return self.add_collection(self.PAINT_COLLECTION.from_spec(colln_spec), file_path)
    def remove_collection(self, colln_id):
        try:
            entry = self.__entries.pop(colln_id)
        except KeyError:
            raise perrors.NotFound(colln_id) from None
        logger.info("removed paint collection \"%s\"", colln_id)
        return entry.collection
    def get_collection(self, colln_id):
        try:
            return self.__entries[colln_id].collection
        except KeyError:
            raise perrors.NotFound(colln_id) from None
    def iter_collections(self):
        return (self.__entries[colln_id].collection for colln_id in sorted(self.__entries))
    def iter_paints(self):
        for collection in self.iter_collections():
            for paint in collection:
                yield paint
    def file_paths(self):
        return [self.__entries[colln_id].file_path for colln_id in sorted(self.__entries) if self.__entries[colln_id].file_path]
    def load_file_list(self, file_list_path):
        """Load the collections listed in file_list_path and return a
        list of (file_path, error) pairs for those that failed
        """
        errors = []
        for file_path in read_collection_file_names(file_list_path):
            try:
                self.add_collection_from_file(file_path)
            except (perrors.PaintIOError, perrors.MalformedText, perrors.AlreadyExists) as edata:
                logger.warning("%s: failed to load paint collection: %s", file_path, edata)
                errors.append((file_path, edata))
        return errors
    def save_file_list(self, file_list_path):
        write_collection_file_names(file_list_path, self.file_paths())


class PaintSeriesManager(PaintCollectionManager):
    PAINT_COLLECTION_SPEC = ModelPaintSeriesSpec
    PAINT_COLLECTION = PaintSeries


IDEAL_MODEL_PAINT_SERIES_TEXT = \
"""Manufacturer: Imaginary
Series: Ideal Paint Colours Series
ModelPaint(name="Black", rgb=RGB16(red=0x0, green=0x0, blue=0x0), transparency="O", finish="G", metallic="NM", fluorescence="NF", notes="")
ModelPaint(name="Blue", rgb=RGB16(red=0x0, green=0x0, blue=0xFFFF), transparency="O", finish="G", metallic="NM", fluorescence="NF", notes="")
ModelPaint(name="Cyan", rgb=RGB16(red=0x0, green=0xFFFF, blue=0xFFFF), transparency="O", finish="G", metallic="NM", fluorescence="NF", notes="")
ModelPaint(name="Green", rgb=RGB16(red=0x0, green=0xFFFF, blue=0x0), transparency="O", finish="G", metallic="NM", fluorescence="NF", notes="")
ModelPaint(name="Magenta", rgb=RGB16(red=0xFFFF, green=0x0, blue=0xFFFF), transparency="O", finish="G", metallic="NM", fluorescence="NF", notes="")
ModelPaint(name="Red", rgb=RGB16(red=0xFFFF, green=0x0, blue=0x0), transparency="O", finish="G", metallic="NM", fluorescence="NF", notes="")
ModelPaint(name="White", rgb=RGB16(red=0xFFFF, green=0xFFFF, blue=0xFFFF), transparency="O", finish="G", metallic="NM", fluorescence="NF", notes="")
ModelPaint(name="Yellow", rgb=RGB16(red=0xFFFF, green=0xFFFF, blue=0x0), transparency="O", finish="G", metallic="NM", fluorescence="NF", notes="")
"""

def ideal_model_paint_series():
    return PaintSeries.from_spec(ModelPaintSeriesSpec.fm_definition(IDEAL_MODEL_PAINT_SERIES_TEXT))
