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

"""Manage various paint colour standards

Standards (e.g. FS 595 or RAL) use the same file format as paint
series but are identified by sponsor and standard name.
"""

from . import pseries
from . import vpaint

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"


class PaintStandardId(pseries.PaintCollectionId):
    __slots__ = ()
    # No i18n for these strings
    OWNER_LABEL = "Sponsor"
    NAME_LABEL = "Standard"
    @property
    def sponsor(self):
        return self.owner


class ModelPaintStandardSpec(pseries.PaintCollectionSpec):
    COLLECTION_ID = PaintStandardId
    PAINT_SPEC = vpaint.ModelPaintSpec


class PaintStandard(pseries.PaintCollection):
    pass


class PaintStandardsManager(pseries.PaintCollectionManager):
    PAINT_COLLECTION_SPEC = ModelPaintStandardSpec
    PAINT_COLLECTION = PaintStandard
