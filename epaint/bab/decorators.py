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

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"


class classproperty:
    """A read only property evaluated against the class rather than
    an instance e.g. RGBPN.WHITE
    """
    def __init__(self, fget):
        self.fget = fget
        self.__doc__ = fget.__doc__
    def __get__(self, instance, owner):
        return self.fget(owner)
