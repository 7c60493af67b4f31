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

"""Exceptions raised by the paint model
"""

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"


class PaintError(Exception):
    pass


class MalformedText(PaintError):
    def __init__(self, text, reason=None):
        self.text = text
        self.reason = reason
        if reason:
            PaintError.__init__(self, _("{0}: malformed text: {1}").format(reason, text))
        else:
            PaintError.__init__(self, _("Malformed text: {0}").format(text))


class AlreadyExists(PaintError):
    def __init__(self, name):
        self.name = name
        PaintError.__init__(self, _("{0}: already exists").format(name))


class NotFound(PaintError):
    def __init__(self, name):
        self.name = name
        PaintError.__init__(self, _("{0}: not found").format(name))


class NoSubstantiveComponents(PaintError):
    def __init__(self):
        PaintError.__init__(self, _("No substantive components"))


class PaintIOError(PaintError):
    def __init__(self, filename, strerror):
        self.filename = filename
        self.strerror = strerror
        PaintError.__init__(self, "{0}: {1}".format(filename, strerror))
    @classmethod
    def from_os_error(cls, edata, filename=None):
        return cls(edata.filename if edata.filename else filename, edata.strerror)
