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

"""Manage configurable options

Modules declare the options they consult with define() and read them
with get().  Values come from an INI style file (if one has been
loaded) and fall back to the declared default.
"""

import collections
import configparser
import logging

__all__ = []
__author__ = "Peter Williams <pwil3058@gmail.com>"

logger = logging.getLogger(__name__)


class DuplicateDefn(Exception):
    pass


Defn = collections.namedtuple("Defn", ["str_to_val", "default", "help"])

DEFINITIONS = {}

_USER_OPTIONS = configparser.ConfigParser()
_USER_CFG_FILE_PATH = None


def str_to_bool(string):
    lowstr = string.strip().lower()
    if lowstr in ["true", "yes", "on", "1"]:
        return True
    elif lowstr in ["false", "no", "off", "0"]:
        return False
    else:
        return None


def define(section, oname, odefn):
    if section not in DEFINITIONS:
        DEFINITIONS[section] = {oname: odefn}
    elif oname in DEFINITIONS[section]:
        raise DuplicateDefn("{0}:{1} already defined".format(section, oname))
    else:
        DEFINITIONS[section][oname] = odefn


def load(file_path):
    """Replace the current user options with those in file_path.
    A missing file just means that every option has its default value.
    """
    global _USER_OPTIONS, _USER_CFG_FILE_PATH
    new_version = configparser.ConfigParser()
    # let configparser.Error propagate so that a bad file changes nothing
    new_version.read(file_path, encoding="utf-8")
    _USER_OPTIONS = new_version
    _USER_CFG_FILE_PATH = file_path
    logger.debug("loaded options from %s", file_path)


def reset():
    global _USER_OPTIONS, _USER_CFG_FILE_PATH
    _USER_OPTIONS = configparser.ConfigParser()
    _USER_CFG_FILE_PATH = None


def _str_to_val(section, oname):
    # unknown section:oname raises KeyError which is what we want
    str_to_val = DEFINITIONS[section][oname].str_to_val
    return str_to_bool if str_to_val is bool else str_to_val


def get(section, oname):
    str_to_val = _str_to_val(section, oname)
    value = None
    if _USER_OPTIONS.has_option(section, oname):
        try:
            value = str_to_val(_USER_OPTIONS.get(section, oname))
        except ValueError:
            logger.warning("%s:%s: ignoring bad option value %r", section, oname, _USER_OPTIONS.get(section, oname))
    return value if value is not None else DEFINITIONS[section][oname].default


def set(section, oname, val):
    _str_to_val(section, oname)
    if not _USER_OPTIONS.has_section(section):
        _USER_OPTIONS.add_section(section)
    _USER_OPTIONS.set(section, oname, str(val))
    if _USER_CFG_FILE_PATH is not None:
        with open(_USER_CFG_FILE_PATH, "w", encoding="utf-8") as fobj:
            _USER_OPTIONS.write(fobj)


def get_help(section, oname):
    return DEFINITIONS[section][oname].help
