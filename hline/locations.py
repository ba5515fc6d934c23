# This file is part of hline.
#
# hline is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
#
# hline is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License
# along with hline.  If not, see <https://www.gnu.org/licenses/>.

import os
import pathlib

import hline.exception


# Location structure -> interface
#
#     $XDG_CONFIG_HOME/hline/                     config()
#         definitions.hs                          config_definitions()
#
# HLINE_CONFIG, if set, replaces config_definitions(). Either way, the
# result is a default location: it is fine for the file not to exist.

class Locations(object):
    HLINE_DIR_NAME = 'hline'
    DEFINITIONS_FILE_NAME = 'definitions.hs'

    def __init__(self):
        self.home = Locations.normalize_path(
            'home directory',
            os.environ.get('HOME', None),
            pathlib.Path.home())
        self.config_base = Locations.normalize_path(
            'application configuration directory (e.g. XDG_CONFIG_HOME)',
            os.environ.get('XDG_CONFIG_HOME', None),
            self.home / '.config')
        self.definitions_override = os.environ.get('HLINE_CONFIG', None)

    def config(self):
        return self.config_base / Locations.HLINE_DIR_NAME

    def config_definitions(self):
        if self.definitions_override:
            return Locations.normalize_path('definitions file (HLINE_CONFIG)', self.definitions_override)
        return self.config() / Locations.DEFINITIONS_FILE_NAME

    @staticmethod
    def normalize_path(description, provided, *defaults):
        path = provided
        d = 0
        while path is None and d < len(defaults):
            path = defaults[d]
            d += 1
        if path is None:
            raise hline.exception.HlineException(
                f'Unable to start because value of {description} cannot be determined.')
        try:
            if not isinstance(path, pathlib.Path):
                path = pathlib.Path(path)
            path = path.expanduser()
        except Exception as e:
            raise hline.exception.HlineException(
                f'Unable to start because value of {description} cannot be determined: {e}')
        return path


def default_path():
    return Locations().config_definitions()
