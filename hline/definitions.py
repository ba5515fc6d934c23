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

"""Loads the optional file of user definitions.

The contents are opaque Haskell source, spliced into the generated program as
is. Nothing here parses, validates or rewrites them: a syntax error surfaces
only when ghc runs.
"""

import hline.exception
import hline.locations
import hline.util


def load(path, explicit=False):
    """Return the contents of the definitions file at C{path}, or C{''}.

    A missing or unreadable file is not an error at the default location. If the
    file was requested explicitly, it is, and C{ConfigNotFoundException} is raised.
    """
    if path is None:
        return ''
    path = hline.util.normalize_path(path)
    try:
        # Undecodable bytes survive, and are passed on to ghc as they were.
        with open(path, 'r', errors='surrogateescape') as definitions_file:
            return definitions_file.read()
    except FileNotFoundError:
        if explicit:
            raise hline.exception.ConfigNotFoundException(path)
    except OSError as e:
        if explicit:
            raise hline.exception.ConfigNotFoundException(path, e.__class__.__name__)
    return ''


def load_for(config_path):
    """Load from C{config_path} if given (explicit), otherwise from the default location.

    Returns (path used, definitions text).
    """
    if config_path is None:
        path = hline.locations.default_path()
        return path, load(path, explicit=False)
    else:
        return config_path, load(config_path, explicit=True)
