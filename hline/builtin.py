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

# Short names available to every expression without an import. GHCi resolves
# fully qualified names from base on its own, so each alias is just a binding.
# Order matters only for readability of the generated program.

BUILTINS = (
    # Data.List
    ('sort', 'Data.List.sort'),
    ('sortOn', 'Data.List.sortOn'),
    ('nub', 'Data.List.nub'),
    ('group', 'Data.List.group'),
    ('intercalate', 'Data.List.intercalate'),
    ('transpose', 'Data.List.transpose'),
    ('isPrefixOf', 'Data.List.isPrefixOf'),
    ('isSuffixOf', 'Data.List.isSuffixOf'),
    ('isInfixOf', 'Data.List.isInfixOf'),
    # Data.Char
    ('isDigit', 'Data.Char.isDigit'),
    ('isAlpha', 'Data.Char.isAlpha'),
    ('isAlphaNum', 'Data.Char.isAlphaNum'),
    ('isSpace', 'Data.Char.isSpace'),
    ('isUpper', 'Data.Char.isUpper'),
    ('isLower', 'Data.Char.isLower'),
    ('isPunctuation', 'Data.Char.isPunctuation'),
    ('toUpper', 'Data.Char.toUpper'),
    ('toLower', 'Data.Char.toLower'),
    ('digitToInt', 'Data.Char.digitToInt'),
    ('ord', 'Data.Char.ord'),
    ('chr', 'Data.Char.chr'),
)


def builtins():
    return list(BUILTINS)


def alias(short, qualified):
    return f'{short} = {qualified}'


def aliases(table=BUILTINS):
    return [alias(short, qualified) for short, qualified in table]
