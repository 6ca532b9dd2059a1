# Copyright © 2015-2018 STRG.AT GmbH, Vienna, Austria
#
# This file is part of the The SCORE Framework.
#
# The SCORE Framework and all its parts are free software: you can redistribute
# them and/or modify them under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation which is in the
# file named COPYING.LESSER.txt.
#
# The SCORE Framework and all its parts are distributed without any WARRANTY;
# without even the implied warranty of MERCHANTABILITY or FITNESS FOR A
# PARTICULAR PURPOSE. For more details see the GNU Lesser General Public
# License.
#
# If you have not received a copy of the GNU Lesser General Public License see
# http://www.gnu.org/licenses/.
#
# The License-Agreement realised between you as Licensee and STRG.AT GmbH as
# Licenser including the issue of its valid conclusion and its pre- and
# post-contractual effects is governed by the laws of Austria. Any disputes
# concerning this License-Agreement including the issue of its valid conclusion
# and its pre- and post-contractual effects are exclusively decided by the
# competent court, in whose district STRG.AT GmbH has its registered seat, at
# the discretion of STRG.AT GmbH also the competent court, in whose district the
# Licensee has his registered seat, an establishment or assets.

"""
Version strings for local theme assets. The version of an asset is the last
modification time of its file, which is appended to the asset's URL to make
browsers reload it whenever it changes.
"""
import logging
import os


log = logging.getLogger(__name__)


class MtimeVersioner:
    """
    Provides the last modification timestamp (in whole seconds) of files as
    their version.
    """

    def version(self, file):
        """
        Returns the version string of given *file* or `None`, if the file does
        not exist.
        """
        if not os.path.isfile(file):
            return None
        return str(int(os.path.getmtime(file)))


class FrozenVersioner(MtimeVersioner):
    """
    A versioner that determines the version of each file only once and returns
    the same value on consecutive calls.

    Note: This object never clears its internal cache and is targeted at
    environments that do not change during runtime (hence its name). Files
    that did not exist on the first call are checked again on the next one.
    """

    def __init__(self):
        self.versions = {}

    def version(self, file):
        try:
            return self.versions[file]
        except KeyError:
            version = super().version(file)
            if version is not None:
                log.debug('Freezing version %s of %s', version, file)
                self.versions[file] = version
            return version


def create_versioner(freeze):
    if freeze:
        return FrozenVersioner()
    return MtimeVersioner()
