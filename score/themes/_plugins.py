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

from ._assets import split_refs
from ._errors import PluginNotRegistered, PluginAssetNotFound
import logging
import os


log = logging.getLogger(__name__)


def resolve_plugin(config, plugin):
    """
    Returns a list of 2-tuples ``(type, file)`` for all files of given *plugin*
    in the order they were declared in the :term:`plugin catalog`. Raises
    :class:`PluginNotRegistered` or :class:`PluginAssetNotFound` if the plugin
    is unknown or one of its files does not exist.
    """
    if plugin not in config.plugins:
        raise PluginNotRegistered(plugin)
    result = []
    for type_, files in config.plugins[plugin].items():
        for file in files:
            if not os.path.isfile(config.plugin_file(file)):
                raise PluginAssetNotFound(plugin, file)
            result.append((type_, file))
    return result


def load_plugins(config, assets, plugin_url, plugins):
    """
    Registers the files of all given *plugins* in the :class:`AssetSet`
    *assets*. The *plugins* may be passed as a comma-separated string or as a
    list. Each plugin is validated completely before any of its files are
    added, i.e. a plugin with a missing file will not leave any of its other
    files behind.
    """
    for plugin in split_refs(plugins):
        files = resolve_plugin(config, plugin)
        for type_, file in files:
            assets.add_plugin_asset(type_, plugin_url + file)
        log.info('Loaded plugin %s (%d files)', plugin, len(files))
