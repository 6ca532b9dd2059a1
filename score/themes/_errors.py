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

class ThemeError(Exception):
    """
    Base class for all errors raised while composing a themed page.
    """


class PluginNotRegistered(ThemeError):
    """
    Thrown when a plugin is loaded, that is not part of the configured
    :term:`plugin catalog`.
    """

    def __init__(self, plugin):
        self.plugin = plugin
        super().__init__('Plugin not registered: %s' % plugin)


class PluginAssetNotFound(ThemeError):
    """
    Thrown when a file listed in the :term:`plugin catalog` does not exist in
    the plugin folder of the active theme.
    """

    def __init__(self, plugin, file):
        self.plugin = plugin
        self.file = file
        super().__init__('Plugin file not found: %s/%s' % (plugin, file))


class TemplateNotFound(ThemeError):
    """
    Thrown when the main template of the active theme could not be found.
    Missing header and footer templates are not an error.
    """

    def __init__(self, template):
        self.template = template
        super().__init__('Template not found: %s' % template)
