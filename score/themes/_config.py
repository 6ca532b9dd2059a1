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

from score.init import ConfigurationError, parse_list
import copy
import os


class ThemeConfig:
    """
    The configuration of a :term:`theme` as used during a :term:`render cycle`.
    Instances are created once during :func:`module initialization
    <score.themes.init>` and copied for every :class:`ThemeContext
    <score.themes.ThemeContext>`, so changes applied at runtime never affect
    other render cycles.

    All paths are relative to *rootdir*, which is the public document root of
    the application. The files of a theme called ``default`` are thus expected
    in the following folder structure (assuming the default values)::

        <rootdir>/
            themes/
                default/
                    header.html
                    index.html
                    footer.html
                    css/
                    js/
                    images/
                    plugins/
    """

    def __init__(self, rootdir, *, base_url='/', theme_path='themes',
                 theme='default', template='index', header='header',
                 footer='footer', css_path='css', js_path='js',
                 image_path='images', plugin_path='plugins',
                 template_ext='.html', use_full_template=False, plugins=None,
                 freeze=False):
        self.rootdir = rootdir
        self.base_url = base_url
        self.theme_path = theme_path
        self.theme = theme
        self.template = template
        self.header = header
        self.footer = footer
        self.css_path = css_path
        self.js_path = js_path
        self.image_path = image_path
        self.plugin_path = plugin_path
        self.template_ext = template_ext
        self.use_full_template = use_full_template
        self.plugins = plugins or {}
        self.freeze = freeze

    def copy(self):
        return copy.deepcopy(self)

    def theme_dir(self):
        """
        The folder of the active theme on the file system.
        """
        return os.path.join(self.rootdir, self.theme_path, self.theme)

    def url_path(self, *parts):
        """
        Joins given *parts* to a path relative to the base url, starting at the
        folder of the active theme.
        """
        return '/'.join((self.theme_path, self.theme) + parts)

    def template_file(self, name):
        """
        The file of the template with given *name*. The configured
        *template_ext* is appended if *name* has no extension.
        """
        if not os.path.splitext(name)[1]:
            name += self.template_ext
        return os.path.join(self.theme_dir(), name)

    def asset_file(self, kind, name):
        """
        The file of a local theme asset. The *kind* must either be ``css`` or
        ``js``.
        """
        subdir = {'css': self.css_path, 'js': self.js_path}[kind]
        return os.path.join(self.theme_dir(), subdir,
                            ensure_extension(name, '.' + kind))

    def plugin_file(self, name):
        return os.path.join(self.theme_dir(), self.plugin_path, name)

    def __repr__(self):
        return '<ThemeConfig %s/%s>' % (self.theme_path, self.theme)


def ensure_extension(name, ext):
    """
    Appends *ext* to *name*, unless it already ends with it.

    >>> ensure_extension('jquery.min', '.js')
    'jquery.min.js'
    >>> ensure_extension('style.css', '.css')
    'style.css'
    """
    if name.endswith(ext):
        return name
    return name + ext


def parse_plugins(conf):
    """
    Extracts the :term:`plugin catalog` from a configuration dict. Plugins can
    either be provided as a dict under the key ``plugins``, or as separate keys
    in the form ``plugins.<plugin>.<type>``. The type is the part after the
    last dot, so plugin names may contain dots themselves::

        plugins.datatables.css = datatables/datatables.min.css
        plugins.datatables.js =
            datatables/jquery.dataTables.min.js
            datatables/dataTables.bootstrap.min.js
    """
    plugins = {}
    if isinstance(conf.get('plugins'), dict):
        for plugin, buckets in conf['plugins'].items():
            if not isinstance(buckets, dict):
                raise ConfigurationError(
                    __package__, 'Invalid configuration of plugin %s' % plugin)
            plugins[plugin] = {}
            for type_, files in buckets.items():
                if isinstance(files, str):
                    files = parse_list(files)
                plugins[plugin][type_] = list(files)
    for key, value in conf.items():
        if not key.startswith('plugins.'):
            continue
        parts = key[len('plugins.'):].rsplit('.', 1)
        if len(parts) != 2 or not all(parts):
            raise ConfigurationError(
                __package__, 'Invalid plugin configuration key: %s' % key)
        plugin, type_ = parts
        plugins.setdefault(plugin, {})[type_] = parse_list(value)
    return plugins
