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

from score.init import (
    ConfiguredModule, ConfigurationError, parse_bool)
from ._config import ThemeConfig, parse_plugins
from ._context import ThemeContext
from .collaborators import TplViewRenderer, UrlHelper
from .versioning import create_versioner
import io
import os


defaults = {
    'rootdir': None,
    'base_url': '/',
    'theme_path': 'themes',
    'theme': 'default',
    'template': 'index',
    'header': 'header',
    'footer': 'footer',
    'css_path': 'css',
    'js_path': 'js',
    'image_path': 'images',
    'plugin_path': 'plugins',
    'template_ext': '.html',
    'use_full_template': False,
    'freeze': False,
}


def init(confdict=None, tpl=None, loader=None):
    """
    Initializes this module acoording to :ref:`our module initialization
    guidelines <module_initialization>` with the following configuration keys:

    :confkey:`rootdir`
        The public document root of the application. All themes are expected
        below this folder. This value is mandatory.

    :confkey:`base_url` :confdefault:`/`
        The URL corresponding to the *rootdir*.

    :confkey:`theme_path` :confdefault:`themes`
        The folder below *rootdir* containing all themes.

    :confkey:`theme` :confdefault:`default`
        The name of the theme to use, unless another one is selected at
        runtime.

    :confkey:`template` :confdefault:`index`
        The main template of each theme.

    :confkey:`header` :confdefault:`header`
        The header template, rendered before the main template. Missing header
        templates will be ignored.

    :confkey:`footer` :confdefault:`footer`
        The footer template, rendered after the main template. Missing footer
        templates will be ignored.

    :confkey:`css_path` :confdefault:`css`
        The folder containing the stylesheets inside each theme.

    :confkey:`js_path` :confdefault:`js`
        The folder containing the scripts inside each theme.

    :confkey:`image_path` :confdefault:`images`
        The folder containing images inside each theme.

    :confkey:`plugin_path` :confdefault:`plugins`
        The folder containing the files of all plugins inside each theme.

    :confkey:`template_ext` :confdefault:`.html`
        The extension to append to template names without one.

    :confkey:`use_full_template` :confdefault:`False`
        Whether to render the main template only, omitting header and footer.

    :confkey:`freeze` :confdefault:`False`
        Whether the versions of local assets should be determined only once
        per process. Should be set to `True` on deployment systems.

    :confkey:`plugins.<plugin>.<type>`
        The :term:`plugin catalog`: a list of files of a plugin for a certain
        asset type (i.e. ``css`` or ``js``), relative to the *plugin_path*.

    If no *confdict* is given, it will be retrieved from the
    :class:`ConfigLoader <score.themes.collaborators.ConfigLoader>` *loader*.
    The optional *tpl* is a configured :mod:`score.tpl` module, that will be
    used to render templates.
    """
    if confdict is None:
        if loader is None:
            raise ConfigurationError(
                'score.themes', 'Neither confdict nor loader provided')
        confdict = loader.load('themes')
    conf = dict(defaults.items())
    conf.update(confdict)
    if not conf['rootdir']:
        raise ConfigurationError('score.themes', 'No rootdir configured')
    if not os.path.isdir(conf['rootdir']):
        raise ConfigurationError(
            'score.themes', 'Configured rootdir does not exist')
    try:
        freeze = parse_bool(conf['freeze'])
        use_full_template = parse_bool(conf['use_full_template'])
    except ValueError as e:
        raise ConfigurationError('score.themes', str(e))
    config = ThemeConfig(
        conf['rootdir'],
        base_url=conf['base_url'],
        theme_path=conf['theme_path'].strip('/'),
        theme=conf['theme'],
        template=conf['template'],
        header=conf['header'],
        footer=conf['footer'],
        css_path=conf['css_path'].strip('/'),
        js_path=conf['js_path'].strip('/'),
        image_path=conf['image_path'].strip('/'),
        plugin_path=conf['plugin_path'].strip('/'),
        template_ext=conf['template_ext'],
        use_full_template=use_full_template,
        plugins=parse_plugins(conf),
        freeze=freeze,
    )
    return ConfiguredThemesModule(config, tpl)


class ConfiguredThemesModule(ConfiguredModule):
    """
    This module's :class:`configuration class
    <score.init.ConfiguredModule>`.
    """

    def __init__(self, config, tpl=None):
        super().__init__(__package__)
        self.config = config
        self.tpl = tpl
        self.renderer = None
        if tpl:
            self.renderer = TplViewRenderer(tpl, config.rootdir)
        self.url = UrlHelper(config.base_url)
        self.versioner = create_versioner(config.freeze)

    def create_context(self, *, url=None, router=None, renderer=None,
                       output=None, interactive=True, translator=None):
        """
        Creates a new :class:`ThemeContext` for a single :term:`render cycle`.
        Every context operates on its own copy of the configuration. The
        *url* helper and the view *renderer* default to the ones of this
        module. The optional *translator* is used for
        :meth:`ThemeContext.add_i18n_js`.
        """
        return ThemeContext(
            self.config.copy(),
            renderer or self.renderer,
            url=url or self.url,
            router=router,
            output=output,
            interactive=interactive,
            versioner=self.versioner,
            translator=translator).init()

    def render(self, body=None, data=None, page_title=None, **kwargs):
        """
        Renders a page in a new context and returns the result. All keyword
        arguments except *output* are passed to :meth:`create_context`. Use
        a context directly to render into another stream.
        """
        if 'output' in kwargs:
            raise TypeError(
                'render() collects its own output, use create_context() '
                'to render into a custom stream')
        ctx = self.create_context(output=io.StringIO(), **kwargs)
        ctx.render(body, data, page_title)
        return ctx.output.getvalue()
