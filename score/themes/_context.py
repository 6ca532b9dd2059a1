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

from ._assets import AssetSet
from ._config import ensure_extension
from ._errors import TemplateNotFound
from ._plugins import load_plugins
from ._tags import link_tag, script_tag, inline_script
from .collaborators import PlaceholderTranslator, UrlHelper
from .versioning import create_versioner
import io
import logging
import os
import re


log = logging.getLogger(__name__)

#: Template variable containing the rendered body of the page.
CONTENT = 'content'

#: Template variable containing the title of the page.
PAGE_TITLE = 'page_title'

#: Template variable containing the :class:`ThemeContext` itself.
THEMES = 'themes'


class ThemeContext:
    """
    The state of a single :term:`render cycle`: the :class:`ThemeConfig
    <score.themes.ThemeConfig>` (which may be altered freely without affecting
    other contexts), the collected assets and the variables that will be passed
    to the templates.

    Contexts are usually created via :meth:`ConfiguredThemesModule.create_context
    <score.themes.ConfiguredThemesModule.create_context>`. All rendered markup
    is written to the *output* stream, which defaults to a new
    :class:`io.StringIO`.

    Setters and asset registration functions return the context itself, so
    calls can be chained::

        ctx.set_theme('admin')\\
            .add_css('reset.css, admin.css')\\
            .load_plugins('datatables')\\
            .render('users/list', {'users': users})
    """

    def __init__(self, config, renderer=None, *, url=None, router=None,
                 output=None, interactive=True, versioner=None,
                 translator=None):
        self._defaults = config.copy()
        self.config = config
        self.renderer = renderer
        self.url = url or UrlHelper(config.base_url)
        self.router = router
        self.output = output if output is not None else io.StringIO()
        self.interactive = interactive
        self.versioner = versioner or create_versioner(config.freeze)
        self.translator = translator or PlaceholderTranslator()
        self.assets = AssetSet()
        self.vars = {}
        self.initialized = False

    def init(self):
        """
        Restores the configuration this context was created with, resets all
        collected assets and variables and applies the configured theme.
        """
        self.config = self._defaults.copy()
        self.assets.clear()
        self.vars = {THEMES: self}
        self.initialized = True
        self.set_theme(self.config.theme)
        return self

    def _ensure_initialized(self):
        if not self.initialized:
            self.init()

    # -- configuration --------------------------------------------------------

    def set_theme(self, theme=None):
        """
        Switches to the theme called *theme* and updates the template variables
        ``theme_url``, ``image_url`` and ``plugin_url``. Values other than
        strings are ignored, but the URLs are updated anyway.
        """
        self._ensure_initialized()
        if isinstance(theme, str):
            self.config.theme = theme
        elif theme is not None:
            log.debug('Ignoring invalid theme name %r', theme)
        self.set_var({
            'theme_url': self._theme_url(),
            'image_url': self._theme_url(self.config.image_path),
            'plugin_url': self._theme_url(self.config.plugin_path),
        })
        return self

    def _theme_url(self, *parts):
        return self.url.base_url(self.config.url_path(*parts)) + '/'

    def set_template(self, template=None):
        return self._set_name('template', template)

    def set_header(self, header=None):
        return self._set_name('header', header)

    def set_footer(self, footer=None):
        return self._set_name('footer', footer)

    def _set_name(self, key, value):
        self._ensure_initialized()
        if isinstance(value, str):
            setattr(self.config, key, value)
        else:
            log.debug('Ignoring invalid %s name %r', key, value)
        return self

    def use_full_template(self, use_full_template=True):
        """
        Whether only the main template should be rendered. If this is `False`,
        the header and footer templates will be rendered around it.
        """
        self._ensure_initialized()
        if isinstance(use_full_template, bool):
            self.config.use_full_template = use_full_template
        else:
            log.debug('Ignoring invalid use_full_template value %r',
                      use_full_template)
        return self

    def set_var(self, key, value=None):
        """
        Sets a template variable. It is also possible to pass a `dict` as *key*
        to set multiple variables at once.
        """
        self._ensure_initialized()
        if isinstance(key, dict):
            self.vars.update(key)
        else:
            self.vars[key] = value
        return self

    def get_data(self):
        """
        Returns a copy of all template variables.
        """
        return dict(self.vars)

    def get_config(self):
        return self.config

    def set_page_title(self, page_title=None):
        """
        Determines the title of the page. The first of the following values
        wins:

        - *page_title* itself, if it is a string,
        - the value ``page_title``, if *page_title* is a `dict` containing it,
        - a previously set page title,
        - the value ``title``, if *page_title* is a `dict` containing it,
        - ``<Controller> | <Action>`` as reported by the :class:`Router
          <score.themes.collaborators.Router>`, unless this context is not
          interactive,
        - an empty string.
        """
        self._ensure_initialized()
        if isinstance(page_title, str):
            title = page_title
        else:
            if not isinstance(page_title, dict):
                page_title = {}
            if PAGE_TITLE in page_title:
                title = page_title[PAGE_TITLE]
            elif PAGE_TITLE in self.vars:
                title = self.vars[PAGE_TITLE]
            elif isinstance(page_title.get('title'), str):
                title = page_title['title']
            elif self.interactive and self.router is not None:
                title = self._router_title()
            else:
                title = ''
        self.vars[PAGE_TITLE] = title
        return self

    def _router_title(self):
        controller = re.split(r'[.\\/]', self.router.controller_name())[-1]
        action = self.router.action_name()
        return '%s | %s' % (controller, action[:1].upper() + action[1:])

    # -- assets ---------------------------------------------------------------

    def add_css(self, css):
        """
        Adds stylesheets of the active theme. The *css* files can be passed as
        a comma-separated string or as a list of file names relative to the
        theme's css folder.
        """
        self._ensure_initialized()
        self.assets.add_css(css)
        return self

    def add_js(self, js):
        self._ensure_initialized()
        self.assets.add_js(js)
        return self

    def add_external_css(self, urls):
        self._ensure_initialized()
        self.assets.add_external_css(urls)
        return self

    def add_external_js(self, urls):
        self._ensure_initialized()
        self.assets.add_external_js(urls)
        return self

    def add_inline_js(self, script):
        self._ensure_initialized()
        self.assets.add_inline_js(script)
        return self

    def add_i18n_js(self, script, langs=None):
        """
        Adds an inline script after passing it through the :class:`Translator
        <score.themes.collaborators.Translator>` with given *langs*. If
        *script* is the name of a ``.js`` file, the content of that file in the
        theme's js folder is used instead. Missing files are skipped.

        Adding the same script again replaces its previous translation.
        """
        self._ensure_initialized()
        if not isinstance(script, str) or not script.strip():
            return self
        script = script.strip()
        key = body = script
        if os.path.splitext(script)[1] == '.js':
            key = self.config.asset_file('js', script)
            if not os.path.isfile(key):
                log.debug('Skipping missing i18n script %s', script)
                return self
            with open(key) as fp:
                body = fp.read()
        self.assets.add_inline_js(
            self.translator.translate(body, langs or {}), key=key)
        return self

    def load_plugins(self, plugins):
        """
        Loads the assets of given *plugins*, which must be part of the
        configured :term:`plugin catalog`.
        """
        self._ensure_initialized()
        load_plugins(self.config, self.assets, self.vars['plugin_url'],
                     plugins)
        return self

    # -- rendering ------------------------------------------------------------

    def render(self, body=None, data=None, page_title=None):
        """
        Renders a page into the output stream. The *body* is either the name of
        a view, which will be rendered with all template variables, or a
        literal string to use as content. The optional *data* will be added to
        the template variables prior to rendering.

        Raises :class:`TemplateNotFound <score.themes.TemplateNotFound>` if the
        main template of the active theme does not exist.
        """
        self._ensure_initialized()
        if data:
            self.set_var(dict(data))
        if not self._template_exists(self.config.template):
            raise TemplateNotFound(self.config.template)
        self.set_var(CONTENT, self._render_body(body))
        if isinstance(page_title, str):
            self.set_page_title(page_title)
        else:
            self.set_page_title(dict(data or {}))
        if self.config.use_full_template:
            templates = [self.config.template]
        else:
            templates = [self.config.header, self.config.template,
                         self.config.footer]
        for template in templates:
            if template != self.config.template and \
                    not self._template_exists(template):
                log.debug('Skipping missing template %s', template)
                continue
            self.output.write(self._renderer().render(
                self._template_ref(template), self.get_data(),
                directory=self.config.theme_dir()))

    def _renderer(self):
        if self.renderer is None:
            raise RuntimeError('Cannot render: no view renderer configured')
        return self.renderer

    def _template_ref(self, template):
        return os.path.relpath(self.config.template_file(template),
                               self.config.theme_dir())

    def _template_exists(self, template):
        if not template:
            return False
        return os.path.isfile(self.config.template_file(template))

    def _render_body(self, body):
        if not isinstance(body, str) or not body:
            return ''
        if self.renderer is None:
            return body
        view = self.renderer.locate(body, extension=self.config.template_ext)
        if view is None:
            return body
        return self.renderer.render(view, self.get_data())

    def iter_css_tags(self):
        """
        Generates the tags for all stylesheets: external ones first, followed
        by plugin stylesheets and the stylesheets of the theme.
        """
        for url in self.assets.external_css:
            yield link_tag(url)
        for url in self.assets.plugin_assets('css'):
            yield link_tag(url)
        for css in self.assets.css:
            url = self._local_url('css', css)
            if url:
                yield link_tag(url)

    def iter_js_tags(self):
        """
        Generates the tags for all scripts: external ones first, followed by
        plugin scripts, the scripts of the theme and finally a single tag
        containing all inline scripts.
        """
        for url in self.assets.external_js:
            yield script_tag(url)
        for url in self.assets.plugin_assets('js'):
            yield script_tag(url)
        for js in self.assets.js:
            url = self._local_url('js', js)
            if url:
                yield script_tag(url)
        inline_js = self.assets.inline_js
        if inline_js:
            yield inline_script(inline_js)

    def _local_url(self, kind, name):
        version = self.versioner.version(self.config.asset_file(kind, name))
        if version is None:
            log.debug('Skipping missing %s asset %s', kind, name)
            return None
        folder = {'css': self.config.css_path, 'js': self.config.js_path}[kind]
        path = self.config.url_path(folder, ensure_extension(name, '.' + kind))
        return self.url.base_url(path) + '?v=' + version

    def css(self):
        return ''.join(self.iter_css_tags())

    def js(self):
        return ''.join(self.iter_js_tags())

    def render_css(self, out=None):
        """
        Writes the tags generated by :meth:`iter_css_tags` to *out*, or the
        output stream of this context.
        """
        (self.output if out is None else out).write(self.css())

    def render_js(self, out=None):
        (self.output if out is None else out).write(self.js())
