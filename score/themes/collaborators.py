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
Interfaces of the services this module expects from its host application,
along with adapters for the SCORE framework. The :class:`ThemeContext
<score.themes.ThemeContext>` only ever talks to these interfaces, which makes
it possible to use this module with any framework providing a view renderer
and some means of generating URLs.
"""

import abc
import os
import re
from score.init import parse_config_file
from score.tpl import TemplateNotFound as TplTemplateNotFound


class ViewRenderer(abc.ABC):
    """
    Locates and renders views, i.e. the templates of a theme and the views
    used as page bodies.
    """

    @abc.abstractmethod
    def locate(self, ref, directory=None, extension=None):
        """
        Returns the path of the view referenced by *ref*, that can be passed to
        :meth:`render`, or `None` if there is no such view. The *extension* is
        appended to *ref* if it has none. If a *directory* is given, the view
        is searched in that folder only.
        """

    @abc.abstractmethod
    def render(self, ref, variables, directory=None):
        """
        Renders the view referenced by *ref* with given *variables* and returns
        the result as a string.
        """


class TplViewRenderer(ViewRenderer):
    """
    A :class:`ViewRenderer` backed by a configured :mod:`score.tpl` module.
    Views inside a *directory* (i.e. the templates of a theme) are translated
    to template paths relative to *rootdir*, which must be the root folder the
    tpl module loads its templates from.
    """

    def __init__(self, tpl, rootdir=None):
        self.tpl = tpl
        self.rootdir = rootdir

    def _tpl_path(self, ref, directory):
        if directory is None:
            return ref
        if self.rootdir is None:
            raise ValueError('Cannot render theme templates: no rootdir')
        path = os.path.relpath(os.path.join(directory, ref), self.rootdir)
        return path.replace(os.sep, '/')

    def locate(self, ref, directory=None, extension=None):
        if extension and not os.path.splitext(ref)[1]:
            ref += extension
        path = self._tpl_path(ref, directory)
        if path in self.tpl.iter_paths():
            return ref
        return None

    def render(self, ref, variables, directory=None):
        path = self._tpl_path(ref, directory)
        try:
            return self.tpl.render(path, variables)
        except TplTemplateNotFound:
            from ._errors import TemplateNotFound
            raise TemplateNotFound(path)


class UrlHelper:
    """
    Generates absolute URLs below a *url* prefix.

    >>> UrlHelper('http://example.com/app/').base_url('themes/default')
    'http://example.com/app/themes/default'
    """

    def __init__(self, url='/'):
        self.url = url

    def base_url(self, path=''):
        return self.url.rstrip('/') + '/' + path.lstrip('/')


class Router(abc.ABC):
    """
    Provides information about the currently dispatched request. Only used for
    generating a default page title.
    """

    @abc.abstractmethod
    def controller_name(self):
        pass

    @abc.abstractmethod
    def action_name(self):
        pass


class Translator(abc.ABC):
    """
    Translates scripts added via :meth:`ThemeContext.add_i18n_js
    <score.themes.ThemeContext.add_i18n_js>`.
    """

    @abc.abstractmethod
    def translate(self, script, langs):
        """
        Returns *script* with all translatable strings replaced by their
        values in the *langs* mapping.
        """


class PlaceholderTranslator(Translator):
    """
    Replaces ``${key}`` placeholders with the values found in *langs*.
    Placeholders without a value are left untouched.

    >>> PlaceholderTranslator().translate('alert("${hello}");',
    ...                                   {'hello': 'Hallo'})
    'alert("Hallo");'
    """

    placeholder = re.compile(r'\$\{\s*([^{}\s]+)\s*\}')

    def translate(self, script, langs):
        def replace(match):
            try:
                return str(langs[match.group(1)])
            except KeyError:
                return match.group(0)
        return self.placeholder.sub(replace, script)


class ConfigLoader(abc.ABC):
    """
    Provides configuration dicts for modules.
    """

    @abc.abstractmethod
    def load(self, name):
        """
        Returns the configuration dict of the module with given *name*.
        """


class FileConfigLoader(ConfigLoader):
    """
    Reads module configurations from sections of a :mod:`score.init`
    configuration *file*. A missing section results in an empty configuration.
    """

    def __init__(self, file):
        self.file = file

    def load(self, name):
        conf = parse_config_file(self.file)
        return dict(conf.get(name, {}))
