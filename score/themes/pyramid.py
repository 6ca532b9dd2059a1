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
This package :ref:`integrates <framework_integration>` the module with
pyramid.

It adds the reified request method ``themes``, which provides a separate
:class:`ThemeContext <score.themes.ThemeContext>` for each request, and
registers a handler for :exc:`ThemeError <score.themes.ThemeError>`, which
returns the HTTP status code ``500 - Internal Server Error``.
"""

from pyramid.httpexceptions import HTTPInternalServerError
import logging
import score.themes
from score.themes.collaborators import Router, UrlHelper


log = logging.getLogger(__name__)


def themeerror(exc, request):
    """
    Logs the error and returns an HTTP response with status code 500. This
    method is registered in the pyramid-specific :func:`init` function.
    """
    log.error('Could not render page %s: %s', request.path, exc)
    return HTTPInternalServerError()


def init(confdict, configurator, tpl=None):
    """
    Initializes the module via the generic :func:`initializer function
    <score.themes.init>` and performs the following steps:

    - Adds the request method ``themes``, that creates a :class:`ThemeContext
      <score.themes.ThemeContext>` with URLs relative to the request's
      application url.
    - Registers the view themeerror for a handler to the :exc:`ThemeError
      <score.themes.ThemeError>` Exception.
    """
    themes = score.themes.init(confdict, tpl)

    def request_themes(request):
        return themes.create_context(
            url=UrlHelper(request.application_url + '/'),
            router=PyramidRouter(request))

    configurator.add_request_method(request_themes, 'themes', reify=True)
    configurator.add_view(themeerror, context=score.themes.ThemeError)
    return themes


class PyramidRouter(Router):
    """
    A :class:`Router <score.themes.collaborators.Router>` reporting the name of
    the matched route as controller and the view name as action.
    """

    def __init__(self, request):
        self.request = request

    def controller_name(self):
        route = getattr(self.request, 'matched_route', None)
        if route is None:
            return ''
        return route.name

    def action_name(self):
        return self.request.view_name or 'index'
