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

import xxhash


def _key(ref):
    return xxhash.xxh64(ref.encode('UTF-8')).hexdigest()


def split_refs(refs):
    """
    Normalizes asset references: *refs* may either be a comma-separated string
    or an iterable of strings. Every reference is stripped and empty references
    are dropped.

    >>> split_refs(' reset.css, ,style.css ')
    ['reset.css', 'style.css']
    """
    if refs is None:
        return []
    if isinstance(refs, str):
        refs = refs.split(',')
    result = []
    for ref in refs:
        if not isinstance(ref, str):
            continue
        ref = ref.strip()
        if ref:
            result.append(ref)
    return result


class AssetSet:
    """
    The assets collected during a single :term:`render cycle`.

    Local and external stylesheets and scripts are stored in separate mappings
    keyed by a hash of their reference, which makes repeated registrations of
    the same reference a no-op. The assets of loaded plugins are stored in the
    order they were registered, duplicates included.
    """

    def __init__(self):
        self.clear()

    def clear(self):
        self._css = {}
        self._js = {}
        self._external_css = {}
        self._external_js = {}
        self._inline_js = {}
        self._plugins = {}

    def add_css(self, refs):
        self._add(self._css, refs)

    def add_js(self, refs):
        self._add(self._js, refs)

    def add_external_css(self, refs):
        self._add(self._external_css, refs)

    def add_external_js(self, refs):
        self._add(self._external_js, refs)

    def add_inline_js(self, script, key=None):
        """
        Adds an inline *script*. Scripts are deduplicated by their content,
        unless an explicit *key* is given.
        """
        if not isinstance(script, str):
            return
        script = script.strip()
        if script:
            self._inline_js[_key(key or script)] = script

    def add_plugin_asset(self, type_, url):
        self._plugins.setdefault(type_, []).append(url)

    def _add(self, target, refs):
        for ref in split_refs(refs):
            target[_key(ref)] = ref

    @property
    def css(self):
        return list(self._css.values())

    @property
    def js(self):
        return list(self._js.values())

    @property
    def external_css(self):
        return list(self._external_css.values())

    @property
    def external_js(self):
        return list(self._external_js.values())

    @property
    def inline_js(self):
        return list(self._inline_js.values())

    def plugin_assets(self, type_):
        """
        The URLs of all loaded plugin assets of given *type_* (i.e. ``css`` or
        ``js``).
        """
        return list(self._plugins.get(type_, ()))

    def plugin_types(self):
        return list(self._plugins.keys())
