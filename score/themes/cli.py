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

import click
import os


@click.group()
def main():
    """
    Manages themes.
    """
    pass


@main.command()
@click.pass_context
def plugins(clickctx):
    """
    Lists all registered plugins
    """
    themes = clickctx.obj['conf'].load('themes')
    for plugin, buckets in sorted(themes.config.plugins.items()):
        for type_, files in buckets.items():
            print('%s %s: %s' % (plugin, type_, ' '.join(files)))


@main.command()
@click.option('-t', '--theme')
@click.pass_context
def check(clickctx, theme):
    """
    Checks the files of all plugins
    """
    themes = clickctx.obj['conf'].load('themes')
    config = themes.config.copy()
    if theme:
        config.theme = theme
    missing = False
    for plugin, buckets in sorted(config.plugins.items()):
        for files in buckets.values():
            for file in files:
                if not os.path.isfile(config.plugin_file(file)):
                    print('%s: missing %s' % (plugin, config.plugin_file(file)))
                    missing = True
    if missing:
        clickctx.exit(1)


def _context(themes, theme, plugins):
    ctx = themes.create_context(interactive=False)
    if theme:
        ctx.set_theme(theme)
    for plugin in plugins:
        ctx.load_plugins(plugin)
    return ctx


@main.command()
@click.option('-t', '--theme')
@click.option('-p', '--plugin', 'plugins', multiple=True)
@click.argument('files', nargs=-1)
@click.pass_context
def css(clickctx, theme, plugins, files):
    """
    Provides stylesheet tags
    """
    themes = clickctx.obj['conf'].load('themes')
    ctx = _context(themes, theme, plugins).add_css(list(files))
    print(ctx.css(), end='')


@main.command()
@click.option('-t', '--theme')
@click.option('-p', '--plugin', 'plugins', multiple=True)
@click.argument('files', nargs=-1)
@click.pass_context
def js(clickctx, theme, plugins, files):
    """
    Provides script tags
    """
    themes = clickctx.obj['conf'].load('themes')
    ctx = _context(themes, theme, plugins).add_js(list(files))
    print(ctx.js(), end='')


@main.command()
@click.option('-t', '--theme')
@click.option('--title', 'page_title')
@click.option('--full/--no-full', 'full', default=None)
@click.argument('body')
@click.pass_context
def render(clickctx, theme, page_title, full, body):
    """
    Renders a page
    """
    themes = clickctx.obj['conf'].load('themes')
    ctx = _context(themes, theme, ())
    if full is not None:
        ctx.use_full_template(full)
    ctx.render(body, page_title=page_title)
    print(ctx.output.getvalue(), end='')


if __name__ == '__main__':
    main()
