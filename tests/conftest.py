import os
import string

import pytest

import score.themes
from score.themes.collaborators import Router, ViewRenderer


class StringTemplateRenderer(ViewRenderer):
    """
    Renders theme templates from disk and body views from memory, both using
    :class:`string.Template` placeholders.
    """

    def __init__(self, views=None):
        self.views = views or {}
        self.rendered = []

    def locate(self, ref, directory=None, extension=None):
        if extension and not os.path.splitext(ref)[1]:
            ref += extension
        if directory is not None:
            if os.path.isfile(os.path.join(directory, ref)):
                return ref
            return None
        if ref in self.views:
            return ref
        return None

    def render(self, ref, variables, directory=None):
        self.rendered.append(ref)
        if directory is None:
            source = self.views[ref]
        else:
            with open(os.path.join(directory, ref)) as fp:
                source = fp.read()
        return string.Template(source).safe_substitute(variables)


class StaticRouter(Router):

    def __init__(self, controller, action):
        self.controller = controller
        self.action = action

    def controller_name(self):
        return self.controller

    def action_name(self):
        return self.action


def write(path, content=''):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w') as fp:
        fp.write(content)
    return path


@pytest.fixture
def rootdir(tmp_path):
    theme = tmp_path / 'themes' / 'default'
    write(str(theme / 'header.html'), '<header>${page_title}</header>')
    write(str(theme / 'index.html'), '<main>${content}</main>')
    write(str(theme / 'footer.html'), '<footer></footer>')
    write(str(theme / 'css' / 'style.css'), 'body {}')
    write(str(theme / 'css' / 'print.css'), '@media print {}')
    write(str(theme / 'js' / 'app.js'), 'var app;')
    write(str(theme / 'plugins' / 'datatables' / 'dt.css'))
    write(str(theme / 'plugins' / 'datatables' / 'dt.js'))
    write(str(theme / 'plugins' / 'select2' / 'select2.js'))
    return str(tmp_path)


@pytest.fixture
def renderer():
    return StringTemplateRenderer({
        'home.html': '<h1>${title}</h1>',
    })


@pytest.fixture
def confdict(rootdir):
    return {
        'rootdir': rootdir,
        'base_url': 'http://example.com/',
        'plugins.datatables.css': 'datatables/dt.css',
        'plugins.datatables.js': 'datatables/dt.js',
        'plugins.select2.js': 'select2/select2.js',
        'plugins.broken.js': 'broken/missing.js',
    }


@pytest.fixture
def themes(confdict):
    return score.themes.init(confdict)


@pytest.fixture
def ctx(themes, renderer):
    return themes.create_context(renderer=renderer)


@pytest.fixture
def write_file():
    return write


@pytest.fixture
def make_router():
    return StaticRouter
