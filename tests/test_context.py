import os

import pytest

from score.themes import ThemeContext
from score.themes.collaborators import Translator


def test_context_is_initialized(ctx):
    data = ctx.get_data()
    assert data['theme_url'] == 'http://example.com/themes/default/'
    assert data['image_url'] == 'http://example.com/themes/default/images/'
    assert data['plugin_url'] == 'http://example.com/themes/default/plugins/'
    assert data['themes'] is ctx


def test_set_theme_updates_urls(ctx):
    assert ctx.set_theme('admin') is ctx
    assert ctx.config.theme == 'admin'
    assert ctx.get_data()['theme_url'] == 'http://example.com/themes/admin/'
    assert ctx.get_data()['image_url'] == \
        'http://example.com/themes/admin/images/'


@pytest.mark.parametrize('value', [None, 42, ['admin'], True])
def test_set_theme_ignores_invalid_names(ctx, value):
    ctx.set_theme(value)
    assert ctx.config.theme == 'default'
    assert ctx.get_data()['theme_url'] == 'http://example.com/themes/default/'


def test_name_setters(ctx):
    ctx.set_template('layout').set_header('top').set_footer('bottom')
    assert ctx.config.template == 'layout'
    assert ctx.config.header == 'top'
    assert ctx.config.footer == 'bottom'


@pytest.mark.parametrize('setter', ['set_template', 'set_header', 'set_footer'])
@pytest.mark.parametrize('value', [None, 1, {'name': 'x'}])
def test_name_setters_ignore_invalid_values(ctx, setter, value):
    key = setter[len('set_'):]
    before = getattr(ctx.config, key)
    assert getattr(ctx, setter)(value) is ctx
    assert getattr(ctx.config, key) == before


def test_use_full_template(ctx):
    assert ctx.config.use_full_template is False
    ctx.use_full_template()
    assert ctx.config.use_full_template is True
    ctx.use_full_template(False)
    assert ctx.config.use_full_template is False


@pytest.mark.parametrize('value', ['yes', 1, None])
def test_use_full_template_ignores_non_booleans(ctx, value):
    ctx.use_full_template(value)
    assert ctx.config.use_full_template is False


def test_contexts_are_isolated(themes, renderer):
    first = themes.create_context(renderer=renderer)
    second = themes.create_context(renderer=renderer)
    first.set_theme('admin').add_css('admin.css').set_var('user', 'jane')
    assert second.config.theme == 'default'
    assert themes.config.theme == 'default'
    assert second.assets.css == []
    assert 'user' not in second.get_data()


def test_set_var(ctx):
    ctx.set_var('a', 1).set_var({'b': 2, 'c': 3})
    data = ctx.get_data()
    assert (data['a'], data['b'], data['c']) == (1, 2, 3)
    data['a'] = 5
    assert ctx.get_data()['a'] == 1


def test_init_resets_state(ctx):
    ctx.add_css('style.css').add_inline_js('x();').set_var('a', 1)
    ctx.init()
    assert ctx.assets.css == []
    assert ctx.assets.inline_js == []
    assert 'a' not in ctx.get_data()
    assert 'theme_url' in ctx.get_data()


def test_uninitialized_context_initializes_lazily(themes, renderer):
    ctx = ThemeContext(themes.config.copy(), renderer)
    assert not ctx.initialized
    ctx.add_css('style.css')
    assert ctx.initialized
    assert ctx.assets.css == ['style.css']
    assert 'theme_url' in ctx.get_data()


def test_page_title_string(ctx):
    ctx.set_page_title('Welcome')
    assert ctx.get_data()['page_title'] == 'Welcome'


def test_page_title_from_mapping(ctx):
    ctx.set_page_title({'page_title': 'Mapped', 'title': 'Other'})
    assert ctx.get_data()['page_title'] == 'Mapped'


def test_page_title_keeps_previous_value(ctx):
    ctx.set_page_title('First')
    ctx.set_page_title({'title': 'Second'})
    assert ctx.get_data()['page_title'] == 'First'


def test_page_title_from_router(themes, renderer, make_router):
    ctx = themes.create_context(
        renderer=renderer, router=make_router('app.views.Users', 'list'))
    ctx.set_page_title()
    assert ctx.get_data()['page_title'] == 'Users | List'


def test_page_title_not_derived_when_headless(
        themes, renderer, make_router):
    ctx = themes.create_context(
        renderer=renderer, router=make_router('Users', 'list'),
        interactive=False)
    ctx.set_page_title()
    assert ctx.get_data()['page_title'] == ''


def test_page_title_defaults_to_empty_string(ctx):
    ctx.set_page_title()
    assert ctx.get_data()['page_title'] == ''


def test_init_restores_configuration(ctx):
    ctx.set_theme('admin').set_template('other').set_header('top')
    ctx.use_full_template()
    ctx.init()
    assert ctx.config.theme == 'default'
    assert ctx.config.template == 'index'
    assert ctx.config.header == 'header'
    assert ctx.config.use_full_template is False
    assert ctx.get_data()['theme_url'] == 'http://example.com/themes/default/'


def test_add_i18n_js_inline(ctx):
    ctx.add_i18n_js('alert("${hello}");', {'hello': 'Hallo'})
    ctx.add_i18n_js('   ')
    assert ctx.assets.inline_js == ['alert("Hallo");']


def test_add_i18n_js_file(ctx, rootdir, write_file):
    write_file(os.path.join(rootdir, 'themes', 'default', 'js', 'i18n.js'),
               'var msg = "${welcome}";')
    ctx.add_i18n_js('i18n.js', {'welcome': 'Willkommen'})
    assert ctx.assets.inline_js == ['var msg = "Willkommen";']
    ctx.add_i18n_js('i18n.js', {'welcome': 'Welcome'})
    assert ctx.assets.inline_js == ['var msg = "Welcome";']


def test_add_i18n_js_missing_file(ctx):
    assert ctx.add_i18n_js('missing.js', {}) is ctx
    assert ctx.assets.inline_js == []


def test_add_i18n_js_custom_translator(themes):
    class Upper(Translator):
        def translate(self, script, langs):
            return script.upper()
    ctx = themes.create_context(translator=Upper())
    ctx.add_i18n_js('hello();')
    assert ctx.assets.inline_js == ['HELLO();']
