import pytest

from jsalchemy_schema.utils import humanize, load_class, snake_case, tableize


@pytest.mark.parametrize('camel, snake', [
    ('Article', 'article'),
    ('BlogPost', 'blog_post'),
    ('HTTPRequest', 'http_request'),
    ('Order2Item', 'order2_item'),
])
def test_snake_case(camel, snake):
    assert snake_case(camel) == snake


def test_humanize():
    assert humanize('blog_post') == 'Blog post'
    assert humanize('article') == 'Article'


def test_tableize():
    assert tableize('article') == 'articles'
    assert tableize('blog_post') == 'blog_posts'
    assert tableize('person', {'person': 'people_records'}) == 'people_records'


def test_load_class():
    from jsalchemy_schema.models import SQLAlchemyModelProvider
    assert load_class('jsalchemy_schema.models.SQLAlchemyModelProvider') is SQLAlchemyModelProvider
