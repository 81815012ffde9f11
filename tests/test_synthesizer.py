import pytest

from jsalchemy_schema import ColumnDescriptor, LinkDescriptor, ModelDescriptor, synthesize
from jsalchemy_schema.synthesizer import json_type


@pytest.mark.parametrize('native, expected', [
    ('date', ('string', 'date')),
    ('datetime', ('string', 'date-time')),
    ('text', ('string', None)),
    ('decimal', ('number', None)),
    ('integer', ('integer', None)),
    ('boolean', ('boolean', None)),
    ('string', ('string', None)),
    ('uuid', ('uuid', None)),
])
def test_json_type(native, expected):
    assert json_type(native) == expected


def test_article(article):
    link = LinkDescriptor(rel='show', method='GET', href='/articles/{id}')
    schema, ui_schema = synthesize(article, [link])

    assert list(schema) == ['type', 'title', 'description', 'properties', 'required', 'links']
    assert schema['type'] == 'object'
    assert schema['title'] == schema['description'] == 'Article'
    assert list(schema['properties']) == ['id', 'title', 'body', 'created_at']
    assert schema['required'] == ['title']
    assert schema['properties']['title'] == {'type': 'string', 'maxlength': 255}
    assert schema['properties']['body'] == {'type': 'string'}
    assert schema['properties']['created_at'] == {'type': 'string', 'format': 'date-time'}
    assert schema['links'] == [{'rel': 'show', 'method': 'GET', 'href': '/articles/{id}'}]

    assert ui_schema == {
        'id': {'ui:readonly': True},
        'title': {},
        'body': {},
        'created_at': {'ui:readonly': True},
    }


def test_implicit_fields_never_required():
    model = ModelDescriptor.build('note', 'Note', [
        ColumnDescriptor(name='id', type='integer', nullable=False),
        ColumnDescriptor(name='created_at', type='datetime', nullable=False),
        ColumnDescriptor(name='updated_at', type='datetime', nullable=False),
        ColumnDescriptor(name='author_id', type='integer', nullable=False),
    ])
    schema, ui_schema = synthesize(model)
    assert schema['required'] == ['author_id']
    assert schema['links'] == []
    assert [name for name, settings in ui_schema.items() if settings.get('ui:readonly')] == \
        ['id', 'created_at', 'updated_at']


def test_defaults_and_limits():
    model = ModelDescriptor.build('setting', 'Setting', [
        ColumnDescriptor(name='enabled', type='boolean', default=False),
        ColumnDescriptor(name='label', type='string', default='none', limit=None),
        ColumnDescriptor(name='notes', type='text', limit=2000),
        ColumnDescriptor(name='ratio', type='decimal', default=0.5),
    ])
    properties = synthesize(model)[0]['properties']
    assert properties['enabled'] == {'type': 'boolean', 'default': False}
    assert properties['label'] == {'type': 'string', 'default': 'none'}
    assert properties['notes'] == {'type': 'string'}
    assert properties['ratio'] == {'type': 'number', 'default': 0.5}
    assert synthesize(model)[0]['required'] == []
