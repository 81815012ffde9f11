from typing import Dict, List, Tuple

from .descriptors import ColumnDescriptor, LinkDescriptor, ModelDescriptor

READ_ONLY_FIELDS = ('created_at', 'updated_at', 'id')

JSON_TYPES = {
    'date': 'string',
    'datetime': 'string',
    'text': 'string',
    'decimal': 'number',
}

JSON_FORMATS = {
    'date': 'date',
    'datetime': 'date-time',
}


def json_type(native: str) -> Tuple[str, str | None]:
    """Map a column type into the JSON schema `type` and `format`."""
    return JSON_TYPES.get(native, native), JSON_FORMATS.get(native)


def schema_template() -> dict:
    return {
        'type': 'object',
        'title': '',
        'description': 'object',
        'properties': {},
        'required': [],
        'links': [],
    }


def field_property(column: ColumnDescriptor) -> dict:
    type_, format_ = json_type(column.type)
    ret = {'type': type_}
    if format_:
        ret['format'] = format_
    if column.default is not None:
        ret['default'] = column.default
    if column.type == 'string' and column.limit:
        ret['maxlength'] = column.limit
    return ret


def is_required(column: ColumnDescriptor) -> bool:
    return not column.nullable and column.name not in READ_ONLY_FIELDS


def ui_settings(name: str) -> dict:
    return {'ui:readonly': True} if name in READ_ONLY_FIELDS else {}


def synthesize(model: ModelDescriptor, links: List[LinkDescriptor] = None) -> Tuple[dict, dict]:
    """Build the JSON schema and the UI schema of `model`."""
    schema = schema_template()
    schema['title'] = schema['description'] = model.title
    schema['properties'] = {name: field_property(col) for name, col in model.columns.items()}
    schema['required'] = [name for name, col in model.columns.items() if is_required(col)]
    schema['links'] = [link.to_dict() for link in links or ()]
    ui_schema: Dict[str, dict] = {name: ui_settings(name) for name in model.columns}
    return schema, ui_schema
