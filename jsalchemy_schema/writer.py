"""Writes the generated documents, never overwriting an existing file::

    {out_path}/{model_name}/schema.json
    {out_path}/{model_name}/ui_schema.json
"""
import logging
import os
from decimal import Decimal
from typing import Callable, Iterable, List, Literal, NamedTuple, Tuple

import orjson
from click import style

log = logging.getLogger(__package__)

SCHEMA_FILE = 'schema.json'
UI_SCHEMA_FILE = 'ui_schema.json'


class WriteAction(NamedTuple):
    path: str
    payload: bytes
    action: Literal['create', 'skip']


class WriteReport(NamedTuple):
    created: List[str]
    existing: List[str]


def _default(obj):
    if isinstance(obj, Decimal):
        return float(obj)
    raise TypeError(f'{type(obj).__name__} is not JSON serializable')


def dumps(document: dict) -> bytes:
    """Pretty print `document`."""
    return orjson.dumps(document, default=_default, option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE)


def plan(out_path: str, documents: Iterable[Tuple[str, dict, dict]],
         exists: Callable[[str], bool] = os.path.exists) -> List[WriteAction]:
    """Decide what to do with the files of every `(model_name, schema, ui_schema)`."""
    ret = []
    planned = set()
    for name, schema, ui_schema in documents:
        for file_name, document in ((SCHEMA_FILE, schema), (UI_SCHEMA_FILE, ui_schema)):
            path = os.path.join(out_path, name, file_name)
            action = 'skip' if path in planned or exists(path) else 'create'
            planned.add(path)
            ret.append(WriteAction(path, dumps(document), action))
    return ret


def apply(actions: Iterable[WriteAction]) -> WriteReport:
    report = WriteReport([], [])
    for path, payload, action in actions:
        if action == 'skip':
            log.info('Skipping existing %s', style(path, fg='yellow'))
            report.existing.append(path)
            continue
        os.makedirs(os.path.dirname(path), exist_ok=True)
        try:
            with open(path, 'xb') as f:
                f.write(payload)
        except FileExistsError:
            log.info('Skipping existing %s', style(path, fg='yellow'))
            report.existing.append(path)
            continue
        log.info('Created %s', style(path, fg='green'))
        report.created.append(path)
    return report


def write_documents(out_path: str, documents: Iterable[Tuple[str, dict, dict]]) -> WriteReport:
    os.makedirs(out_path, exist_ok=True)
    return apply(plan(out_path, documents))
