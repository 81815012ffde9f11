"""Model enumeration.

The generator never looks at a live class registry: it asks a `ModelProvider`
for a snapshot of `ModelDescriptor`. `SQLAlchemyModelProvider` builds that
snapshot by importing the model source files of an application.
"""
import glob
import importlib.util
import logging
import os
import sys
from decimal import Decimal
from typing import Iterable, List, Tuple

from click import style
from sqlalchemy import Column, inspect
from sqlalchemy.orm import DeclarativeBase

from .descriptors import ColumnDescriptor, ModelDescriptor
from .exceptions import ModelLoadError
from .utils import humanize, load_class, snake_case

log = logging.getLogger(__package__)

NATIVE_TYPES = {
    'string': 'string',
    'unicode': 'string',
    'varchar': 'string',
    'char': 'string',
    'enum': 'string',
    'text': 'text',
    'unicodetext': 'text',
    'clob': 'text',
    'integer': 'integer',
    'biginteger': 'integer',
    'smallinteger': 'integer',
    'numeric': 'decimal',
    'decimal': 'decimal',
    'float': 'number',
    'double': 'number',
    'real': 'number',
    'boolean': 'boolean',
    'date': 'date',
    'datetime': 'datetime',
    'timestamp': 'datetime',
}


def to_native_type(field_type) -> str:
    """Transform a SQLAlchemy type into the logical type of the column."""
    klass = field_type if isinstance(field_type, type) else type(field_type)
    for base in klass.__mro__:
        name = base.__name__.lower()
        if name in NATIVE_TYPES:
            return NATIVE_TYPES[name]
    return klass.__name__.lower()


def column_default(column):
    """Return the literal default of `column`, if it declares one."""
    default = column.default
    if default is not None and default.is_scalar:
        value = default.arg
        return float(value) if isinstance(value, Decimal) else value
    server_default = column.server_default
    if server_default is not None and isinstance(getattr(server_default, 'arg', None), str):
        return server_default.arg
    return None


def describe_column(column) -> ColumnDescriptor:
    native = to_native_type(column.type)
    return ColumnDescriptor(
        name=column.name,
        type=native,
        nullable=bool(column.nullable),
        default=column_default(column),
        limit=getattr(column.type, 'length', None) if native == 'string' else None,
    )


def describe_model(model: DeclarativeBase) -> ModelDescriptor:
    name = snake_case(model.__name__)
    return ModelDescriptor.build(
        name=name,
        title=humanize(name),
        columns=[describe_column(c) for c in model.__mapper__.columns if isinstance(c, Column)],
    )


class ModelProvider:

    def models(self) -> List[ModelDescriptor]:
        """Returns the descriptors of all the application models, in order."""
        raise NotImplementedError()


class StaticModelProvider(ModelProvider):

    def __init__(self, descriptors: Iterable[ModelDescriptor]):
        self.descriptors = list(descriptors)

    def models(self) -> List[ModelDescriptor]:
        return list(self.descriptors)


class SQLAlchemyModelProvider(ModelProvider):
    """Loads the SQLAlchemy models declared in the files matching `model_path`."""

    def __init__(self, model_path: str, base_path: str = None, base_class: type | str = None,
                 exclude: Tuple[str] = ()):
        self.model_path = model_path
        self.base_path = os.path.abspath(base_path or os.getcwd())
        self.base_class = load_class(base_class) if isinstance(base_class, str) else base_class
        self.exclude = set(exclude or ())

    @property
    def files(self) -> List[str]:
        return sorted(f for f in glob.glob(self.model_path, recursive=True)
                      if os.path.isfile(f) and f.endswith('.py'))

    def module_name(self, path: str) -> str:
        relative = os.path.relpath(os.path.abspath(path), self.base_path)
        if relative.startswith(os.pardir):
            relative = os.path.basename(path)
        parts = os.path.splitext(relative)[0].split(os.sep)
        if parts[-1] == '__init__':
            parts.pop()
        return '.'.join(parts)

    def load(self, path: str):
        """Import the module at `path`, or return it if it is already imported."""
        name = self.module_name(path)
        module = sys.modules.get(name)
        if module is not None and os.path.abspath(getattr(module, '__file__', '') or '') == os.path.abspath(path):
            return module
        spec = importlib.util.spec_from_file_location(name, path)
        if spec is None:
            raise ModelLoadError(path, 'not a python module')
        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            del sys.modules[name]
            raise ModelLoadError(path, f'{type(e).__name__}: {e}') from e
        log.debug('Loaded models from %s', style(path, fg='blue'))
        return module

    def is_model(self, obj, module) -> bool:
        if not isinstance(obj, type) or obj.__module__ != module.__name__:
            return False
        if inspect(obj, raiseerr=False) is None:
            return False
        if obj.__name__ in self.exclude:
            return False
        if self.base_class is not None:
            return obj is not self.base_class and issubclass(obj, self.base_class)
        return True

    def classes(self) -> List[type]:
        if self.base_path not in sys.path:
            sys.path.insert(0, self.base_path)
        modules = [self.load(f) for f in self.files]
        ret = []
        for module in modules:
            ret.extend(obj for obj in vars(module).values()
                       if self.is_model(obj, module) and obj not in ret)
        return ret

    def models(self) -> List[ModelDescriptor]:
        return [describe_model(model) for model in self.classes()]
