import importlib
import re
from functools import wraps

from pluralizer import Pluralizer

pluralizer = Pluralizer()
pluralize = pluralizer.plural


def memoize(func):
    cache = {}

    @wraps(func)
    def wrapper(*args):
        if args not in cache:
            cache[args] = func(*args)
        return cache[args]

    return wrapper


CAP_WORD = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


def snake_case(camel: str) -> str:
    """Transform any camel case string into a snake case"""
    return CAP_WORD.sub('_', camel).replace('-', '_').lower()


def humanize(snake: str) -> str:
    """`blog_post` becomes `Blog post`."""
    ret = snake.replace('_', ' ').strip()
    return ret[:1].upper() + ret[1:]


@memoize
def _tableize(name: str) -> str:
    *head, last = name.split('_')
    return '_'.join(head + [pluralize(last)])


def tableize(name: str, overrides: dict = None) -> str:
    """Return the collection name of the model `name` (`blog_post` -> `blog_posts`).

    `overrides` maps model names to table names for irregular plurals.
    """
    if overrides and name in overrides:
        return overrides[name]
    return _tableize(name)


def load_class(class_path: str) -> type:
    module_name, _, class_name = class_path.rpartition('.')
    module = importlib.import_module(module_name)
    return getattr(module, class_name)
