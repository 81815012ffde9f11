"""Route indexing.

Groups the application routes by controller into the `links` of the JSON schema
documents, e.g.::

    {'articles': [
        {'rel': 'create', 'method': 'POST', 'href': '/articles'},
        {'rel': 'show', 'method': 'GET', 'href': '/articles/{id}'},
    ]}
"""
import logging
import re
from typing import Dict, Iterable, List, Optional

import orjson
from click import style
from pydantic import BaseModel, ConfigDict, field_validator

from .descriptors import LinkDescriptor
from .exceptions import RouteTableError

log = logging.getLogger(__package__)

SKIP_CONTROLLERS = frozenset({'passwords', 'sessions', 'users', 'admin'})
SKIP_ACTIONS = ('edit', 'new')

FORMAT_SUFFIX = re.compile(r'\(\.:format\)')
ID_SEGMENT = re.compile(r':id\b')
VERB_ANCHORS = re.compile(r'[$^]')


class ActionMatcher:
    """The action requirement of a route."""

    relation: Optional[str] = None

    def matches(self, name: str) -> bool:
        raise NotImplementedError()


class NoAction(ActionMatcher):

    def matches(self, name: str) -> bool:
        return False

    def __repr__(self):
        return '<NoAction>'


class LiteralSet(ActionMatcher):

    def __init__(self, names: Iterable[str]):
        self.names = tuple(dict.fromkeys(names))

    @property
    def relation(self) -> Optional[str]:
        return '|'.join(self.names) or None

    def matches(self, name: str) -> bool:
        return name in self.names

    def __repr__(self):
        return f'<LiteralSet {self.names}>'


class Pattern(ActionMatcher):

    def __init__(self, pattern: re.Pattern | str):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    @property
    def relation(self) -> str:
        return self.pattern.pattern

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None

    def __repr__(self):
        return f'<Pattern {self.pattern.pattern!r}>'


def action_matcher(action) -> ActionMatcher:
    """Normalise the `action` requirement of a route."""
    if action is None:
        return NoAction()
    if isinstance(action, ActionMatcher):
        return action
    if isinstance(action, str):
        return LiteralSet([action])
    if isinstance(action, re.Pattern):
        return Pattern(action)
    if isinstance(action, dict) and len(action) == 1 and isinstance(action.get('pattern'), str):
        return Pattern(action['pattern'])
    if isinstance(action, (list, tuple, set, frozenset, dict)):
        return LiteralSet(action)
    raise RouteTableError(f'Unsupported action requirement {action!r}')


class RouteDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    verb: str
    path: str
    controller: Optional[str] = None
    action: ActionMatcher = NoAction()

    @field_validator('action', mode='before')
    @classmethod
    def _normalise_action(cls, value):
        return action_matcher(value)

    @classmethod
    def from_requirements(cls, verb: str, path: str, requirements: dict = None) -> 'RouteDescriptor':
        requirements = requirements or {}
        return cls(verb=verb, path=path, controller=requirements.get('controller'),
                   action=requirements.get('action'))

    @property
    def has_requirements(self) -> bool:
        return bool(self.controller) or not isinstance(self.action, NoAction)

    def to_link(self) -> LinkDescriptor:
        href = ID_SEGMENT.sub('{id}', FORMAT_SUFFIX.sub('', self.path))
        return LinkDescriptor(rel=self.action.relation, method=VERB_ANCHORS.sub('', self.verb), href=href)


def skipped_controller(controller: str) -> bool:
    """`admin` excludes the controller `admin` as well as the namespace `admin/...`."""
    return any(part in SKIP_CONTROLLERS for part in controller.split('/'))


def skip_reason(route: RouteDescriptor) -> Optional[str]:
    if not route.has_requirements:
        return 'no requirements'
    if not route.controller:
        return 'no controller'
    if skipped_controller(route.controller):
        return f'controller {route.controller}'
    for action in SKIP_ACTIONS:
        if route.action.matches(action):
            return f'action {action}'
    return None


def index_routes(routes: Iterable[RouteDescriptor]) -> Dict[str, List[LinkDescriptor]]:
    """Group the `routes` links by controller, keeping the first link of each relation."""
    ret = {}
    for route in routes or ():
        reason = skip_reason(route)
        if reason:
            log.debug('Skipping route %s %s (%s)', route.verb, route.path, reason)
            continue
        links = ret.setdefault(route.controller, [])
        link = route.to_link()
        if any(l.rel == link.rel for l in links):
            continue
        links.append(link)
    return ret


class RouteIndex:
    """Memoized `index_routes` over the route table of one generation run."""

    def __init__(self, routes: Iterable[RouteDescriptor] = None):
        self.routes = list(routes or ())
        self._links = None

    @property
    def links(self) -> Dict[str, List[LinkDescriptor]]:
        if self._links is None:
            self._links = index_routes(self.routes)
            log.debug('Indexed %s routes into %s controllers', len(self.routes), len(self._links))
        return self._links

    def __getitem__(self, controller: str) -> List[LinkDescriptor]:
        return self.links.get(controller, [])


def parse_routes(data) -> List[RouteDescriptor]:
    if not isinstance(data, list):
        raise RouteTableError('The route table must be a list of routes')
    try:
        return [RouteDescriptor.from_requirements(r['verb'], r['path'], r.get('requirements'))
                for r in data]
    except (KeyError, TypeError, ValueError, re.error) as e:
        raise RouteTableError(f'Malformed route table: {e}') from e


def load_routes(path: str = None) -> List[RouteDescriptor]:
    """Load the route table stored as JSON at `path`; no path means no routes."""
    if not path:
        return []
    try:
        with open(path, 'rb') as f:
            data = orjson.loads(f.read())
    except OSError as e:
        raise RouteTableError(f'Unable to read the route table "{path}": {e.strerror}') from e
    except orjson.JSONDecodeError as e:
        raise RouteTableError(f'Invalid route table "{path}": {e}') from e
    log.info('Loaded route table %s', style(path, fg='blue'))
    return parse_routes(data)
