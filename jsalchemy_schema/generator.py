import logging
from typing import Iterable, List, Tuple

import click
from click import style

from .config import GeneratorConfig
from .descriptors import ModelDescriptor
from .models import ModelProvider, SQLAlchemyModelProvider
from .routes import RouteDescriptor, RouteIndex, load_routes
from .synthesizer import synthesize
from .utils import tableize
from .writer import WriteReport, write_documents

log = logging.getLogger(__package__)


class SchemaGenerator:
    """Create the JSON schema files of every model.

    >>> generator = SchemaGenerator(GeneratorConfig(base_path='/srv/app'))
    >>> report = generator.write()
    """

    def __init__(self, config: GeneratorConfig = None, provider: ModelProvider = None,
                 routes: Iterable[RouteDescriptor] = None):
        self.config = config or GeneratorConfig()
        self.provider = provider or SQLAlchemyModelProvider(
            self.config.model_path, self.config.base_path,
            base_class=self.config.base_class, exclude=tuple(self.config.exclude_models))
        if routes is None:
            routes = load_routes(self.config.routes_path)
        self.routes = RouteIndex(routes)

    def links(self, model: ModelDescriptor):
        return self.routes[tableize(model.name, self.config.table_names)]

    def documents(self) -> List[Tuple[str, dict, dict]]:
        ret = []
        for model in self.provider.models():
            schema, ui_schema = synthesize(model, self.links(model))
            ret.append((model.name, schema, ui_schema))
        log.debug('Built the documents of %s models', len(ret))
        return ret

    def write(self) -> WriteReport:
        log.info('Writing JSON schemas into %s', style(self.config.out_path, fg='blue'))
        return write_documents(self.config.out_path, self.documents())


def print_report(report: WriteReport):
    if report.existing:
        click.echo('== Existing Files ==')
        click.echo('Please rename them before they can be re-generated')
        click.echo('\n'.join(report.existing))
    if report.created:
        click.echo('== Created Files ==')
        click.echo('\n'.join(report.created))
