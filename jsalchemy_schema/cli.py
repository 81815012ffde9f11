import logging

import click

from .config import GeneratorConfig
from .exceptions import ConfigurationError, JSAlchemySchemaException
from .generator import SchemaGenerator, print_report


def parse_table_names(values) -> dict:
    ret = {}
    for value in values:
        model, sep, table = value.partition('=')
        if not sep or not model or not table:
            raise ConfigurationError(f'Invalid table name "{value}", expected MODEL=TABLE')
        ret[model] = table
    return ret


@click.command()
@click.option('--base-path', type=click.Path(file_okay=False), help='Root of the application [default: cwd].')
@click.option('--model-path', help='Glob of the model files [default: BASE_PATH/app/models/**/*.py].')
@click.option('--out-path', type=click.Path(file_okay=False), help='Output folder [default: BASE_PATH/json-schema].')
@click.option('--routes', 'routes_path', type=click.Path(dir_okay=False), help='JSON route table.')
@click.option('--base-class', help='Dotted path of the base model class to exclude.')
@click.option('--exclude', 'exclude_models', multiple=True, help='Model class to skip.')
@click.option('--table-name', 'table_names', multiple=True, metavar='MODEL=TABLE',
              help='Table name of a model with an irregular plural.')
@click.option('-v', '--verbose', is_flag=True)
def main(verbose, table_names, exclude_models, **options):
    """Generate a JSON schema and a UI schema for every model of the application."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    try:
        config = GeneratorConfig.from_dict(dict(options, exclude_models=list(exclude_models),
                                                table_names=parse_table_names(table_names)))
        report = SchemaGenerator(config).write()
    except JSAlchemySchemaException as e:
        raise click.ClickException(e.message) from e
    print_report(report)


if __name__ == '__main__':
    main()
