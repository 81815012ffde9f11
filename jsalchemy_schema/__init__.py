from .config import GeneratorConfig
from .descriptors import ColumnDescriptor, LinkDescriptor, ModelDescriptor
from .exceptions import ConfigurationError, JSAlchemySchemaException, ModelLoadError, RouteTableError
from .generator import SchemaGenerator, print_report
from .models import ModelProvider, SQLAlchemyModelProvider, StaticModelProvider
from .routes import RouteDescriptor, RouteIndex, load_routes
from .synthesizer import synthesize
from .writer import WriteReport, write_documents
