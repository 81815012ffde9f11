class JSAlchemySchemaException(Exception):
    """Base of every error the schema generator raises on purpose."""

    message = 'Schema generation failed'

    def __init__(self, message: str = None):
        if message:
            self.message = message
        super().__init__(self.message)


class ModelLoadError(JSAlchemySchemaException):
    """A model source file couldn't be imported."""

    def __init__(self, path: str, reason: str = None):
        self.path = path
        super().__init__(f'Unable to load models from "{path}"' + (f': {reason}' if reason else ''))


class RouteTableError(JSAlchemySchemaException):
    """The route table is missing or malformed."""


class ConfigurationError(JSAlchemySchemaException):
    pass
