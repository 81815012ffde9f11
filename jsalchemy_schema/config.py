import os
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

default_config = dict(
    base_path=None,                    # current working directory
    model_path=None,                   # {base_path}/app/models/**/*.py
    out_path=None,                     # {base_path}/json-schema
    routes_path=None,                  # no routes, no links
    base_class=None,
    exclude_models=[],
    table_names={},
)


class GeneratorConfig(BaseModel):
    """Paths and options of a generation run."""

    base_path: Optional[str] = None
    model_path: Optional[str] = None
    out_path: Optional[str] = None
    routes_path: Optional[str] = None
    base_class: Optional[str] = None
    exclude_models: List[str] = Field(default_factory=list)
    table_names: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode='after')
    def _resolve_paths(self) -> 'GeneratorConfig':
        if not self.base_path:
            self.base_path = os.getcwd()
        if not self.model_path:
            self.model_path = os.path.join(self.base_path, 'app', 'models', '**', '*.py')
        if not self.out_path:
            self.out_path = os.path.join(self.base_path, 'json-schema')
        return self

    @classmethod
    def from_dict(cls, config: dict) -> 'GeneratorConfig':
        return cls(**{**default_config, **{k: v for k, v in config.items() if v is not None}})
