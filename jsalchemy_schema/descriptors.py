from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ColumnDescriptor(BaseModel):
    """What the generator knows about one model column.

    `type` is the logical type (`string`, `text`, `decimal`, ...) or, for anything else, the native type name.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    nullable: bool = True
    default: Any = None
    limit: Optional[int] = None


class ModelDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    columns: Dict[str, ColumnDescriptor] = Field(default_factory=dict)

    @classmethod
    def build(cls, name: str, title: str, columns: List[ColumnDescriptor]) -> 'ModelDescriptor':
        """Keep the declaration order of `columns`."""
        return cls(name=name, title=title, columns={c.name: c for c in columns})


class LinkDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    rel: Optional[str]
    method: str
    href: str

    def to_dict(self) -> dict:
        return {'rel': self.rel, 'method': self.method, 'href': self.href}
