from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import String, Text, Numeric, DateTime, Boolean
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from jsalchemy_schema import ColumnDescriptor, ModelDescriptor, RouteDescriptor

ARTICLE_MODEL = '''
from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ApplicationRecord(Base):
    __abstract__ = True


class Article(ApplicationRecord):
    __tablename__ = 'articles'

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    body: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime]
'''


@pytest.fixture
def Base():
    class Base(DeclarativeBase):
        pass

    return Base


@pytest.fixture
def article_model(Base):

    class BlogPost(Base):
        __tablename__ = 'blog_posts'

        id: Mapped[int] = mapped_column(primary_key=True)
        title: Mapped[str] = mapped_column(String(120))
        body: Mapped[str | None] = mapped_column(Text)
        price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal('9.90'))
        published: Mapped[bool] = mapped_column(Boolean, default=False)
        created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
        updated_at: Mapped[datetime | None]

    return BlogPost


@pytest.fixture
def article():
    """The `Article` of the documentation."""
    return ModelDescriptor.build('article', 'Article', [
        ColumnDescriptor(name='id', type='integer', nullable=False),
        ColumnDescriptor(name='title', type='string', nullable=False, limit=255),
        ColumnDescriptor(name='body', type='text', nullable=True),
        ColumnDescriptor(name='created_at', type='datetime', nullable=False),
    ])


@pytest.fixture
def article_routes():
    return [RouteDescriptor.from_requirements('GET', '/articles/:id(.:format)',
                                              {'controller': 'articles', 'action': 'show'})]


@pytest.fixture
def app_path(tmp_path):
    """An application with one model file."""
    models = tmp_path / 'app' / 'models'
    models.mkdir(parents=True)
    (models / 'article.py').write_text(ARTICLE_MODEL)
    return tmp_path
