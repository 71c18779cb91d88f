import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from giftdraw.db import Base, init_engine


@pytest.fixture
def session():
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)
    db_session = sessionmaker(bind=engine, expire_on_commit=False)()
    yield db_session
    db_session.close()
    engine.dispose()


@pytest.fixture
def database(tmp_path):
    engine = init_engine(f"sqlite+pysqlite:///{tmp_path / 'giftdraw.db'}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()
