import pathlib
import site

import pytest
from columnmap.config.type_mapping import TypeMappingConfig

HERE = pathlib.Path(pathlib.Path(__file__).resolve()).parent
site.addsitedir(HERE)


@pytest.fixture(autouse=True)
def reset_type_mapping_config():
    """Reset the configuration singleton before and after each test to ensure test isolation."""
    TypeMappingConfig.reset_instance()
    yield
    TypeMappingConfig.reset_instance()


pytest_plugins = [
    'tests.fixtures.mocks',
    'tests.fixtures.values',
]
