from pytest import fixture

from attrmap.container import AttributeMap
from attrmap.entry import value_equality_factory


@fixture(scope="function")
def attribute_map() -> AttributeMap[str]:
    return AttributeMap(value_equality_factory)
