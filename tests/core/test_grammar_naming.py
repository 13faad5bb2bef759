import pytest

from edgeschema.core.errors import EdgeNameError, SchemaError
from edgeschema.core.grammar import assert_edge_name, is_edge_name


@pytest.mark.parametrize("name", ["friends", "owner_id", "_private", "Edges2"])
def test_valid_edge_names(name: str) -> None:
    assert is_edge_name(name)
    assert_edge_name(name)


@pytest.mark.parametrize("name", ["", "has space", "1st", "from", "class"])
def test_invalid_edge_names(name: str) -> None:
    assert not is_edge_name(name)
    with pytest.raises(EdgeNameError, match="ref name must be a non-empty identifier"):
        assert_edge_name(name, "ref name")


def test_edge_name_error_is_schema_error() -> None:
    assert issubclass(EdgeNameError, SchemaError)
    assert issubclass(SchemaError, ValueError)
