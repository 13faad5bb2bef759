import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from edgeschema.core.annotation import EdgesAnnotation
from edgeschema.core.builders import to
from edgeschema.core.serde import descriptor_to_dict, dumps_descriptor
from edgeschema.core.storage import columns, table


class Bind(BaseModel):
    enabled: bool = True

    def name(self) -> str:
        return "Bind"


@dataclass
class Opaque:
    def name(self) -> str:
        return "Opaque"


class Unserializable:
    def name(self) -> str:
        return "Nope"


def _pair():
    return (
        to("groups", "Group")
        .storage_key(table("user_groups"), columns("user_id", "group_id"))
        .annotations(EdgesAnnotation("mixin"), Bind(), EdgesAnnotation('json:"groups"'))
        .from_("users")
        .comment("members")
        .descriptor()
    )


def test_descriptor_to_dict_nests_ref_and_resolves_annotations() -> None:
    out = descriptor_to_dict(_pair())

    assert out["name"] == "users"
    assert out["inverse"] is True
    assert out["comment"] == "members"
    assert out["storage_key"] is None
    assert out["annotations"] == {}
    ref = out["ref"]
    assert ref["name"] == "groups"
    assert ref["ref"] is None
    assert ref["storage_key"] == {
        "table": "user_groups",
        "symbols": [],
        "columns": ["user_id", "group_id"],
    }
    assert ref["annotations"] == {
        "Edges": {"struct_tag": 'json:"groups"'},
        "Bind": {"enabled": True},
    }


def test_through_is_serialized() -> None:
    out = descriptor_to_dict(to("friends", "User").through("friendships", "Friendship").descriptor())
    assert out["through"] == {"name": "friendships", "type": "Friendship"}
    assert out["ref"] is None


def test_dumps_descriptor_round_trips_through_json() -> None:
    desc = _pair()
    assert json.loads(dumps_descriptor(desc)) == descriptor_to_dict(desc)


def test_dumps_descriptor_is_independent_of_call_order() -> None:
    a = to("pets", "Pet").required().unique().descriptor()
    b = to("pets", "Pet").unique().required().descriptor()
    c = to("pets", "Pet").unique().descriptor()

    assert dumps_descriptor(a) == dumps_descriptor(b)
    assert dumps_descriptor(a) != dumps_descriptor(c)


def test_unserializable_annotation_raises() -> None:
    desc = to("pets", "Pet").annotations(Unserializable()).descriptor()
    with pytest.raises(TypeError, match="not serializable"):
        descriptor_to_dict(desc)

    ok = to("pets", "Pet").annotations(Opaque()).descriptor()
    assert descriptor_to_dict(ok)["annotations"] == {"Opaque": {}}
