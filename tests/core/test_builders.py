import pytest
from pydantic import ValidationError

from edgeschema.config import EdgeSettings
from edgeschema.core.annotation import EdgesAnnotation
from edgeschema.core.builders import AssocBuilder, InverseBuilder, from_, to, type_name
from edgeschema.core.errors import EdgeNameError
from edgeschema.core.storage import columns, symbols, table


class User:
    pass


class Node:
    pass


class Friendship:
    pass


def test_basic_edge() -> None:
    edge = to("friends", User).required().comment("comment").descriptor()

    assert edge.inverse is False
    assert edge.unique is False
    assert edge.comment == "comment"
    assert edge.type == "User"
    assert edge.name == "friends"
    assert edge.required is True
    assert edge.ref is None


def test_edge_with_children() -> None:
    parent = to("parent", Node).unique().immutable().descriptor()

    assert parent.inverse is False
    assert parent.unique is True
    assert parent.type == "Node"
    assert parent.required is False
    assert parent.immutable is True

    children = (
        to("children", Node)
        .from_("parent")
        .unique()
        .comment("comment")
        .field("parent_id")
        .descriptor()
    )

    assert children.field == "parent_id"
    assert children.comment == "comment"
    assert children.ref is not None
    assert children.ref.field == ""


def test_m2m_relation_of_same_type() -> None:
    edge = to("following", User).from_("followers").descriptor()

    assert edge.inverse is True
    assert edge.unique is False
    assert edge.name == "followers"
    assert edge.type == "User"
    assert edge.ref is not None
    assert edge.ref.name == "following"
    assert edge.ref.unique is False
    assert edge.ref.inverse is False


def test_unique_is_recorded_per_side() -> None:
    m2o = to("following", User).unique().from_("followers").descriptor()
    assert m2o.unique is False
    assert m2o.ref.unique is True

    o2m = to("following", User).from_("followers").unique().descriptor()
    assert o2m.unique is True
    assert o2m.ref.unique is False

    o2o = to("following", User).unique().from_("followers").unique().descriptor()
    assert o2o.unique is True
    assert o2o.ref.unique is True


def test_from_resets_inverse_side_configuration() -> None:
    edge = (
        to("following", User)
        .required()
        .comment("assoc")
        .annotations(EdgesAnnotation("a"))
        .from_("followers")
        .descriptor()
    )

    assert edge.required is False
    assert edge.comment == ""
    assert edge.annotations == ()
    assert edge.ref.required is True
    assert edge.ref.comment == "assoc"


def test_struct_tag_last_call_wins() -> None:
    edge = (
        to("friends", User)
        .struct_tag('json:"user_name,omitempty"')
        .struct_tag('json:"friends"')
        .descriptor()
    )
    assert edge.tag == 'json:"friends"'


def test_edge_with_storage_key() -> None:
    edge = (
        to("following", User)
        .struct_tag("following")
        .storage_key(
            table("user_followers"),
            columns("following_id", "followers_id"),
            symbols("users_followers", "users_followers"),
        )
        .from_("followers")
        .struct_tag("followers")
        .descriptor()
    )

    assert edge.tag == "followers"
    assert edge.storage_key is None
    assoc = edge.ref
    assert assoc.tag == "following"
    assert assoc.storage_key is not None
    assert assoc.storage_key.table == "user_followers"
    assert assoc.storage_key.columns == ("following_id", "followers_id")
    assert assoc.storage_key.symbols == ("users_followers", "users_followers")


def test_storage_key_calls_accumulate() -> None:
    key = (
        to("groups", "Group")
        .storage_key(table("user_groups"), columns("user_id", "group_id"))
        .storage_key(symbols("fk_user", "fk_group"), table("memberships"))
        .descriptor()
        .storage_key
    )

    assert key.table == "memberships"
    assert key.columns == ("user_id", "group_id")
    assert key.symbols == ("fk_user", "fk_group")


def test_annotations_append_in_call_order() -> None:
    first = EdgesAnnotation("a")
    second = EdgesAnnotation("b")

    edge = to("pets", "Pet").annotations(first).annotations(second, first).descriptor()
    assert edge.annotations == (first, second, first)

    inverse = from_("owner", User).ref("pets").annotations(first).annotations(second).descriptor()
    assert inverse.annotations == (first, second)


def test_builders_are_copy_on_write() -> None:
    base = to("friends", User)
    unique = base.unique()

    assert isinstance(unique, AssocBuilder)
    assert base.descriptor().unique is False
    assert unique.descriptor().unique is True

    inverse = base.from_("friend_of")
    assert isinstance(inverse, InverseBuilder)
    assert inverse.required().descriptor().required is True
    assert inverse.descriptor().required is False


def test_standalone_inverse_edge() -> None:
    edge = from_("owner", User).ref("pets").unique().field("owner_id").descriptor()

    assert edge.inverse is True
    assert edge.ref is None
    assert edge.ref_name == "pets"
    assert edge.unique is True
    assert edge.field == "owner_id"
    assert edge.type == "User"


def test_through_records_join_entity() -> None:
    edge = to("friends", User).through("friendships", Friendship).descriptor()
    assert edge.through is not None
    assert edge.through.name == "friendships"
    assert edge.through.type == "Friendship"

    liked = from_("liked_users", User).ref("liked_tweets").through("likes", "ent.TweetLike")
    assert liked.descriptor().through.type == "TweetLike"


def test_empty_names_are_recorded_by_default() -> None:
    edge = to("", User).from_("").ref("").descriptor()
    assert edge.name == ""
    assert edge.ref.name == ""


@pytest.mark.parametrize(
    "build",
    [
        lambda s: to("", User, settings=s),
        lambda s: from_("not valid", User, settings=s),
        lambda s: to("friends", User, settings=s).from_("class"),
        lambda s: from_("owner", User, settings=s).ref(""),
        lambda s: to("friends", User, settings=s).through("", Friendship),
    ],
)
def test_strict_names_reject_bad_names(build) -> None:
    with pytest.raises(EdgeNameError):
        build(EdgeSettings(strict_names=True))


def test_qualified_type_names_setting() -> None:
    s = EdgeSettings(qualified_type_names=True)
    edge = to("friends", User, settings=s).through("friendships", Friendship).descriptor()

    assert edge.type == f"{__name__}.User"
    assert edge.through.type == f"{__name__}.Friendship"


def test_type_name_resolution() -> None:
    assert type_name(User) == "User"
    assert type_name("schema.User") == "User"
    assert type_name("schema.User", qualified=True) == "schema.User"
    with pytest.raises(TypeError):
        type_name(42)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [{"name": "Edges"}, "Edges", 1])
def test_annotations_without_name_are_rejected(value) -> None:
    builder = to("pets", "Pet")
    with pytest.raises(TypeError, match="must provide name"):
        builder.annotations(EdgesAnnotation("a"), value)
    with pytest.raises(TypeError, match="must provide name"):
        from_("owner", User).annotations(value)
    assert builder.descriptor().annotations == ()


def test_extracted_descriptor_is_frozen() -> None:
    edge = to("following", User).from_("followers").descriptor()

    with pytest.raises(ValidationError):
        edge.unique = True  # type: ignore[misc]
    with pytest.raises(ValidationError):
        edge.ref.name = "other"  # type: ignore[union-attr]
    assert edge.unique is False
    assert edge.ref.name == "following"
