import pytest

from meili.schema import (
    DISPLAYED,
    INDEXED,
    RANKED,
    AttrMove,
    AttrPropsChange,
    IdentChange,
    NewAttr,
    RemovedAttr,
    Schema,
    SchemaAttr,
    SchemaBuilder,
    SchemaProps,
    diff,
)


def _sample_schema():
    builder = SchemaBuilder.with_identifier("id")
    builder.new_attribute("alpha", DISPLAYED)
    builder.new_attribute("beta", DISPLAYED | INDEXED)
    builder.new_attribute("gamma", INDEXED)
    return builder.build()


def test_difference():
    builder = SchemaBuilder.with_identifier("id")
    builder.new_attribute("alpha", DISPLAYED)
    builder.new_attribute("beta", DISPLAYED | INDEXED)
    builder.new_attribute("gamma", INDEXED)
    builder.new_attribute("omega", INDEXED)
    old = builder.build()

    builder = SchemaBuilder.with_identifier("kiki")
    builder.new_attribute("beta", DISPLAYED | INDEXED)
    builder.new_attribute("alpha", DISPLAYED | INDEXED)
    builder.new_attribute("delta", RANKED)
    builder.new_attribute("gamma", DISPLAYED)
    new = builder.build()

    expected = [
        IdentChange(old="id", new="kiki"),
        AttrMove(name="alpha", old=0, new=1),
        AttrPropsChange(name="alpha", old=DISPLAYED, new=DISPLAYED | INDEXED),
        AttrMove(name="beta", old=1, new=0),
        AttrMove(name="gamma", old=2, new=3),
        AttrPropsChange(name="gamma", old=INDEXED, new=DISPLAYED),
        RemovedAttr(name="omega"),
        NewAttr(name="delta", pos=2, props=RANKED),
    ]
    assert diff(old, new) == expected


def test_diff_of_identical_schemas_is_empty():
    assert diff(_sample_schema(), _sample_schema()) == []


def test_serialize_deserialize_dict():
    schema = _sample_schema()
    assert Schema.from_dict(schema.to_dict()) == schema


def test_serialize_deserialize_toml():
    schema = _sample_schema()
    assert Schema.from_toml(schema.to_toml()) == schema
    assert Schema.from_toml(schema.to_toml().encode("utf-8")) == schema

    data = """
            identifier = "id"

            [attributes."alpha"]
            displayed = true

            [attributes."beta"]
            displayed = true
            indexed = true

            [attributes."gamma"]
            indexed = true
        """
    assert Schema.from_toml(data) == schema


def test_serialize_deserialize_json():
    schema = _sample_schema()
    assert Schema.from_json(schema.to_json()) == schema

    data = """
            {
                "identifier": "id",
                "attributes": {
                    "alpha": {
                        "displayed": true
                    },
                    "beta": {
                        "displayed": true,
                        "indexed": true
                    },
                    "gamma": {
                        "indexed": true
                    }
                }
            }"""
    assert Schema.from_json(data) == schema


def test_debug_output():
    schema = _sample_schema()
    expected = """Schema {
    identifier: "id",
    attributes: {
        "alpha": {
            DISPLAYED,
        },
        "beta": {
            DISPLAYED,
            INDEXED,
        },
        "gamma": {
            INDEXED,
        },
    },
}"""
    assert schema.pretty() == expected

    expected = (
        'Schema { identifier: "id", attributes: {"alpha": {DISPLAYED}, '
        '"beta": {DISPLAYED, INDEXED}, "gamma": {INDEXED}} }'
    )
    assert repr(schema) == expected


def test_duplicate_attribute_rejected():
    builder = SchemaBuilder.with_identifier("id")
    builder.new_attribute("alpha", DISPLAYED)
    with pytest.raises(ValueError, match="Field already inserted."):
        builder.new_attribute("alpha", INDEXED)


def test_new_attribute_returns_positions():
    builder = SchemaBuilder.with_identifier("id")
    assert builder.new_attribute("a", DISPLAYED) == SchemaAttr(0)
    assert builder.new_attribute("b", DISPLAYED) == SchemaAttr(1)


def test_schema_lookups():
    schema = _sample_schema()
    assert schema.number_of_attributes() == 3
    assert schema.identifier_name() == "id"
    assert schema.attribute("beta") == SchemaAttr(1)
    assert schema.attribute("missing") is None
    assert schema.attribute_name(SchemaAttr(2)) == "gamma"
    assert schema.props(SchemaAttr(1)) == DISPLAYED | INDEXED


def test_schema_iteration_order():
    names = [(name, attr.value) for name, attr, _ in _sample_schema()]
    assert names == [("alpha", 0), ("beta", 1), ("gamma", 2)]


def test_to_builder_round_trip():
    schema = _sample_schema()
    builder = schema.to_builder()
    assert list(builder.attributes) == ["alpha", "beta", "gamma"]
    assert builder.build() == schema


def test_props_flags_and_union():
    props = SchemaProps.from_dict({"displayed": True, "ranked": True})
    assert props == DISPLAYED | RANKED
    assert props.is_displayed() and props.is_ranked()
    assert not props.is_indexed()
    assert repr(props) == "{DISPLAYED, RANKED}"


def test_props_from_dict_defaults_and_types():
    assert SchemaProps.from_dict({"indexed": True}) == INDEXED
    assert SchemaProps.from_dict({}).to_dict() == {
        "displayed": False,
        "indexed": False,
        "ranked": False,
    }
    with pytest.raises(TypeError):
        SchemaProps.from_dict({"indexed": "yes"})


def test_builder_from_dict_missing_field():
    with pytest.raises(ValueError):
        SchemaBuilder.from_dict({"identifier": "id"})


def test_schema_attr_bounds():
    assert SchemaAttr.min().prev() is None
    assert SchemaAttr.max().next() is None
    assert SchemaAttr.min().next() == SchemaAttr(1)
    assert SchemaAttr.max().prev() == SchemaAttr(65534)
    assert str(SchemaAttr(42)) == "42"
    with pytest.raises(ValueError):
        SchemaAttr(65536)


def test_schema_equality_depends_on_identifier():
    builder = SchemaBuilder.with_identifier("other")
    builder.new_attribute("alpha", DISPLAYED)
    builder.new_attribute("beta", DISPLAYED | INDEXED)
    builder.new_attribute("gamma", INDEXED)
    assert builder.build() != _sample_schema()
    assert hash(_sample_schema()) == hash(_sample_schema())