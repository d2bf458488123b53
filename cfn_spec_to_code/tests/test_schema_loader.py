import json
from pathlib import Path

import pytest

from cfn_spec_to_code.pipeline.errors import SchemaLoadError
from cfn_spec_to_code.pipeline.schema_ast import PrimitiveType, PropertySpec, SchemaLoader, UpdateType

SPEC_PATH = Path(__file__).parent / "test_data" / "specs" / "mini_spec.json"


@pytest.fixture
def loader():
    return SchemaLoader()


class TestSchemaLoader:
    def test_load_file(self, loader):
        spec = loader.load_file(SPEC_PATH)

        assert spec.version == "18.4.0"
        assert len(spec.types) == 7
        assert spec.get("AWS::EC2::VPC").kind == "resource"
        assert spec.get("Tag").kind == "property"

    def test_pascal_case_properties(self, loader):
        spec = loader.load_file(SPEC_PATH)

        rules = spec.get("AWS::S3::Bucket.LifecycleConfiguration").properties["Rules"]
        assert rules == PropertySpec(
            required=True,
            documentation="http://docs.aws.amazon.com/AWSCloudFormation/latest/UserGuide/aws-properties-s3-bucket-lifecycleconfig.html#cfn-s3-bucket-lifecycleconfig-rules",
            primitive_type=PrimitiveType.STRING,
            update_type=UpdateType.MUTABLE,
            type="List",
            item_type=None,
            primitive_item_type=PrimitiveType.LONG,
        )

    def test_camel_case_properties(self, loader):
        spec = loader.load(
            {
                "PropertyTypes": {
                    "Service::Widget": {
                        "documentation": "d",
                        "properties": {"Tags": {"required": False, "documentation": "t", "type": "List", "itemType": "Service::Tag", "updateType": "Conditional"}},
                    }
                }
            }
        )

        widget = spec.get("Service::Widget")
        assert widget.documentation == "d"
        tags = widget.properties["Tags"]
        assert tags.required is False
        assert tags.item_type == "Service::Tag"
        assert tags.update_type == UpdateType.CONDITIONAL

    def test_defaults(self, loader):
        spec = loader.load({"PropertyTypes": {"A::B": {"Properties": {"P": {"Required": True}}}}})

        prop = spec.get("A::B").properties["P"]
        assert prop.primitive_type == PrimitiveType.STRING
        assert prop.update_type == UpdateType.IMMUTABLE
        assert prop.documentation == ""
        assert prop.type is None

    def test_property_order_is_kept(self, loader):
        spec = loader.load({"PropertyTypes": {"A::B": {"Properties": {"Z": {"Required": True}, "A": {"Required": True}}}}})

        assert list(spec.get("A::B").properties) == ["Z", "A"]

    def test_groupings_can_be_excluded(self):
        loader = SchemaLoader(include_resource_types=False)

        spec = loader.load_file(SPEC_PATH)

        assert {t.kind for t in spec.types} == {"property"}

    def test_ignored_types(self):
        spec = SchemaLoader(ignore_types=["Tag"]).load_file(SPEC_PATH)

        assert spec.get("Tag") is None
        assert len(spec.types) == 6

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(SchemaLoadError, match="Cannot read"):
            loader.load_file(tmp_path / "nope.json")

    def test_invalid_json(self, loader, tmp_path):
        path = tmp_path / "spec.json"
        path.write_text("[1, 2")

        with pytest.raises(SchemaLoadError, match="not valid JSON"):
            loader.load_file(path)

    @pytest.mark.parametrize(
        "document, message",
        [
            ([], "must be a JSON object"),
            ({}, "neither"),
            ({"PropertyTypes": []}, "PropertyTypes must be an object"),
            ({"PropertyTypes": {"A::B": "x"}}, "must be an object"),
            ({"PropertyTypes": {"A::B": {"Properties": []}}}, "Properties of"),
            ({"PropertyTypes": {"A::B": {"Properties": {"P": {}}}}}, "missing Required"),
            ({"PropertyTypes": {"A::B": {"Properties": {"P": {"Required": "yes"}}}}}, "must be a boolean"),
            ({"PropertyTypes": {"A::B": {"Properties": {"P": {"Required": True, "PrimitiveType": "Float"}}}}}, "unknown PrimitiveType 'Float'"),
            ({"PropertyTypes": {"A::B": {"Properties": {"P": {"Required": True, "UpdateType": "Sometimes"}}}}}, "unknown UpdateType"),
            ({"PropertyTypes": {"A::B": {"Properties": {"P": {"Required": True, "Type": 3}}}}}, "Type of property A::B/P"),
            ({"ResourceTypes": {"A::B": {}}, "PropertyTypes": {"A::B": {}}}, "more than once"),
            ({"ResourceSpecificationVersion": 1, "PropertyTypes": {}}, "ResourceSpecificationVersion"),
        ],
    )
    def test_malformed_documents(self, loader, document, message):
        with pytest.raises(SchemaLoadError, match=message):
            loader.load(document)

    def test_load_is_independent_of_json_roundtrip(self, loader):
        with open(SPEC_PATH) as f:
            document = json.load(f)

        assert loader.load(document) == loader.load_file(SPEC_PATH)
