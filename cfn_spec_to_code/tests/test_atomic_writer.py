import pytest

from cfn_spec_to_code.pipeline.errors import EmissionError
from cfn_spec_to_code.pipeline.writer import AtomicWriter

VALID = "pub mod AWS {\n    pub struct A {}\n}\n"


class TestAtomicWriter:
    def test_write(self, tmp_path):
        path = tmp_path / "out" / "aws.rs"

        AtomicWriter().write(path, VALID)

        assert path.read_text() == VALID
        assert [p.name for p in path.parent.iterdir()] == ["aws.rs"]

    def test_validation_failure_leaves_nothing(self, tmp_path):
        path = tmp_path / "aws.rs"

        with pytest.raises(EmissionError, match="unbalanced braces"):
            AtomicWriter().write(path, "pub mod AWS {\n")

        assert list(tmp_path.iterdir()) == []

    def test_validation_failure_keeps_previous_file(self, tmp_path):
        path = tmp_path / "aws.rs"
        path.write_text(VALID)

        with pytest.raises(EmissionError):
            AtomicWriter().write(path, "no modules here")

        assert path.read_text() == VALID
        assert [p.name for p in tmp_path.iterdir()] == ["aws.rs"]

    def test_braces_in_comments_are_ignored(self, tmp_path):
        path = tmp_path / "aws.rs"
        content = "// {{ header\npub mod AWS {\n    /// see {docs\n}\n"

        AtomicWriter().write(path, content)

        assert path.read_text() == content

    def test_validation_can_be_skipped(self, tmp_path):
        path = tmp_path / "aws.rs"

        AtomicWriter().write(path, "anything", validate=False)

        assert path.read_text() == "anything"

    def test_custom_validator(self, tmp_path):
        seen = []

        AtomicWriter(validate_rust=seen.append).write(tmp_path / "aws.rs", "x")

        assert seen == ["x"]

    def test_write_if_not_exists(self, tmp_path):
        path = tmp_path / "aws.rs"
        writer = AtomicWriter()

        writer.write_if_not_exists(path, VALID)
        with pytest.raises(EmissionError, match="already exists"):
            writer.write_if_not_exists(path, VALID)

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("")

        with pytest.raises(EmissionError, match="Cannot write"):
            AtomicWriter().write(blocker / "aws.rs", VALID)
