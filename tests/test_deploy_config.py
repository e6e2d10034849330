"""Tests for the box minimum-balance helpers used when funding the app."""

from __future__ import annotations

from smart_contracts.artifact_registry.deploy_config import (
    artifact_mbr,
    box_mbr,
    record_box_mbr,
    sovereignty_box_mbr,
)


class TestBoxMbr:
    def test_formula(self):
        assert box_mbr(0, 0) == 2_500
        assert box_mbr(9, 32) == 2_500 + 400 * 41

    def test_sovereignty_box(self):
        # "o" + itob(id) + public key, one-byte bool value
        assert sovereignty_box_mbr() == 2_500 + 400 * (41 + 1)

    def test_record_box(self):
        # head 54 + title 2+1 + abstract 2+1 + tags 2 + (4+1)
        assert record_box_mbr("T", "A", ["x"]) == 2_500 + 400 * (9 + 54 + 3 + 3 + 2 + 5)

    def test_record_box_counts_utf8_bytes(self):
        assert record_box_mbr("é", "A", ["x"]) - record_box_mbr("e", "A", ["x"]) == 400

    def test_record_box_grows_per_tag(self):
        one = record_box_mbr("T", "A", ["ab"])
        two = record_box_mbr("T", "A", ["ab", "cd"])
        assert two - one == 400 * 6

    def test_artifact_mbr_sums_both_boxes(self):
        tags = ["math", "graph"]
        expected = record_box_mbr("Graph Theory Notes", "Intro to graphs", tags) + sovereignty_box_mbr()
        assert artifact_mbr("Graph Theory Notes", "Intro to graphs", tags) == expected
