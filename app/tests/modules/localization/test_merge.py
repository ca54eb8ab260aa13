"""Unit tests for modules.localization.merge."""

import pytest

from modules.localization.merge import MergeArrayHandling, merge_json


@pytest.mark.unit
class TestMergeJson:
    def test_arrays_are_replaced_by_default(self):
        target = {"tags": ["a", "b"]}
        merge_json(target, {"tags": ["c"]})
        assert target == {"tags": ["c"]}

    def test_nested_objects_merge(self):
        target = {"TitlePart": {"title": "Hello", "subtitle": "World"}}
        merge_json(target, {"TitlePart": {"title": "Bonjour"}})
        assert target == {"TitlePart": {"title": "Bonjour", "subtitle": "World"}}

    def test_new_keys_are_added(self):
        target = {"a": 1}
        merge_json(target, {"b": {"c": 2}})
        assert target == {"a": 1, "b": {"c": 2}}

    def test_none_values_are_ignored_by_default(self):
        target = {"a": 1}
        merge_json(target, {"a": None, "b": None})
        assert target == {"a": 1}

    def test_none_values_merge_when_enabled(self):
        target = {"a": 1}
        merge_json(target, {"a": None}, merge_null_values=True)
        assert target == {"a": None}

    def test_concat(self):
        target = {"tags": ["a", "b"]}
        merge_json(target, {"tags": ["b", "c"]}, array_handling=MergeArrayHandling.CONCAT)
        assert target["tags"] == ["a", "b", "b", "c"]

    def test_union(self):
        target = {"tags": ["a", "b"]}
        merge_json(target, {"tags": ["b", "c"]}, array_handling=MergeArrayHandling.UNION)
        assert target["tags"] == ["a", "b", "c"]

    def test_merge_by_index(self):
        target = {"items": [{"id": 1, "x": "a"}, {"id": 2}]}
        merge_json(
            target,
            {"items": [{"x": "b"}, {"y": 1}, {"id": 3}]},
            array_handling=MergeArrayHandling.MERGE,
        )
        assert target["items"] == [
            {"id": 1, "x": "b"},
            {"id": 2, "y": 1},
            {"id": 3},
        ]

    def test_scalar_overwrites_object(self):
        target = {"a": {"b": 1}}
        merge_json(target, {"a": "flat"})
        assert target == {"a": "flat"}

    def test_patch_values_are_copied(self):
        patch = {"part": {"tags": ["a"]}}
        target = {}
        merge_json(target, patch)
        patch["part"]["tags"].append("b")
        assert target == {"part": {"tags": ["a"]}}

    def test_returns_target(self):
        target = {}
        assert merge_json(target, {"a": 1}) is target
