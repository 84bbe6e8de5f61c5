"""Tests for collection ordering."""

from workflow_canon.ordering import locale_sort_key, order_group, order_groups, ordered_key


class TestOrderedKey:
    """Test sort key extraction."""

    def test_present_fields(self):
        """Test extracting present fields in order."""
        dep = {"name": "n", "dependencyType": "t", "workflowItem": "w"}
        assert ordered_key(dep, "dependencyType", "name", "workflowItem") == ("t", "n", "w")

    def test_missing_and_null_fields(self):
        """Test that missing and null fields become empty strings."""
        assert ordered_key({"id": None}, "domainClass", "id") == ("", "")

    def test_non_string_fields(self):
        """Test that non-string values are converted to text."""
        assert ordered_key({"id": 7}, "id") == ("7",)

    def test_non_mapping_entity(self):
        """Test that non-mapping entities yield empty strings."""
        assert ordered_key("loose", "name") == ("",)
        assert ordered_key(None, "a", "b") == ("", "")


class TestLocaleSortKey:
    """Test locale-aware collation keys."""

    def _sorted(self, names):
        return sorted(names, key=locale_sort_key)

    def test_case_insensitive_primary(self):
        """Test that case does not dominate ordering."""
        assert self._sorted(["b", "B", "a", "C"]) == ["a", "b", "B", "C"]

    def test_lowercase_first_on_tie(self):
        """Test that lowercase sorts before uppercase for the same letters."""
        assert self._sorted(["Alpha", "alpha"]) == ["alpha", "Alpha"]

    def test_accents_secondary(self):
        """Test that accented letters sort next to their base letter."""
        assert self._sorted(["z", "é", "e", "f"]) == ["e", "é", "f", "z"]

    def test_punctuation_before_digits_before_letters(self):
        """Test that punctuation and symbols sort before digits and letters."""
        names = ["step2", "step_2", "step-2", "~tilde", "alpha", "1one", "_under", "Beta", "beta"]
        assert self._sorted(names) == [
            "_under", "~tilde", "1one", "alpha", "beta", "Beta", "step_2", "step-2", "step2",
        ]

    def test_distinct_strings_never_equal(self):
        """Test that distinct strings get distinct keys."""
        assert locale_sort_key("\u00e9") != locale_sort_key("e\u0301")


class TestOrderGroup:
    """Test per-group collection ordering."""

    def test_items_by_name(self):
        """Test that items are ordered by locale-aware name."""
        group = {"items": [{"name": "beta"}, {"name": "Alpha"}, {"name": "alpha"}]}
        order_group(group)
        assert [i["name"] for i in group["items"]] == ["alpha", "Alpha", "beta"]

    def test_items_with_punctuated_names(self):
        """Test item ordering for names differing only in separators."""
        group = {"items": [{"name": "step2"}, {"name": "step-2"}, {"name": "step_2"}]}
        order_group(group)
        assert [i["name"] for i in group["items"]] == ["step_2", "step-2", "step2"]

    def test_items_without_name_first(self):
        """Test that items without a name sort as empty string."""
        group = {"items": [{"name": "a"}, {"id": 1}, {"name": None, "id": 2}]}
        order_group(group)
        assert group["items"] == [{"id": 1}, {"name": None, "id": 2}, {"name": "a"}]

    def test_items_stable_on_ties(self):
        """Test that items with equal names keep their relative order."""
        group = {"items": [{"name": "x", "n": 1}, {"name": "a"}, {"name": "x", "n": 2}]}
        order_group(group)
        assert group["items"] == [{"name": "a"}, {"name": "x", "n": 1}, {"name": "x", "n": 2}]

    def test_dependencies_by_tuple(self):
        """Test dependency ordering by (dependencyType, name, workflowItem)."""
        deps = [
            {"dependencyType": "b", "name": "a", "workflowItem": "a"},
            {"dependencyType": "a", "name": "b", "workflowItem": "a"},
            {"dependencyType": "a", "name": "a", "workflowItem": "b"},
            {"dependencyType": "a", "name": "a", "workflowItem": "a"},
        ]
        group = {"dependencies": deps}
        order_group(group)
        assert [
            (d["dependencyType"], d["name"], d["workflowItem"]) for d in group["dependencies"]
        ] == [("a", "a", "a"), ("a", "a", "b"), ("a", "b", "a"), ("b", "a", "a")]

    def test_dependencies_no_separator_collision(self):
        """Test that component boundaries are respected."""
        deps = [
            {"dependencyType": "a", "name": "b|c"},
            {"dependencyType": "a|b", "name": "c"},
        ]
        group = {"dependencies": deps}
        order_group(group)
        assert [d["dependencyType"] for d in group["dependencies"]] == ["a", "a|b"]

    def test_dependencies_plain_ordering(self):
        """Test that dependency names use plain string ordering."""
        group = {"dependencies": [{"name": "b"}, {"name": "B"}]}
        order_group(group)
        assert [d["name"] for d in group["dependencies"]] == ["B", "b"]

    def test_tags_plain_ordering(self):
        """Test that tags use plain string ordering."""
        group = {"tags": ["b", "a", "B"]}
        order_group(group)
        assert group["tags"] == ["B", "a", "b"]

    def test_non_list_fields_untouched(self):
        """Test that absent and non-list collections are left alone."""
        group = {"items": {"name": "x"}, "tags": "b,a"}
        order_group(group)
        assert group == {"items": {"name": "x"}, "tags": "b,a"}

    def test_non_mapping_group(self):
        """Test that non-mapping groups are returned unchanged."""
        assert order_group(["not", "a", "group"]) == ["not", "a", "group"]


class TestOrderGroups:
    """Test top-level group ordering."""

    def test_by_domain_class_then_id(self):
        """Test ordering by (domainClass, id)."""
        groups = [
            {"domainClass": "B", "id": "1"},
            {"domainClass": "A", "id": "2"},
            {"domainClass": "A", "id": "1"},
            {"id": "9"},
        ]
        result = order_groups(groups)
        assert [(g.get("domainClass"), g["id"]) for g in result] == [
            (None, "9"), ("A", "1"), ("A", "2"), ("B", "1"),
        ]

    def test_nested_collections_ordered(self):
        """Test that per-group ordering runs for every group."""
        groups = [{"id": "b", "tags": ["y", "x"]}, {"id": "a", "tags": ["d", "c"]}]
        result = order_groups(groups)
        assert [g["tags"] for g in result] == [["c", "d"], ["x", "y"]]
