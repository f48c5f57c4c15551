"""Tests for the token trie."""

from __future__ import annotations

from keyward.processor.trie import Node, Trie, exact_key, folded_key


class TestInsert:
    def test_new_keyword_counts(self) -> None:
        trie = Trie()
        assert trie.insert(["hello"], "hello") is True
        assert trie.insert(["hello", " ", "world"], "hello world") is True
        assert len(trie) == 2

    def test_reinsert_overwrites_without_counting(self) -> None:
        trie = Trie()
        trie.insert(["love"], "like")
        assert trie.insert(["love"], "adore") is False
        assert len(trie) == 1
        assert trie.lookup(["love"]) == "adore"

    def test_prefix_node_becomes_terminal(self) -> None:
        """Inserting a prefix of an existing keyword marks the inner node."""
        trie = Trie()
        trie.insert(["a", " ", "b"], "ab")
        assert trie.lookup(["a"]) is None
        assert trie.insert(["a"], "a") is True
        assert len(trie) == 2
        assert trie.lookup(["a"]) == "a"

    def test_empty_path_is_noop(self) -> None:
        trie = Trie()
        assert trie.insert([], "anything") is False
        assert len(trie) == 0
        assert trie.root == Node()

    def test_empty_clean_word_is_terminal(self) -> None:
        trie = Trie()
        assert trie.insert(["drop"], "") is True
        assert len(trie) == 1
        assert trie.lookup(["drop"]) == ""

    def test_count_is_keywords_not_nodes(self) -> None:
        trie = Trie()
        trie.insert(["a", " ", "b", " ", "c"], "abc")
        assert len(trie) == 1


class TestCasePolicy:
    def test_case_sensitive_keys_exact(self) -> None:
        trie = Trie(case_sensitive=True)
        trie.insert(["Rust"], "Rust")
        assert trie.child(trie.root, "Rust") is not None
        assert trie.child(trie.root, "RUST") is None

    def test_case_insensitive_keys_folded(self) -> None:
        trie = Trie(case_sensitive=False)
        trie.insert(["Rust"], "Rust")
        node = trie.child(trie.root, "rUsT")
        assert node is not None
        # Folding affects lookup only, not the stored value.
        assert node.clean_word == "Rust"

    def test_unicode_case_folding(self) -> None:
        trie = Trie(case_sensitive=False)
        trie.insert(["Maße"], "Maße")
        assert trie.lookup(["MASSE"]) == "Maße"
        assert trie.lookup(["masse"]) == "Maße"

    def test_same_keyword_different_case_is_one_keyword(self) -> None:
        trie = Trie(case_sensitive=False)
        trie.insert(["Rust"], "Rust")
        trie.insert(["RUST"], "RUST")
        assert len(trie) == 1
        assert trie.lookup(["rust"]) == "RUST"

    def test_key_functions(self) -> None:
        assert exact_key("ABC") == "ABC"
        assert folded_key("ABC") == "abc"
        assert folded_key("ß") == "ss"


class TestLookupAndWalk:
    def test_lookup_missing(self) -> None:
        trie = Trie()
        trie.insert(["a"], "a")
        assert trie.lookup(["b"]) is None
        assert trie.lookup([]) is None

    def test_iter_keywords(self) -> None:
        trie = Trie()
        trie.insert(["a"], "A")
        trie.insert(["a", " ", "b"], "AB")
        trie.insert(["c"], "C")
        found = dict(trie.iter_keywords())
        assert found == {("a",): "A", ("a", " ", "b"): "AB", ("c",): "C"}

    def test_equality(self) -> None:
        left, right = Trie(), Trie()
        for trie in (left, right):
            trie.insert(["x", " ", "y"], "xy")
        assert left == right
        right.insert(["z"], "z")
        assert left != right

    def test_case_policy_part_of_equality(self) -> None:
        assert Trie(case_sensitive=True) != Trie(case_sensitive=False)
