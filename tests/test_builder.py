"""
HueMatch — Reference builder and vocabulary tests
"""

import json

import numpy as np
import pytest

from huematch.builder import build, build_and_save
from huematch.errors import BuildError
from huematch.reference_store import Color, ReferenceStore
from huematch.resolver import Resolver
from huematch.vocabulary import DEFAULT_VOCABULARY, load_vocabulary

from .conftest import BLUE, FAKE_DIM, RED, TEAL, FakeProvider, word_vector

VOCAB = [("love", RED), ("sad", BLUE), ("calm", TEAL)]


class TestBuild:
    def test_one_entry_per_word_in_order(self, provider):
        store = build(VOCAB, provider)
        assert len(store) == 3
        assert store.dimensions == FAKE_DIM
        assert [e.color for e in store] == [RED, BLUE, TEAL]
        assert provider.calls == ["love", "sad", "calm"]

    def test_uses_same_embedding_path_as_resolver(self, provider):
        store = build(VOCAB, provider)
        np.testing.assert_array_equal(np.array(store[0].embedding), word_vector("love").astype(np.float64))
        assert Resolver(provider, store).resolve("love") == RED

    def test_multi_word_phrases_are_mean_pooled(self, provider):
        store = build([("deep sea", BLUE)], provider)
        expected = (word_vector("deep").astype(np.float64) + word_vector("sea").astype(np.float64)) / 2
        np.testing.assert_allclose(np.array(store[0].embedding), expected, rtol=1e-12, atol=1e-12)

    def test_duplicates_are_kept_as_distinct_entries(self, provider):
        store = build([("flower", Color(255, 180, 180)), ("flower", Color(249, 213, 229))], provider)
        assert len(store) == 2
        assert store[0].embedding == store[1].embedding
        # identical embeddings: the first one wins every match
        assert Resolver(provider, store).resolve("flower") == Color(255, 180, 180)

    def test_failure_aborts_whole_build(self):
        provider = FakeProvider(fail_on=("sad",))
        with pytest.raises(BuildError, match="'sad'"):
            build(VOCAB, provider)
        # fail-fast: nothing after the failing word is embedded
        assert provider.calls == ["love", "sad"]

    def test_zero_token_word_aborts_build(self, provider):
        with pytest.raises(BuildError, match="zero token"):
            build([("love", RED), ("  ", BLUE)], provider)

    def test_empty_vocabulary_rejected(self, provider):
        with pytest.raises(BuildError, match="empty"):
            build([], provider)

    def test_inconsistent_dimensions_rejected(self):
        class ShiftingProvider:
            dimensions = 2

            def __init__(self):
                self.n = 1

            def embed(self, text):
                self.n += 1
                return np.ones((1, self.n))

        with pytest.raises(BuildError, match="mixed dimensions"):
            build(VOCAB, ShiftingProvider())


class TestBuildAndSave:
    def test_writes_loadable_store(self, tmp_path, provider):
        path = tmp_path / "custom" / "ref_embeddings.json"
        built = build_and_save(VOCAB, provider, path)
        assert ReferenceStore.load(path, expected_dimensions=FAKE_DIM) == built

    def test_failed_build_writes_nothing(self, tmp_path):
        path = tmp_path / "ref_embeddings.json"
        with pytest.raises(BuildError):
            build_and_save(VOCAB, FakeProvider(fail_on=("calm",)), path)
        assert not path.exists()
        assert list(tmp_path.iterdir()) == []

    def test_non_finite_embedding_writes_nothing(self, tmp_path):
        class NaNProvider:
            dimensions = 2

            def embed(self, text):
                return np.array([[np.nan, 1.0]], dtype=np.float32)

        path = tmp_path / "ref_embeddings.json"
        with pytest.raises(BuildError, match="'x'"):
            build_and_save([("x", RED)], NaNProvider(), path)
        assert list(tmp_path.iterdir()) == []

    def test_failed_build_keeps_previous_store(self, tmp_path, provider):
        path = tmp_path / "ref_embeddings.json"
        previous = build_and_save(VOCAB, provider, path)
        with pytest.raises(BuildError):
            build_and_save([("x", RED)], FakeProvider(fail_on=("x",)), path)
        assert ReferenceStore.load(path) == previous


class TestDefaultVocabulary:
    def test_starts_with_love_red(self):
        assert DEFAULT_VOCABULARY[0] == ("love", Color(255, 0, 0))

    def test_all_entries_are_word_color_pairs(self):
        for word, color in DEFAULT_VOCABULARY:
            assert isinstance(word, str) and word
            assert isinstance(color, Color)

    def test_keeps_duplicate_words(self):
        words = [w for w, _ in DEFAULT_VOCABULARY]
        for dup in ("flower", "gold", "silver", "energy", "freedom"):
            assert words.count(dup) == 2

    def test_duplicate_colors_differ_where_expected(self):
        golds = [c for w, c in DEFAULT_VOCABULARY if w == "gold"]
        assert golds == [Color(255, 215, 0), Color(207, 181, 59)]


class TestLoadVocabulary:
    def test_object_and_pair_entries(self, tmp_path):
        path = tmp_path / "vocab.json"
        path.write_text(
            json.dumps([{"word": "love", "color": [255, 0, 0]}, ["sea", [0, 90, 160]]]),
            encoding="utf-8",
        )
        assert load_vocabulary(path) == [("love", RED), ("sea", Color(0, 90, 160))]

    def test_missing_file(self, tmp_path):
        with pytest.raises(BuildError, match="Cannot read"):
            load_vocabulary(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "vocab.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(BuildError, match="not valid JSON"):
            load_vocabulary(path)

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"love": [255, 0, 0]},
            [["love"]],
            [{"word": "", "color": [1, 2, 3]}],
            [{"word": "love", "color": [1, 2]}],
            [{"word": "love", "color": [1, 2, 300]}],
            [["love", "red"]],
        ],
    )
    def test_malformed_payloads(self, tmp_path, payload):
        path = tmp_path / "vocab.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(BuildError):
            load_vocabulary(path)
