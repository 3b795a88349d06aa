from conftest import entry

from vyvu.domain.entities.category import Category
from vyvu.domain.entities.vocabulary_entry import VocabularyEntry
from vyvu.domain.services.catalog_normalizer import merge_entries
from vyvu.domain.text_normalizer import surface_key
from vyvu.domain.value_objects.example_sentence import ExampleSentence


def test_distinct_entries_pass_through_in_order() -> None:
    entries = [entry("ich", "tôi", id="a"), entry("du", "bạn", id="b")]
    assert merge_entries(entries) == entries


def test_shared_source_form_merges_into_first() -> None:
    first = entry("groß", "to", id="a", category=Category.ADJECTIVES)
    second = entry("Groß", "lớn", target_alternates=("to lớn",), id="b", category=Category.OTHER)

    [merged] = merge_entries([first, second])

    assert merged.id == "a"
    assert merged.source_canonical == "groß"
    assert merged.source_alternates == ()
    assert merged.target_canonical == "to"
    assert merged.target_alternates == ("lớn", "to lớn")
    assert merged.category is Category.ADJECTIVES


def test_shared_target_form_merges() -> None:
    first = entry("sprechen", "nói", id="a")
    second = entry("reden", "nói", id="b")

    [merged] = merge_entries([first, second])

    assert merged.all_source_forms == ("sprechen", "reden")
    assert merged.all_target_forms == ("nói",)


def test_tone_marks_keep_words_apart() -> None:
    entries = [entry("nur", "chỉ", id="a"), entry("Faden", "chỉ may", id="b"), entry("X", "chi", id="c")]
    assert [e.id for e in merge_entries(entries)] == ["a", "b", "c"]


def test_example_adopted_only_when_first_has_none() -> None:
    sentence = ExampleSentence("b", "Ich esse.", "Tôi ăn.")
    first = entry("essen", "ăn", id="a")
    second = VocabularyEntry.create(source="essen", target="ăn cơm", id="b", example=sentence)

    [merged] = merge_entries([first, second])
    assert merged.example == sentence

    other = ExampleSentence("c", "Wir essen.", "Chúng tôi ăn.")
    third = VocabularyEntry.create(source="Essen", target="ăn", id="c", example=other)
    [merged_again] = merge_entries([second, third])
    assert merged_again.example == sentence


def test_bridge_entry_merges_into_earliest_without_stealing_forms() -> None:
    a = entry("Haus", "nhà", id="a")
    b = entry("Gebäude", "tòa nhà", id="b")
    bridge = entry("haus", "tòa nhà", target_alternates=("căn nhà",), id="c")

    merged = merge_entries([a, b, bridge])

    assert [e.id for e in merged] == ["a", "b"]
    assert merged[0].all_target_forms == ("nhà", "căn nhà")
    assert merged[1].all_target_forms == ("tòa nhà",)


def test_every_surface_form_belongs_to_one_entry() -> None:
    entries = [
        entry("ich", "tôi", target_alternates=("tớ",), id="1"),
        entry("Ich", "tao", id="2"),
        entry("mich", "tao", target_alternates=("tôi",), id="3"),
        entry("du", "bạn", id="4"),
        entry("dich", "bạn", target_alternates=("cậu",), id="5"),
    ]

    merged = merge_entries(entries)

    owners: dict[str, str] = {}
    for e in merged:
        for form in (*e.all_source_forms, *e.all_target_forms):
            key = surface_key(form)
            assert owners.setdefault(key, e.id) == e.id
    assert [e.id for e in merged] == ["1", "4"]


def test_merge_is_deterministic_and_does_not_mutate() -> None:
    entries = [entry("ich", "tôi", id="1"), entry("ich", "tớ", id="2")]
    snapshot = list(entries)

    assert merge_entries(entries) == merge_entries(entries)
    assert entries == snapshot
    assert entries[0].target_alternates == ()


def test_empty_input() -> None:
    assert merge_entries([]) == []
