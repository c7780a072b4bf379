import json

from core.hadith import DEFAULT_COLLECTIONS, load_collection_store


def write_collection(directory, name: str, payload) -> None:
    path = directory / f"{name}.json"
    if isinstance(payload, str):
        path.write_text(payload, encoding="utf-8")
    else:
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def test_collection_file_is_loaded(tmp_path):
    write_collection(
        tmp_path,
        "bukhari",
        {
            "metadata": {"length": 2},
            "chapters": [{"id": 1, "english": "Revelation", "arabic": "الوحي"}],
            "hadiths": [
                {
                    "id": 1,
                    "idInBook": 1,
                    "chapterId": 1,
                    "bookId": 1,
                    "arabic": "إنما الأعمال بالنيات",
                    "english": {"narrator": "Umar", "text": "Actions are by intentions"},
                },
                {
                    "id": 2,
                    "idInBook": "2",
                    "chapterId": 1,
                    "bookId": 1,
                    "english": "Plain english text",
                    "grade": "Hasan",
                },
            ],
        },
    )

    store = load_collection_store(tmp_path)

    first, second = store.get_hadiths("bukhari", 1, 1, 10).items
    assert first.english == "Actions are by intentions"
    assert first.narrator == "Umar"
    assert first.grade == "Sahih"
    assert second.hadith_number == 2
    assert second.english == "Plain english text"
    assert second.grade == "Hasan"

    book = store.get_book("bukhari", 1)
    assert book.title == "Revelation"
    assert book.hadith_count == 2
    assert store.get_collection("bukhari").hadith_count == 2


def test_bad_numeric_fields_default_to_zero(tmp_path):
    write_collection(
        tmp_path,
        "muslim",
        {"chapters": [], "hadiths": [{"id": "x", "chapterId": None, "english": None}]},
    )

    store = load_collection_store(tmp_path)

    (hadith,) = store.get_hadiths("muslim", 0, 1, 10).items
    assert hadith.hadith_number == 0
    assert hadith.chapter_id == 0
    assert hadith.english == ""


def test_unreadable_file_is_skipped(tmp_path, caplog):
    write_collection(tmp_path, "bukhari", "{not json")
    write_collection(tmp_path, "muslim", {"hadiths": [{"id": 1, "chapterId": 4}]})

    store = load_collection_store(tmp_path)

    assert store.get_hadiths("bukhari", 0, 1, 10).total == 0
    assert store.get_hadiths("muslim", 0, 1, 10).total == 1
    assert [c.name for c in store.get_collections()] == [c.name for c in DEFAULT_COLLECTIONS]
    assert any("Skipping unreadable collection file" in r.getMessage() for r in caplog.records)


def test_missing_directory_gives_metadata_only_store(tmp_path):
    store = load_collection_store(tmp_path / "missing")

    assert len(store.get_collections()) == len(DEFAULT_COLLECTIONS)
    assert store.stats()["hadiths"] == 0
    assert load_collection_store(None).stats()["collections"] == len(DEFAULT_COLLECTIONS)


def test_malformed_records_cost_only_themselves(tmp_path, caplog):
    write_collection(
        tmp_path,
        "bukhari",
        {
            "chapters": [None, {"id": 1, "english": "Revelation"}],
            "hadiths": [
                {"idInBook": 1, "chapterId": 1, "english": {"text": "Good record"}},
                {"idInBook": 2, "chapterId": 1, "english": 5},
                None,
                "not a record",
            ],
        },
    )

    store = load_collection_store(tmp_path)

    first, second = store.get_hadiths("bukhari", 1, 1, 10).items
    assert first.english == "Good record"
    assert second.hadith_number == 2
    assert second.english == ""
    assert store.stats()["books"] == 1
    skipped = [r for r in caplog.records if r.getMessage() == "Skipping malformed record"]
    assert [(r.kind, r.position) for r in skipped] == [("chapter", 0), ("hadith", 2), ("hadith", 3)]
