from pathlib import Path
import pytest
from textindex.engine import Engine
from textindex.models import VocabularyRecord

PHONES = [
    VocabularyRecord("iPhone 14", "Apple"),
    VocabularyRecord("iPhone 15", "Apple"),
    VocabularyRecord("Galaxy S21", "Samsung"),
]

def _seed_csv(tmp: Path) -> str:
    p = tmp / "phones.csv"
    p.write_text(
        "model,company\n"
        "iPhone 14,Apple\n"
        "iPhone 15,Apple\n"
        "Galaxy S21,Samsung\n",
        encoding="utf-8",
    )
    return str(p)

@pytest.mark.e2e
def test_spellcheck_scenario_from_csv(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(db_dsn=f"csv:///{_seed_csv(tmp_path)}")
        assert eng.word_exists("iPhone 14")          # normalized before lookup
        assert not eng.word_exists("iphone")
        assert set(eng.suggest_words("iphone")) == {"iPhone 14", "iPhone 15"}
        res = eng.spell_check("Iphone")
        assert res["term"] == "iphone" and res["exists"] is False
        assert "Galaxy S21" not in res["suggestions"]
        assert eng.spell_check("samsung") == {"term": "samsung", "exists": True, "suggestions": []}
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_add_record_and_reload():
    eng = Engine()
    try:
        eng.build(records=PHONES)
        eng.add_record(VocabularyRecord("Pixel 8", "Google"))
        assert eng.word_exists("google")
        eng.reload()
        assert eng.word_exists("pixel 8")
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_autocomplete_insert_and_store_backed_completion():
    eng = Engine()
    try:
        eng.build(records=PHONES)
        eng.insert_autocomplete_word("Galaxy Note")
        assert eng.autocomplete_suggestions("gal") == ["galaxy note"]
        # pulls "Galaxy S21" out of the store into the tree
        assert eng.complete_word("GAL") == ["galaxy note", "galaxy s21"]
        assert eng.autocomplete_suggestions("galaxy s") == ["galaxy s21"]
        assert eng.complete_word("ip") == ["iphone 14", "iphone 15"]
        assert eng.complete_word("  ") == []
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_database_word_count_and_ranking():
    eng = Engine()
    try:
        eng.build(records=PHONES + [VocabularyRecord("Galaxy A5", "Samsung")])
        assert eng.database_word_count("IPHONE") == 2
        assert eng.database_word_count("samsung") == 2
        # apple x2, "galaxy s21" 2, "galaxy a5" 3, samsung x2
        assert eng.database_word_count("a") == 9
        assert eng.database_word_count("") == 0

        ranked = [r.name for r in eng.rank_records("a")]
        assert ranked == ["Galaxy A5", "Galaxy S21", "iPhone 14", "iPhone 15"]
        assert eng.rank_records("xyz") == []
        assert eng.frequencies.get("a") == 1
    finally:
        eng.shutdown()
