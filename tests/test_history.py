import pytest

from compass_helpers import history
from compass_helpers.models import AnalysisData, College, StudentAnalysis

from conftest import COLLEGES, STUDENT_ANALYSIS


@pytest.fixture
def data():
    return AnalysisData(
        analysis=StudentAnalysis.from_dict(STUDENT_ANALYSIS),
        colleges=[College.from_dict(c) for c in COLLEGES],
        file_name="scores.pdf",
    )


def test_save_and_load(tmp_path, data):
    record = history.save_analysis(data, data_dir=tmp_path)

    assert len(record.id) == 32
    assert record.timestamp > 0
    assert (tmp_path / f"analysis_{record.id}.json").exists()

    loaded = history.load_analysis(record.id, data_dir=tmp_path)
    assert loaded == record
    assert loaded.colleges[0].scholarships[0].name == "Lester B. Pearson Scholarship"


def test_save_creates_data_dir(tmp_path, data):
    target = tmp_path / "nested" / "data"
    history.save_analysis(data, data_dir=target)
    assert len(history.list_analyses(target)) == 1


def test_list_is_newest_first_and_skips_bad_files(tmp_path, data, monkeypatch):
    times = iter([1000, 2000])
    monkeypatch.setattr(history, "_now_ms", lambda: next(times))
    older = history.save_analysis(data, data_dir=tmp_path)
    newer = history.save_analysis(data, data_dir=tmp_path)
    (tmp_path / "analysis_broken.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "analysis_list.json").write_text("[]", encoding="utf-8")
    (tmp_path / "analysis_stamp.json").write_text('{"timestamp": [1]}', encoding="utf-8")

    records = history.list_analyses(tmp_path)
    assert [r.id for r in records] == [newer.id, older.id]


def test_load_missing_raises_key_error(tmp_path):
    with pytest.raises(KeyError):
        history.load_analysis("0" * 32, data_dir=tmp_path)
    with pytest.raises(KeyError):
        history.load_analysis("../etc/passwd", data_dir=tmp_path)


def test_delete(tmp_path, data):
    record = history.save_analysis(data, data_dir=tmp_path)
    assert history.delete_analysis(record.id, data_dir=tmp_path) is True
    assert history.delete_analysis(record.id, data_dir=tmp_path) is False
    assert history.delete_analysis("not-an-id", data_dir=tmp_path) is False
    assert history.list_analyses(tmp_path) == []


@pytest.mark.parametrize("text, expected", [
    ("$45,000 per year", 45000.0),
    ("CA$61,720", 61720.0),
    ("£9,250", 9250.0),
    ("$50k", 50000.0),
    ("Free for EU students", None),
    ("", None),
    (None, None),
])
def test_parse_amount(text, expected):
    assert history.parse_amount(text) == expected
