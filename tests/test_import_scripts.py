from scripts.import_marks import import_marks
from scripts.import_students import import_students
from scripts.import_subjects import import_subjects
from services.results import compute_stats


def write_csv(path, text):
    path.write_text(text, encoding="utf-8-sig")
    return str(path)


def test_import_students_skips_duplicates(db, tmp_path):
    csv_path = write_csv(tmp_path / "students.csv", "name,roll_number\nAsha,R001\nBilal,R002\nCopy,R001\n")
    assert import_students(db, csv_path) == 2


def test_import_all(db, store, tmp_path):
    import_subjects(db, write_csv(
        tmp_path / "subjects.csv",
        "name,max_marks,passing_marks\nMath,100,35\nScience,,\nBroken,abc,1\n",
    ))
    import_students(db, write_csv(tmp_path / "students.csv", "name,roll_number\nAsha,R001\nBilal,R002\n"))
    saved = import_marks(db, write_csv(
        tmp_path / "marks.csv",
        "roll_number,subject,marks_obtained\n"
        "R001,Math,80\n"
        "R001,Science,40\n"
        "R002,Math,10\n"
        "R002,Math,20\n"
        "R009,Math,50\n"
        "R002,Science,500\n",
    ))

    assert saved == 4
    assert [s.name for s in store.list_subjects()] == ["Math", "Science"]
    assert store.list_subjects()[1].max_marks == 100
    stats = compute_stats(store.list_students(), store.list_marks(), store.list_subjects())
    assert stats.pass_rate == 50
    assert stats.avg_percentage == 40


def test_short_rows_are_skipped(db, store, tmp_path):
    added = import_students(db, write_csv(tmp_path / "students.csv", "name,roll_number\nAsha\nBilal,R002\n"))
    assert added == 1
    assert [s.roll_number for s in store.list_students()] == ["R002"]

    import_subjects(db, write_csv(tmp_path / "subjects.csv", "name,max_marks,passing_marks\nMath\n\n"))
    saved = import_marks(db, write_csv(
        tmp_path / "marks.csv",
        "roll_number,subject,marks_obtained\nR002,Math\nR002\nR002,Math,50\n",
    ))
    assert saved == 1
    assert [m.marks_obtained for m in store.list_marks()] == [50]
