import pytest

from exercise_catalog.csv_parser import (
    FormatError,
    parse_catalog,
    split_by_semicolons,
    split_csv_row,
    split_lines,
    split_top_level_comma,
)
from exercise_catalog.models import Exercise, Target

HEADER = "Name,MuscleGroup,SubregionPairs"
BENCH = (
    'Bench Press,Chest,"Chest,Mid Chest (Sternal Pectoralis Major); '
    'Shoulder,Front Delts (Anterior Deltoid); Triceps,Lateral Head (Caput Laterale)"'
)


def test_header_accepted() -> None:
    assert parse_catalog(HEADER) == []


def test_header_is_case_insensitive_and_prefix_matched() -> None:
    exercises = parse_catalog("NAME,musclegroup,SubRegionList\nSquat,Legs,")
    assert [e.name for e in exercises] == ["Squat"]


@pytest.mark.parametrize(
    "header",
    ["Foo,Bar,Baz", "Name,MuscleGroup", "Name,Group,SubregionPairs", "Title,MuscleGroup,SubregionPairs"],
)
def test_bad_header_raises(header: str) -> None:
    with pytest.raises(FormatError, match="Name,MuscleGroup,SubregionPairs"):
        parse_catalog(f"{header}\n{BENCH}")


def test_format_error_is_value_error() -> None:
    assert issubclass(FormatError, ValueError)


def test_leading_blank_lines_before_header() -> None:
    exercises = parse_catalog(f"\n   \n{HEADER}\n{BENCH}\n")
    assert len(exercises) == 1


def test_empty_input_yields_no_records() -> None:
    assert parse_catalog("") == []
    assert parse_catalog("\n \r\n") == []


def test_quoted_field_with_escaped_quotes() -> None:
    assert split_csv_row('"He said ""hi"""') == ['He said "hi"']


def test_split_csv_row_trims_and_respects_quotes() -> None:
    assert split_csv_row(' a , "b,c" ,d ') == ["a", "b,c", "d"]
    assert split_csv_row("a,,") == ["a", "", ""]


def test_split_lines_handles_all_line_breaks() -> None:
    assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]


def test_split_by_semicolons_drops_blank_items() -> None:
    assert split_by_semicolons("a,b; ;c,d;") == ["a,b", "c,d"]
    assert split_by_semicolons('"x;y",z; w,v') == ["x;y,z", "w,v"]


def test_split_top_level_comma_keeps_remainder_verbatim() -> None:
    assert split_top_level_comma("Chest,Upper, inner") == ["Chest", "Upper, inner"]
    assert split_top_level_comma('"A,B",C') == ["A,B", "C"]
    assert split_top_level_comma("NoComma") == ["NoComma"]


def test_multi_target_decode() -> None:
    exercises = parse_catalog(f"{HEADER}\n{BENCH}")
    assert exercises == [
        Exercise(
            name="Bench Press",
            targets=[
                Target("Chest", "Mid Chest (Sternal Pectoralis Major)"),
                Target("Shoulder", "Front Delts (Anterior Deltoid)"),
                Target("Triceps", "Lateral Head (Caput Laterale)"),
            ],
        )
    ]


def test_fallback_to_primary_group() -> None:
    exercises = parse_catalog(f"{HEADER}\nSquat,Legs,")
    assert len(exercises) == 1
    assert exercises[0].targets == (Target("Legs", ""),)


def test_fallback_when_no_pair_has_a_comma() -> None:
    exercises = parse_catalog(f'{HEADER}\nPlank,Abs,"Core; Abs"')
    assert exercises[0].targets == (Target("Abs", ""),)


def test_malformed_pair_is_ignored_but_row_kept() -> None:
    exercises = parse_catalog(f'{HEADER}\nRow,Back,"Back,Lats; Broken; Biceps,Long Head"')
    assert exercises[0].targets == (Target("Back", "Lats"), Target("Biceps", "Long Head"))


def test_record_without_any_group() -> None:
    exercises = parse_catalog(f"{HEADER}\nMystery,,")
    assert exercises == [Exercise(name="Mystery", targets=())]


def test_short_rows_are_skipped() -> None:
    text = f"{HEADER}\nOnlyOneField\nTwo,Fields\n{BENCH}\n\n"
    exercises = parse_catalog(text)
    assert [e.name for e in exercises] == ["Bench Press"]


def test_row_order_preserved() -> None:
    text = f"{HEADER}\nZeus Press,Chest,\nAlpha Curl,Biceps,\r\nMid Row,Back,"
    assert [e.name for e in parse_catalog(text)] == ["Zeus Press", "Alpha Curl", "Mid Row"]


def test_duplicate_groups_are_not_deduplicated() -> None:
    exercises = parse_catalog(f'{HEADER}\nCable Fly,Chest,"Chest,Mid; Chest,Lower"')
    assert [t.group for t in exercises[0].targets] == ["Chest", "Chest"]
    assert exercises[0].groups == ["Chest"]
