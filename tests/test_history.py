from edhighway.history import clean_string_list, extract_system_jumps, find_row, update_recent


def test_clean_string_list_drops_blank_entries():
    assert clean_string_list(["Sol", "", "  ", "Colonia"]) == ["Sol", "Colonia"]


def test_clean_string_list_keeps_original_text():
    assert clean_string_list([" Sol "]) == [" Sol "]


def test_update_recent_appends_trimmed_value():
    assert update_recent(["Sol"], "  Colonia ", 5) == ["Sol", "Colonia"]


def test_update_recent_ignores_blank_value():
    assert update_recent(["Sol"], "   ", 5) == ["Sol"]


def test_update_recent_moves_repeated_value_to_end():
    assert update_recent(["Sol", "Colonia", "Achenar"], "Sol", 5) == [
        "Colonia",
        "Achenar",
        "Sol",
    ]


def test_update_recent_respects_limit():
    result = update_recent(["a", "b", "c"], "d", 2)
    assert result == ["c", "d"]
    assert len(result) <= 2


def test_update_recent_trims_when_limit_lowered_and_value_blank():
    assert update_recent(["a", "b", "c"], "", 1) == ["c"]


def test_update_recent_does_not_mutate_input():
    items = ["Sol"]
    update_recent(items, "Colonia", 5)
    assert items == ["Sol"]


def test_update_recent_has_no_duplicates():
    result = update_recent(["a", "b", "a", "c"], "b", 10)
    assert len(result) == len(set(result))
    assert result[-1] == "b"


def test_extract_system_jumps_present():
    jumps = [{"system": "Sol"}, {"system": "Colonia"}]
    assert extract_system_jumps({"system_jumps": jumps, "distance": 1}) == jumps


def test_extract_system_jumps_missing():
    assert extract_system_jumps({"distance": 1}) == []
    assert extract_system_jumps(None) == []


def test_find_row_locates_system():
    rows = [{"system": "Sol"}, {"system": "Colonia"}]
    assert find_row(rows, "Colonia") == 1


def test_find_row_missing_or_empty():
    rows = [{"system": "Sol"}]
    assert find_row(rows, "Achenar") is None
    assert find_row(rows, "") is None


def test_find_row_round_trip_with_extracted_jumps():
    result = {"system_jumps": [{"system": "Sol"}, {"system": "Beagle Point"}]}
    rows = extract_system_jumps(result)
    index = find_row(rows, "Beagle Point")
    assert rows[index]["system"] == "Beagle Point"