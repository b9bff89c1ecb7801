import pytest

from contacts_csv.mapping import RowTooShort, map_row, split_group_last_name
from contacts_csv.rules import NUM_OUTPUT_COLUMNS


def test_split_group_and_last_name():
    assert split_group_last_name("ПМ-35 ПОНОМАРЕВ") == ("ПМ-35", "ПОНОМАРЕВ")


def test_split_without_space_is_last_name_only():
    assert split_group_last_name("Иванов") == ("", "Иванов")


def test_split_empty():
    assert split_group_last_name("") == ("", "")


def test_split_skips_run_of_spaces():
    assert split_group_last_name("ПМ-35   Петров Сидоров") == ("ПМ-35", "Петров Сидоров")


def test_split_leading_space_means_no_group():
    assert split_group_last_name(" Петров") == ("", "Петров")


def test_split_trailing_spaces_only():
    assert split_group_last_name("ПМ-35   ") == ("ПМ-35", "")


def test_map_row_end_to_end():
    fields = ["", "Role", "Ivan", "ГР-1 Petrov", "login@x.com", "new@x.com", "+79990000000"]
    out = map_row(fields, "2024")

    assert len(out) == NUM_OUTPUT_COLUMNS == 23
    assert out[0] == "Ivan"
    assert out[2] == "ГР-1 Petrov"
    assert out[16] == "2024"
    # provisioned mailbox first, login address second
    assert out[18] == "new@x.com"
    assert out[20] == "login@x.com"
    assert out[22] == "+79990000000"

    filled = {0, 2, 16, 18, 20, 22}
    assert all(out[i] == "" for i in range(23) if i not in filled)


def test_map_row_without_group():
    fields = ["", "", "Anna", "Smirnova", "", "", ""]
    out = map_row(fields, "")
    assert out[2] == "Smirnova"
    assert out[16] == ""


def test_map_row_ignores_extra_fields():
    fields = ["t", "r", "A", "G B", "l", "c", "p", "extra", "more"]
    out = map_row(fields, "x")
    assert len(out) == 23
    assert "extra" not in out


def test_map_row_rejects_short_rows():
    with pytest.raises(RowTooShort) as exc:
        map_row(["a", "b", "c", "d", "e"], "x")
    assert exc.value.found == 5
