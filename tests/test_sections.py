import pytest

from drills.sections import Section, main, section_title


@pytest.mark.parametrize(
    "name,title",
    [
        ("arrays", "Array Folder"),
        ("STRINGS", "Strings Problems"),
        ("oops", "OOPs Section"),
        ("linked-list", "LinkedList"),
        ("linked list", "LinkedList"),
        ("tries", "tries"),
        ("strings_hard", "Strings Hard"),
    ],
)
def test_section_title_by_name(name, title):
    assert section_title(name) == title


def test_section_title_accepts_member():
    assert section_title(Section.GRAPHS) == "Graphs"


def test_every_member_round_trips_through_its_name():
    for member in Section:
        assert section_title(member.name.lower()) == member.value


def test_unknown_section_raises():
    with pytest.raises(ValueError):
        section_title("quantum")


def test_main_prints_without_newline(capsys):
    assert main(["heaps"]) == 0
    assert capsys.readouterr().out == "Heaps"


def test_main_default(capsys):
    main([])
    assert capsys.readouterr().out == "Array Folder"


def test_main_rejects_unknown_section():
    with pytest.raises(SystemExit):
        main(["nowhere"])