import pytest

from hashoff.prompts import get_yes_or_no, make_file_selection, make_selection_from


def scripted(*answers):
    remaining = list(answers)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        return remaining.pop(0)

    return read_line, prompts


class Output:
    def __init__(self):
        self.parts = []

    def __call__(self, text):
        self.parts.append(text)

    @property
    def text(self):
        return "".join(self.parts)


def test_selection_lists_options_and_returns_index():
    read_line, prompts = scripted("1")
    out = Output()
    assert make_selection_from("Pick:", ["alpha", "beta"], read_line, out) == 1
    assert out.text.startswith("Pick:\n0 alpha\n1 beta\n")
    assert prompts == ["Your choice: "]


def test_selection_reprompts_on_out_of_range():
    read_line, prompts = scripted("5", "-1", "0")
    out = Output()
    assert make_selection_from("Pick:", ["a", "b", "c"], read_line, out) == 0
    assert out.text.count("Please enter a number between 0 and 2") == 2
    assert len(prompts) == 3


def test_selection_reprompts_on_non_integer():
    read_line, _ = scripted("abc", " 1 ")
    out = Output()
    assert make_selection_from("Pick:", ["a", "b"], read_line, out) == 1
    assert "Illegal integer format" in out.text


def test_selection_from_empty_list_raises():
    read_line, _ = scripted()
    with pytest.raises(ValueError):
        make_selection_from("Pick:", [], read_line, Output())


def test_file_selection_filters_by_suffix(tmp_path):
    for name in ("b.txt", "a.txt", "c.dat"):
        (tmp_path / name).write_text("")
    read_line, _ = scripted("1")
    out = Output()
    chosen = make_file_selection(".txt", str(tmp_path), read_line, out)
    assert chosen == f"{tmp_path}/b.txt"
    assert "c.dat" not in out.text
    assert "Please choose a demo file from this list:" in out.text


def test_file_selection_keeps_trailing_slash(tmp_path):
    (tmp_path / "x.txt").write_text("")
    read_line, _ = scripted("0")
    chosen = make_file_selection(".txt", f"{tmp_path}/", read_line, Output())
    assert chosen == f"{tmp_path}/x.txt"


def test_file_selection_with_no_matches_raises(tmp_path):
    (tmp_path / "x.dat").write_text("")
    read_line, _ = scripted()
    with pytest.raises(ValueError):
        make_file_selection(".txt", str(tmp_path), read_line, Output())


@pytest.mark.parametrize(
    ("answer", "expected"),
    [("y", True), ("Yes", True), ("n", False), ("  NO  ", False)],
)
def test_yes_or_no(answer, expected):
    read_line, _ = scripted(answer)
    assert get_yes_or_no("Again?", read_line, Output()) is expected


def test_yes_or_no_reprompts():
    read_line, prompts = scripted("maybe", "", "yep")
    out = Output()
    assert get_yes_or_no("Again?", read_line, out) is True
    assert len(prompts) == 3
    assert out.text.count("starts with 'Y' or 'N'") == 2