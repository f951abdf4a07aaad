import pytest

from app.classify import classify, code_for
from app.collapse import collapse
from app.normalize import normalize
from app.phonetic import encode_words, phonetic_code, phonetic_string


# --- normalize ---

@pytest.mark.parametrize("raw,expected", [
    ("  MÜLLER  ", "muller"),
    ("Philipp", "filipp"),
    ("Strauß", "strauss"),
    ("Çelik", "celik"),
    ("Yvonne", "ifonne"),
    ("Wolfgang Jäger", "folfgang iager"),
    ("Crème Brûlée", "creme brlee"),
    ("Hans-Peter 2", "hanspeter 2"),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_normalize_empty():
    assert normalize("") == ""
    assert normalize(" \t\n ") == ""


@pytest.mark.parametrize("raw", ["Müller-Lüdenscheidt", "Strauß", "Philipp", "Wolfgang Jäger", "José"])
def test_normalize_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_mixed_case_normalizes_like_lowercase():
    assert normalize("MÜLLER") == normalize("müller") == "muller"


# --- classify ---

def test_classify_initial_c():
    assert classify("c") == ["8"]
    assert classify("ca") == ["4", "0"]
    assert classify("cl") == ["4", "5"]
    assert classify("ce") == ["8", "0"]


def test_classify_inner_c():
    assert classify("acl") == ["0", "8", "5"]
    assert classify("ach") == ["0", "4", None]
    assert classify("sch") == ["8", "8", None]
    assert classify("ac") == ["0", "4"]


def test_classify_d_t():
    assert classify("dt") == ["2", "2"]
    assert classify("ds") == ["8", "8"]
    assert classify("tz") == ["8", "8"]


def test_classify_x():
    assert classify("x") == ["4", "8"]
    assert classify("axa") == ["0", "4", "8", "0"]
    assert classify("kxa") == ["4", "8", "0"]


def test_classify_neighbours_are_positional():
    assert classify("t s") == ["2", None, "8"]
    assert classify("s ch") == ["8", None, "4", None]
    assert classify("s1c") == ["8", None, "4"]


def test_code_for_unknown_chars_are_silent():
    assert code_for("h", None, None, 0) == (None,)
    assert code_for("9", "a", "b", 3) == (None,)
    assert code_for(" ", "a", "b", 1) == (None,)


# --- collapse ---

def test_collapse_short():
    assert collapse([]) == []
    assert collapse(["5"]) == []


def test_collapse_pairs_and_zeros():
    assert collapse(["6", "0", "5", "5", "0", "7"]) == ["6", "5"]
    assert collapse(["0", "0", "0", "0"]) == []
    assert collapse([None, None, "8", "1"]) == ["8"]


def test_collapse_long_runs_merge_pairwise():
    assert collapse(["5", "5", "5", "5", "0"]) == ["5", "5"]
    assert collapse(["5", "5", "5", "0"]) == ["5", "5"]
    assert collapse(["5", "5", "0"]) == ["5"]


# --- phonetic_code ---

@pytest.mark.parametrize("word", ["", "   ", "\t", "---", "12 34"])
def test_no_letters_give_empty_code(word):
    assert phonetic_code(word) == []


def test_single_c_is_dropped():
    assert phonetic_code("c") == []


def test_vowels_only():
    assert phonetic_code("aeiou") == []


def test_meier_variants_match():
    codes = {phonetic_string(w) for w in ["Meier", "Maier", "Mayer", "Mayr", "Meyer"]}
    assert codes == {"6"}


@pytest.mark.parametrize("word,expected", [
    ("Müller-Lüdenscheidt", "65752682"),
    ("MÜLLER", "65"),
    ("Wikipedia", "3412"),
    ("Breschnew", "1786"),
    ("Christ", "478"),
    ("Celle", "85"),
    ("Xaver", "483"),
    ("Platz", "158"),
    ("Mercedes", "6782"),
    ("Hans 2", "68"),
])
def test_reference_codes(word, expected):
    assert phonetic_string(word) == expected
    assert phonetic_code(word) == list(expected)


def test_output_alphabet():
    for word in ["Müller-Lüdenscheidt", "Schmidt", "Xaver Quaxi", "Cäcilie", "Zürich 1848"]:
        assert set(phonetic_code(word)) <= set("12345678")


def test_encode_words_keeps_order():
    results = encode_words(["Mayr", "", "Müller"])
    assert [r["word"] for r in results] == ["Mayr", "", "Müller"]
    assert [r["code"] for r in results] == ["6", "", "65"]
    assert results[2]["normalized"] == "muller"
    assert results[2]["digits"] == ["6", "5"]


def test_code_for_keyword_arguments():
    assert code_for("c", prev="s", nxt="h", position=1) == ("8",)
    assert code_for("x", prev=None, nxt="a", position=0) == ("4", "8")
