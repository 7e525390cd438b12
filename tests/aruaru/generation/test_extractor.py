import pytest

from aruaru.generation.extractor import (
    clean_line,
    extract,
    parse_lenient,
    parse_response,
    parse_strict,
)


def test_strict_json_array_keeps_every_element_in_order():
    raw = '["Aしがち","Bしがち","Cしがち","Dしがち"]'

    outcome = parse_response(raw)

    assert outcome.mode == "strict"
    assert outcome.candidates == ("Aしがち", "Bしがち", "Cしがち", "Dしがち")


def test_strict_accepts_short_items_without_length_filter():
    assert extract('["a", "b", "c"]') == ["a", "b", "c"]


def test_strict_non_string_elements_become_json_text():
    assert parse_strict('["x", 1, {"k": "値"}]') == ["x", "1", '{"k": "値"}']


@pytest.mark.parametrize("raw", ['{"texts": ["a"]}', '"just a string"', "42", "null"])
def test_strict_rejects_non_array_json(raw):
    assert parse_strict(raw) is None


def test_json_object_falls_back_to_lenient():
    raw = '{"texts": ["a", "b", "c"]}'
    outcome = parse_response(raw)

    assert outcome.mode == "lenient"
    assert outcome.candidates == (raw,)


def test_empty_json_array_is_empty_outcome():
    outcome = parse_response("[]")
    assert outcome.mode == "empty"
    assert outcome.candidates == ()


@pytest.mark.parametrize("raw", [None, "", "   \n\n  "])
def test_missing_or_blank_response_yields_nothing(raw):
    outcome = parse_response(raw)
    assert outcome.mode == "empty"
    assert extract(raw) == []


def test_lenient_strips_numbering_and_quotes():
    raw = (
        "1. 「深夜のコンビニで店員が宇宙人と交代しがち」\n"
        "2) 『午前3時に冷蔵庫が哲学を語り出しがち』\n"
        '3. "月曜の朝に目覚まし時計が休暇を申請しがち"\n'
    )

    outcome = parse_response(raw)

    assert outcome.mode == "lenient"
    assert outcome.candidates == (
        "深夜のコンビニで店員が宇宙人と交代しがち",
        "午前3時に冷蔵庫が哲学を語り出しがち",
        "月曜の朝に目覚まし時計が休暇を申請しがち",
    )


def test_lenient_keeps_first_three_of_four():
    raw = "\n".join(
        [
            "深夜の駅前で信号機が盆踊りを始めがち",
            "午前2時のファミレスでパフェが自己紹介しがち",
            "夜中の公園で滑り台が逆走しがち",
            "丑三つ時の台所で鍋が歌い出しがち",
        ]
    )

    assert extract(raw) == [
        "深夜の駅前で信号機が盆踊りを始めがち",
        "午前2時のファミレスでパフェが自己紹介しがち",
        "夜中の公園で滑り台が逆走しがち",
    ]


def test_lenient_drops_short_fragments_and_blank_lines():
    raw = "以下です：\n\n1. 短い\n2. 昼休みの屋上で弁当箱が会議を開きがち\n]\n"
    assert parse_lenient(raw) == ["昼休みの屋上で弁当箱が会議を開きがち"]


def test_lenient_length_boundary_is_eleven_characters():
    ten = "あいうえおかきくけこ"
    eleven = ten + "さ"
    assert parse_lenient(f"{ten}\n{eleven}") == [eleven]


def test_clean_line_strips_only_one_bracket_each_side():
    assert clean_line("「「二重かっこのあるあるしがち」」") == "「二重かっこのあるあるしがち」"
    assert clean_line("  12． 全角ピリオドの番号付きあるある  ") == "全角ピリオドの番号付きあるある"


def test_extraction_is_repeatable():
    raw = "1. 深夜のコンビニでおでんが踊りがち\n2. 朝の電車で吊り革が歌いがち\n"
    assert parse_response(raw) == parse_response(raw)
    assert extract(raw) == extract(raw)
