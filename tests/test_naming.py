from __future__ import annotations

from mockf.naming import NameRegistry, generate_name, name_for_type, split_words, type_words


def test_generate_name_one_word():
    assert generate_name(["reader"], NameRegistry()) == "r"


def test_generate_name_same_letter():
    assert generate_name(["request"], NameRegistry(("r",))) == "re"


def test_generate_name_whole_word():
    assert generate_name(["request"], NameRegistry(("r",)), 10) == "request"


def test_generate_name_two_words():
    assert generate_name(["response", "writer"], NameRegistry()) == "rw"


def test_generate_name_skips_receiver_and_keywords():
    assert generate_name(["Func"], NameRegistry()) == "fu"
    # "g" is taken, "go" is a keyword and the word is exhausted.
    assert generate_name(["Go"], NameRegistry(("g",))) == "go2"


def test_split_words():
    assert split_words("ResponseWriter") == ["Response", "Writer"]
    assert split_words("HTTPServer") == ["HTTP", "Server"]
    assert split_words("ID2Name") == ["ID", "2", "Name"]
    assert split_words("reader") == ["reader"]


def test_type_words_uses_bare_type_name():
    assert type_words("http.ResponseWriter") == ["Response", "Writer"]
    assert type_words("...io.Reader") == ["Reader"]
    assert type_words("*http.Request") == ["Request"]
    assert type_words("[]byte") == ["byte"]
    assert type_words("[]*") == ["arg"]


def test_name_for_type_never_repeats():
    registry = NameRegistry()
    names = [name_for_type("int", registry) for _ in range(5)]
    assert names == ["i", "in", "int", "int2", "int3"]
    assert len(set(names)) == len(names)


def test_name_for_type_respects_declared_names():
    registry = NameRegistry(("r",))
    assert name_for_type("http.Request", registry) == "re"
    assert "re" in registry


def test_name_for_type_is_deterministic():
    def run() -> list[str]:
        registry = NameRegistry()
        return [name_for_type(t, registry) for t in ["http.Request", "http.Request", "io.Reader"]]

    assert run() == run() == ["r", "re", "rea"]


def test_type_words_drop_digit_words():
    assert type_words("[32]byte") == ["byte"]
    assert type_words("ID2Name") == ["ID", "Name"]
    assert name_for_type("[32]byte", NameRegistry()) == "b"


def test_receiver_name():
    from mockf.naming import receiver_name

    assert receiver_name(["r", "w"]) == "f"
    assert receiver_name(["f"]) == "fn"
    assert receiver_name(["f", "fn"]) == "fn2"
