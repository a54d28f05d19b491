from arith.tokenizer import TokenKind, tokenize


def test_numerals_operators_and_brackets():
    tokens = tokenize("2'3/8 × (1/2 + 3)")
    assert [t.text for t in tokens] == ["2'3/8", "×", "(", "1/2", "+", "3", ")"]
    assert [t.kind for t in tokens] == [
        TokenKind.NUMBER,
        TokenKind.OPERATOR,
        TokenKind.LEFT_BRACKET,
        TokenKind.NUMBER,
        TokenKind.OPERATOR,
        TokenKind.NUMBER,
        TokenKind.RIGHT_BRACKET,
    ]


def test_whitespace_only_separates():
    assert tokenize("1+2÷3") == tokenize("  1 +  2 ÷ 3 ")
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_unknown_characters_become_symbols():
    tokens = tokenize("1 * 2 =")
    assert [t.kind for t in tokens] == [
        TokenKind.NUMBER,
        TokenKind.SYMBOL,
        TokenKind.NUMBER,
        TokenKind.SYMBOL,
    ]


def test_sequence_is_restartable():
    tokens = tokenize("1 - 1/2")
    assert list(tokens) == list(tokens)
    assert len(tokens) == 3
